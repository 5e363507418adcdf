"""Tests for the package-level entry points."""

import pytest

import accname
from accname import (
    AccessibleNameService,
    InvalidElementError,
    NameResult,
    compute_accessible_description,
    compute_accessible_name,
    compute_accessible_name_and_description,
    default_service,
    get_role,
    is_interactive,
    is_name_required,
    parse_html,
)


def test_name_and_description():
    soup = parse_html('<label for="q">Search</label><input id="q" title="Site search">')
    result = compute_accessible_name_and_description(soup.select_one("input"))
    assert result == NameResult(name="Search", description="Site search")


def test_name_only():
    soup = parse_html('<a href="/cart">Cart <span>(3)</span></a>')
    assert compute_accessible_name(soup.a) == "Cart (3)"


def test_description_only():
    soup = parse_html('<button aria-description="Opens a dialog">Share</button>')
    assert compute_accessible_description(soup.button) == "Opens a dialog"


def test_virtual_element():
    element = {"tagName": "button", "attributes": {"title": "Close"}, "children": []}
    assert compute_accessible_name(element) == "Close"
    assert compute_accessible_description(element) is None


def test_get_role():
    soup = parse_html('<ul><li>x</li></ul><select multiple><option>a</option></select>')
    assert get_role(soup.li) == "listitem"
    assert get_role(soup.find("select")) == "listbox"
    assert get_role({"tagName": "input", "attributes": {"type": "checkbox"}}) == "checkbox"


def test_is_interactive():
    soup = parse_html('<button>Go</button><div role="button">Go</div><input type="hidden">')
    assert is_interactive(soup.button)
    assert not is_interactive(soup.div)
    assert not is_interactive(soup.input)
    assert is_interactive({"tagName": "a", "attributes": {"href": "/"}})


def test_is_name_required():
    assert is_name_required("button")
    assert is_name_required("dialog")
    assert not is_name_required("generic")
    assert not is_name_required("landmark")


def test_default_service_is_shared():
    assert isinstance(default_service(), AccessibleNameService)
    assert default_service() is default_service()


def test_parse_html_explicit_parser():
    soup = parse_html('<p class="a b">x</p>', parser="html.parser")
    assert soup.p["class"] == "a b"


@pytest.mark.parametrize("value", [None, "<button>Go</button>", parse_html("<p>x</p>")])
def test_invalid_input(value):
    with pytest.raises(InvalidElementError):
        compute_accessible_name(value)


def test_exports():
    assert accname.__version__
    for name in accname.__all__:
        assert hasattr(accname, name)
