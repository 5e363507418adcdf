"""Accessible name and description cases for parsed HTML.

Most markup is adapted from the W3C web-platform-tests ``accname`` suite
(test names are kept as ids), with document-global IDs and CSS classes
renamed so every case is self-contained.
"""

from __future__ import annotations

import pytest

# =============================================================================
# Names: one element per HTML-AAM rule
# =============================================================================

TAG_NAME_CASES = [
    ("a", '<a href="#">Name</a>', "a", "Name"),
    ("a (span)", '<a href="#"><span>Name</span></a>', "a", "Name"),
    ("a[title] (empty content)", '<a href="#" title="Go home"><img src="x.png"></a>', "a", "Go home"),
    ("button", "<button>Name</button>", "button", "Name"),
    ("button (empty)", "<button></button>", "button", ""),
    ("button[aria-label]", '<button aria-label="Name">Bad</button>', "button", "Name"),
    (
        "button[aria-labelledby]",
        '<span id="lbl">Name</span><button aria-labelledby="lbl">Bad</button>',
        "button",
        "Name",
    ),
    ("button[title] (empty content)", '<button title="Name"></button>', "button", "Name"),
    ("input[type=text][aria-label]", '<input type="text" aria-label="Name">', "input", "Name"),
    ("input[type=text][title]", '<input type="text" title="Name">', "input", "Name"),
    ("input[type=text][placeholder]", '<input type="text" placeholder="Name">', "input", "Name"),
    (
        "input[type=text][title][placeholder]",
        '<input type="text" title="Title" placeholder="Placeholder">',
        "input",
        "Title",
    ),
    ("input[type=url]", '<input type="url">', "input", ""),
    (
        "input[type=url] (label, remote)",
        '<label for="field">Name</label><input id="field" type="url">',
        "input",
        "Name",
    ),
    ("input[type=url] (label, nested)", '<label>Name<input type="url"></label>', "input", "Name"),
    (
        "input[type=url] (label, multiple)",
        '<label for="field">Name</label><label for="field">Two</label><input id="field" type="url">',
        "input",
        "Name Two",
    ),
    ("input[type=submit][value]", '<input type="submit" value="Send">', "input", "Send"),
    ("input[type=reset][title]", '<input type="reset" title="Clear">', "input", "Clear"),
    ("input[type=image][alt]", '<input type="image" src="go.png" alt="Go">', "input", "Go"),
    ("input[type=checkbox][title]", '<input type="checkbox" title="foo">', "input", "foo"),
    ("option", "<option>Name</option>", "option", "Name"),
    ("output", "<output>Bad</output>", "output", ""),
    ("output[aria-label]", '<output aria-label="Name">Bad</output>', "output", "Name"),
    (
        "output (label, remote)",
        '<label for="out">Name</label><output id="out">Bad</output>',
        "output",
        "Name",
    ),
    ("output (label, nested)", "<label>Name<output /></label>", "output", "Name"),
    ("output[title]", '<output title="Name">Bad</output>', "output", "Name"),
    ("td", "<table><tr><td>Name</td></tr></table>", "td", ""),
    ("th", "<table><tr><th>Name</th></tr></table>", "th", ""),
    ("td[title]", '<table><tr><td title="Name">Bad</td></tr></table>', "td", "Name"),
    ("textarea", "<textarea></textarea>", "textarea", ""),
    (
        "textarea (label, multiple)",
        '<label for="ta">Name</label><label for="ta">Two</label><textarea id="ta"></textarea>',
        "textarea",
        "Name Two",
    ),
    ("textarea[placeholder]", '<textarea placeholder="Name"></textarea>', "textarea", "Name"),
    ("p", "<p>Name</p>", "p", ""),
    ("div", "<div>Name</div>", "div", ""),
    ("span", "<span>Name</span>", "span", ""),
    ("li (no list)", "<li>Name</li>", "li", ""),
    ("li", "<ul><li>Name</li></ul>", "li", "Name"),
    ("h2", "<h2>Section <em>two</em></h2>", "h2", "Section two"),
    ("aside", "<aside>Related links</aside>", "aside", ""),
    ("aside[aria-label]", '<aside aria-label="Related">Related links</aside>', "aside", "Related"),
    ("section[title]", '<section title="Intro">Text</section>', "section", "Intro"),
    ("fieldset", "<fieldset><legend>Shipping</legend><input></fieldset>", "fieldset", "Shipping"),
    ("fieldset[title]", '<fieldset title="Billing"><input></fieldset>', "fieldset", "Billing"),
    (
        "figure",
        '<figure><img src="a.png" alt="A"><figcaption>Caption</figcaption></figure>',
        "figure",
        "Caption",
    ),
    ("img[alt]", '<img src="a.png" alt="Logo">', "img", "Logo"),
    ("img[alt=''][title]", '<img src="a.png" alt="" title="Ignored">', "img", ""),
    ("img[title]", '<img src="a.png" title="Logo">', "img", "Logo"),
    (
        "img (figcaption)",
        '<figure><img src="a.png"><figcaption>Caption</figcaption></figure>',
        "img",
        "Caption",
    ),
    ("table", "<table><caption>Prices</caption><tr><td>1</td></tr></table>", "table", "Prices"),
    ("table[title]", '<table title="Prices"><tr><td>1</td></tr></table>', "table", "Prices"),
    ("summary", "<details><summary>More</summary>Body</details>", "summary", "More"),
    ("select[title]", '<select title="Size"><option>S</option></select>', "select", "Size"),
    (
        "svg",
        "<svg><title>Chart</title><rect></rect></svg>",
        "svg",
        "Chart",
    ),
    ("abbr[title]", '<abbr title="HyperText Markup Language">HTML</abbr>', "abbr", "HyperText Markup Language"),
]


@pytest.mark.parametrize(
    "markup,selector,expected",
    [case[1:] for case in TAG_NAME_CASES],
    ids=[case[0] for case in TAG_NAME_CASES],
)
def test_tag_names(service, select, markup, selector, expected):
    assert service.name(select(markup, selector)) == expected


# A control wrapped by its own label contributes nothing to that label.
CONTROL_IN_OWN_LABEL_CASES = [
    ("input[type=text]", '<label>Name <input type="text" value="foo"></label>', "input", "Name"),
    ("select", "<label>Size <select><option selected>M</option></select></label>", "select", "Size"),
    ("textarea", "<label>Notes <textarea>draft</textarea></label>", "textarea", "Notes"),
    ("input[type=range]", '<label>Vol <input type="range" value="5"></label>', "input", "Vol"),
    (
        "label wraps and points at the control",
        '<label for="c">Accept <input type="checkbox" id="c"> terms</label>',
        "#c",
        "Accept terms",
    ),
    (
        "nested control labels another one",
        '<input id="q" type="text"><label for="q">Show <input type="text" value="10"> rows</label>',
        "#q",
        "Show 10 rows",
    ),
]


@pytest.mark.parametrize(
    "markup,selector,expected",
    [case[1:] for case in CONTROL_IN_OWN_LABEL_CASES],
    ids=[case[0] for case in CONTROL_IN_OWN_LABEL_CASES],
)
def test_control_in_own_label(service, select, markup, selector, expected):
    assert service.name(select(markup, selector)) == expected


# =============================================================================
# Names: generic subtree algorithm
# =============================================================================

COMBOBOX_MARKUP = (
    '<input type="{kind}" id="test" />\n  <label for="test">Flash the screen\n'
    '    <div role="combobox">\n      <div role="textbox"></div>\n'
    '      <ul role="listbox" style="list-style-type: none;">\n'
    '        <li role="option" aria-selected="true">1</li>\n'
    '    <li role="option">2</li>\n    <li role="option">3</li>\n      </ul>\n'
    "    </div>\n    times.\n  </label>"
)

SUBTREE_NAME_CASES = [
    (
        "name_1.0_combobox-focusable-alternative-manual",
        '<input role="combobox" type="text" title="Choose your language" value="English">',
        "input",
        "Choose your language",
    ),
    (
        "name_1.0_combobox-focusable-manual",
        '<div role="combobox" tabindex="0" title="Choose your language.">\n'
        "    <span> English </span>\n  </div>",
        "div[role=combobox]",
        "Choose your language.",
    ),
    (
        "name_checkbox-label-embedded-combobox-manual",
        COMBOBOX_MARKUP.format(kind="checkbox"),
        "#test",
        "Flash the screen 1 times.",
    ),
    (
        "name_text-label-embedded-combobox-manual",
        COMBOBOX_MARKUP.format(kind="text"),
        "#test",
        "Flash the screen 1 times.",
    ),
    (
        "name_checkbox-label-embedded-listbox-manual",
        '<input type="checkbox" id="test" />\n  <label for="test">Flash the screen\n'
        '    <ul role="listbox" style="list-style-type: none;">\n'
        '      <li role="option" aria-selected="true">1</li>\n'
        '      <li role="option">2</li>\n      <li role="option">3</li>\n'
        "    </ul>\n    times.\n  </label>",
        "#test",
        "Flash the screen 1 times.",
    ),
    (
        "name_checkbox-label-embedded-menu-manual",
        '<input type="checkbox" id="test" />\n  <label for="test">Flash the screen\n'
        '    <span role="menu">\n      <span role="menuitem" aria-selected="true">1</span>\n'
        '        <span role="menuitem" hidden>2</span>\n'
        '    <span role="menuitem" hidden>3</span>\n      </span>\n      times.\n  </label>',
        "#test",
        "Flash the screen times.",
    ),
    (
        "name_checkbox-label-embedded-select-manual",
        '<input type="checkbox" id="test" />\n  <label for="test">Flash the screen\n'
        '    <select size="1">\n      <option selected="selected">1</option>\n'
        "      <option>2</option>\n      <option>3</option>\n    </select>\n"
        "    times.\n  </label>",
        "#test",
        "Flash the screen 1 times.",
    ),
    (
        "name_checkbox-label-embedded-slider-manual",
        '<input type="checkbox" id="test" />\n  <label for="test">foo '
        '<input role="slider" type="range" value="5" min="1" max="10" '
        'aria-valuenow="5" aria-valuemin="1" aria-valuemax="10"> baz\n  </label>',
        "#test",
        "foo 5 baz",
    ),
    (
        "name_file-label-embedded-spinbutton-manual",
        '<input type="file" id="test" />\n  <label for="test">foo '
        '<input role="spinbutton" type="number" value="5" min="1" max="10" '
        'aria-valuenow="5" aria-valuemin="1" aria-valuemax="10"> baz\n  </label>',
        "#test",
        "foo 5 baz",
    ),
    (
        "name_checkbox-label-embedded-textbox-manual",
        '<input type="checkbox" id="test" />\n  <label for="test">Flash the screen\n'
        '    <div role="textbox" contenteditable>1</div>\n    times.\n  </label>',
        "#test",
        "Flash the screen 1 times.",
    ),
    (
        "name_checkbox-label-multiple-label-alternative-manual",
        '<label for="test">a test</label>\n  <label>This <input type="checkbox" id="test" /> is</label>',
        "#test",
        "a test This is",
    ),
    (
        "name_checkbox-label-multiple-label-manual",
        '<label>This <input type="checkbox" id="test" /> is</label>\n  <label for="test">a test</label>',
        "#test",
        "This is a test",
    ),
    (
        "name_file-label-inline-block-elements-manual",
        '<input type="file" id="test" />\n  <label for="test">W<i>h<b>a</b></i>t<br>is'
        "<div>your<div>name<b>?</b></div></div></label>",
        "#test",
        "What is your name?",
    ),
    ("inline children join", '<a href="#">one<span>two</span>three</a>', "a", "onetwothree"),
    ("block children are spaced", '<a href="#">one<div>two</div>three</a>', "a", "one two three"),
    ("br separates", '<a href="#">one<br>two</a>', "a", "one two"),
    (
        "aria-owns appends",
        '<div id="test" role="button" aria-owns="owned">Go</div><span id="owned">now</span>',
        "#test",
        "Go now",
    ),
    (
        "aria-labelledby joins in order",
        '<div id="test" role="button" aria-labelledby="b a"></div>'
        '<span id="a">world</span><span id="b">Hello</span>',
        "#test",
        "Hello world",
    ),
    (
        "aria-labelledby skips missing ids",
        '<div id="test" role="button" aria-labelledby="missing a">x</div><span id="a">Label</span>',
        "#test",
        "Label",
    ),
    (
        "aria-labelledby includes hidden targets",
        '<div id="test" role="button" aria-labelledby="h">Visible</div><span id="h" hidden>Secret</span>',
        "#test",
        "Secret",
    ),
    (
        "aria-labelledby self reference",
        '<div id="test" role="button" aria-labelledby="test">Content</div>',
        "#test",
        "Content",
    ),
    (
        "aria-labelledby self reference with label",
        '<div id="test" role="button" aria-labelledby="test other" aria-label="Delete">x</div>'
        '<span id="other">file.txt</span>',
        "#test",
        "Delete file.txt",
    ),
    ("generic with aria-label", '<div aria-label="Label">Text</div>', "div", "Label"),
    ("aria-label wins over content", '<a href="#" aria-label="Home">Start</a>', "a", "Home"),
    ("whitespace collapses", "<button>\n  Save\n\n   draft\t</button>", "button", "Save draft"),
    ("button[aria-hidden]", '<button aria-hidden="true">Name</button>', "button", ""),
    (
        "button[aria-hidden] (partial)",
        "<button><span aria-hidden>Hidden</span>Name</button>",
        "button",
        "Name",
    ),
    (
        "hidden attribute",
        "<button>Go <span hidden>away</span>now</button>",
        "button",
        "Go now",
    ),
]


@pytest.mark.parametrize(
    "markup,selector,expected",
    [case[1:] for case in SUBTREE_NAME_CASES],
    ids=[case[0] for case in SUBTREE_NAME_CASES],
)
def test_subtree_names(service, select, markup, selector, expected):
    assert service.name(select(markup, selector)) == expected


# =============================================================================
# Names: CSS
# =============================================================================

CSS_NAME_CASES = [
    (
        "display none by class",
        "<style>.hidden { display: none; }</style>"
        '<button>2 <span class="hidden">3</span>4</button>',
        "button",
        "2 4",
    ),
    (
        "visibility hidden",
        '<button>2 <span style="visibility: hidden">3</span>4</button>',
        "button",
        "2 4",
    ),
    (
        "display none overridden by labelledby",
        "<style>.hidden { display: none; }</style>"
        '<button aria-labelledby="lbl">x</button><span id="lbl" class="hidden">Secret</span>',
        "button",
        "Secret",
    ),
    (
        "::before and ::after",
        '<style>.lbl::before { content: "fancy "; } .lbl::after { content: " fruit"; }</style>'
        '<button class="lbl">apple</button>',
        "button",
        "fancy apple fruit",
    ),
    (
        "::after attr()",
        '<style>.lbl::after { content: attr(data-after); }</style>'
        '<button class="lbl" data-after="now">Go</button>',
        "button",
        "Gonow",
    ),
    (
        "block ::before is spaced",
        '<style>.lbl::before { content: "This"; display: block; }</style>'
        '<button class="lbl">is</button>',
        "button",
        "This is",
    ),
    (
        "inline-block styles",
        "<style>.block { display: block; }</style>"
        '<a href="#">This<span class="block">is</span>a<span>test.</span></a>',
        "a",
        "This is atest.",
    ),
    (
        "display inline joins",
        '<a href="#">one<div style="display: inline">two</div></a>',
        "a",
        "onetwo",
    ),
]


@pytest.mark.parametrize(
    "markup,selector,expected",
    [case[1:] for case in CSS_NAME_CASES],
    ids=[case[0] for case in CSS_NAME_CASES],
)
def test_css_names(service, select, markup, selector, expected):
    assert service.name(select(markup, selector)) == expected


# =============================================================================
# Descriptions
# =============================================================================

MARBLES_MARKUP = (
    "<style>\n    .hidden { display: none; }\n  </style>\n"
    '  <input id="test" type="text" aria-label="Important stuff" aria-describedby="desc" />\n'
    '  <div>\n    <div id="desc">\n'
    '      <span aria-hidden="true"><i> Hello, </i></span>\n'
    "      <span>My</span> name is\n"
    '      <div><img src="file.jpg" title="Bryan" alt="" role="presentation" /></div>\n'
    '      <span role="presentation" aria-label="Eli">\n'
    '        <span aria-label="Garaventa">Zambino</span>\n      </span>\n'
    "      <span>the weird.</span>\n      (QED)\n"
    '      <span class="hidden"><i><b>and don\'t you forget it.</b></i></span>\n'
    "      <table>\n        <tr>\n          <td>Where</td>\n"
    '          <td style="visibility:hidden;"><div>in</div></td>\n'
    '          <td><div style="display:none;">the world</div></td>\n'
    "          <td>are my marbles?</td>\n        </tr>\n      </table>\n"
    "    </div>\n  </div>"
)

DESCRIPTION_CASES = [
    (
        "description_1.0_combobox-focusable-manual",
        '<div role="combobox" tabindex="0" title="Choose your language.">\n'
        "    <span> English </span>\n  </div>",
        "div",
        None,
    ),
    (
        "description_from_content_of_describedby_element-manual",
        MARBLES_MARKUP,
        "#test",
        "My name is Eli the weird. (QED) Where are my marbles?",
    ),
    (
        "description_link-with-label-manual",
        '<a href="#" aria-label="California" title="San Francisco" >United States</a>',
        "a",
        "San Francisco",
    ),
    (
        "description_test_case_557-manual",
        '<img src="foo.jpg" aria-label="1" alt="a" title="t"/>',
        "img",
        "t",
    ),
    (
        "description_test_case_664-manual",
        '<div>\n    <img id="test" aria-describedby="d1" src="test.png">\n  </div>\n'
        '  <div id="d1">foo</div>',
        "img",
        "foo",
    ),
    (
        "description_test_case_665-manual",
        '<div>\n    <img aria-describedby="d1" src="test.png">\n  </div>\n'
        '  <div id="d1" style="display:none">foo</div>',
        "img",
        "foo",
    ),
    (
        "description_test_case_666-manual",
        '<div>\n    <img aria-describedby="d1" src="test.png">\n  </div>\n'
        '  <div id="d1" role="presentation">foo</div>',
        "img",
        "foo",
    ),
    (
        "description_test_case_772-manual",
        '<img src="foo.jpg" id="test" alt="test" aria-describedby="d1">\n  <div id="d1">foo</div>',
        "img",
        "foo",
    ),
    (
        "aria-description",
        '<button aria-description="Deletes the file">Delete</button>',
        "button",
        "Deletes the file",
    ),
    ("title", '<button title="Deletes the file">Delete</button>', "button", "Deletes the file"),
    ("title equal to name", '<input type="text" title="Search">', "input", None),
    (
        "describedby wins over title",
        '<button aria-describedby="d1" title="Tip">Go</button><p id="d1">Leaves now</p>',
        "button",
        "Leaves now",
    ),
    (
        "describedby missing target",
        '<button aria-describedby="missing" title="Tip">Go</button>',
        "button",
        None,
    ),
    (
        "describedby one valid target",
        '<button aria-describedby="missing d1">Go</button><div id="d1">foo</div>',
        "button",
        "foo",
    ),
    (
        "describedby already in name",
        '<button aria-describedby="inner">Go <span id="inner">now</span></button>',
        "button",
        None,
    ),
    ("no description", "<button>Go</button>", "button", None),
]


@pytest.mark.parametrize(
    "markup,selector,expected",
    [case[1:] for case in DESCRIPTION_CASES],
    ids=[case[0] for case in DESCRIPTION_CASES],
)
def test_descriptions(service, select, markup, selector, expected):
    assert service.description(select(markup, selector)) == expected


# =============================================================================
# Algorithm properties
# =============================================================================


class TestProperties:
    @pytest.mark.parametrize("markup,selector,name,description", [
        ("<button>Name</button>", "button", "Name", None),
        ('<button aria-label="Name">Bad</button>', "button", "Name", None),
        ('<label for="x">Name</label><input id="x" type="text">', "input", "Name", None),
        ('<img alt="" />', "img", "", None),
        ('<div id="x" aria-labelledby="x">foo</div>', "div", "foo", None),
        (
            '<a href="#" aria-label="California" title="San Francisco">United States</a>',
            "a",
            "California",
            "San Francisco",
        ),
    ])
    def test_scenarios(self, service, select, markup, selector, name, description):
        result = service.compute(select(markup, selector))
        assert result.name == name
        assert result.description == description

    def test_idempotent(self, service, select):
        tag = select(MARBLES_MARKUP, "#test")
        assert service.compute(tag) == service.compute(tag)

    @pytest.mark.parametrize("markup,expected", [
        (
            '<span id="l">By labelledby</span>'
            '<input id="t" aria-labelledby="l" aria-label="By label" title="By title">'
            '<label for="t">By host label</label>',
            "By labelledby",
        ),
        (
            '<input id="t" aria-label="By label" title="By title"><label for="t">By host label</label>',
            "By label",
        ),
        ('<input id="t" title="By title"><label for="t">By host label</label>', "By host label"),
        ('<input id="t" title="By title">', "By title"),
    ])
    def test_precedence(self, service, select, markup, expected):
        assert service.name(select(markup, "#t")) == expected
