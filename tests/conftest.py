"""Pytest configuration for the accname test suite."""

from __future__ import annotations

from typing import Any, Callable, List

import pytest
from bs4 import Tag

from accname.domains.element.adapters import parse_html
from accname.domains.naming.services import AccessibleNameService
from accname.domains.role.aggregates import RoleRegistry
from accname.domains.role.loader import load_registry
from accname.domains.role.services import RoleClassifier


class RecordingPublisher:
    """EventPublisher that keeps every published event."""

    def __init__(self) -> None:
        self.events: List[Any] = []

    def publish(self, event: object) -> None:
        self.events.append(event)


@pytest.fixture
def select() -> Callable[[str, str], Tag]:
    """Parse markup and return the first element matching a CSS selector."""

    def _select(markup: str, selector: str) -> Tag:
        soup = parse_html(markup)
        element = soup.select_one(selector)
        assert element is not None, f"{selector!r} matched nothing in {markup!r}"
        return element

    return _select


@pytest.fixture(scope="session")
def registry() -> RoleRegistry:
    """The packaged role registry, loaded once per session."""
    return load_registry()


@pytest.fixture
def classifier(registry: RoleRegistry) -> RoleClassifier:
    return RoleClassifier(registry)


@pytest.fixture
def event_publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def service(classifier: RoleClassifier, event_publisher: RecordingPublisher) -> AccessibleNameService:
    return AccessibleNameService(classifier, event_publisher=event_publisher)
