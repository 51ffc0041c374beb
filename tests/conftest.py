"""Shared fixtures."""

import pytest


@pytest.fixture
def alice():
    return {"login": "alice", "html_url": "https://github.com/alice"}


@pytest.fixture
def bob():
    return {"login": "bob", "html_url": "https://github.com/bob"}


@pytest.fixture
def issue(alice):
    return {
        "title": "Bug",
        "html_url": "https://github.com/o/r/issues/1",
        "user": alice,
    }


@pytest.fixture
def pull_request(alice):
    return {
        "title": "Fix bug",
        "number": 7,
        "html_url": "https://github.com/o/r/pull/7",
        "user": alice,
    }


@pytest.fixture
def comment(bob):
    return {
        "html_url": "https://github.com/o/r/issues/1#issuecomment-9",
        "user": bob,
        "body": "Looks good",
    }


def _markdown_lines(card):
    data = card if isinstance(card, dict) else card.to_dict()
    elements = data["body"]["elements"]
    assert len(elements) == 1
    assert elements[0]["tag"] == "markdown"
    return elements[0]["content"].split("\n")


@pytest.fixture
def markdown_lines():
    """Lines of the single markdown block of a card (model or dict)."""
    return _markdown_lines
