# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : test_whitespace_and_names.py
#   file_relpath : tests/tags/test_whitespace_and_names.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whitespace-sensitivity classification and the recognized tag name dictionary."""

from __future__ import annotations

from prettymarkup.tags.known import KNOWN_TAG_NAMES, is_known_tag_name
from prettymarkup.tags.whitespace import (
    WHITESPACE_SENSITIVE_TAG_NAMES,
    is_whitespace_sensitive,
    is_whitespace_sensitive_tag,
)
from prettymarkup.tree.nodes import Element, Root, Text
from tests.conftest import parametrize


@parametrize("tag", ["pre", "PRE", "textarea", "script", "style", "listing", "plaintext", "xmp"])
def test_sensitive_tags(tag: str) -> None:
    assert is_whitespace_sensitive_tag(tag)


@parametrize("tag", ["div", "p", "code", "span", "my-pre"])
def test_insensitive_tags(tag: str) -> None:
    assert not is_whitespace_sensitive_tag(tag)


def test_sensitive_names_are_lower_case() -> None:
    assert all(name == name.lower() for name in WHITESPACE_SENSITIVE_TAG_NAMES)


def test_chain_is_sensitive_when_any_ancestor_is() -> None:
    pre = Element("pre")
    span = Element("span")
    assert is_whitespace_sensitive([Root(), Element("div"), pre, span])
    assert is_whitespace_sensitive([pre])


def test_chain_ignores_non_elements() -> None:
    assert not is_whitespace_sensitive([Root(), Element("div"), Element("b")])
    assert not is_whitespace_sensitive([Text("pre")])
    assert not is_whitespace_sensitive([])


@parametrize("tag", ["div", "DIV", "feGaussianBlur", "fegaussianblur", "mfrac", "svg", "slot"])
def test_known_tag_names(tag: str) -> None:
    assert is_known_tag_name(tag)


@parametrize("tag", ["my-widget", "x-foo", "blah"])
def test_custom_elements_are_not_known(tag: str) -> None:
    assert not is_known_tag_name(tag)


def test_known_names_are_lower_case() -> None:
    assert "fegaussianblur" in KNOWN_TAG_NAMES
    assert "feGaussianBlur" not in KNOWN_TAG_NAMES
