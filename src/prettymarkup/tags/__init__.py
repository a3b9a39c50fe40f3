# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : __init__.py
#   file_relpath : src/prettymarkup/tags/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tag knowledge: behavior registry, recognized names and whitespace sensitivity."""

from __future__ import annotations

from .behavior import TagBehavior, TagContentType
from .known import KNOWN_TAG_NAMES, is_known_tag_name
from .registry import (
    DEFAULT_TAG_BEHAVIOR,
    TagBehaviorRegistry,
    build_tag_behaviors,
    get_registry,
    get_tag_behavior,
)
from .whitespace import (
    WHITESPACE_SENSITIVE_TAG_NAMES,
    is_whitespace_sensitive,
    is_whitespace_sensitive_tag,
)

__all__ = [
    "DEFAULT_TAG_BEHAVIOR",
    "KNOWN_TAG_NAMES",
    "TagBehavior",
    "TagBehaviorRegistry",
    "TagContentType",
    "WHITESPACE_SENSITIVE_TAG_NAMES",
    "build_tag_behaviors",
    "get_registry",
    "get_tag_behavior",
    "is_known_tag_name",
    "is_whitespace_sensitive",
    "is_whitespace_sensitive_tag",
]
