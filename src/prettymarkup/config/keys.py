# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : keys.py
#   file_relpath : src/prettymarkup/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for PrettyMarkup configuration.

These constants are the external configuration schema as it appears in
``prettymarkup.toml`` and in ``[tool.prettymarkup]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PrettyMarkup configuration.

    The ordering of constants mirrors ``prettymarkup-default.toml``.
    """

    # [formatting]
    SECTION_FORMATTING: Final[str] = "formatting"

    KEY_TAB_WIDTH: Final[str] = "tab_width"
    KEY_USE_TABS: Final[str] = "use_tabs"
    KEY_PRINT_WIDTH: Final[str] = "print_width"
    KEY_SINGLE_QUOTE: Final[str] = "single_quote"
    KEY_USE_EMBEDDED_FORMATTER: Final[str] = "use_embedded_formatter"

    # [parser]
    SECTION_PARSER: Final[str] = "parser"

    KEY_IGNORE_FIRST_LF: Final[str] = "ignore_first_lf"

    # [embedded] (free-form, passed to the embedded formatter)
    SECTION_EMBEDDED: Final[str] = "embedded"
