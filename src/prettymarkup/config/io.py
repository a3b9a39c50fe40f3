# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : io.py
#   file_relpath : src/prettymarkup/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for PrettyMarkup configuration.

Parsing and rendering use `tomlkit`; parsed documents are returned as plain
`dict` structures (``TomlTable``).

Two families of helpers live here:

* loaders for the packaged default template and on-disk TOML files;
* *checked* getters that validate the shape of a value and record a warning
  (logged and appended to a diagnostics list) instead of failing, so that a
  mistyped value falls back to the current setting.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from prettymarkup.config.keys import Toml
from prettymarkup.config.logging import get_logger
from prettymarkup.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    HEADER_END_MARKER,
)
from prettymarkup.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from prettymarkup.config.logging import PrettyMarkupLogger

TomlTable = dict[str, Any]

logger: PrettyMarkupLogger = get_logger(__name__)


# --- Loaders ---


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a Python dict.

    This function performs no I/O; the packaged template documents the same
    values. The returned value is a new dict so callers can mutate it safely.
    """
    return {
        Toml.SECTION_FORMATTING: {
            Toml.KEY_TAB_WIDTH: 2,
            Toml.KEY_USE_TABS: False,
            Toml.KEY_PRINT_WIDTH: 80,
            Toml.KEY_SINGLE_QUOTE: False,
            Toml.KEY_USE_EMBEDDED_FORMATTER: True,
        },
        Toml.SECTION_PARSER: {
            Toml.KEY_IGNORE_FIRST_LF: False,
        },
        Toml.SECTION_EMBEDDED: {},
    }


def load_default_config_toml_text() -> str:
    """Load the bundled ``prettymarkup-default.toml`` template as text.

    The file header block is stripped so the text starts at the template
    content. If the packaged resource cannot be read, a document rendered from
    `load_defaults_dict` is returned instead (and a warning is logged).
    """
    resource = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        toml_text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return to_toml(load_defaults_dict())

    lines: list[str] = toml_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == f"# {HEADER_END_MARKER}":
            return "".join(lines[i + 1 :]).lstrip("\n")
    return toml_text


def parse_toml_text(text: str, *, source: str) -> TomlTable:
    """Parse TOML ``text`` into a plain dict.

    Raises:
        ConfigError: If ``text`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"Error decoding TOML from {source}: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file (UTF-8).

    Raises:
        ConfigError: If the file cannot be read or decoded.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Error loading TOML from {path}: {exc}") from exc
    return parse_toml_text(text, source=str(path))


def to_toml(table: TomlTable) -> str:
    """Render ``table`` as TOML text, dropping ``None`` values."""
    cleaned: TomlTable = {}
    for key, value in table.items():
        if isinstance(value, dict):
            cleaned[key] = {k: v for k, v in value.items() if v is not None}
        elif value is not None:
            cleaned[key] = value
    return tomlkit.dumps(cleaned)


# --- Checked getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict."""
    value: Any | None = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for %r, got %s", key, type(value).__name__)
    return {}


def get_int_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    ``bool`` is rejected even though it is a subclass of ``int``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.append(f"Expected int in {loc}, got {type(value).__name__}: {value!r}")
    return None


def get_bool_value_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: list[str],
) -> bool | None:
    """Return an optional bool value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None

    if isinstance(value, bool):
        return value

    loc: Final[str] = f"{where}.{key}"
    logger.warning("Expected bool in %s, got %s: %r", loc, type(value).__name__, value)
    diagnostics.append(f"Expected bool in {loc}, got {type(value).__name__}: {value!r}")
    return None
