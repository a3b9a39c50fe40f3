# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : constants.py
#   file_relpath : src/prettymarkup/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMarkup Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

PRETTYMARKUP_VERSION: str = get_version("prettymarkup")

# Name of the bundled default config inside the package `prettymarkup.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "prettymarkup.config"
DEFAULT_TOML_CONFIG_NAME: str = "prettymarkup-default.toml"

PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "prettymarkup"

# Comment marker protecting the next element from formatting.
IGNORE_MARKER: str = "prettymarkup-ignore"

HEADER_END_MARKER: str = "topmark:header:end"
