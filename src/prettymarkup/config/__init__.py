# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : __init__.py
#   file_relpath : src/prettymarkup/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for PrettyMarkup.

Defines the `Config` snapshot and its `MutableConfig` builder, TOML loading
with `tomlkit`, and the project logging setup (`prettymarkup.config.logging`).
"""

from __future__ import annotations

from prettymarkup.config.model import Config, MutableConfig, load_config

__all__ = [
    "Config",
    "MutableConfig",
    "load_config",
]
