# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : __main__.py
#   file_relpath : src/prettymarkup/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PrettyMarkup via ``python -m prettymarkup``.

Delegates to `prettymarkup.cli.main.cli`, the single CLI entry point.

Examples:
    Check formatting of a template::

        python -m prettymarkup format index.html
"""

from __future__ import annotations

from prettymarkup.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
