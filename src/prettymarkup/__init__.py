# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : __init__.py
#   file_relpath : src/prettymarkup/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PrettyMarkup package.

PrettyMarkup is a markup (HTML, Vue/Angular templates, SVG) pretty-printer. It
decides where line breaks and indentation go while leaving whitespace-sensitive
content, embedded code blocks and template interpolations intact, and exposes
both a CLI and a small typed API (`prettymarkup.api`).
"""

from __future__ import annotations
