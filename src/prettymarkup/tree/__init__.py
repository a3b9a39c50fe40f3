# topmark:header:start
#
#   project      : PrettyMarkup
#   file         : __init__.py
#   file_relpath : src/prettymarkup/tree/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup document tree: node model, reader, whitespace pre-normalizer and writer.

Submodules are imported explicitly (``prettymarkup.tree.nodes`` etc.) to keep
this package import-light; ``prettymarkup.tags`` depends on the node model.
"""
