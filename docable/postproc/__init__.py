"""Post-processing applied to extracted members."""

from .whitespace import collapse_asterisk_indent, join_keywords, normalize_member

__all__ = ["collapse_asterisk_indent", "join_keywords", "normalize_member"]
