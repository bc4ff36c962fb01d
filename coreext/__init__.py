"""Helpers for sequences and strings: byte-offset string functions, keyed
splitting, position-aware slice views, indentation and pipeline helpers."""

__version__ = "1.5.4"

__all__ = [
    "split_while",
    "slices",
    "strings",
    "str_split",
    "text_layout",
    "self_ops",
]