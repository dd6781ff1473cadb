"""Small character, string, linked-list and formatting helpers."""

__all__ = ["chars", "text", "linked", "printf"]