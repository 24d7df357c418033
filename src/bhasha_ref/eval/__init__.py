"""Evaluator helper modules for the bhasha runtime."""

__all__ = [
    "bind",
    "blocks",
    "common",
    "control",
    "expr",
    "fn",
    "helpers",
    "literals",
]
