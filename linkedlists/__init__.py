"""Singly, doubly and circular linked lists, with a command-line demo."""

__version__ = "0.1.0"
__all__ = ["singly", "doubly", "circular", "demo"]