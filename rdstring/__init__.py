"""Length-prefixed dynamic byte strings with size-dependent headers."""

__version__ = "0.1.0"
__all__ = ["header", "dynstr"]