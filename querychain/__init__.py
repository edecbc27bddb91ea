"""Lazy, re-iterable query chains over iterables; see querychain.query.Query."""

__version__ = "0.1.0"
__all__ = ["query"]