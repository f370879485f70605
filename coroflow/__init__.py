"""Lazy coroutine tasks, synchronisation primitives and networking value types that need no event loop."""

__version__ = "0.11.1"