"""UI-agnostic editing core for an assembly source editor."""

__all__ = [
    "adapters",
    "buffer",
    "completion",
    "config",
    "runtime",
    "text",
]

__version__ = "0.1.0"
