from .resolve import resolvent

__all__ = [
    "resolvent",
]
