"""Exceções utilitárias compartilhadas."""

from .exceptions import BuilderError

__all__ = [
    "BuilderError",
]
