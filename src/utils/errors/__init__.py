"""Exceções utilitárias compartilhadas."""

from .exceptions import InfrastructureError

__all__ = [
    "InfrastructureError",
]
