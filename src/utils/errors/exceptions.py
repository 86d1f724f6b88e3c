"""Exceções de infraestrutura compartilhadas pelos conectores."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura levantadas como exceção."""
