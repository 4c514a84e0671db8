"""Exceções de domínio compartilhadas pelos builders de payload."""

from __future__ import annotations


class BuilderError(ValueError):
    """Base para falhas de contrato detectadas na borda dos builders."""
