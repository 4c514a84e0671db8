"""Erros de validação dos payloads Discord."""

from __future__ import annotations

from utils.errors import BuilderError


class ValidationError(BuilderError):
    """Entrada viola um contrato ou limite documentado da plataforma."""
