"""Base comum dos elementos interativos (botão, select, text input)."""

from __future__ import annotations

from typing import Any

from app.constants.discord import EXCLUSIVE_COMPONENT_TYPES, ComponentType


def compact_record(record: dict[str, Any]) -> dict[str, Any]:
    """Remove campos opcionais não definidos (None) de um registro JSON."""
    return {key: value for key, value in record.items() if value is not None}


class Component:
    """Elemento interativo com discriminante de tipo e flag disabled.

    O tipo é fixado na construção; estilo e alvo podem mudar depois,
    o tipo não.
    """

    def __init__(self, component_type: ComponentType) -> None:
        self._type = ComponentType(component_type)
        self.disabled = False

    @property
    def type(self) -> ComponentType:
        return self._type

    @property
    def exclusive(self) -> bool:
        """True se o elemento precisa ocupar uma action row sozinho."""
        return self._type in EXCLUSIVE_COMPONENT_TYPES

    def disable(self) -> Component:
        """Desabilita o componente."""
        self.disabled = True
        return self

    def enable(self) -> Component:
        """Habilita o componente."""
        self.disabled = False
        return self

    def to_json(self) -> dict[str, Any]:
        raise NotImplementedError

    def to_json_raw(self) -> dict[str, Any]:
        """Forma wire; igual à forma model salvo quando sobrescrito."""
        return self.to_json()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(type={self._type.name}, disabled={self.disabled})"
