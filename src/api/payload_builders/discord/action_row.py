"""Action row: contêiner ordenado e passivo de componentes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.constants.discord import MAX_ROW_COMPONENTS, ComponentType

if TYPE_CHECKING:
    from app.protocols.payload_builder import SerializableComponent


class ActionRow:
    """Sequência ordenada de componentes renderizados juntos.

    Não valida capacidade; isso é responsabilidade do RowLayout.
    """

    type = ComponentType.ACTION_ROW

    def __init__(self, capacity: int = MAX_ROW_COMPONENTS) -> None:
        self.capacity = capacity
        self._components: list[SerializableComponent] = []

    @property
    def size(self) -> int:
        return len(self._components)

    @property
    def components(self) -> list[SerializableComponent]:
        """Cópia dos componentes, na ordem de inserção."""
        return list(self._components)

    def add_component(self, component: SerializableComponent) -> ActionRow:
        self._components.append(component)
        return self

    def add_components(self, *components: SerializableComponent) -> ActionRow:
        for component in components:
            self.add_component(component)
        return self

    def is_empty(self) -> bool:
        return self.size == 0

    def is_full(self) -> bool:
        return self.size >= self.capacity

    def has_exclusive(self) -> bool:
        """True se a row já contém um select ou text input."""
        return any(component.exclusive for component in self._components)

    def to_json(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "components": [component.to_json() for component in self._components],
        }

    def to_json_raw(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "components": [component.to_json_raw() for component in self._components],
        }

    def __repr__(self) -> str:
        return f"ActionRow(size={self.size}, capacity={self.capacity})"
