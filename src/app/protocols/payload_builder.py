"""Protocolos de construção de payload de componentes."""

from __future__ import annotations

from typing import Any, Protocol


class SerializableComponent(Protocol):
    """Contrato mínimo de um elemento posicionável numa action row."""

    disabled: bool

    @property
    def exclusive(self) -> bool: ...

    def to_json(self) -> dict[str, Any]: ...

    def to_json_raw(self) -> dict[str, Any]: ...
