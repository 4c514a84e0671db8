"""Text input de modal."""

from __future__ import annotations

from typing import Any

from api.payload_builders.discord.base import Component, compact_record
from app.constants.discord import ComponentType, TextInputStyle


class TextInput(Component):
    """Captura de texto livre com limites de tamanho e valor pré-preenchido.

    Assim como o select, ocupa uma action row sozinho. A forma wire é
    idêntica à forma model.
    """

    def __init__(self, style: TextInputStyle | int, label: str, custom_id: str) -> None:
        super().__init__(ComponentType.TEXT_INPUT)
        self.style = TextInputStyle(int(style))
        self.label = label
        self.custom_id = custom_id
        self.placeholder: str | None = None
        self.value: str | None = None
        self.min_length: int | None = None
        self.max_length: int | None = None
        self.required: bool | None = None

    @classmethod
    def create(
        cls,
        style: TextInputStyle | int,
        label: str,
        custom_id: str,
        placeholder: str | None = None,
        value: str | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
        required: bool | None = None,
    ) -> TextInput:
        text_input = cls(style, label, custom_id)
        if placeholder:
            text_input.set_placeholder(placeholder)
        if value:
            text_input.set_value(value)
        text_input.set_length(min_length, max_length)
        if required is not None:
            text_input.set_required(required)
        return text_input

    def set_custom_id(self, custom_id: str) -> TextInput:
        self.custom_id = custom_id
        return self

    def set_label(self, label: str) -> TextInput:
        self.label = label
        return self

    def set_length(self, minimum: int | None = None, maximum: int | None = None) -> TextInput:
        """Define tamanho mínimo/máximo do texto (0-4000 / 1-4000)."""
        if minimum is not None:
            self.min_length = minimum
        if maximum is not None:
            self.max_length = maximum
        return self

    def set_optional(self) -> TextInput:
        self.required = False
        return self

    def set_placeholder(self, placeholder: str) -> TextInput:
        self.placeholder = placeholder
        return self

    def set_required(self, required: bool = True) -> TextInput:
        self.required = required
        return self

    def set_style(self, style: TextInputStyle | int) -> TextInput:
        self.style = TextInputStyle(int(style))
        return self

    def set_value(self, value: str) -> TextInput:
        """Valor pré-preenchido, máx. 4000 caracteres."""
        self.value = value
        return self

    def to_json(self) -> dict[str, Any]:
        return compact_record(
            {
                "type": self.type,
                "customID": self.custom_id,
                "style": self.style,
                "label": self.label,
                "minLength": self.min_length,
                "maxLength": self.max_length,
                "required": self.required,
                "value": self.value,
                "placeholder": self.placeholder,
            }
        )
