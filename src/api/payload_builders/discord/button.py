"""Botão: ação por custom_id (estilos 1-4) ou link (estilo 5)."""

from __future__ import annotations

from typing import Any

from api.payload_builders.discord.base import Component, compact_record
from api.validators.discord.errors import ValidationError
from app.constants.discord import ButtonColor, ButtonStyle, ComponentType


class Button(Component):
    """Botão interativo ou de link.

    O alvo (custom_id ou url) é decidido pelo estilo na construção:
    LINK usa url, os demais usam custom_id.
    """

    def __init__(
        self,
        style: ButtonStyle | ButtonColor | int,
        url_or_custom_id: str,
    ) -> None:
        super().__init__(ComponentType.BUTTON)
        self.style = ButtonStyle(int(style))
        self.custom_id: str | None = None
        self.url: str | None = None
        self.label: str | None = None
        self.emoji: dict[str, Any] | None = None
        if self.style is ButtonStyle.LINK:
            self.url = url_or_custom_id
        else:
            self.custom_id = url_or_custom_id

    @classmethod
    def create(
        cls,
        style: ButtonStyle | ButtonColor | int,
        url_or_custom_id: str,
        label: str | None = None,
        emoji: dict[str, Any] | None = None,
        disabled: bool | None = None,
    ) -> Button:
        """Cria um botão já com label, emoji e estado."""
        button = cls(style, url_or_custom_id)
        if label:
            button.set_label(label)
        if emoji:
            button.set_emoji(emoji)
        if disabled is not None:
            if disabled:
                button.disable()
            else:
                button.enable()
        return button

    @property
    def is_link(self) -> bool:
        return self.style is ButtonStyle.LINK

    def set_custom_id(self, custom_id: str) -> Button:
        """Define o custom_id (estilos 1-4), máx. 100 caracteres."""
        self.custom_id = custom_id
        return self

    def set_emoji(self, emoji: dict[str, Any]) -> Button:
        self.emoji = emoji
        return self

    def set_label(self, label: str) -> Button:
        """Define o texto exibido no botão, máx. 80 caracteres."""
        self.label = label
        return self

    def set_style(self, style: ButtonStyle | ButtonColor | int) -> Button:
        """Define o estilo.

        1 - blurple, 2 - grey, 3 - green, 4 - red, 5 - link.

        Raises:
            ValidationError: Se a troca cruzar entre link e não-link, já
                que o alvo (url ou custom_id) foi fixado na construção
        """
        new_style = ButtonStyle(int(style))
        if (new_style is ButtonStyle.LINK) != self.is_link:
            raise ValidationError(
                f"cannot change button style from {self.style.name} to {new_style.name}"
            )
        self.style = new_style
        return self

    def set_url(self, url: str) -> Button:
        """Define a url aberta ao clicar (estilo 5)."""
        self.url = url
        return self

    def to_json(self) -> dict[str, Any]:
        record: dict[str, Any] = {
            "type": self.type,
            "style": self.style,
            "label": self.label,
            "emoji": self.emoji,
            "disabled": self.disabled,
        }
        if self.is_link:
            record["url"] = self.url
        else:
            record["customID"] = self.custom_id
        return compact_record(record)
