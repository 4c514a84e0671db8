"""Select menu (string, user, role, mentionable, channel)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.discord.base import Component, compact_record
from app.constants.discord import ChannelType, ComponentType

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def build_select_option(
    label: str,
    value: str,
    description: str | None = None,
    emoji: dict[str, Any] | None = None,
    default: bool | None = None,
) -> dict[str, Any]:
    """Monta uma opção de select, omitindo campos opcionais ausentes."""
    return compact_record(
        {
            "label": label,
            "value": value,
            "description": description,
            "emoji": emoji,
            "default": default,
        }
    )


class SelectMenu(Component):
    """Seletor de uma ou várias escolhas.

    Sempre ocupa uma action row sozinho.
    """

    def __init__(
        self,
        custom_id: str,
        select_type: ComponentType | int = ComponentType.STRING_SELECT,
    ) -> None:
        super().__init__(ComponentType(select_type))
        self.custom_id = custom_id
        self.options: list[dict[str, Any]] = []
        self.placeholder: str | None = None
        self.min_values: int | None = None
        self.max_values: int | None = None
        self.channel_types: list[ChannelType] | None = None

    @classmethod
    def create(
        cls,
        custom_id: str,
        options: Iterable[Mapping[str, Any]] | None = None,
        placeholder: str | None = None,
        min_values: int | None = None,
        max_values: int | None = None,
        disabled: bool | None = None,
        select_type: ComponentType | int = ComponentType.STRING_SELECT,
    ) -> SelectMenu:
        """Cria um select já com opções, limites e estado."""
        menu = cls(custom_id, select_type)
        options = list(options or [])
        if options:
            menu.clear_options()
            menu.add_options(*options)
        if placeholder:
            menu.set_placeholder(placeholder)
        menu.set_values(min_values, max_values)
        if disabled is not None:
            if disabled:
                menu.disable()
            else:
                menu.enable()
        return menu

    def add_option(
        self,
        label: str,
        value: str,
        description: str | None = None,
        emoji: dict[str, Any] | None = None,
        default: bool | None = None,
    ) -> SelectMenu:
        """Adiciona uma opção ao final da lista."""
        self.options.append(build_select_option(label, value, description, emoji, default))
        return self

    def add_options(self, *options: Mapping[str, Any]) -> SelectMenu:
        """Adiciona opções em lote, preservando a ordem."""
        for option in options:
            self.add_option(
                option["label"],
                option["value"],
                option.get("description"),
                option.get("emoji"),
                option.get("default"),
            )
        return self

    def clear_options(self) -> SelectMenu:
        self.options = []
        return self

    def set_channel_types(self, *types: ChannelType | int | Iterable[ChannelType | int]) -> SelectMenu:
        """Define os tipos de canal aceitos (select de canal).

        Aceita tanto set_channel_types(a, b) quanto set_channel_types([a, b]).
        """
        if len(types) == 1 and not isinstance(types[0], int):
            types = tuple(types[0])
        self.channel_types = [ChannelType(int(t)) for t in types]
        return self

    def set_custom_id(self, custom_id: str) -> SelectMenu:
        self.custom_id = custom_id
        return self

    def set_placeholder(self, placeholder: str) -> SelectMenu:
        """Texto exibido sem seleção, máx. 100 caracteres."""
        self.placeholder = placeholder
        return self

    def set_values(self, minimum: int | None = None, maximum: int | None = None) -> SelectMenu:
        """Define a quantidade mínima/máxima de itens selecionados.

        Valores None mantêm o limite atual.
        """
        if minimum is not None:
            self.min_values = minimum
        if maximum is not None:
            self.max_values = maximum
        return self

    def to_json(self) -> dict[str, Any]:
        return compact_record(
            {
                "type": self.type,
                "customID": self.custom_id,
                "options": list(self.options),
                "placeholder": self.placeholder,
                "minValues": self.min_values,
                "maxValues": self.max_values,
                "disabled": self.disabled,
                "channelTypes": self.channel_types,
            }
        )

    def to_json_raw(self) -> dict[str, Any]:
        return compact_record(
            {
                "type": self.type,
                "custom_id": self.custom_id,
                "options": list(self.options),
                "placeholder": self.placeholder,
                "min_values": self.min_values,
                "max_values": self.max_values,
                "disabled": self.disabled,
                "channel_types": self.channel_types,
            }
        )
