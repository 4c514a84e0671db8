"""Builder fluente de action rows (mensagens e modais).

Camada de borda sobre o RowLayout: valida a entrada do chamador
(row_max, estilos, tipo de select) e oferece atalhos para criar
componentes. O posicionamento em si fica no RowLayout.

Uso:
    rows = (
        ComponentBuilder()
        .add_interaction_button(ButtonStyle.PRIMARY, "confirm", "Confirmar")
        .add_url_button("https://example.com", "Docs")
        .add_select_menu("color", [{"label": "Azul", "value": "blue"}])
        .to_json()
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.discord.button import Button
from api.payload_builders.discord.emoji import emoji_to_partial
from api.payload_builders.discord.layout import RowLayout
from api.payload_builders.discord.select_menu import SelectMenu
from api.payload_builders.discord.text_input import TextInput
from api.validators.discord.components import (
    validate_button_style,
    validate_row_max,
    validate_select_type,
    validate_text_input_style,
)
from api.validators.discord.errors import ValidationError
from app.constants.discord import (
    ButtonColor,
    ButtonStyle,
    ComponentType,
    SerializationMode,
    TextInputStyle,
)
from config.settings.discord import get_component_settings

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from api.payload_builders.discord.action_row import ActionRow
    from app.protocols.payload_builder import SerializableComponent


class ComponentBuilder:
    """Monta a lista de action rows de uma mensagem ou modal."""

    emoji_to_partial = staticmethod(emoji_to_partial)

    def __init__(self, row_max: int | None = None) -> None:
        if row_max is None:
            row_max = get_component_settings().default_row_max
        self._layout = RowLayout(validate_row_max(row_max))

    @property
    def row_max(self) -> int:
        return self._layout.row_max

    @property
    def rows(self) -> list[ActionRow]:
        """Rows atuais, incluindo vazias ainda não compactadas."""
        return self._layout.rows

    def set_row_max(self, row_max: int) -> ComponentBuilder:
        """Altera a capacidade das próximas rows (1-5).

        Raises:
            ValidationError: Se row_max estiver fora de [1, 5]
        """
        self._layout.row_max = validate_row_max(row_max)
        return self

    def add_component(self, component: SerializableComponent) -> ComponentBuilder:
        """Adiciona um componente à row corrente ou a uma nova, conforme o layout."""
        self._layout.place(component)
        return self

    def add_components(self, *components: SerializableComponent) -> ComponentBuilder:
        self._layout.place_many(*components)
        return self

    def add_row(self, components: Iterable[SerializableComponent] = ()) -> ComponentBuilder:
        """Inicia uma nova action row, opcionalmente já com componentes."""
        self._layout.open_row(components)
        return self

    def add_interaction_button(
        self,
        style: ButtonStyle | ButtonColor | int,
        custom_id: str,
        label: str | None = None,
        emoji: dict[str, Any] | None = None,
        disabled: bool | None = None,
    ) -> ComponentBuilder:
        """Adiciona um botão de interação (estilos 1-4).

        Raises:
            ValidationError: Se o estilo for inválido ou LINK
        """
        button_style = validate_button_style(style)
        if button_style is ButtonStyle.LINK:
            raise ValidationError("link buttons must be added with add_url_button")
        return self.add_component(Button.create(button_style, custom_id, label, emoji, disabled))

    def add_url_button(
        self,
        url: str,
        label: str | None = None,
        emoji: dict[str, Any] | None = None,
        disabled: bool | None = None,
    ) -> ComponentBuilder:
        """Adiciona um botão de link."""
        return self.add_component(Button.create(ButtonStyle.LINK, url, label, emoji, disabled))

    def add_select_menu(
        self,
        custom_id: str,
        options: Iterable[Mapping[str, Any]] = (),
        placeholder: str | None = None,
        min_values: int | None = None,
        max_values: int | None = None,
        disabled: bool | None = None,
        select_type: ComponentType | int = ComponentType.STRING_SELECT,
    ) -> ComponentBuilder:
        """Adiciona um select menu; ele sempre ocupa uma row sozinho."""
        menu = SelectMenu.create(
            custom_id,
            options,
            placeholder,
            min_values,
            max_values,
            disabled,
            select_type=validate_select_type(select_type),
        )
        return self.add_component(menu)

    def add_text_input(
        self,
        style: TextInputStyle | int,
        label: str,
        custom_id: str,
        placeholder: str | None = None,
        value: str | None = None,
        min_length: int | None = None,
        max_length: int | None = None,
        required: bool | None = None,
    ) -> ComponentBuilder:
        """Adiciona um text input (modais); ele sempre ocupa uma row sozinho."""
        text_input = TextInput.create(
            validate_text_input_style(style),
            label,
            custom_id,
            placeholder,
            value,
            min_length,
            max_length,
            required,
        )
        return self.add_component(text_input)

    def remove_empty_rows(self) -> ComponentBuilder:
        """Remove todas as rows vazias."""
        self._layout.finalize()
        return self

    def to_json(self) -> list[dict[str, Any]]:
        """Converte o conteúdo atual para JSON (camelCase)."""
        return self._layout.to_json()

    def to_json_raw(self) -> list[dict[str, Any]]:
        """Converte o conteúdo atual para JSON da API (snake_case)."""
        return self._layout.to_json_raw()

    def serialize(self, mode: SerializationMode | str | None = None) -> list[dict[str, Any]]:
        """Serializa no modo pedido ou no padrão configurado.

        Raises:
            ValidationError: Se o modo for desconhecido
        """
        if mode is None:
            mode = get_component_settings().default_serialization_mode
        try:
            mode = SerializationMode(mode)
        except ValueError as exc:
            raise ValidationError(f"unknown serialization mode: {mode!r}") from exc

        if mode is SerializationMode.WIRE:
            return self.to_json_raw()
        return self.to_json()
