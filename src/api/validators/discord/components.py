"""Validadores de componentes e layout.

As funções validate_*_style / validate_row_max são usadas pelo
ComponentBuilder na borda; as demais são checagens opcionais de limite
que o chamador aplica antes de enviar o payload.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.validators.discord.errors import ValidationError
from api.validators.discord.limits import (
    MAX_ACTION_ROWS,
    MAX_BUTTON_LABEL_LENGTH,
    MAX_CUSTOM_ID_LENGTH,
    MAX_PLACEHOLDER_LENGTH,
    MAX_ROW_COMPONENTS,
    MAX_SELECT_OPTION_TEXT_LENGTH,
    MAX_SELECT_OPTIONS,
    MAX_SELECT_VALUES,
    MAX_TEXT_INPUT_LABEL_LENGTH,
    MAX_TEXT_INPUT_LENGTH,
    MIN_ROW_COMPONENTS,
)
from app.constants.discord import (
    SELECT_MENU_TYPES,
    ButtonStyle,
    ComponentType,
    TextInputStyle,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from api.payload_builders.discord.action_row import ActionRow
    from api.payload_builders.discord.button import Button
    from api.payload_builders.discord.select_menu import SelectMenu
    from api.payload_builders.discord.text_input import TextInput


def validate_row_max(row_max: int) -> int:
    """Valida a capacidade de uma action row.

    Raises:
        ValidationError: Se não for inteiro em [1, 5]
    """
    if isinstance(row_max, bool) or not isinstance(row_max, int):
        raise ValidationError(f"row_max must be an integer, got {type(row_max).__name__}")

    if not MIN_ROW_COMPONENTS <= row_max <= MAX_ROW_COMPONENTS:
        raise ValidationError(
            f"row_max must be between {MIN_ROW_COMPONENTS} and {MAX_ROW_COMPONENTS}, got {row_max}"
        )
    return row_max


def validate_button_style(style: int) -> ButtonStyle:
    """Converte e valida o estilo de botão."""
    try:
        return ButtonStyle(int(style))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid button style: {style!r}") from exc


def validate_select_type(select_type: int) -> ComponentType:
    """Converte e valida o tipo de select menu."""
    try:
        component_type = ComponentType(int(select_type))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid select menu type: {select_type!r}") from exc

    if component_type not in SELECT_MENU_TYPES:
        raise ValidationError(f"{component_type.name} is not a select menu type")
    return component_type


def validate_text_input_style(style: int) -> TextInputStyle:
    """Converte e valida o estilo de text input."""
    try:
        return TextInputStyle(int(style))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid text input style: {style!r}") from exc


def _validate_custom_id(custom_id: str | None, component: str) -> None:
    if not custom_id:
        raise ValidationError(f"custom_id is required for {component}")
    if len(custom_id) > MAX_CUSTOM_ID_LENGTH:
        raise ValidationError(
            f"{component} custom_id exceeds {MAX_CUSTOM_ID_LENGTH} characters"
        )


def validate_button(button: Button) -> None:
    """Valida alvo e label de um botão.

    Raises:
        ValidationError: Se faltar url/custom_id ou se label exceder o limite
    """
    if button.is_link:
        if not button.url:
            raise ValidationError("url is required for link buttons")
    else:
        _validate_custom_id(button.custom_id, "button")

    if not button.label and not button.emoji:
        raise ValidationError("button requires a label or an emoji")

    if button.label and len(button.label) > MAX_BUTTON_LABEL_LENGTH:
        raise ValidationError(f"button label exceeds {MAX_BUTTON_LABEL_LENGTH} characters")


def validate_select_menu(menu: SelectMenu) -> None:
    """Valida opções e limites de seleção de um select menu."""
    _validate_custom_id(menu.custom_id, "select menu")

    if menu.type == ComponentType.STRING_SELECT and not menu.options:
        raise ValidationError("string select requires at least one option")

    if len(menu.options) > MAX_SELECT_OPTIONS:
        raise ValidationError(f"select menu exceeds {MAX_SELECT_OPTIONS} options")

    for option in menu.options:
        for key in ("label", "value", "description"):
            text = option.get(key)
            if text and len(text) > MAX_SELECT_OPTION_TEXT_LENGTH:
                raise ValidationError(
                    f"select option {key} exceeds {MAX_SELECT_OPTION_TEXT_LENGTH} characters"
                )

    if menu.placeholder and len(menu.placeholder) > MAX_PLACEHOLDER_LENGTH:
        raise ValidationError(f"placeholder exceeds {MAX_PLACEHOLDER_LENGTH} characters")

    minimum = menu.min_values
    maximum = menu.max_values
    if minimum is not None and not 0 <= minimum <= MAX_SELECT_VALUES:
        raise ValidationError(f"min_values must be between 0 and {MAX_SELECT_VALUES}")
    if maximum is not None and not 1 <= maximum <= MAX_SELECT_VALUES:
        raise ValidationError(f"max_values must be between 1 and {MAX_SELECT_VALUES}")
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValidationError("min_values cannot exceed max_values")


def validate_text_input(text_input: TextInput) -> None:
    """Valida label, tamanhos e valor pré-preenchido de um text input."""
    _validate_custom_id(text_input.custom_id, "text input")

    if not text_input.label:
        raise ValidationError("label is required for text input")
    if len(text_input.label) > MAX_TEXT_INPUT_LABEL_LENGTH:
        raise ValidationError(f"text input label exceeds {MAX_TEXT_INPUT_LABEL_LENGTH} characters")

    minimum = text_input.min_length
    maximum = text_input.max_length
    if minimum is not None and not 0 <= minimum <= MAX_TEXT_INPUT_LENGTH:
        raise ValidationError(f"min_length must be between 0 and {MAX_TEXT_INPUT_LENGTH}")
    if maximum is not None and not 1 <= maximum <= MAX_TEXT_INPUT_LENGTH:
        raise ValidationError(f"max_length must be between 1 and {MAX_TEXT_INPUT_LENGTH}")
    if minimum is not None and maximum is not None and minimum > maximum:
        raise ValidationError("min_length cannot exceed max_length")

    if text_input.value and len(text_input.value) > MAX_TEXT_INPUT_LENGTH:
        raise ValidationError(f"value exceeds {MAX_TEXT_INPUT_LENGTH} characters")


_COMPONENT_VALIDATORS = {
    ComponentType.BUTTON: validate_button,
    ComponentType.TEXT_INPUT: validate_text_input,
    **{select_type: validate_select_menu for select_type in SELECT_MENU_TYPES},
}


def validate_action_rows(rows: Sequence[ActionRow]) -> None:
    """Valida um layout finalizado antes do envio.

    Raises:
        ValidationError: Se houver mais rows que o permitido, row com
            mais de 5 componentes, exclusivo dividindo row ou componente
            individual inválido
    """
    if len(rows) > MAX_ACTION_ROWS:
        raise ValidationError(f"message exceeds {MAX_ACTION_ROWS} action rows")

    for index, row in enumerate(rows):
        if row.size > MAX_ROW_COMPONENTS:
            raise ValidationError(f"action row {index} exceeds {MAX_ROW_COMPONENTS} components")
        if row.has_exclusive() and row.size > 1:
            raise ValidationError(f"action row {index} shares an exclusive component")
        for component in row.components:
            _COMPONENT_VALIDATORS[component.type](component)
