"""Validadores de conformidade para payloads Discord.

Uso:
    from api.validators.discord import ValidationError, validate_action_rows

    builder = ComponentBuilder()
    ...
    validate_action_rows(builder.remove_empty_rows().rows)
"""

from api.validators.discord.commands import (
    resolve_permission_names,
    validate_command,
    validate_command_type,
    validate_option_type,
)
from api.validators.discord.components import (
    validate_action_rows,
    validate_button,
    validate_button_style,
    validate_row_max,
    validate_select_menu,
    validate_select_type,
    validate_text_input,
    validate_text_input_style,
)
from api.validators.discord.embed import validate_embed
from api.validators.discord.errors import ValidationError

__all__ = [
    "ValidationError",
    "resolve_permission_names",
    "validate_action_rows",
    "validate_button",
    "validate_button_style",
    "validate_command",
    "validate_command_type",
    "validate_embed",
    "validate_option_type",
    "validate_row_max",
    "validate_select_menu",
    "validate_select_type",
    "validate_text_input",
    "validate_text_input_style",
]
