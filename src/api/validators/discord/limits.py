"""Limites documentados da API Discord para componentes, embeds e comandos."""

from __future__ import annotations

from app.constants.discord import MAX_ROW_COMPONENTS

# Layout de componentes
MIN_ROW_COMPONENTS = 1
MAX_ACTION_ROWS = 5

# Componentes
MAX_CUSTOM_ID_LENGTH = 100
MAX_BUTTON_LABEL_LENGTH = 80
MAX_PLACEHOLDER_LENGTH = 100
MAX_SELECT_OPTIONS = 25
MAX_SELECT_VALUES = 25
MAX_SELECT_OPTION_TEXT_LENGTH = 100
MAX_TEXT_INPUT_LABEL_LENGTH = 45
MAX_TEXT_INPUT_LENGTH = 4000

# Embeds
MAX_EMBED_TITLE_LENGTH = 256
MAX_EMBED_DESCRIPTION_LENGTH = 4096
MAX_EMBED_FIELDS = 25
MAX_EMBED_FIELD_NAME_LENGTH = 256
MAX_EMBED_FIELD_VALUE_LENGTH = 1024
MAX_EMBED_FOOTER_LENGTH = 2048
MAX_EMBED_AUTHOR_NAME_LENGTH = 256
MAX_EMBED_TOTAL_LENGTH = 6000

# Application commands
MAX_COMMAND_NAME_LENGTH = 32
MAX_COMMAND_DESCRIPTION_LENGTH = 100
MAX_COMMAND_OPTIONS = 25
MAX_COMMAND_CHOICES = 25

__all__ = [
    "MAX_ACTION_ROWS",
    "MAX_BUTTON_LABEL_LENGTH",
    "MAX_COMMAND_CHOICES",
    "MAX_COMMAND_DESCRIPTION_LENGTH",
    "MAX_COMMAND_NAME_LENGTH",
    "MAX_COMMAND_OPTIONS",
    "MAX_CUSTOM_ID_LENGTH",
    "MAX_EMBED_AUTHOR_NAME_LENGTH",
    "MAX_EMBED_DESCRIPTION_LENGTH",
    "MAX_EMBED_FIELDS",
    "MAX_EMBED_FIELD_NAME_LENGTH",
    "MAX_EMBED_FIELD_VALUE_LENGTH",
    "MAX_EMBED_FOOTER_LENGTH",
    "MAX_EMBED_TITLE_LENGTH",
    "MAX_EMBED_TOTAL_LENGTH",
    "MAX_PLACEHOLDER_LENGTH",
    "MAX_ROW_COMPONENTS",
    "MAX_SELECT_OPTIONS",
    "MAX_SELECT_OPTION_TEXT_LENGTH",
    "MAX_SELECT_VALUES",
    "MAX_TEXT_INPUT_LABEL_LENGTH",
    "MAX_TEXT_INPUT_LENGTH",
    "MIN_ROW_COMPONENTS",
]
