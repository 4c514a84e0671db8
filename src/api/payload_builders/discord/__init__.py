"""Builders de payload para a API Discord.

Componentes interativos (action rows com botões, selects e text
inputs), embeds e definições de application commands.
"""

from api.payload_builders.discord.action_row import ActionRow
from api.payload_builders.discord.base import Component
from api.payload_builders.discord.button import Button
from api.payload_builders.discord.command import ApplicationCommandBuilder
from api.payload_builders.discord.command_option import ApplicationCommandOptionBuilder
from api.payload_builders.discord.component_builder import ComponentBuilder
from api.payload_builders.discord.embed import EmbedBuilder
from api.payload_builders.discord.emoji import emoji_to_partial
from api.payload_builders.discord.layout import RowLayout
from api.payload_builders.discord.select_menu import SelectMenu, build_select_option
from api.payload_builders.discord.text_input import TextInput

__all__ = [
    "ActionRow",
    "ApplicationCommandBuilder",
    "ApplicationCommandOptionBuilder",
    "Button",
    "Component",
    "ComponentBuilder",
    "EmbedBuilder",
    "RowLayout",
    "SelectMenu",
    "TextInput",
    "build_select_option",
    "emoji_to_partial",
]
