"""Builder de opções de application command.

Cada tipo de opção projeta um formato JSON próprio; a projeção é
escolhida pelo tipo em _PROJECTIONS.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.discord.base import compact_record
from api.validators.discord.commands import validate_option_type
from app.constants.discord import ApplicationCommandOptionType, ChannelType

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping


def build_option(*args: Any) -> dict[str, Any]:
    """Resolve as formas aceitas por add_option() em um dict de opção.

    Formas:
        build_option(option_builder_ou_dict)
        build_option(name, type)
        build_option(name, type, extra)  # extra: callable(option) ou dict
    """
    if len(args) == 1:
        option = args[0]
        if isinstance(option, ApplicationCommandOptionBuilder):
            return option.to_json()
        return dict(option)

    name, option_type, *rest = args
    extra = rest[0] if rest else None
    option_type = validate_option_type(option_type)

    if extra is not None and not callable(extra):
        return {**extra, "name": name, "type": option_type}

    builder = ApplicationCommandOptionBuilder(option_type, name)
    if extra is not None:
        extra(builder)
    return builder.to_json()


class ApplicationCommandOptionBuilder:
    """Builder fluente de uma opção (ou sub-comando) de application command.

    min/max valem como minLength/maxLength em STRING e como
    minValue/maxValue em INTEGER/NUMBER.
    """

    def __init__(self, option_type: ApplicationCommandOptionType | int, name: str) -> None:
        self.type = validate_option_type(option_type)
        self.name = name
        self.description = ""
        self.autocomplete: bool | None = None
        self.channel_types: list[ChannelType] | None = None
        self.choices: list[dict[str, Any]] = []
        self.description_localizations: dict[str, str] | None = None
        self.name_localizations: dict[str, str] | None = None
        self.min: int | float | None = None
        self.max: int | float | None = None
        self.options: list[dict[str, Any]] = []
        self.required: bool | None = None

    def add_choice(
        self,
        name: str,
        value: str | int | float,
        name_localizations: Mapping[str, str] | None = None,
    ) -> ApplicationCommandOptionBuilder:
        self.choices.append(
            compact_record(
                {
                    "name": name,
                    "value": value,
                    "nameLocalizations": dict(name_localizations) if name_localizations else None,
                }
            )
        )
        return self

    def add_description_localization(self, locale: str, description: str) -> ApplicationCommandOptionBuilder:
        if self.description_localizations is None:
            self.description_localizations = {}
        self.description_localizations[locale] = description
        return self

    def add_name_localization(self, locale: str, name: str) -> ApplicationCommandOptionBuilder:
        if self.name_localizations is None:
            self.name_localizations = {}
        self.name_localizations[locale] = name
        return self

    def add_option(self, *args: Any) -> ApplicationCommandOptionBuilder:
        """Adiciona uma opção filha (sub-comandos e grupos).

        Ver build_option() para as formas aceitas.
        """
        self.options.append(build_option(*args))
        return self

    def set_autocomplete(self, value: bool = True) -> ApplicationCommandOptionBuilder:
        self.autocomplete = value
        return self

    def set_channel_types(self, types: Iterable[ChannelType | int]) -> ApplicationCommandOptionBuilder:
        self.channel_types = [ChannelType(int(t)) for t in types]
        return self

    def set_choices(self, choices: Iterable[Mapping[str, Any]]) -> ApplicationCommandOptionBuilder:
        self.choices = [dict(choice) for choice in choices]
        return self

    def set_description(self, description: str) -> ApplicationCommandOptionBuilder:
        self.description = description
        return self

    def set_description_localizations(
        self, localizations: Mapping[str, str]
    ) -> ApplicationCommandOptionBuilder:
        self.description_localizations = dict(localizations)
        return self

    def set_min_max(
        self,
        minimum: int | float | None = None,
        maximum: int | float | None = None,
    ) -> ApplicationCommandOptionBuilder:
        """Define min/max (tamanho para STRING, valor para INTEGER/NUMBER)."""
        self.min = minimum
        self.max = maximum
        return self

    def set_name(self, name: str) -> ApplicationCommandOptionBuilder:
        self.name = name
        return self

    def set_name_localizations(self, localizations: Mapping[str, str]) -> ApplicationCommandOptionBuilder:
        self.name_localizations = dict(localizations)
        return self

    def set_required(self, value: bool = True) -> ApplicationCommandOptionBuilder:
        self.required = value
        return self

    def to_json(self) -> dict[str, Any]:
        """Projeta a opção no formato JSON do seu tipo."""
        record = {
            "type": self.type,
            "name": self.name,
            "nameLocalizations": self.name_localizations,
            "description": self.description,
            "descriptionLocalizations": self.description_localizations,
        }
        record.update(_PROJECTIONS[self.type](self))
        return compact_record(record)


def _choices(option: ApplicationCommandOptionBuilder) -> list[dict[str, Any]] | None:
    return list(option.choices) if option.choices else None


def _project_sub_command(option: ApplicationCommandOptionBuilder) -> dict[str, Any]:
    return {"options": list(option.options)}


def _project_string(option: ApplicationCommandOptionBuilder) -> dict[str, Any]:
    return {
        "autocomplete": option.autocomplete,
        "choices": _choices(option),
        "minLength": option.min,
        "maxLength": option.max,
        "required": option.required,
    }


def _project_numeric(option: ApplicationCommandOptionBuilder) -> dict[str, Any]:
    return {
        "autocomplete": option.autocomplete,
        "choices": _choices(option),
        "minValue": option.min,
        "maxValue": option.max,
        "required": option.required,
    }


def _project_simple(option: ApplicationCommandOptionBuilder) -> dict[str, Any]:
    return {"required": option.required}


def _project_channel(option: ApplicationCommandOptionBuilder) -> dict[str, Any]:
    return {
        "channelTypes": list(option.channel_types) if option.channel_types else None,
        "required": option.required,
    }


_PROJECTIONS: dict[
    ApplicationCommandOptionType,
    Callable[[ApplicationCommandOptionBuilder], dict[str, Any]],
] = {
    ApplicationCommandOptionType.SUB_COMMAND: _project_sub_command,
    ApplicationCommandOptionType.SUB_COMMAND_GROUP: _project_sub_command,
    ApplicationCommandOptionType.STRING: _project_string,
    ApplicationCommandOptionType.INTEGER: _project_numeric,
    ApplicationCommandOptionType.NUMBER: _project_numeric,
    ApplicationCommandOptionType.BOOLEAN: _project_simple,
    ApplicationCommandOptionType.USER: _project_simple,
    ApplicationCommandOptionType.ROLE: _project_simple,
    ApplicationCommandOptionType.MENTIONABLE: _project_simple,
    ApplicationCommandOptionType.ATTACHMENT: _project_simple,
    ApplicationCommandOptionType.CHANNEL: _project_channel,
}
