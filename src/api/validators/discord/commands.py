"""Validadores de application commands e opções."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.discord.errors import ValidationError
from api.validators.discord.limits import (
    MAX_COMMAND_CHOICES,
    MAX_COMMAND_DESCRIPTION_LENGTH,
    MAX_COMMAND_NAME_LENGTH,
    MAX_COMMAND_OPTIONS,
)
from app.constants.discord import (
    ApplicationCommandOptionType,
    ApplicationCommandType,
    Permission,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


def validate_option_type(option_type: int) -> ApplicationCommandOptionType:
    """Converte e valida o tipo de uma opção de comando.

    Raises:
        ValidationError: Se o tipo não existir
    """
    if isinstance(option_type, bool):
        raise ValidationError(f"invalid application command option type: {option_type!r}")
    try:
        return ApplicationCommandOptionType(int(option_type))
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            f"invalid application command option type: {option_type!r}"
        ) from exc


def validate_command_type(command_type: int) -> ApplicationCommandType:
    """Converte e valida o tipo de um application command."""
    try:
        return ApplicationCommandType(int(command_type))
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"invalid application command type: {command_type!r}") from exc


def resolve_permission_names(names: Iterable[str | int]) -> Permission:
    """Combina nomes de permissão (ex: "MANAGE_GUILD") ou flags em um único bitfield.

    Raises:
        ValidationError: Se algum nome não existir
    """
    combined = Permission(0)
    for name in names:
        if isinstance(name, int) and not isinstance(name, bool):
            combined |= Permission(name)
            continue
        try:
            combined |= Permission[name]
        except (KeyError, TypeError) as exc:
            raise ValidationError(f"unknown permission: {name!r}") from exc
    return combined


def _validate_options(options: list[Mapping[str, Any]], path: str) -> None:
    if len(options) > MAX_COMMAND_OPTIONS:
        raise ValidationError(f"{path} exceeds {MAX_COMMAND_OPTIONS} options")

    for option in options:
        name = option.get("name") or ""
        option_path = f"{path}.{name}"
        if not name or len(name) > MAX_COMMAND_NAME_LENGTH:
            raise ValidationError(
                f"{option_path} name must have 1-{MAX_COMMAND_NAME_LENGTH} characters"
            )
        if len(option.get("choices") or []) > MAX_COMMAND_CHOICES:
            raise ValidationError(f"{option_path} exceeds {MAX_COMMAND_CHOICES} choices")
        _validate_options(option.get("options") or [], option_path)


def validate_command(command: Mapping[str, Any]) -> None:
    """Valida o JSON de um application command antes do envio.

    Args:
        command: Resultado de ApplicationCommandBuilder.to_json()

    Raises:
        ValidationError: Se nome, descrição ou opções violarem os limites
    """
    name = command.get("name") or ""
    if not name or len(name) > MAX_COMMAND_NAME_LENGTH:
        raise ValidationError(f"command name must have 1-{MAX_COMMAND_NAME_LENGTH} characters")

    description = command.get("description") or ""
    if command.get("type") == ApplicationCommandType.CHAT_INPUT and not description:
        raise ValidationError("description is required for chat input commands")
    if len(description) > MAX_COMMAND_DESCRIPTION_LENGTH:
        raise ValidationError(
            f"command description exceeds {MAX_COMMAND_DESCRIPTION_LENGTH} characters"
        )

    _validate_options(list(command.get("options") or []), name)
