"""Builder de application commands (chat input, user e message)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.payload_builders.discord.base import compact_record
from api.payload_builders.discord.command_option import build_option
from api.validators.discord.commands import (
    resolve_permission_names,
    validate_command_type,
)
from api.validators.discord.errors import ValidationError
from app.constants.discord import ApplicationCommandType, Permission
from config.logging import get_logger, log_payload_built

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)


class ApplicationCommandBuilder:
    """Builder fluente da definição de um application command.

    Uso:
        command = (
            ApplicationCommandBuilder(ApplicationCommandType.CHAT_INPUT, "ping")
            .set_description("Responde pong")
            .add_option("target", ApplicationCommandOptionType.USER)
            .disallow_dm_usage()
            .to_json()
        )
    """

    def __init__(self, command_type: ApplicationCommandType | int, name: str) -> None:
        self.type = validate_command_type(command_type)
        self.name = name
        self.default_member_permissions: str | None = None
        self.description: str | None = None
        self.description_localizations: dict[str, str] | None = None
        self.dm_permission: bool | None = None
        self.name_localizations: dict[str, str] | None = None
        self.options: list[dict[str, Any]] = []

    def add_description_localization(self, locale: str, description: str) -> ApplicationCommandBuilder:
        """Adiciona uma tradução da descrição para o locale informado."""
        if self.description_localizations is None:
            self.description_localizations = {}
        self.description_localizations[locale] = description
        return self

    def add_name_localization(self, locale: str, name: str) -> ApplicationCommandBuilder:
        """Adiciona uma tradução do nome para o locale informado."""
        if self.name_localizations is None:
            self.name_localizations = {}
        self.name_localizations[locale] = name
        return self

    def add_option(self, *args: Any) -> ApplicationCommandBuilder:
        """Adiciona uma opção.

        Formas aceitas:
            add_option(ApplicationCommandOptionBuilder(...))
            add_option({"type": 3, "name": "texto", ...})
            add_option("texto", ApplicationCommandOptionType.STRING)
            add_option("texto", ApplicationCommandOptionType.STRING, lambda o: o.set_required())
            add_option("texto", ApplicationCommandOptionType.STRING, {"description": "..."})
        """
        self.options.append(build_option(*args))
        return self

    def allow_dm_usage(self) -> ApplicationCommandBuilder:
        return self.set_dm_permission(True)

    def disallow_dm_usage(self) -> ApplicationCommandBuilder:
        return self.set_dm_permission(False)

    def set_dm_permission(self, dm_permission: bool) -> ApplicationCommandBuilder:
        self.dm_permission = dm_permission
        return self

    def set_default_member_permissions(
        self,
        *permissions: int | str | Permission | list[str],
    ) -> ApplicationCommandBuilder:
        """Define as permissões padrão exigidas para usar o comando.

        Aceita um bitfield (int, Permission ou string numérica), uma lista
        de nomes de permissão, ou vários nomes como argumentos.

        Raises:
            ValidationError: Se o valor não puder ser convertido
        """
        if not permissions:
            raise ValidationError("at least one permission is required")

        first = permissions[0]
        if len(permissions) > 1 or (isinstance(first, str) and first in Permission.__members__):
            data: Any = list(permissions)
        else:
            data = first

        if isinstance(data, bool):
            raise ValidationError(f"invalid permissions value: {data!r}")
        if isinstance(data, int):
            value = str(int(data))
        elif isinstance(data, str):
            if not data.isdigit():
                raise ValidationError(f"invalid permissions value: {data!r}")
            value = data
        else:
            value = str(int(resolve_permission_names(data)))

        self.default_member_permissions = value
        return self

    def set_description(self, description: str) -> ApplicationCommandBuilder:
        self.description = description
        return self

    def set_description_localizations(self, localizations: Mapping[str, str]) -> ApplicationCommandBuilder:
        """Define o mapa completo de locale -> descrição."""
        self.description_localizations = dict(localizations)
        return self

    def set_name(self, name: str) -> ApplicationCommandBuilder:
        self.name = name
        return self

    def set_name_localizations(self, localizations: Mapping[str, str]) -> ApplicationCommandBuilder:
        """Define o mapa completo de locale -> nome."""
        self.name_localizations = dict(localizations)
        return self

    def to_json(self) -> dict[str, Any]:
        """Converte o comando para JSON."""
        command = compact_record(
            {
                "defaultMemberPermissions": self.default_member_permissions,
                "description": self.description,
                "descriptionLocalizations": self.description_localizations,
                "dmPermission": self.dm_permission,
                "name": self.name,
                "nameLocalizations": self.name_localizations,
                "options": list(self.options),
                "type": self.type,
            }
        )
        log_payload_built(logger, "application_command", options=len(self.options))
        return command
