"""Builder de embeds.

Mantém um único registro de embed; campos opcionais não definidos
são omitidos em to_json(). O número de fields não é limitado aqui
(ver api.validators.discord.embed.validate_embed).
"""

from __future__ import annotations

import copy
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from api.payload_builders.discord.base import compact_record
from config.logging import get_logger, log_payload_built

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = get_logger(__name__)

ZERO_WIDTH_SPACE = "\u200b"


class EmbedBuilder:
    """Builder fluente de um embed."""

    def __init__(self) -> None:
        self._json: dict[str, Any] = {}

    @classmethod
    def load_from_json(
        cls,
        json: Mapping[str, Any] | list[Mapping[str, Any]],
        force_singular: bool = False,
    ) -> EmbedBuilder | list[EmbedBuilder] | None:
        """Cria builder(s) a partir de JSON de embed.

        Args:
            json: Um embed ou uma lista de embeds.
            force_singular: Com lista, retorna só o primeiro builder
                (None se a lista estiver vazia).
        """
        if isinstance(json, list):
            builders = [cls.load_from_json(item) for item in json]
            if force_singular:
                return builders[0] if builders else None
            return builders

        builder = cls()
        builder._json = copy.deepcopy(dict(json))
        if "fields" in builder._json:
            builder._json["fields"] = [dict(field) for field in builder._json["fields"]]
        return builder

    # Fields

    def add_blank_field(self, inline: bool | None = None) -> EmbedBuilder:
        """Adiciona um field em branco (espaços de largura zero)."""
        return self.add_field(ZERO_WIDTH_SPACE, ZERO_WIDTH_SPACE, inline)

    def add_field(self, name: str, value: str, inline: bool | None = None) -> EmbedBuilder:
        self._json.setdefault("fields", []).append(
            compact_record({"name": name, "value": value, "inline": inline})
        )
        return self

    def add_fields(self, *fields: Mapping[str, Any]) -> EmbedBuilder:
        for field in fields:
            self.add_field(field["name"], field["value"], field.get("inline"))
        return self

    # Getters

    def get_author(self) -> dict[str, Any] | None:
        return self._json.get("author")

    def get_color(self) -> int | None:
        return self._json.get("color")

    def get_description(self) -> str | None:
        return self._json.get("description")

    def get_field(self, index: int) -> dict[str, Any] | None:
        """Retorna o field no índice, ou None se não existir."""
        fields = self.get_fields()
        if 0 <= index < len(fields):
            return fields[index]
        return None

    def get_fields(self) -> list[dict[str, Any]]:
        return self._json.get("fields", [])

    def get_footer(self) -> dict[str, Any] | None:
        return self._json.get("footer")

    def get_image(self) -> dict[str, Any] | None:
        return self._json.get("image")

    def get_thumbnail(self) -> dict[str, Any] | None:
        return self._json.get("thumbnail")

    def get_timestamp(self) -> str | None:
        return self._json.get("timestamp")

    def get_timestamp_date(self) -> datetime | None:
        """Timestamp atual como datetime."""
        timestamp = self.get_timestamp()
        if not timestamp:
            return None
        return datetime.fromisoformat(timestamp)

    def get_title(self) -> str | None:
        return self._json.get("title")

    def get_url(self) -> str | None:
        return self._json.get("url")

    # Removers

    def _remove(self, key: str) -> EmbedBuilder:
        self._json.pop(key, None)
        return self

    def remove_author(self) -> EmbedBuilder:
        return self._remove("author")

    def remove_color(self) -> EmbedBuilder:
        return self._remove("color")

    def remove_description(self) -> EmbedBuilder:
        return self._remove("description")

    def remove_footer(self) -> EmbedBuilder:
        return self._remove("footer")

    def remove_image(self) -> EmbedBuilder:
        return self._remove("image")

    def remove_thumbnail(self) -> EmbedBuilder:
        return self._remove("thumbnail")

    def remove_timestamp(self) -> EmbedBuilder:
        return self._remove("timestamp")

    def remove_title(self) -> EmbedBuilder:
        return self._remove("title")

    def remove_url(self) -> EmbedBuilder:
        return self._remove("url")

    # Setters

    def set_author(
        self,
        name: str,
        icon_url: str | None = None,
        url: str | None = None,
    ) -> EmbedBuilder:
        self._json["author"] = compact_record({"name": name, "iconURL": icon_url, "url": url})
        return self

    def set_color(self, color: int) -> EmbedBuilder:
        self._json["color"] = color
        return self

    def set_description(self, first: str | list[str], *other: str | list[str]) -> EmbedBuilder:
        """Define a descrição.

        Aceita strings, listas de strings ou ambos em vários argumentos;
        tudo é unido por LF.
        """
        lines: list[str] = []
        for part in (first, *other):
            if isinstance(part, str):
                lines.append(part)
            else:
                lines.extend(part)
        self._json["description"] = "\n".join(lines)
        return self

    def set_footer(self, text: str, icon_url: str | None = None) -> EmbedBuilder:
        self._json["footer"] = compact_record({"text": text, "iconURL": icon_url})
        return self

    def set_image(self, url: str) -> EmbedBuilder:
        self._json["image"] = {"url": url}
        return self

    def set_thumbnail(self, url: str) -> EmbedBuilder:
        self._json["thumbnail"] = {"url": url}
        return self

    def set_timestamp(self, time: str | datetime) -> EmbedBuilder:
        """Define o timestamp: ISO 8601, datetime ou "now"."""
        if time == "now":
            time = datetime.now(UTC)
        if isinstance(time, datetime):
            time = time.isoformat()
        self._json["timestamp"] = time
        return self

    def set_title(self, title: str) -> EmbedBuilder:
        self._json["title"] = title
        return self

    def set_url(self, url: str) -> EmbedBuilder:
        self._json["url"] = url
        return self

    def to_json(self, array: bool = False) -> dict[str, Any] | list[dict[str, Any]]:
        """Converte o embed para JSON.

        Args:
            array: Se True, retorna o embed dentro de uma lista.
        """
        embed = compact_record(copy.deepcopy(self._json))
        log_payload_built(logger, "embed", fields=len(self.get_fields()))
        return [embed] if array else embed
