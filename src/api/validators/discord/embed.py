"""Validador de embeds (limites de tamanho da plataforma)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from api.validators.discord.errors import ValidationError
from api.validators.discord.limits import (
    MAX_EMBED_AUTHOR_NAME_LENGTH,
    MAX_EMBED_DESCRIPTION_LENGTH,
    MAX_EMBED_FIELD_NAME_LENGTH,
    MAX_EMBED_FIELD_VALUE_LENGTH,
    MAX_EMBED_FIELDS,
    MAX_EMBED_FOOTER_LENGTH,
    MAX_EMBED_TITLE_LENGTH,
    MAX_EMBED_TOTAL_LENGTH,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


def _check_length(text: str | None, limit: int, label: str) -> int:
    if not text:
        return 0
    if len(text) > limit:
        raise ValidationError(f"{label} exceeds {limit} characters")
    return len(text)


def validate_embed(embed: Mapping[str, Any]) -> None:
    """Valida o JSON de um embed.

    Args:
        embed: Resultado de EmbedBuilder.to_json()

    Raises:
        ValidationError: Se algum texto, a soma dos textos ou o número
            de fields exceder o limite
    """
    fields = embed.get("fields") or []
    if len(fields) > MAX_EMBED_FIELDS:
        raise ValidationError(f"embed exceeds {MAX_EMBED_FIELDS} fields")

    total = _check_length(embed.get("title"), MAX_EMBED_TITLE_LENGTH, "title")
    total += _check_length(embed.get("description"), MAX_EMBED_DESCRIPTION_LENGTH, "description")
    total += _check_length(
        (embed.get("author") or {}).get("name"), MAX_EMBED_AUTHOR_NAME_LENGTH, "author name"
    )
    total += _check_length(
        (embed.get("footer") or {}).get("text"), MAX_EMBED_FOOTER_LENGTH, "footer text"
    )

    for index, field in enumerate(fields):
        if not field.get("name") or not field.get("value"):
            raise ValidationError(f"field {index} requires name and value")
        total += _check_length(field["name"], MAX_EMBED_FIELD_NAME_LENGTH, f"field {index} name")
        total += _check_length(field["value"], MAX_EMBED_FIELD_VALUE_LENGTH, f"field {index} value")

    if total > MAX_EMBED_TOTAL_LENGTH:
        raise ValidationError(f"embed text exceeds {MAX_EMBED_TOTAL_LENGTH} characters in total")
