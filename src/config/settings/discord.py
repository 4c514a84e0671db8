"""Settings dos builders de componentes Discord.

Defaults lidos do ambiente para quem cria ComponentBuilder sem
informar row_max ou modo de serialização explicitamente.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from app.constants.discord import MAX_ROW_COMPONENTS, SerializationMode


class ComponentSettings(BaseModel):
    """Configurações padrão do layout de componentes."""

    model_config = ConfigDict(extra="ignore")

    default_row_max: int = Field(
        default=MAX_ROW_COMPONENTS,
        ge=1,
        le=MAX_ROW_COMPONENTS,
        description="Quantidade máxima de componentes não exclusivos por row.",
    )
    default_serialization_mode: SerializationMode = Field(
        default=SerializationMode.MODEL,
        description="Nomenclatura padrão do JSON gerado (model|wire).",
    )


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    raw_value = os.getenv(key)
    if raw_value is None:
        return None
    stripped_value = raw_value.strip()
    return stripped_value or None


def _load_component_settings_from_env() -> ComponentSettings:
    """Carrega ComponentSettings a partir de variáveis de ambiente."""
    values: dict[str, object] = {}
    row_max = _read_optional_env("DISCORD_COMPONENT_ROW_MAX")
    if row_max is not None:
        values["default_row_max"] = row_max
    mode = _read_optional_env("DISCORD_SERIALIZATION_MODE")
    if mode is not None:
        values["default_serialization_mode"] = mode.lower()
    return ComponentSettings(**values)


@lru_cache(maxsize=1)
def get_component_settings() -> ComponentSettings:
    """Retorna instância cacheada de ComponentSettings."""
    return _load_component_settings_from_env()


__all__ = ["MAX_ROW_COMPONENTS", "ComponentSettings", "get_component_settings"]
