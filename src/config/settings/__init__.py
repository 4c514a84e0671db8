"""Agregador de settings dos builders.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.discord import (
    MAX_ROW_COMPONENTS,
    ComponentSettings,
    get_component_settings,
)

__all__ = [
    "MAX_ROW_COMPONENTS",
    "BaseSettings",
    "ComponentSettings",
    "Environment",
    "get_base_settings",
    "get_component_settings",
]
