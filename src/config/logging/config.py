"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização do serviço que consome os builders
    configure_logging()  # LOG_LEVEL e SERVICE_NAME vêm de BaseSettings
    configure_logging(level="DEBUG", service_name="meu_bot")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.debug("Row opened", extra={"row_index": 2})

Os builders só emitem logs; quem configura handlers é a aplicação.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import PayloadContextFilter
from config.logging.formatters import create_json_formatter
from config.settings.base import get_base_settings

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "discord_builders"


def configure_logging(
    level: str | None = None,
    service_name: str | None = None,
    payload_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Padrão: BaseSettings.log_level (env LOG_LEVEL).
        service_name: Nome do serviço para identificação nos logs.
            Padrão: BaseSettings.service_name (env SERVICE_NAME).
        payload_id_getter: Função opcional que retorna o payload_id
            do contexto atual (ex: de ContextVar).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    settings = get_base_settings()
    if level is None:
        level = settings.log_level
    if service_name is None:
        service_name = settings.service_name or DEFAULT_SERVICE_NAME

    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(PayloadContextFilter(service_name, payload_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado."""
    return logging.getLogger(name)


def log_payload_built(
    logger: logging.Logger,
    component: str,
    **counts: int,
) -> None:
    """Log observável de payload serializado (sem conteúdo de usuário).

    Args:
        logger: Logger instance.
        component: Nome do payload (ex: "action_rows", "embed").
        **counts: Contagens agregadas (ex: rows=3, elements=7).

    Exemplo:
        log_payload_built(logger, "action_rows", rows=2, elements=6)
    """
    extra: dict[str, object] = {"component": component}
    extra.update(counts)

    logger.debug(
        "Payload built for %s",
        component,
        extra=extra,
    )
