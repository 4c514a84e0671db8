"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="meu_bot")

    logger = get_logger(__name__)
    logger.info("Operação OK", extra={"rows": 3})

Campos obrigatórios em todo log:
- payload_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import configure_logging, get_logger, log_payload_built
from config.logging.filters import PayloadContextFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "PayloadContextFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
    "log_payload_built",
]
