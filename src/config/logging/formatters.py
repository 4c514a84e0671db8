"""Formatters de logging estruturado.

Todo log JSON sai com os campos de REQUIRED_LOG_FIELDS, renomeados
conforme FIELD_RENAME_MAP.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos obrigatórios em todo log estruturado
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "payload_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-10-17 10:30:00,123",
            "level": "DEBUG",
            "logger": "api.payload_builders.discord.layout",
            "message": "Empty action rows removed",
            "payload_id": "modal-42",
            "service": "discord_builders",
            "removed_rows": 2
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )
