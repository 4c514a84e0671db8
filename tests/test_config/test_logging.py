"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_payload_built,
PayloadContextFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    PayloadContextFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_payload_built,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from config.settings import get_base_settings


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("SERVICE_NAME", raising=False)
    get_base_settings.cache_clear()
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    get_base_settings.cache_clear()


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura logging com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_configure_logging_is_case_insensitive(self) -> None:
        """Nível é aceito em minúsculas."""
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_configure_logging_replaces_handlers(self) -> None:
        """Handlers existentes são substituídos por um único handler JSON."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging(payload_id_getter=lambda: "modal-1")
        assert len(root.handlers) == 1
        assert any(isinstance(f, PayloadContextFilter) for f in root.handlers[0].filters)

    def test_defaults_come_from_base_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Sem argumentos, usa LOG_LEVEL e SERVICE_NAME de BaseSettings."""
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("SERVICE_NAME", "bot_from_env")
        get_base_settings.cache_clear()

        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        context_filter = next(
            f for f in root.handlers[0].filters if isinstance(f, PayloadContextFilter)
        )
        record = _record()
        context_filter.filter(record)
        assert record.service == "bot_from_env"

    def test_explicit_arguments_override_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        get_base_settings.cache_clear()
        configure_logging(level="DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level_from_settings_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        get_base_settings.cache_clear()
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging()

    def test_constants(self) -> None:
        """Níveis válidos e nome padrão do serviço."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "discord_builders"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("api.payload_builders.discord.layout")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "api.payload_builders.discord.layout"
        assert logger is get_logger("api.payload_builders.discord.layout")


class TestLogPayloadBuilt:
    """Testes para log_payload_built."""

    def test_logs_component_and_counts_at_debug(self) -> None:
        """Usa formato lazy e envia contagens via extra."""
        logger = MagicMock(spec=logging.Logger)
        log_payload_built(logger, "action_rows", rows=2, elements=6)
        logger.debug.assert_called_once()
        args, kwargs = logger.debug.call_args
        assert args == ("Payload built for %s", "action_rows")
        assert kwargs["extra"] == {"component": "action_rows", "rows": 2, "elements": 6}

    def test_logs_without_counts(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_payload_built(logger, "embed")
        assert logger.debug.call_args[1]["extra"] == {"component": "embed"}


class TestPayloadContextFilter:
    """Testes para PayloadContextFilter."""

    def test_filter_adds_payload_id_and_service(self) -> None:
        filter_ = PayloadContextFilter("my_bot", lambda: "msg-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.payload_id == "msg-123"
        assert record.service == "my_bot"

    def test_filter_preserves_explicit_payload_id(self) -> None:
        """payload_id passado via extra tem precedência."""
        filter_ = PayloadContextFilter("svc", lambda: "from-getter")
        record = _record()
        record.payload_id = "explicit-id"
        filter_.filter(record)
        assert record.payload_id == "explicit-id"

    def test_filter_uses_empty_string_without_getter(self) -> None:
        filter_ = PayloadContextFilter("svc")
        record = _record(level=logging.ERROR)
        assert filter_.filter(record) is True
        assert record.payload_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_fields_and_rename_map(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "payload_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_renames_fields(self) -> None:
        """Saída é JSON com level/logger renomeados."""
        formatter = create_json_formatter()
        record = _record("Empty action rows removed")
        record.payload_id = "abc-123"
        record.service = "test_service"
        output = json.loads(formatter.format(record))
        assert output["message"] == "Empty action rows removed"
        assert output["level"] == "INFO"
        assert output["logger"] == "test.logger"
        assert output["payload_id"] == "abc-123"
        assert output["service"] == "test_service"


class TestLoggingIntegration:
    """Testes de integração do sistema de logging com os builders."""

    def test_layout_logs_go_through_configured_handler(self) -> None:
        """Builders emitem logs DEBUG sem configurar handlers próprios."""
        from api.payload_builders.discord import ComponentBuilder

        configure_logging(level="DEBUG", service_name="integration_test")
        builder = ComponentBuilder().add_select_menu(
            "pick", [{"label": "A", "value": "a"}]
        )
        # Não deve levantar exceção
        assert len(builder.to_json()) == 1
