"""Testes para square_ox.config.logging.

Cobre: configure_logging, get_logger, CorrelationIdFilter,
create_json_formatter e a saída JSON dos logs do dispatcher.
"""

from __future__ import annotations

import io
import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from square_ox.api.connectors.square.square_logging import log_success
from square_ox.config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    BearerRedactionFilter,
    CorrelationIdFilter,
    configure_logging,
    configure_logging_from_settings,
    create_json_formatter,
    get_logger,
)
from square_ox.config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS
from square_ox.config.logging.formatters import LOG_FIELD_ORDER
from square_ox.config.settings import SquareSettings


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record(msg: str = "msg", name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),  # case insensitive
            ("ERROR", logging.ERROR),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_levels(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_configure_logging_installs_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "custom-corr-id")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)
        assert any(isinstance(f, BearerRedactionFilter) for f in handler.filters)
        assert isinstance(handler.formatter, JsonFormatter)

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "square_ox"


class TestGetLogger:
    def test_get_logger_returns_named_logger(self) -> None:
        logger = get_logger("square_ox.test")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "square_ox.test"
        assert get_logger("square_ox.test") is logger


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"

        filter_.filter(record)

        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name")
        record = _record()

        filter_.filter(record)

        assert record.correlation_id == ""
        assert record.service == "service_name"


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_content(self) -> None:
        expected = {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
            "client_version",
        }
        assert expected == REQUIRED_LOG_FIELDS

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {
            "asctime": "timestamp",
            "levelname": "level",
            "name": "logger",
        }

    def test_fields_keep_fixed_order(self) -> None:
        record = _record("ordem")
        CorrelationIdFilter("svc").filter(record)

        data = json.loads(create_json_formatter().format(record))

        renamed = [FIELD_RENAME_MAP.get(field, field) for field in LOG_FIELD_ORDER]
        assert list(data)[: len(renamed)] == renamed

    def test_non_ascii_kept_readable(self) -> None:
        output = create_json_formatter().format(_record("localização criada"))

        assert "localização criada" in output

    def test_json_formatter_renames_fields(self) -> None:
        record = _record("Test message", name="square_ox.test")
        record.correlation_id = "abc-123"
        record.service = "test_service"
        record.client_version = "0.2.0"

        data = json.loads(create_json_formatter().format(record))

        assert data["message"] == "Test message"
        assert data["logger"] == "square_ox.test"
        assert data["level"] == "INFO"
        assert data["correlation_id"] == "abc-123"
        assert data["service"] == "test_service"
        assert data["client_version"] == "0.2.0"
        assert "timestamp" in data
        assert "asctime" not in data


class TestLoggingIntegration:
    """Fluxo completo: configure + logs do dispatcher em JSON."""

    def test_dispatch_success_log_is_json(self) -> None:
        configure_logging(
            level="DEBUG",
            service_name="integration_test",
            correlation_id_getter=lambda: "int-test-001",
        )
        stream = io.StringIO()
        logging.getLogger().handlers[0].setStream(stream)

        log_success("GET", "/v2/locations", 200)

        data = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert data["message"] == "square_request_ok"
        assert data["service"] == "integration_test"
        assert data["correlation_id"] == "int-test-001"
        assert data["method"] == "GET"
        assert data["path"] == "/v2/locations"
        assert data["status_code"] == 200


class TestBearerRedactionFilter:
    """Mascaramento de tokens Bearer."""

    def test_redacts_token_in_args(self) -> None:
        record = logging.LogRecord(
            name="httpx",
            level=logging.DEBUG,
            pathname="",
            lineno=0,
            msg="headers=%s",
            args=("{'Authorization': 'Bearer EAAAl-secret'}",),
            exc_info=None,
        )

        assert BearerRedactionFilter().filter(record) is True
        assert record.getMessage() == "headers={'Authorization': 'Bearer ***'}"

    def test_message_without_token_untouched(self) -> None:
        record = _record("plain %s")
        record.args = ("value",)

        BearerRedactionFilter().filter(record)

        assert record.msg == "plain %s"
        assert record.getMessage() == "plain value"

    def test_malformed_format_args_pass_through(self) -> None:
        record = _record("%d items")
        record.args = ("not-a-number",)

        assert BearerRedactionFilter().filter(record) is True
        assert record.msg == "%d items"
        assert record.args == ("not-a-number",)

    def test_malformed_log_call_does_not_raise(self) -> None:
        configure_logging(level="INFO")
        logging.getLogger().handlers[0].setStream(io.StringIO())

        logging.getLogger("app").warning("%d items", "not-a-number")


class TestCorrelationIdFilterVersion:
    def test_client_version_injected(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert isinstance(record.client_version, str)
        assert record.client_version


class TestConfigureLoggingFromSettings:
    """Nível e nome do serviço vindos de SquareSettings."""

    def test_uses_settings_level_and_service(self) -> None:
        settings = SquareSettings(log_level="DEBUG", service_name="checkout_worker")

        configure_logging_from_settings(settings, correlation_id_getter=lambda: "req-9")
        stream = io.StringIO()
        logging.getLogger().handlers[0].setStream(stream)

        log_success("GET", "/v2/locations", 200)

        assert logging.getLogger().level == logging.DEBUG
        data = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert data["service"] == "checkout_worker"
        assert data["correlation_id"] == "req-9"

    def test_reads_environment_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("SERVICE_NAME", "env_service")

        configure_logging_from_settings()
        stream = io.StringIO()
        logging.getLogger().handlers[0].setStream(stream)

        logging.getLogger("app").warning("location_sync_failed")

        assert logging.getLogger().level == logging.WARNING
        data = json.loads(stream.getvalue().strip())
        assert data["service"] == "env_service"
