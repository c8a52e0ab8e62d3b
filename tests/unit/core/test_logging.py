"""Unit tests for structured logging helpers."""

import structlog

from scopegrant.core.config import Settings
from scopegrant.core.logging import (
    LoggingContext,
    add_correlation_id,
    add_logger_name,
    bind_correlation_id,
    clear_context,
    configure_logging,
    get_logger,
)


def test_add_correlation_id_keeps_bound_value():
    event = add_correlation_id(None, "info", {"correlation_id": "abc"})
    assert event["correlation_id"] == "abc"


def test_add_correlation_id_generates_one():
    event = add_correlation_id(None, "info", {})
    assert event["correlation_id"].startswith("cid_")


def test_add_logger_name_fallback():
    event = add_logger_name(object(), "info", {})
    assert event["logger"] == "scopegrant"


def test_logging_context_binds_and_unbinds():
    clear_context()
    with LoggingContext(role_id="r_1"):
        assert structlog.contextvars.get_contextvars()["role_id"] == "r_1"
    assert "role_id" not in structlog.contextvars.get_contextvars()


def test_bind_correlation_id():
    clear_context()
    bind_correlation_id("cid_test")
    assert structlog.contextvars.get_contextvars()["correlation_id"] == "cid_test"
    clear_context()
    assert structlog.contextvars.get_contextvars() == {}


def test_configure_logging_json(capsys):
    configure_logging(Settings(environment="production", log_format="json"))
    try:
        get_logger("scopegrant.test").info("Role grant created", public_id="rg_1")
        out = capsys.readouterr().out
    finally:
        structlog.reset_defaults()

    assert '"public_id": "rg_1"' in out
    assert '"event": "Role grant created"' in out
