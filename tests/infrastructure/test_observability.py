"""Observability - tests for JSONFormatter and setup_logging."""

import json
import logging

from storefront.infrastructure.observability import (
    LOGGER_NAME,
    JSONFormatter,
    setup_logging,
)


def _make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "storefront.services.order_service", logging.WARNING, __file__, 1,
        "Order rejected: %s", ("bad",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_make_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "storefront.services.order_service"
    assert payload["message"] == "Order rejected: bad"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    record = _make_record(order_id="ORD-1", error_code="DUPLICATE_SKU", secret="x")
    payload = json.loads(JSONFormatter().format(record))
    assert payload["order_id"] == "ORD-1"
    assert payload["error_code"] == "DUPLICATE_SKU"
    assert "secret" not in payload
    assert "profile_id" not in payload


def test_setup_logging_replaces_handler_instead_of_stacking():
    logger = logging.getLogger(LOGGER_NAME)
    first = setup_logging("DEBUG", "json")
    second = setup_logging("warning", "text")
    try:
        assert first not in logger.handlers
        assert second in logger.handlers
        assert logger.level == logging.WARNING
        assert not isinstance(second.formatter, JSONFormatter)
    finally:
        logger.removeHandler(second)
        logger.setLevel(logging.NOTSET)


def test_setup_logging_unknown_level_falls_back_to_info():
    logger = logging.getLogger(LOGGER_NAME)
    handler = setup_logging("chatty", "json")
    try:
        assert logger.level == logging.INFO
        assert isinstance(handler.formatter, JSONFormatter)
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
