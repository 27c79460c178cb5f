"""
Unit tests for logging configuration.
"""

import json
import logging

import structlog

from lifecycle_hooks.infrastructure.logging import configure_logging, get_logger


def teardown_function():
    structlog.reset_defaults()


def test_json_format(caplog):
    configure_logging("INFO", "json")
    caplog.set_level(logging.INFO)

    get_logger("hooks").bind(container_id="docker://abc", pod="p_n()").info("hook ran", url="http://foo:80/")

    record = json.loads(caplog.records[-1].getMessage())
    assert record["event"] == "hook ran"
    assert record["container_id"] == "docker://abc"
    assert record["pod"] == "p_n()"
    assert record["level"] == "info"


def test_text_format(caplog):
    configure_logging("INFO", "text")
    caplog.set_level(logging.INFO)

    get_logger("hooks").warning("hook failed", error="boom")

    message = caplog.records[-1].getMessage()
    assert "hook failed" in message
    assert "error=boom" in message


def test_debug_filtered_at_info(caplog):
    configure_logging("INFO", "json")
    caplog.set_level(logging.INFO)

    get_logger("hooks").debug("noise")

    assert not any("noise" in r.getMessage() for r in caplog.records)
