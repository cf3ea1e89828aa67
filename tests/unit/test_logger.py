import json
import logging
import time

import pytest

from envx import EnvParseError, configure_logging, configure_logging_from_env, get_logger
from envx.utils import JsonFormatter, PlainFormatter


def test_configure_logging_explicit_arguments(root_logger):
    configure_logging(level="debug", fmt="JSON", utc=False)

    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1
    formatter = root_logger.handlers[0].formatter
    assert isinstance(formatter, JsonFormatter)
    assert formatter.utc is False

    configure_logging()
    assert root_logger.level == logging.INFO
    assert isinstance(root_logger.handlers[0].formatter, PlainFormatter)


def test_configure_logging_from_env_reads_mapping(root_logger):
    configure_logging_from_env(environ={"LOG_LEVEL": "debug", "LOG_FORMAT": "JSON", "LOG_UTC": "false"})

    assert root_logger.level == logging.DEBUG
    formatter = root_logger.handlers[0].formatter
    assert isinstance(formatter, JsonFormatter)
    assert formatter.utc is False


def test_configure_logging_from_env_defaults_and_overrides(root_logger):
    configure_logging_from_env(environ={})
    assert root_logger.level == logging.INFO
    assert isinstance(root_logger.handlers[0].formatter, PlainFormatter)

    configure_logging_from_env(level="warning", fmt="json", environ={"LOG_LEVEL": "DEBUG", "LOG_FORMAT": "plain"})
    assert root_logger.level == logging.WARNING
    assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)


def test_configure_logging_from_env_rejects_bad_bool(root_logger):
    with pytest.raises(EnvParseError) as e:
        configure_logging_from_env(environ={"LOG_UTC": "maybe"})
    assert e.value.name == "LOG_UTC"


def test_explicit_utc_ignores_malformed_env(root_logger):
    configure_logging_from_env(utc=False, environ={"LOG_UTC": "maybe"})
    formatter = root_logger.handlers[0].formatter
    assert isinstance(formatter, PlainFormatter)
    assert formatter.converter is time.localtime


def test_json_formatter_includes_extras():
    record = logging.LogRecord("envx.test", logging.INFO, __file__, 1, "env set", None, None)
    record.env = "APP_PORT"
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "env set"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "envx.test"
    assert payload["extra"] == {"env": "APP_PORT"}
    assert payload["ts"].endswith("Z")


def test_get_logger_namespace():
    assert get_logger().name == "envx"
    assert get_logger("envx.envset").name == "envx.envset"
