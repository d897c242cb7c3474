"""Tests for kombi's logger namespace and logging configuration."""

from __future__ import annotations

import json
import logging

import pytest
from kombi.runtime import LOGGER_NAME, configure_logging, get_logger, reset_logging


def _records(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


class TestGetLogger:
    """Tests for get_logger() naming and default silence."""

    @pytest.mark.parametrize(
        ('name', 'expected'),
        [
            (None, 'kombi'),
            ('kombi', 'kombi'),
            ('kombi.trace', 'kombi.trace'),
            ('trace', 'kombi.trace'),
            ('kombinator', 'kombi.kombinator'),
        ],
    )
    def test_names_are_nested_under_kombi(self, name: str | None, expected: str, caplog) -> None:
        """Logger names live in the kombi namespace."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)
        get_logger(name).info('named')
        assert [r.name for r in caplog.records] == [expected]

    def test_silent_without_configuration(self, capsys) -> None:
        """Debug events go nowhere until logging is configured."""
        get_logger('test').debug('hidden', key='value')
        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err == ''

    def test_events_reach_stdlib_as_dicts(self, caplog) -> None:
        """Enabled events are handed to stdlib logging with their fields."""
        caplog.set_level(logging.DEBUG, logger=LOGGER_NAME)
        get_logger('test').debug('visible', key='value')

        (record,) = caplog.records
        assert record.levelno == logging.DEBUG
        assert record.msg['event'] == 'visible'
        assert record.msg['key'] == 'value'
        assert record.msg['level'] == 'debug'

    def test_level_filters_before_rendering(self, caplog) -> None:
        """Events below the logger's level never reach stdlib."""
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)
        get_logger('test').debug('hidden')
        assert caplog.records == []


class TestConfigureLogging:
    """Tests for configure_logging() and reset_logging()."""

    def test_json_output(self, capsys) -> None:
        """JSON mode writes one JSON object per record to stderr."""
        configure_logging(level='INFO', json_output=True)
        get_logger('test').info('json event', key='value')

        captured = capsys.readouterr()
        assert captured.out == ''
        (record,) = _records(captured.err)
        assert record['event'] == 'json event'
        assert record['key'] == 'value'
        assert record['logger'] == 'kombi.test'
        assert record['level'] == 'info'
        assert 'timestamp' in record

    def test_console_output(self, capsys) -> None:
        """Console mode writes a human-readable line."""
        configure_logging(level='INFO', json_output=False)
        get_logger('test').info('console event')

        assert 'console event' in capsys.readouterr().err

    def test_level_threshold(self, capsys) -> None:
        """Events below the configured level are dropped."""
        configure_logging(level='WARNING')
        log = get_logger('test')
        log.info('hidden')
        log.warning('shown')

        assert [r['event'] for r in _records(capsys.readouterr().err)] == ['shown']

    def test_stdlib_records_are_formatted(self, capsys) -> None:
        """Plain stdlib records on kombi loggers share the same renderer."""
        configure_logging(level='INFO')
        logging.getLogger('kombi.plain').info('from stdlib')

        (record,) = _records(capsys.readouterr().err)
        assert record['event'] == 'from stdlib'
        assert record['logger'] == 'kombi.plain'

    def test_reconfigure_replaces_handler(self, capsys) -> None:
        """Configuring twice still renders each event once."""
        configure_logging(level='INFO')
        configure_logging(level='INFO')
        get_logger('test').info('once')

        assert len(_records(capsys.readouterr().err)) == 1
        assert len(logging.getLogger(LOGGER_NAME).handlers) == 1

    def test_root_logger_untouched(self) -> None:
        """Only the kombi logger is configured."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level

        configure_logging(level='DEBUG')

        assert root.handlers == handlers
        assert root.level == level
        assert logging.getLogger(LOGGER_NAME).propagate is False

    def test_reset_restores_silence(self, capsys) -> None:
        """reset_logging() removes the handler and restores defaults."""
        configure_logging(level='DEBUG')
        reset_logging()
        get_logger('test').debug('after reset')

        logger = logging.getLogger(LOGGER_NAME)
        assert logger.handlers == []
        assert logger.level == logging.NOTSET
        assert logger.propagate is True
        assert capsys.readouterr().err == ''

    def test_reset_without_configure_is_noop(self) -> None:
        """reset_logging() is safe to call when nothing was configured."""
        reset_logging()
        assert logging.getLogger(LOGGER_NAME).handlers == []
