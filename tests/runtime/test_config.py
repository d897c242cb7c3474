"""Tests for runtime configuration and initialization."""

from __future__ import annotations

import json
import logging
import os
from unittest.mock import patch

import pytest
from kombi import traced
from kombi.runtime import LOGGER_NAME, KombiConfig, get_config, init
from kombi.runtime._config import _detect_json_logs, _detect_log_level


class TestKombiConfig:
    """Tests for the KombiConfig dataclass."""

    def test_default_values(self) -> None:
        config = KombiConfig()
        assert config.log_level is None
        assert config.json_logs is True

    def test_config_is_frozen(self) -> None:
        config = KombiConfig()
        with pytest.raises(AttributeError):
            config.log_level = 'DEBUG'  # type: ignore[misc]


class TestDetectFromEnvironment:
    """Tests for environment variable detection."""

    def test_log_level_unset(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert _detect_log_level() is None

    def test_log_level_empty(self) -> None:
        with patch.dict(os.environ, {'KOMBI_LOG_LEVEL': '  '}):
            assert _detect_log_level() is None

    def test_log_level_case_insensitive(self) -> None:
        with patch.dict(os.environ, {'KOMBI_LOG_LEVEL': 'debug'}):
            assert _detect_log_level() == 'DEBUG'

    @pytest.mark.parametrize('value', ['0', 'false', 'No', 'OFF'])
    def test_json_logs_disabled(self, value: str) -> None:
        with patch.dict(os.environ, {'KOMBI_JSON_LOGS': value}):
            assert _detect_json_logs() is False

    @pytest.mark.parametrize('value', ['', '1', 'true', 'yes'])
    def test_json_logs_enabled(self, value: str) -> None:
        with patch.dict(os.environ, {'KOMBI_JSON_LOGS': value}):
            assert _detect_json_logs() is True


class TestInit:
    """Tests for init() and get_config()."""

    def test_get_config_before_init(self) -> None:
        with pytest.raises(RuntimeError, match='not initialized'):
            get_config()

    def test_init_defaults_silent(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        assert config == KombiConfig(log_level=None, json_logs=True)
        assert get_config() is config

    def test_init_explicit_values(self) -> None:
        config = init(log_level='debug', json_logs=False)
        assert config.log_level == 'DEBUG'
        assert config.json_logs is False
        assert logging.getLogger(LOGGER_NAME).level == logging.DEBUG

    def test_init_reads_environment(self) -> None:
        with patch.dict(os.environ, {'KOMBI_LOG_LEVEL': 'warning', 'KOMBI_JSON_LOGS': 'false'}):
            config = init()
        assert config.log_level == 'WARNING'
        assert config.json_logs is False

    def test_explicit_overrides_environment(self) -> None:
        with patch.dict(os.environ, {'KOMBI_LOG_LEVEL': 'ERROR'}):
            config = init(log_level='INFO')
        assert config.log_level == 'INFO'

    def test_init_configures_logging(self, capsys) -> None:
        init(log_level='DEBUG')

        records = [json.loads(line) for line in capsys.readouterr().err.splitlines()]
        assert any(r['event'] == 'kombi.configured' for r in records)

    def test_silent_init_undoes_earlier_configuration(self, capsys) -> None:
        """init() without a level turns off logging set up by a previous init()."""
        init(log_level='DEBUG')
        with patch.dict(os.environ, {}, clear=True):
            config = init()
        capsys.readouterr()

        traced(lambda x: x, name='quiet')(1)

        assert config.log_level is None
        assert logging.getLogger(LOGGER_NAME).handlers == []
        assert logging.getLogger(LOGGER_NAME).level == logging.NOTSET
        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err == ''
