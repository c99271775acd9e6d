"""Tests for speedtype.core.config – environment-driven settings."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from speedtype.core.config import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_WORD_COUNT,
    SessionConfig,
    load_config,
)


class TestDefaults:
    def test_dataclass_defaults(self):
        cfg = SessionConfig()
        assert cfg.duration_seconds == 60
        assert cfg.word_count == 50
        assert cfg.log_level == "INFO"

    def test_empty_environment(self):
        cfg = load_config({})
        assert cfg == SessionConfig(DEFAULT_DURATION_SECONDS, DEFAULT_WORD_COUNT, "INFO")

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("SPEEDTYPE_DURATION", "15")
        assert load_config().duration_seconds == 15

    def test_log_level_number(self):
        assert SessionConfig(log_level="DEBUG").log_level_number == logging.DEBUG


class TestOverrides:
    def test_numbers(self):
        cfg = load_config({"SPEEDTYPE_DURATION": "30", "SPEEDTYPE_WORD_COUNT": "10"})
        assert cfg.duration_seconds == 30
        assert cfg.word_count == 10

    def test_blank_values_fall_back(self):
        cfg = load_config({"SPEEDTYPE_DURATION": " "})
        assert cfg.duration_seconds == DEFAULT_DURATION_SECONDS

    def test_dictionary_is_not_configurable(self, tmp_path: Path):
        custom = tmp_path / "w.yaml"
        custom.write_text("words: [alpha, beta]\n", encoding="utf-8")
        cfg = load_config({"SPEEDTYPE_WORDS_FILE": str(custom)})
        assert cfg == SessionConfig()
        assert not hasattr(cfg, "words_file")

    def test_log_level_case_insensitive(self):
        assert load_config({"SPEEDTYPE_LOG_LEVEL": "debug"}).log_level == "DEBUG"


class TestInvalid:
    def test_non_integer(self):
        with pytest.raises(ValueError, match="SPEEDTYPE_DURATION must be an integer"):
            load_config({"SPEEDTYPE_DURATION": "sixty"})

    @pytest.mark.parametrize("value", ["0", "-3"])
    def test_non_positive(self, value):
        with pytest.raises(ValueError, match="SPEEDTYPE_WORD_COUNT must be positive"):
            load_config({"SPEEDTYPE_WORD_COUNT": value})

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="SPEEDTYPE_LOG_LEVEL"):
            load_config({"SPEEDTYPE_LOG_LEVEL": "chatty"})
