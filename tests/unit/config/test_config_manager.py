"""Tests for layered configuration loading."""
from __future__ import annotations

import pytest

from shiftinclude.core.config import ConfigManager, IncludeConfig
from shiftinclude.core.exceptions import ConfigValidationError
from shiftinclude.core.includes import MAX_LINK_NESTED_DEPTH, Shift


class TestConfigManager:
    """Defaults < book table < environment."""

    def test_bundled_defaults(self) -> None:
        cfg = ConfigManager(environ={}).load_config()
        assert cfg["shift"] == "none"
        assert cfg["max_depth"] == MAX_LINK_NESTED_DEPTH
        assert cfg["log_level"] == "WARNING"

    def test_book_table_keys_are_normalised(self) -> None:
        cfg = ConfigManager({"max-depth": 3, "shift": "auto"}, environ={}).load_config()
        assert cfg["max_depth"] == 3
        assert cfg["shift"] == "auto"

    def test_mdbook_table_keys_are_accepted(self) -> None:
        book = {"command": "shiftinclude", "renderers": ["html"], "shift": -2}
        cfg = ConfigManager(book, environ={}).load_config()
        assert cfg["shift"] == -2

    def test_env_overrides_book(self) -> None:
        env = {"SHIFTINCLUDE_MAX_DEPTH": "4", "SHIFTINCLUDE_SHIFT": "-2", "OTHER": "x"}
        cfg = ConfigManager({"max-depth": 3}, environ=env).load_config()
        assert cfg["max_depth"] == 4
        assert cfg["shift"] == -2

    def test_env_string_values(self) -> None:
        cfg = ConfigManager(environ={"SHIFTINCLUDE_LOG_LEVEL": "debug"}).load_config()
        assert cfg["log_level"] == "debug"

    def test_process_environment_is_read_by_default(self, monkeypatch) -> None:
        monkeypatch.setenv("SHIFTINCLUDE_SHIFT", "auto")
        assert ConfigManager().load_config()["shift"] == "auto"

    @pytest.mark.parametrize(
        "book",
        [
            {"max-depth": -1},
            {"max-depth": "ten"},
            {"shift": "sideways"},
            {"log-level": "LOUD"},
        ],
    )
    def test_invalid_config_is_rejected(self, book) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            ConfigManager(book, environ={}).load_config()
        assert exc_info.value.context["errors"]

    def test_validation_can_be_skipped(self) -> None:
        cfg = ConfigManager({"max-depth": -1}, environ={}).load_config(validate=False)
        assert cfg["max_depth"] == -1

    def test_unknown_book_keys_pass_through(self) -> None:
        book = {"command": "x", "optional": True, "before": ["links"], "my-key": {"a": 1}}
        cfg = ConfigManager(book, environ={}).load_config()
        assert cfg["optional"] is True
        assert cfg["my_key"] == {"a": 1}

    def test_unknown_env_keys_are_ignored(self) -> None:
        env = {"SHIFTINCLUDE_HOME": "/opt/x", "SHIFTINCLUDE_RATIO": "1.5", "SHIFTINCLUDE_SHIFT": "3"}
        cfg = ConfigManager(environ=env).load_config()
        assert "home" not in cfg
        assert "ratio" not in cfg
        assert cfg["shift"] == 3

    def test_env_values_are_int_or_string(self) -> None:
        env = {"SHIFTINCLUDE_SHIFT": "true"}
        cfg = ConfigManager(environ=env).load_config(validate=False)
        assert cfg["shift"] == "true"


class TestIncludeConfig:
    """Typed accessors over the merged configuration."""

    def test_defaults(self) -> None:
        cfg = IncludeConfig(environ={})
        assert cfg.shift == Shift.none()
        assert cfg.max_depth == MAX_LINK_NESTED_DEPTH
        assert cfg.log_level == "WARNING"

    @pytest.mark.parametrize(
        "value,expected",
        [("auto", Shift.auto()), (2, Shift.right(2)), (-4, Shift.left(4)), ("-1", Shift.left(1))],
    )
    def test_shift(self, value, expected) -> None:
        assert IncludeConfig({"shift": value}, environ={}).shift == expected

    def test_section_exposes_merged_values(self) -> None:
        cfg = IncludeConfig({"max-depth": 5}, environ={})
        assert cfg.section["max_depth"] == 5
        assert cfg.max_depth == 5
