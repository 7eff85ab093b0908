"""Tests for environment-driven settings."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from jsonshape.engine.validator import InstanceValidator
from jsonshape.schema.nodes import NumberSchema
from jsonshape.settings import Settings, configure_logging, get_settings


class TestSettings:
    def test_defaults(self, fresh_settings: pytest.MonkeyPatch) -> None:
        settings = get_settings()
        assert settings.log_level == "INFO"
        assert settings.multiple_of_epsilon == 1e-9
        assert settings.max_depth == 64

    def test_env_override(self, fresh_settings: pytest.MonkeyPatch) -> None:
        fresh_settings.setenv("JSONSHAPE_MAX_DEPTH", "8")
        fresh_settings.setenv("JSONSHAPE_LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.max_depth == 8
        assert settings.log_level == "debug"

    def test_settings_are_cached(self, fresh_settings: pytest.MonkeyPatch) -> None:
        assert get_settings() is get_settings()

    def test_epsilon_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            Settings(multiple_of_epsilon=0)

    def test_epsilon_feeds_validator(self) -> None:
        node = NumberSchema(multiple_of=0.1)
        assert InstanceValidator().validate(node, 0.30000001).valid is False
        loose = InstanceValidator(Settings(multiple_of_epsilon=1e-3))
        assert loose.validate(node, 0.30000001).valid


class TestConfigureLogging:
    def test_sets_package_level(self) -> None:
        configure_logging(Settings(log_level="debug"))
        assert logging.getLogger("jsonshape").level == logging.DEBUG
        configure_logging(Settings(log_level="WARNING"))
        assert logging.getLogger("jsonshape").level == logging.WARNING
        logging.getLogger("jsonshape").setLevel(logging.NOTSET)
