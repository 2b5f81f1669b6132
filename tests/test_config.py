"""Unit tests for ball_inheritance.config – constants and logging setup."""
import logging
from ball_inheritance import config


class TestConstants:
    def test_ability_numbers_are_flags(self):
        nums = (config.ABILITY_NUMBER_FIRST, config.ABILITY_NUMBER_SECOND,
                config.HIDDEN_ABILITY_NUMBER)
        assert nums == (1, 2, 4)

    def test_patch_after_gen6(self):
        assert config.ABILITY_PATCH_MIN_FORMAT > config.GEN6_FORMAT


class TestLogging:
    def test_configure_logging(self, monkeypatch):
        calls = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
        config.configure_logging(logging.DEBUG)
        assert calls["level"] == logging.DEBUG
        assert calls["format"] == config.LOG_FORMAT
