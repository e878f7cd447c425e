"""Unit tests for logging setup."""

import logging

import pytest

from productshot.core.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture
def restore_package_level():
    """Restore the productshot logger level after the test.

    Yields:
        The productshot logger
    """
    package_logger = logging.getLogger("productshot")
    original = package_logger.level
    try:
        yield package_logger
    finally:
        package_logger.setLevel(original)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_name(self, restore_package_level):
        """Level names are accepted in any case."""
        configure_logging("debug")
        assert restore_package_level.level == logging.DEBUG

    def test_level_number(self, restore_package_level):
        """Numeric levels are accepted."""
        configure_logging(logging.WARNING)
        assert restore_package_level.level == logging.WARNING

    def test_format(self):
        """The format carries time, logger name, level and message."""
        assert "%(name)s" in LOG_FORMAT
        assert "%(levelname)s" in LOG_FORMAT

    def test_synthesis_logs(self, caplog, executive_chair_spec):
        """Synthesis logs its lifecycle at INFO."""
        from productshot.core.config import EngineConfig
        from productshot.core.engine import synthesize_prompt

        with caplog.at_level(logging.INFO, logger="productshot"):
            synthesize_prompt(executive_chair_spec, engine_config=EngineConfig(_env_file=None))
        assert any("Synthesizing catalog prompt" in record.message for record in caplog.records)
