import logging
from logging.handlers import RotatingFileHandler

import pytest

from src.config.logging_config import configure_logging


@pytest.fixture
def root_logger():
    logger = logging.getLogger()
    level = logger.level
    yield logger
    configure_logging("WARNING")
    logger.setLevel(level)


class TestConfigureLogging:

    def test_repeat_calls_replace_handlers(self, root_logger):
        configure_logging("INFO")
        count = len(root_logger.handlers)

        configure_logging("DEBUG")

        assert len(root_logger.handlers) == count
        assert root_logger.level == logging.DEBUG

    def test_rotating_file_when_configured(self, root_logger, tmp_path):
        log_file = tmp_path / "logs" / "app.log"

        configure_logging("INFO", str(log_file))

        file_handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 10 * 1024 * 1024
        assert file_handlers[0].backupCount == 5
        assert log_file.exists()

    def test_file_handler_removed_on_reconfigure(self, root_logger, tmp_path):
        configure_logging("INFO", str(tmp_path / "app.log"))

        configure_logging("INFO")

        assert not any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers)
