"""Tests for logging configuration"""
import io
import logging

from git_workdir_keeper.logging_config import ColoredFormatter, get_logger, setup_logging


class TestGetLogger:

    def test_strips_package_prefix(self):
        assert get_logger("git_workdir_keeper.services.git.working_dir").name == "git.working_dir"

    def test_other_names_untouched(self):
        assert get_logger("something.else").name == "something.else"


class TestSetupLogging:

    def test_default_level_is_warning(self, restore_root_logger):
        setup_logging()
        assert restore_root_logger.level == logging.WARNING
        assert len(restore_root_logger.handlers) == 1

    def test_verbose_level_is_info(self, restore_root_logger):
        setup_logging(verbose=True)
        assert restore_root_logger.level == logging.INFO

    def test_debug_writes_log_file(self, restore_root_logger, temp_dir):
        log_file = temp_dir / "logs" / "debug.log"
        setup_logging(debug=True, log_file=log_file)

        assert restore_root_logger.level == logging.DEBUG
        get_logger("git_workdir_keeper.tests").debug("hello from the test")
        for handler in restore_root_logger.handlers:
            handler.flush()

        assert "hello from the test" in log_file.read_text()


class TestColoredFormatter:

    def test_plain_when_not_a_tty(self, monkeypatch):
        monkeypatch.setattr("sys.stderr", io.StringIO())
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        assert formatter.format(record) == "ERROR boom"
