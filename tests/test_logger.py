import logging

import pytest

from lazyseq.logger import DEFAULT_LOGGER_NAME, LogFormatter, configure_logger, get_logger


class TestGetLogger:
    def test_cached_per_name(self):
        assert get_logger() is get_logger(DEFAULT_LOGGER_NAME)
        assert get_logger(None) is get_logger()
        assert get_logger("lazyseq-test-a") is not get_logger()

    def test_wraps_named_logger(self):
        logger = get_logger("lazyseq-test-b")
        assert logger.name == "lazyseq-test-b"
        assert logger.get_logger() is logging.getLogger("lazyseq-test-b")

    def test_single_console_handler(self):
        logger = configure_logger("lazyseq-test-c")
        configure_logger("lazyseq-test-c")
        assert len(logger.get_logger().handlers) == 1

    def test_records_stay_with_the_library_logger(self):
        assert not get_logger().get_logger().propagate
        assert configure_logger("lazyseq-test-h", propagate=True).get_logger().propagate


class TestLogging:
    def test_levels(self, log_capture):
        logger = get_logger("lazyseq-test-d")
        caplog = log_capture("lazyseq-test-d")
        logger.d("debug %s", 1)
        logger.info("info")
        logger.warn("warning")
        logger.err("error")
        assert [record.levelno for record in caplog.records] == [
            logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
        ]
        assert caplog.records[0].getMessage() == "debug 1"

    def test_call_style(self, log_capture):
        logger = get_logger("lazyseq-test-e")
        caplog = log_capture("lazyseq-test-e")
        logger(["a", 1])
        logger({"k": "v"})
        logger(3)
        assert [record.getMessage() for record in caplog.records] == ["a\n1", " k: v", "3"]

    def test_console_output(self, capsys):
        logger = configure_logger("lazyseq-test-f", console_log_color=False)
        logger.info("visible")
        logger.d("hidden")
        logger.set_level("debug")
        logger.d("now visible")
        output = capsys.readouterr().out
        assert "[lazyseq-test-f]" in output
        assert "visible" in output
        assert "hidden" not in output
        assert "now visible" in output
        assert "\033[" not in output


class TestConfiguration:
    def test_unknown_option(self):
        with pytest.raises(ValueError):
            configure_logger("lazyseq-test-g", colour=True)

    def test_formatter_colors(self):
        record = logging.LogRecord("x", logging.WARNING, __file__, 1, "message", None, None)
        colored = LogFormatter(fmt="%(color_on)s%(message)s%(color_off)s", color=True)
        plain = LogFormatter(fmt="%(color_on)s%(message)s%(color_off)s", color=False)
        assert colored.format(record) == LogFormatter.COLOR_CODES[logging.WARNING] + "message" + "\033[0m"
        assert plain.format(record) == "message"
