# Imports

import threading
import sys
import logging
from typing import Optional

_lock = threading.Lock()
_loggerhandlers = {}

DEFAULT_LOGGER_NAME = "LazySeq"


def default_config(name):
    return {
        'name': name,
        'console_log_output': "stdout",
        'console_log_level': "info",
        'console_log_color': True,
        'propagate': False,
        'log_line_template': f"%(color_on)s[{name}] %(funcName)-5s%(color_off)s: %(message)s"
    }


class LogFormatter(logging.Formatter):
    """Formats records with an ANSI colour per level, or without colour codes at all."""

    COLOR_CODES = {
        logging.CRITICAL: "\033[38;5;196m",
        logging.ERROR: "\033[38;5;9m",
        logging.WARNING: "\033[38;5;11m",
        logging.INFO: "\033[38;5;111m",
        logging.DEBUG: "\033[1;30m",
    }
    RESET_CODE = "\033[0m"

    def __init__(self, color, *args, **kwargs):
        super(LogFormatter, self).__init__(*args, **kwargs)
        self.color = color

    def format(self, record, *args, **kwargs):
        colored = self.color and record.levelno in self.COLOR_CODES
        record.color_on = self.COLOR_CODES[record.levelno] if colored else ""
        record.color_off = self.RESET_CODE if colored else ""
        return super(LogFormatter, self).format(record, *args, **kwargs)


class SequenceLogger:
    """
    Console logger of the sequence library. Records are emitted at DEBUG and above by the
    underlying logging.Logger, the console handler filters them by console_log_level.
    """

    def __init__(self, config):
        self.config = config
        self.logger = self.setup_logging()

    @property
    def name(self):
        return self.config['name']

    def setup_logging(self):
        logger = logging.getLogger(self.config['name'])
        logger.setLevel(logging.DEBUG)

        output = sys.stdout if self.config["console_log_output"] == "stdout" else sys.stderr
        console_handler = logging.StreamHandler(output)
        console_handler.setLevel(self.config["console_log_level"].upper())
        console_handler.setFormatter(
            LogFormatter(fmt=self.config["log_line_template"], color=self.config["console_log_color"])
        )
        if logger.hasHandlers():
            logger.handlers.clear()
        logger.addHandler(console_handler)
        logger.propagate = self.config.get("propagate", False)
        return logger

    def set_level(self, level):
        """
        Changes the level of the console output, e.g. "debug" to see every built sequence.
        :param level: level name or number
        """
        self.config["console_log_level"] = level if isinstance(level, int) else level.lower()
        for handler in self.logger.handlers:
            handler.setLevel(level if isinstance(level, int) else level.upper())

    def __call__(self, msg):
        if isinstance(msg, (list, tuple)):
            msg = '\n'.join(str(m) for m in msg)
        elif isinstance(msg, dict):
            msg = ' |'.join(f' {k}: {v}' for k, v in msg.items())
        elif not isinstance(msg, str):
            msg = str(msg)
        self.logger.info(msg)

    def info(self, *args, **kwargs):
        return self.logger.info(*args, **kwargs)

    def warn(self, *args, **kwargs):
        return self.logger.warning(*args, **kwargs)

    def err(self, *args, **kwargs):
        return self.logger.error(*args, **kwargs)

    def d(self, *args, **kwargs):
        return self.logger.debug(*args, **kwargs)

    def log(self, *args, **kwargs):
        return self.info(*args, **kwargs)

    def get_logger(self):
        return self.logger


def configure_logger(name=DEFAULT_LOGGER_NAME, **options) -> SequenceLogger:
    """
    Replaces the logger registered under name by one built from the default configuration updated
    with options, e.g. configure_logger(console_log_level="debug", console_log_color=False).
    :return: the new SequenceLogger
    """
    config = default_config(name)
    unknown = set(options) - set(config)
    if unknown:
        raise ValueError(f"Unknown logger options: {', '.join(sorted(unknown))}")
    config.update(options)
    with _lock:
        _loggerhandlers[name] = SequenceLogger(config)
        return _loggerhandlers[name]


def get_logger(name: Optional[str] = DEFAULT_LOGGER_NAME) -> SequenceLogger:
    if name is None:
        name = DEFAULT_LOGGER_NAME
    with _lock:
        if name not in _loggerhandlers:
            _loggerhandlers[name] = SequenceLogger(default_config(name))
        return _loggerhandlers[name]
