import logging
import logging.config
import os
from datetime import datetime
from logging import Logger

from pytz import timezone

LOGGER_NAME = "corpus_bridge"
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_ANSI_RESET = "\033[0m"
_ANSI_COLORS: dict[str, str] = {
    "cyan": "\033[36m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "red": "\033[31m",
    "magenta": "\033[35m",
    "blue": "\033[34m",
    "white": "\033[37m",
}
_LEVEL_PREFIXES: dict[int, str] = {
    logging.WARNING: "⚠️ ",
    logging.ERROR: "⛔ ",
    logging.CRITICAL: "⛔ ",
}


def _is_debug() -> bool:
    return os.getenv("LOG_LEVEL", "info").lower() == "debug"


class TimezoneFormatter(logging.Formatter):
    """Renders timestamps in a configured pytz timezone and prefixes warnings and errors."""

    def __init__(self, tz_name: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.tz = timezone(tz_name)

    def formatTime(self, record, datefmt=None):
        moment = datetime.fromtimestamp(record.created, self.tz)
        return moment.strftime(datefmt) if datefmt else moment.isoformat()

    def format(self, record) -> str:
        try:
            message = record.getMessage()
        except (TypeError, ValueError):
            # malformed %-args from a third party logger, keep the raw template
            message = str(record.msg)
        # every handler formats the same record, so prefix a copy
        prefixed = logging.makeLogRecord(record.__dict__)
        prefixed.msg = _LEVEL_PREFIXES.get(record.levelno, "") + message
        prefixed.args = ()
        return super().format(prefixed)


class ConsoleFormatter(TimezoneFormatter):
    """Adds the ANSI color passed as ``color=`` to ColorLogger calls."""

    def format(self, record) -> str:
        line = super().format(record)
        ansi = _ANSI_COLORS.get(getattr(record, "color", None) or "", "")
        return f"{ansi}{line}{_ANSI_RESET}" if ansi else line


class ColorLogger:
    """Wraps a Logger so every log call accepts an optional ``color=`` keyword.

    Usage::

        logger.info("corpus assembled")
        logger.info("search finished", color="cyan")

    Only the console handler renders the color; the log file stays plain.
    """

    def __init__(self, logger: Logger):
        self._logger = logger

    def log(self, level: int, msg, *args, color: str | None = None, **kwargs):
        if color is not None:
            kwargs["extra"] = {**(kwargs.get("extra") or {}), "color": color}
        self._logger.log(level, msg, *args, **kwargs)

    def debug(self, msg, *args, **kwargs):
        self.log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg, *args, **kwargs):
        self.log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg, *args, **kwargs):
        self.log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg, *args, **kwargs):
        self.log(logging.ERROR, msg, *args, **kwargs)

    def critical(self, msg, *args, **kwargs):
        self.log(logging.CRITICAL, msg, *args, **kwargs)

    def exception(self, msg, *args, **kwargs):
        kwargs.setdefault("exc_info", True)
        self.log(logging.ERROR, msg, *args, **kwargs)

    def __getattr__(self, name):
        return getattr(self._logger, name)


def setup_logging() -> ColorLogger:
    """Configure console and file logging and return the application logger.

    Reads LOG_LEVEL ("debug" enables debug output), TIMEZONE (pytz name,
    default Europe/Berlin) and ROOT_DIR (log files go to ``<ROOT_DIR>/logs``,
    default the working directory).
    """
    level = logging.DEBUG if _is_debug() else logging.INFO
    tz_name = os.getenv("TIMEZONE", "Europe/Berlin")
    log_dir = os.path.join(os.getenv("ROOT_DIR") or os.getcwd(), "logs")
    os.makedirs(log_dir, exist_ok=True)

    def formatter(cls: type) -> dict:
        return {"()": cls, "format": LOG_FORMAT, "datefmt": DATE_FORMAT, "tz_name": tz_name}

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": formatter(TimezoneFormatter),
            "console": formatter(ConsoleFormatter),
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "level": level,
                "stream": "ext://sys.stdout",
            },
            "file": {
                "class": "logging.FileHandler",
                "formatter": "plain",
                "level": level,
                "filename": os.path.join(log_dir, "app.log"),
                "encoding": "utf-8",
            },
        },
        "root": {"handlers": ["console", "file"], "level": level},
    })

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if _is_debug() else logging.WARNING)

    return ColorLogger(logging.getLogger(LOGGER_NAME))
