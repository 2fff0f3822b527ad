"""Logger factory backed by the standard logging module."""
import logging
import sys
from typing import Union

from appinit.domain.interfaces.logger_factory import ILoggerFactory

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class LoggerFactory(ILoggerFactory):
    """Creates loggers and owns the root logging setup."""

    def __init__(self, level: Union[int, str] = logging.INFO, debug: bool = False):
        self._level = logging.DEBUG if debug else _to_level(level)
        self._configured = False

    @classmethod
    def from_config(cls, config_class) -> "LoggerFactory":
        return cls(
            level=getattr(config_class, "LOG_LEVEL", "INFO"),
            debug=bool(getattr(config_class, "DEBUG", False)),
        )

    @property
    def level(self) -> int:
        return self._level

    @property
    def is_configured(self) -> bool:
        return self._configured

    def configure(self) -> None:
        """Configure application logging."""
        # Everything goes to stdout; some hosts mark stderr lines as errors
        logging.basicConfig(
            level=self._level,
            format=LOG_FORMAT,
            stream=sys.stdout,
            force=True
        )
        self._configured = True

    def create_logger(self, name: str) -> logging.Logger:
        return logging.getLogger(name)

    def set_level(self, name: str, level: Union[int, str]) -> None:
        logging.getLogger(name).setLevel(_to_level(level))


def _to_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value
