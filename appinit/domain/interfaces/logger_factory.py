"""Interface for creating loggers."""
import logging
from abc import ABC, abstractmethod


class ILoggerFactory(ABC):
    """Creates named loggers for application components."""

    @abstractmethod
    def create_logger(self, name: str) -> logging.Logger:
        """
        Create (or get) a logger.

        Args:
            name: Logger name, usually the module's __name__

        Returns:
            Logger instance
        """
        pass
