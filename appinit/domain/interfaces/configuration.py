"""Interface for key/value application configuration."""
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IConfiguration(ABC):
    """Read-only view over application settings."""

    @abstractmethod
    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """
        Get a setting value.

        Args:
            key: Setting name (case-insensitive)
            default: Value returned when the key is missing

        Returns:
            Setting value or default
        """
        pass

    @abstractmethod
    def get_section(self, prefix: str) -> "IConfiguration":
        """
        Get the settings sharing a prefix.

        Args:
            prefix: Section name, e.g. "REDIS" for REDIS_URL / REDIS:URL

        Returns:
            Configuration whose keys have the prefix removed
        """
        pass

    @abstractmethod
    def as_dict(self) -> Dict[str, Any]:
        """Return a copy of all settings."""
        pass

    @abstractmethod
    def __getitem__(self, key: str) -> Any:
        pass

    @abstractmethod
    def __contains__(self, key: object) -> bool:
        pass
