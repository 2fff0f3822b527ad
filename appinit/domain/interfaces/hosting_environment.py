"""Interface describing the hosting environment."""
from abc import ABC, abstractmethod

DEVELOPMENT = "Development"
STAGING = "Staging"
PRODUCTION = "Production"


class IHostingEnvironment(ABC):
    """Information about the environment the application runs in."""

    @property
    @abstractmethod
    def environment_name(self) -> str:
        """Name of the environment (Development, Staging, Production, ...)."""
        pass

    @property
    @abstractmethod
    def application_name(self) -> str:
        """Name of the application."""
        pass

    @property
    @abstractmethod
    def content_root_path(self) -> str:
        """Absolute path of the directory holding application content."""
        pass

    @property
    @abstractmethod
    def web_root_path(self) -> str:
        """Absolute path of the directory holding static web files."""
        pass

    def is_environment(self, name: str) -> bool:
        """Compare the current environment name, ignoring case."""
        return self.environment_name.lower() == (name or "").lower()

    def is_development(self) -> bool:
        return self.is_environment(DEVELOPMENT)

    def is_staging(self) -> bool:
        return self.is_environment(STAGING)

    def is_production(self) -> bool:
        return self.is_environment(PRODUCTION)
