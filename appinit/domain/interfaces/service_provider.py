"""Interface for service lookup (Service Locator Pattern)."""
from abc import ABC, abstractmethod
from typing import Any, Optional


class IServiceProvider(ABC):
    """Interface for retrieving registered services by type."""

    @abstractmethod
    def get_service(self, service_type: Any) -> Optional[Any]:
        """
        Look up a service, tolerating absence.

        Args:
            service_type: Type (or generic alias) the service was registered under

        Returns:
            Service instance or None if the type is not registered
        """
        pass

    @abstractmethod
    def get_required_service(self, service_type: Any) -> Any:
        """
        Look up a service that must be registered.

        Args:
            service_type: Type (or generic alias) the service was registered under

        Returns:
            Service instance

        Raises:
            ServiceNotRegisteredError: If the type is not registered
        """
        pass
