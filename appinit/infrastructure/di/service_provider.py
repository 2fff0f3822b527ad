"""Service provider resolving registered services (IoC Container Pattern)."""
import logging
import threading
from typing import Any, Dict, List, Optional

from appinit.domain.exceptions import (
    ScopeRequiredError,
    ServiceNotRegisteredError,
    ServiceResolutionError,
)
from appinit.domain.interfaces.service_provider import IServiceProvider
from appinit.infrastructure.di.service_collection import ServiceDescriptor, ServiceLifetime

logger = logging.getLogger(__name__)


class ServiceProvider(IServiceProvider):
    """
    Resolves services from a fixed set of descriptors.

    Singletons are cached on the root provider and shared by every scope.
    Scoped services are cached per scope and can't be resolved from the root.
    Transient services are created on every lookup.
    """

    def __init__(self, descriptors: Dict[Any, ServiceDescriptor], root: Optional["ServiceProvider"] = None):
        self._descriptors = descriptors
        self._root = root or self
        self._instances: Dict[Any, Any] = {}
        self._created: List[Any] = []
        self._lock = threading.RLock()
        self._disposed = False

    @property
    def is_root(self) -> bool:
        return self._root is self

    def get_service(self, service_type: Any) -> Optional[Any]:
        if service_type in (IServiceProvider, ServiceProvider):
            return self
        descriptor = self._descriptors.get(service_type)
        if descriptor is None:
            return None
        return self._resolve(descriptor)

    def get_required_service(self, service_type: Any) -> Any:
        if service_type in (IServiceProvider, ServiceProvider):
            return self
        descriptor = self._descriptors.get(service_type)
        if descriptor is None:
            raise ServiceNotRegisteredError(service_type)
        return self._resolve(descriptor)

    def is_registered(self, service_type: Any) -> bool:
        return service_type in self._descriptors

    def create_scope(self) -> "ServiceProvider":
        """Create a child provider with its own scoped instances."""
        return ServiceProvider(self._descriptors, root=self._root)

    def _resolve(self, descriptor: ServiceDescriptor) -> Any:
        # Scopes stop resolving once their root is gone
        if self._disposed or self._root._disposed:
            raise ServiceResolutionError(descriptor.service_type, "Service provider has been disposed.")

        if descriptor.lifetime == ServiceLifetime.SINGLETON:
            if descriptor.instance is not None:
                return descriptor.instance
            return self._root._get_or_create(descriptor)

        if descriptor.lifetime == ServiceLifetime.SCOPED:
            if self.is_root:
                raise ScopeRequiredError(descriptor.service_type)
            return self._get_or_create(descriptor)

        return self._create(descriptor)

    def _get_or_create(self, descriptor: ServiceDescriptor) -> Any:
        with self._lock:
            if self._disposed:
                raise ServiceResolutionError(descriptor.service_type, "Service provider has been disposed.")
            if descriptor.service_type not in self._instances:
                instance = self._create(descriptor)
                self._instances[descriptor.service_type] = instance
                self._created.append(instance)
            return self._instances[descriptor.service_type]

    def _create(self, descriptor: ServiceDescriptor) -> Any:
        try:
            instance = descriptor.implementation_factory(self)
        except (ServiceNotRegisteredError, ServiceResolutionError):
            raise
        except Exception as e:
            logger.error(f"Failed to create {descriptor.service_type!r}: {e}", exc_info=True)
            raise ServiceResolutionError(descriptor.service_type) from e
        logger.debug(f"Created {descriptor.lifetime.value} service {descriptor.service_type!r}")
        return instance

    def dispose(self) -> None:
        """Close instances this provider created, newest first."""
        with self._lock:
            if self._disposed:
                return
            self._disposed = True
            created, self._created = self._created, []
            self._instances.clear()

        for instance in reversed(created):
            close = getattr(instance, "close", None)
            if callable(close):
                try:
                    close()
                except Exception as e:
                    logger.warning(f"Error closing {type(instance).__name__}: {e}")

    def __enter__(self) -> "ServiceProvider":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.dispose()
