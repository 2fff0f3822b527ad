"""Service registrations collected before the provider is built."""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterator, Optional

from appinit.infrastructure.di.object_accessor import ObjectAccessor

logger = logging.getLogger(__name__)

Factory = Callable[[Any], Any]


class ServiceLifetime(str, Enum):
    """How long a resolved instance is reused."""
    SINGLETON = "singleton"
    SCOPED = "scoped"
    TRANSIENT = "transient"


@dataclass
class ServiceDescriptor:
    """Registration for one service type."""
    service_type: Any
    lifetime: ServiceLifetime
    implementation_factory: Optional[Factory] = None
    instance: Optional[Any] = None

    def __post_init__(self):
        if self.instance is None and self.implementation_factory is None:
            raise ValueError("Either instance or implementation_factory must be provided")
        if self.instance is not None and self.lifetime != ServiceLifetime.SINGLETON:
            raise ValueError("Only singleton services can be registered with an instance")


class ServiceCollection:
    """
    Collects service descriptors keyed by service type.

    The last registration for a type wins. Factories receive the provider
    resolving them.
    """

    def __init__(self):
        self._descriptors: Dict[Any, ServiceDescriptor] = {}

    def add(self, descriptor: ServiceDescriptor) -> "ServiceCollection":
        if descriptor.service_type in self._descriptors:
            logger.debug(f"Replacing registration for {descriptor.service_type!r}")
        self._descriptors[descriptor.service_type] = descriptor
        return self

    def try_add(self, descriptor: ServiceDescriptor) -> bool:
        """Add the descriptor only if the type is not registered yet."""
        if descriptor.service_type in self._descriptors:
            return False
        self._descriptors[descriptor.service_type] = descriptor
        return True

    def add_singleton(
        self,
        service_type: Any,
        instance: Optional[Any] = None,
        *,
        factory: Optional[Factory] = None
    ) -> "ServiceCollection":
        """
        Register a singleton.

        Args:
            service_type: Lookup key
            instance: Ready-made instance
            factory: Callable creating the instance on first lookup

        Returns:
            The collection, for chaining
        """
        if (instance is None) == (factory is None):
            raise ValueError("Provide exactly one of instance or factory")
        return self.add(ServiceDescriptor(
            service_type=service_type,
            lifetime=ServiceLifetime.SINGLETON,
            implementation_factory=factory,
            instance=instance
        ))

    def add_scoped(self, service_type: Any, factory: Factory) -> "ServiceCollection":
        return self.add(ServiceDescriptor(service_type, ServiceLifetime.SCOPED, factory))

    def add_transient(self, service_type: Any, factory: Factory) -> "ServiceCollection":
        return self.add(ServiceDescriptor(service_type, ServiceLifetime.TRANSIENT, factory))

    def add_object_accessor(self, service_type: Any, value: Optional[Any] = None) -> ObjectAccessor:
        """
        Register an ObjectAccessor[service_type] singleton and return it.

        The caller keeps the accessor and sets ``value`` later.
        """
        accessor = ObjectAccessor(value)
        self.add_singleton(ObjectAccessor[service_type], accessor)
        return accessor

    def get_descriptor(self, service_type: Any) -> Optional[ServiceDescriptor]:
        return self._descriptors.get(service_type)

    def contains(self, service_type: Any) -> bool:
        return service_type in self._descriptors

    def __contains__(self, service_type: Any) -> bool:
        return self.contains(service_type)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __iter__(self) -> Iterator[ServiceDescriptor]:
        return iter(list(self._descriptors.values()))

    def build_service_provider(self):
        """Create the root provider from a snapshot of the registrations."""
        from appinit.infrastructure.di.service_provider import ServiceProvider
        logger.info(f"Building service provider with {len(self)} registrations")
        return ServiceProvider(dict(self._descriptors))
