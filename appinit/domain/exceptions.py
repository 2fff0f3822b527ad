"""Errors raised by the service container."""
from typing import Any, List, Optional


def _type_name(service_type: Any) -> str:
    return getattr(service_type, "__name__", None) or repr(service_type)


class ServiceNotRegisteredError(LookupError):
    """Raised when a required service type has no registration."""

    def __init__(self, service_type: Any):
        self.service_type = service_type
        super().__init__(f"No service for type '{_type_name(service_type)}' has been registered.")


class ServiceResolutionError(RuntimeError):
    """Raised when a registered service could not be created."""

    def __init__(self, service_type: Any, message: Optional[str] = None):
        self.service_type = service_type
        super().__init__(message or f"Failed to create service '{_type_name(service_type)}'.")


class ModuleLifecycleError(RuntimeError):
    """Raised when a module lifecycle hook fails."""

    def __init__(self, module_name: str, stage: str):
        self.module_name = module_name
        self.stage = stage
        super().__init__(f"Module '{module_name}' failed during {stage}.")


class ModuleInitializationError(ModuleLifecycleError):
    """Raised when a module fails while the application starts."""


class ModuleShutdownError(ModuleLifecycleError):
    """Raised after shutdown when one or more modules failed to shut down."""

    def __init__(self, module_name: str, failed_modules: List[str]):
        self.failed_modules = failed_modules
        super().__init__(module_name, "shutdown")


class ScopeRequiredError(ServiceResolutionError):
    """Raised when a scoped service is requested from the root provider."""

    def __init__(self, service_type: Any):
        super().__init__(
            service_type,
            f"Cannot resolve scoped service '{_type_name(service_type)}' from the root provider."
        )
