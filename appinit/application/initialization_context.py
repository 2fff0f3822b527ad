"""Contexts handed to modules during startup and shutdown."""
from appinit.domain.interfaces.service_provider import IServiceProvider
from appinit.utils.check import not_null


class ApplicationInitializationContext:
    """Carries the service provider while modules initialize."""

    def __init__(self, service_provider: IServiceProvider):
        self.service_provider = not_null(service_provider, "service_provider")


class ApplicationShutdownContext:
    """Carries the service provider while modules shut down."""

    def __init__(self, service_provider: IServiceProvider):
        self.service_provider = not_null(service_provider, "service_provider")
