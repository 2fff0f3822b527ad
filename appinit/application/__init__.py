"""Application layer - startup contexts, accessors and modules."""
from appinit.application.initialization_context import (
    ApplicationInitializationContext,
    ApplicationShutdownContext,
)
from appinit.application.context_extensions import (
    get_application_builder,
    get_application_builder_or_none,
    get_environment,
    get_environment_or_none,
    get_configuration,
    get_logger_factory,
)
from appinit.application.modules import AppModule, ModuleLoader, ModuleManager

__all__ = [
    "ApplicationInitializationContext",
    "ApplicationShutdownContext",
    "get_application_builder",
    "get_application_builder_or_none",
    "get_environment",
    "get_environment_or_none",
    "get_configuration",
    "get_logger_factory",
    "AppModule",
    "ModuleLoader",
    "ModuleManager",
]
