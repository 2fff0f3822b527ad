"""Application modules and their lifecycle."""
import logging
from typing import Iterable, List, Sequence, Type

from appinit.application.initialization_context import (
    ApplicationInitializationContext,
    ApplicationShutdownContext,
)
from appinit.domain.exceptions import ModuleInitializationError, ModuleShutdownError
from appinit.infrastructure.di.service_collection import ServiceCollection


class AppModule:
    """
    Base class for application modules.

    Subclasses override the hooks they need. Modules listed in ``depends_on``
    run their hooks first.
    """

    depends_on: Sequence[Type["AppModule"]] = ()

    @property
    def name(self) -> str:
        return type(self).__name__

    def configure_services(self, services: ServiceCollection, config_class) -> None:
        """Register services before the provider is built."""
        pass

    def on_pre_application_initialization(self, context: ApplicationInitializationContext) -> None:
        pass

    def on_application_initialization(self, context: ApplicationInitializationContext) -> None:
        pass

    def on_post_application_initialization(self, context: ApplicationInitializationContext) -> None:
        pass

    def on_application_shutdown(self, context: ApplicationShutdownContext) -> None:
        pass


class ModuleLoader:
    """Orders module classes so dependencies come first."""

    @staticmethod
    def sort(module_types: Iterable[Type[AppModule]]) -> List[Type[AppModule]]:
        """
        Topologically sort module classes by ``depends_on``.

        Dependencies that were not listed are pulled in automatically.

        Raises:
            ValueError: If modules depend on each other in a cycle
        """
        ordered: List[Type[AppModule]] = []
        visiting: List[Type[AppModule]] = []

        def visit(module_type: Type[AppModule]) -> None:
            if module_type in ordered:
                return
            if module_type in visiting:
                cycle = " -> ".join(m.__name__ for m in visiting + [module_type])
                raise ValueError(f"Circular module dependency: {cycle}")
            visiting.append(module_type)
            for dependency in module_type.depends_on:
                visit(dependency)
            visiting.pop()
            ordered.append(module_type)

        for module_type in module_types:
            visit(module_type)
        return ordered


class ModuleManager:
    """Instantiates modules and drives their lifecycle hooks."""

    def __init__(self, module_types: Iterable[Type[AppModule]]):
        self.modules: List[AppModule] = [module_type() for module_type in ModuleLoader.sort(module_types)]
        self.initialized_modules: List[AppModule] = []
        self._logger = logging.getLogger(__name__)

    def configure_services(self, services: ServiceCollection, config_class) -> None:
        for module in self.modules:
            self._run(module, "configure_services", module.configure_services, services, config_class)

    def initialize_modules(self, context: ApplicationInitializationContext) -> None:
        for module in self.modules:
            self._run(module, "pre-initialization", module.on_pre_application_initialization, context)
        for module in self.modules:
            self._run(module, "initialization", module.on_application_initialization, context)
            self.initialized_modules.append(module)
        for module in self.modules:
            self._run(module, "post-initialization", module.on_post_application_initialization, context)
        self._logger.info(f"Initialized modules: {[m.name for m in self.modules]}")

    def shutdown_modules(self, context: ApplicationShutdownContext) -> None:
        """
        Shut down initialized modules in reverse order.

        Every module gets its shutdown hook even if an earlier one fails.

        Raises:
            ModuleShutdownError: After all hooks ran, if any of them failed
        """
        modules, self.initialized_modules = self.initialized_modules, []
        failures = []
        for module in reversed(modules):
            try:
                module.on_application_shutdown(context)
            except Exception as e:
                self._logger.error(f"Module {module.name} failed during shutdown: {e}", exc_info=True)
                failures.append((module.name, e))

        if failures:
            first_name, first_error = failures[0]
            raise ModuleShutdownError(first_name, [name for name, _ in failures]) from first_error
        self._logger.info("All modules shut down")

    def _run(self, module: AppModule, stage: str, hook, *args) -> None:
        try:
            hook(*args)
        except Exception as e:
            self._logger.error(f"Module {module.name} failed during {stage}: {e}", exc_info=True)
            raise ModuleInitializationError(module.name, stage) from e
