"""Flask application factory with dependency injection and startup modules."""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Type

from flask import Flask

from appinit.application.initialization_context import (
    ApplicationInitializationContext,
    ApplicationShutdownContext,
)
from appinit.application.modules import AppModule, ModuleManager
from appinit.config.configuration import Configuration
from appinit.config.settings import Config, get_config
from appinit.domain.exceptions import ModuleShutdownError
from appinit.domain.interfaces.configuration import IConfiguration
from appinit.domain.interfaces.hosting_environment import IHostingEnvironment
from appinit.domain.interfaces.logger_factory import ILoggerFactory
from appinit.infrastructure.di.service_collection import ServiceCollection
from appinit.infrastructure.di.service_provider import ServiceProvider
from appinit.infrastructure.hosting_environment import HostingEnvironment
from appinit.infrastructure.logger_factory import LoggerFactory
from appinit.middleware.error_handler import ErrorHandlingModule
from appinit.middleware.monitoring import MetricsModule
from appinit.views.health import HealthModule

EXTENSION_KEY = "appinit"


@dataclass
class AppInitState:
    """Startup state stored in ``app.extensions["appinit"]``."""
    service_provider: ServiceProvider
    module_manager: ModuleManager
    shut_down: bool = False


def default_modules(config_class: Type[Config]) -> list:
    modules = [ErrorHandlingModule, HealthModule]
    if getattr(config_class, "ENABLE_METRICS", False):
        modules.append(MetricsModule)
    return modules


def create_app(config_class=None, modules: Optional[Iterable[Type[AppModule]]] = None) -> Flask:
    """
    Create and configure Flask application with dependency injection.

    Services are registered first, the Flask app is created and put into its
    object accessor, and then every module's initialization hooks run with an
    ApplicationInitializationContext.

    Args:
        config_class: Optional configuration class (for testing)
        modules: Module classes to run; defaults to error handling, health and metrics

    Returns:
        Configured Flask application
    """
    config = config_class or get_config()

    logger_factory = LoggerFactory.from_config(config)
    logger_factory.configure()
    _logger = logger_factory.create_logger(__name__)

    try:
        config.validate()
    except ValueError as e:
        _logger.warning(f"Configuration validation warning: {e}")

    service_provider: Optional[ServiceProvider] = None
    module_manager: Optional[ModuleManager] = None
    try:
        module_manager = ModuleManager(default_modules(config) if modules is None else modules)

        services = ServiceCollection()
        app_accessor = services.add_object_accessor(Flask)
        services.add_singleton(IHostingEnvironment, HostingEnvironment.from_config(config))
        services.add_singleton(IConfiguration, factory=lambda provider: _build_configuration(config))
        services.add_singleton(ILoggerFactory, logger_factory)
        module_manager.configure_services(services, config)

        service_provider = services.build_service_provider()

        app = Flask(__name__)
        app.config.from_object(config)
        app_accessor.value = app

        with app.app_context():
            module_manager.initialize_modules(ApplicationInitializationContext(service_provider))

        app.extensions[EXTENSION_KEY] = AppInitState(
            service_provider=service_provider,
            module_manager=module_manager
        )
    except Exception as e:
        _logger.critical(f"Failed to create Flask application: {e}", exc_info=True)
        if service_provider is not None:
            _release_startup(service_provider, module_manager, _logger)
        raise

    _logger.info(f"Application ready - registered blueprints: {list(app.blueprints)}")
    return app


def shutdown_app(app: Flask) -> None:
    """
    Run module shutdown hooks and dispose the service provider.

    Calling it more than once has no effect.
    """
    state: Optional[AppInitState] = app.extensions.get(EXTENSION_KEY)
    if state is None or state.shut_down:
        return
    state.shut_down = True
    try:
        state.module_manager.shutdown_modules(ApplicationShutdownContext(state.service_provider))
    finally:
        state.service_provider.dispose()


def _release_startup(service_provider: ServiceProvider, module_manager: ModuleManager, logger) -> None:
    """Shut down modules that finished initializing and dispose the provider after a failed startup."""
    try:
        module_manager.shutdown_modules(ApplicationShutdownContext(service_provider))
    except ModuleShutdownError as e:
        logger.error(f"Shutdown after failed startup did not complete: {e}")
    finally:
        service_provider.dispose()


def _build_configuration(config) -> Configuration:
    configuration = Configuration.from_object(config)
    prefix = getattr(config, "CONFIG_ENV_PREFIX", None)
    if prefix:
        configuration = configuration.merge(Configuration.from_env(prefix))
    return configuration


__all__ = ["create_app", "shutdown_app", "AppInitState", "default_modules", "EXTENSION_KEY"]
