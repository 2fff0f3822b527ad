"""Module ordering and lifecycle tests"""
import pytest

from appinit.application.initialization_context import (
    ApplicationInitializationContext,
    ApplicationShutdownContext,
)
from appinit.application.modules import AppModule, ModuleLoader, ModuleManager
from appinit.domain.exceptions import ModuleInitializationError, ModuleShutdownError
from appinit.infrastructure.di.service_collection import ServiceCollection

events = []


class CoreModule(AppModule):
    def configure_services(self, services, config_class):
        events.append(("configure", self.name))
        services.add_singleton(list, events)

    def on_pre_application_initialization(self, context):
        events.append(("pre", self.name))

    def on_application_initialization(self, context):
        events.append(("init", self.name))

    def on_post_application_initialization(self, context):
        events.append(("post", self.name))

    def on_application_shutdown(self, context):
        events.append(("shutdown", self.name))


class WebModule(CoreModule):
    depends_on = (CoreModule,)


class ApiModule(CoreModule):
    depends_on = (WebModule, CoreModule)


class BrokenModule(AppModule):
    def on_application_initialization(self, context):
        raise RuntimeError("boom")


class ShutdownFailsModule(CoreModule):
    depends_on = (CoreModule,)

    def on_application_shutdown(self, context):
        raise RuntimeError("stuck")


class LoopA(AppModule):
    pass


class LoopB(AppModule):
    depends_on = (LoopA,)


@pytest.fixture(autouse=True)
def clear_events():
    events.clear()
    LoopA.depends_on = (LoopB,)
    yield
    LoopA.depends_on = ()


def test_sort_puts_dependencies_first_and_deduplicates():
    assert ModuleLoader.sort([ApiModule, CoreModule]) == [CoreModule, WebModule, ApiModule]


def test_sort_detects_cycles():
    with pytest.raises(ValueError, match="Circular module dependency"):
        ModuleLoader.sort([LoopA])


def test_lifecycle_order():
    manager = ModuleManager([WebModule])
    services = ServiceCollection()

    manager.configure_services(services, None)
    provider = services.build_service_provider()
    manager.initialize_modules(ApplicationInitializationContext(provider))
    manager.shutdown_modules(ApplicationShutdownContext(provider))

    assert events == [
        ("configure", "CoreModule"),
        ("configure", "WebModule"),
        ("pre", "CoreModule"),
        ("pre", "WebModule"),
        ("init", "CoreModule"),
        ("init", "WebModule"),
        ("post", "CoreModule"),
        ("post", "WebModule"),
        ("shutdown", "WebModule"),
        ("shutdown", "CoreModule"),
    ]
    assert provider.get_required_service(list) is events


def test_failing_hook_is_wrapped():
    manager = ModuleManager([BrokenModule])
    context = ApplicationInitializationContext(ServiceCollection().build_service_provider())

    with pytest.raises(ModuleInitializationError) as exc_info:
        manager.initialize_modules(context)

    assert exc_info.value.module_name == "BrokenModule"
    assert exc_info.value.stage == "initialization"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_shutdown_runs_every_hook_before_reporting_failures():
    manager = ModuleManager([ShutdownFailsModule])
    provider = ServiceCollection().build_service_provider()
    manager.initialize_modules(ApplicationInitializationContext(provider))
    events.clear()

    with pytest.raises(ModuleShutdownError) as exc_info:
        manager.shutdown_modules(ApplicationShutdownContext(provider))

    assert events == [("shutdown", "CoreModule")]
    assert exc_info.value.failed_modules == ["ShutdownFailsModule"]
    assert exc_info.value.stage == "shutdown"
    assert isinstance(exc_info.value.__cause__, RuntimeError)

    manager.shutdown_modules(ApplicationShutdownContext(provider))
    assert events == [("shutdown", "CoreModule")]


def test_shutdown_skips_modules_that_never_initialized():
    manager = ModuleManager([WebModule])
    provider = ServiceCollection().build_service_provider()

    manager.shutdown_modules(ApplicationShutdownContext(provider))

    assert events == []
