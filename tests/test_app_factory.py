"""Application factory and HTTP endpoint tests"""
import pytest
from flask import Flask

from appinit import EXTENSION_KEY, create_app, shutdown_app
from appinit.application.context_extensions import (
    get_application_builder,
    get_configuration,
    get_environment,
    get_logger_factory,
)
from appinit.application.modules import AppModule
from appinit.config.settings import TestingConfig
from appinit.domain.exceptions import ModuleInitializationError
from appinit.domain.interfaces.configuration import IConfiguration
from appinit.infrastructure.di.object_accessor import ObjectAccessor
from appinit.middleware import error_handler
from appinit.views.health import health_blueprint

captured = {}


class CaptureModule(AppModule):
    def on_application_initialization(self, context):
        captured["app"] = get_application_builder(context)
        captured["environment"] = get_environment(context).environment_name
        captured["configuration"] = get_configuration(context)
        captured["logger"] = get_logger_factory(context).create_logger("tests.capture")

    def on_application_shutdown(self, context):
        captured["shutdown"] = True


class ClosingService:
    closed = False

    def close(self):
        ClosingService.closed = True


class ClosingModule(AppModule):
    def configure_services(self, services, config_class):
        services.add_singleton(ClosingService, factory=lambda p: ClosingService())

    def on_application_initialization(self, context):
        context.service_provider.get_required_service(ClosingService)


class MetricsConfig(TestingConfig):
    ENABLE_METRICS = True


class SentryConfig(TestingConfig):
    SENTRY_DSN = "https://public@sentry.example.com/1"


@pytest.fixture(autouse=True)
def reset_captured():
    captured.clear()
    ClosingService.closed = False


def test_create_app_stores_state(app):
    state = app.extensions[EXTENSION_KEY]

    assert state.service_provider.get_required_service(ObjectAccessor[Flask]).value is app
    assert state.service_provider.get_required_service(IConfiguration).get("APP_ENV") == "testing"
    assert app.config["TESTING"] is True


def test_modules_see_startup_services():
    app = create_app(TestingConfig, modules=[CaptureModule])

    assert captured["app"] is app
    assert captured["environment"] == "Testing"
    assert captured["configuration"].get("SECRET_KEY") == TestingConfig.SECRET_KEY
    assert captured["logger"].name == "tests.capture"

    shutdown_app(app)
    assert captured["shutdown"] is True


def test_environment_variables_overlay_configuration(monkeypatch):
    monkeypatch.setenv("APPINIT_FEATURE__SEARCH", "on")
    app = create_app(TestingConfig, modules=[CaptureModule])

    assert captured["configuration"].get_section("FEATURE").get_bool("SEARCH") is True
    shutdown_app(app)


def test_shutdown_disposes_provider_once():
    app = create_app(TestingConfig, modules=[ClosingModule])

    shutdown_app(app)
    shutdown_app(app)

    assert ClosingService.closed
    assert app.extensions[EXTENSION_KEY].shut_down


def test_module_failure_aborts_startup():
    class FailingModule(AppModule):
        def on_application_initialization(self, context):
            raise RuntimeError("boom")

    with pytest.raises(ModuleInitializationError):
        create_app(TestingConfig, modules=[FailingModule])


def test_failed_startup_releases_started_modules_and_services():
    class TrackedClosingModule(ClosingModule):
        def on_application_shutdown(self, context):
            captured["shutdown"] = self.name

    class FailsAfterClosingModule(AppModule):
        depends_on = (TrackedClosingModule,)

        def on_application_initialization(self, context):
            raise RuntimeError("boom")

        def on_application_shutdown(self, context):
            captured["failed_module_shutdown"] = True

    with pytest.raises(ModuleInitializationError):
        create_app(TestingConfig, modules=[FailsAfterClosingModule])

    assert ClosingService.closed
    assert captured["shutdown"] == "TrackedClosingModule"
    assert "failed_module_shutdown" not in captured


def test_health_endpoints(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy", "service": TestingConfig.APP_NAME}

    response = client.get("/health/live")
    assert response.status_code == 200
    assert response.get_json()["status"] == "alive"


def test_readiness_reports_resolved_services(client):
    response = client.get("/health/ready")
    data = response.get_json()

    assert response.status_code == 200
    assert data["status"] == "ready"
    assert data["checks"] == {
        "configuration": True,
        "environment": True,
        "logger_factory": True,
        "overall": True,
    }


def test_readiness_without_startup_state():
    app = Flask(__name__)
    app.register_blueprint(health_blueprint)

    response = app.test_client().get("/health/ready")

    assert response.status_code == 503
    assert response.get_json()["status"] == "not_ready"


def test_json_error_handlers(client):
    response = client.get("/missing")
    assert response.status_code == 404
    assert response.get_json() == {"status": "error", "message": "Resource not found"}

    response = client.post("/health")
    assert response.status_code == 405
    assert response.get_json()["message"] == "Method not allowed"


def test_metrics_module_exposes_request_counts():
    app = create_app(MetricsConfig)
    client = app.test_client()

    client.get("/health")
    response = client.get("/metrics")

    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert "http_requests_total" in body
    assert 'endpoint="health.health_check"' in body
    assert 'environment="Testing"' in body
    shutdown_app(app)


def test_metrics_disabled_in_testing(client):
    assert client.get("/metrics").status_code == 404


def test_sentry_initialized_when_dsn_configured(monkeypatch):
    calls = []
    monkeypatch.setattr(error_handler.sentry_sdk, "init", lambda **kwargs: calls.append(kwargs))

    app = create_app(SentryConfig)

    assert len(calls) == 1
    assert calls[0]["dsn"] == SentryConfig.SENTRY_DSN
    assert calls[0]["environment"] == "Testing"
    shutdown_app(app)
