"""Monitoring and metrics middleware using Prometheus."""
import time

from flask import g, request
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, Counter, Histogram, generate_latest

from appinit.application.context_extensions import (
    get_application_builder,
    get_environment,
    get_logger_factory,
)
from appinit.application.initialization_context import ApplicationInitializationContext
from appinit.application.modules import AppModule


class RequestMetrics:
    """Prometheus collectors for HTTP requests, one registry per application."""

    def __init__(self, registry: CollectorRegistry = None):
        self.registry = registry or CollectorRegistry()
        self.requests_total = Counter(
            'http_requests_total',
            'Total number of HTTP requests',
            ['method', 'endpoint', 'status', 'environment'],
            registry=self.registry
        )
        self.request_duration = Histogram(
            'http_request_duration_seconds',
            'Time spent processing HTTP requests',
            ['endpoint'],
            buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
            registry=self.registry
        )

    def export(self) -> bytes:
        return generate_latest(self.registry)


def register_metrics_middleware(app, metrics: RequestMetrics, environment_name: str) -> None:
    """
    Register Prometheus metrics middleware.

    Args:
        app: Flask application instance
        metrics: Collectors to update
        environment_name: Value of the ``environment`` label
    """
    @app.before_request
    def start_timer():
        g.request_start_time = time.time()

    @app.after_request
    def record_request(response):
        endpoint = request.endpoint or "unknown"
        metrics.requests_total.labels(
            method=request.method,
            endpoint=endpoint,
            status=response.status_code,
            environment=environment_name
        ).inc()
        start_time = g.get("request_start_time")
        if start_time is not None:
            metrics.request_duration.labels(endpoint=endpoint).observe(time.time() - start_time)
        return response

    @app.route('/metrics')
    def metrics_endpoint():
        """Prometheus metrics endpoint."""
        return metrics.export(), 200, {'Content-Type': CONTENT_TYPE_LATEST}


class MetricsModule(AppModule):
    """Exposes request metrics at /metrics."""

    def configure_services(self, services, config_class) -> None:
        services.add_singleton(RequestMetrics, factory=lambda provider: RequestMetrics())

    def on_application_initialization(self, context: ApplicationInitializationContext) -> None:
        app = get_application_builder(context)
        metrics = context.service_provider.get_required_service(RequestMetrics)
        register_metrics_middleware(app, metrics, get_environment(context).environment_name)
        get_logger_factory(context).create_logger(__name__).info("Prometheus metrics enabled at /metrics")
