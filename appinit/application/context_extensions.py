"""Accessors for framework services available during application initialization."""
from typing import Optional

from flask import Flask

from appinit.application.initialization_context import ApplicationInitializationContext
from appinit.domain.interfaces.configuration import IConfiguration
from appinit.domain.interfaces.hosting_environment import IHostingEnvironment
from appinit.domain.interfaces.logger_factory import ILoggerFactory
from appinit.infrastructure.di.object_accessor import ObjectAccessor
from appinit.utils.check import not_null


def get_application_builder(context: ApplicationInitializationContext) -> Flask:
    """
    Get the Flask application being built.

    Raises:
        ServiceNotRegisteredError: If no ObjectAccessor[Flask] is registered
        ValueError: If the accessor does not hold an application yet
    """
    application_builder = context.service_provider.get_required_service(ObjectAccessor[Flask]).value
    not_null(application_builder, "application_builder")
    return application_builder


def get_application_builder_or_none(context: ApplicationInitializationContext) -> Optional[Flask]:
    """Get the Flask application, or None if the accessor is still empty."""
    return context.service_provider.get_required_service(ObjectAccessor[Flask]).value


def get_environment(context: ApplicationInitializationContext) -> IHostingEnvironment:
    return context.service_provider.get_required_service(IHostingEnvironment)


def get_environment_or_none(context: ApplicationInitializationContext) -> Optional[IHostingEnvironment]:
    return context.service_provider.get_service(IHostingEnvironment)


def get_configuration(context: ApplicationInitializationContext) -> IConfiguration:
    return context.service_provider.get_required_service(IConfiguration)


def get_logger_factory(context: ApplicationInitializationContext) -> ILoggerFactory:
    return context.service_provider.get_required_service(ILoggerFactory)
