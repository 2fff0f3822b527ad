"""Pytest fixtures for appinit tests"""
import pytest
from flask import Flask

from appinit import create_app, shutdown_app
from appinit.application.initialization_context import ApplicationInitializationContext
from appinit.config.configuration import Configuration
from appinit.config.settings import TestingConfig
from appinit.domain.interfaces.configuration import IConfiguration
from appinit.domain.interfaces.hosting_environment import IHostingEnvironment
from appinit.domain.interfaces.logger_factory import ILoggerFactory
from appinit.infrastructure.di.service_collection import ServiceCollection
from appinit.infrastructure.hosting_environment import HostingEnvironment
from appinit.infrastructure.logger_factory import LoggerFactory


@pytest.fixture
def app():
    """Application created with the testing configuration"""
    application = create_app(TestingConfig)
    yield application
    shutdown_app(application)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services():
    """Service collection with the four startup services registered"""
    collection = ServiceCollection()
    collection.add_object_accessor(Flask, Flask("test"))
    collection.add_singleton(IHostingEnvironment, HostingEnvironment("Staging", "tests", "/srv/app"))
    collection.add_singleton(IConfiguration, Configuration({"REDIS_URL": "redis://localhost"}))
    collection.add_singleton(ILoggerFactory, LoggerFactory())
    return collection


@pytest.fixture
def context(services):
    return ApplicationInitializationContext(services.build_service_provider())


@pytest.fixture
def empty_context():
    return ApplicationInitializationContext(ServiceCollection().build_service_provider())
