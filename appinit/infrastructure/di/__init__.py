"""Dependency Injection (Infrastructure Layer).

Service collection, provider and object accessor.
"""
from appinit.infrastructure.di.object_accessor import ObjectAccessor
from appinit.infrastructure.di.service_collection import (
    ServiceCollection,
    ServiceDescriptor,
    ServiceLifetime,
)
from appinit.infrastructure.di.service_provider import ServiceProvider

__all__ = [
    "ObjectAccessor",
    "ServiceCollection",
    "ServiceDescriptor",
    "ServiceLifetime",
    "ServiceProvider",
]
