"""Domain interfaces following Dependency Inversion Principle."""

from appinit.domain.interfaces.service_provider import IServiceProvider
from appinit.domain.interfaces.hosting_environment import IHostingEnvironment
from appinit.domain.interfaces.configuration import IConfiguration
from appinit.domain.interfaces.logger_factory import ILoggerFactory

__all__ = [
    "IServiceProvider",
    "IHostingEnvironment",
    "IConfiguration",
    "ILoggerFactory",
]
