"""Configuration module."""
from appinit.config.settings import (
    Config,
    get_config,
    DevelopmentConfig,
    StagingConfig,
    ProductionConfig,
    TestingConfig,
)
from appinit.config.configuration import Configuration

__all__ = [
    "Config",
    "Configuration",
    "get_config",
    "DevelopmentConfig",
    "StagingConfig",
    "ProductionConfig",
    "TestingConfig",
]
