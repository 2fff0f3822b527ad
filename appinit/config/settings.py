"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class following Single Responsibility Principle."""

    # Load environment variables
    load_dotenv()

    # Application
    APP_NAME: str = os.getenv("APP_NAME", "appinit")
    APP_ENV: str = os.getenv("APP_ENV") or os.getenv("FLASK_ENV", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    # Hosting
    CONTENT_ROOT: Optional[str] = os.getenv("CONTENT_ROOT")
    WEB_ROOT: Optional[str] = os.getenv("WEB_ROOT")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Prefix of environment variables merged into IConfiguration
    CONFIG_ENV_PREFIX: str = os.getenv("CONFIG_ENV_PREFIX", "APPINIT_")

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        required_vars = [
            ("APP_NAME", cls.APP_NAME),
            ("SECRET_KEY", cls.SECRET_KEY),
        ]

        missing = [name for name, value in required_vars if not value]
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


class DevelopmentConfig(Config):
    """Development configuration."""
    APP_ENV = "development"
    DEBUG = True


class StagingConfig(Config):
    """Staging configuration."""
    APP_ENV = "staging"
    DEBUG = False


class ProductionConfig(Config):
    """Production configuration."""
    APP_ENV = "production"
    DEBUG = False

    @classmethod
    def validate(cls) -> None:
        super().validate()
        if cls.SECRET_KEY == "dev-secret-key-change-in-production":
            raise ValueError("SECRET_KEY must be set in production")


class TestingConfig(Config):
    """Testing configuration."""
    APP_ENV = "testing"
    TESTING = True
    ENABLE_METRICS = False
    SENTRY_DSN = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = (os.getenv("APP_ENV") or os.getenv("FLASK_ENV", "development")).lower()

    config_map = {
        "development": DevelopmentConfig,
        "staging": StagingConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
