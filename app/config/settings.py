"""Application configuration with environment-based settings."""
import os
from typing import Optional
from dotenv import load_dotenv


class Config:
    """Base configuration class read once from the environment at import time."""

    # Load environment variables
    load_dotenv()

    # WhatsApp Cloud API Configuration
    WHATSAPP_TOKEN: Optional[str] = os.getenv("WHATSAPP_TOKEN")
    PHONE_NUMBER_ID: Optional[str] = os.getenv("PHONE_NUMBER_ID")
    VERSION: str = os.getenv("VERSION", "v18.0")
    VERIFY_TOKEN: Optional[str] = os.getenv("VERIFY_TOKEN")
    APP_SECRET: Optional[str] = os.getenv("APP_SECRET")
    WHATSAPP_API_TIMEOUT: float = float(os.getenv("WHATSAPP_API_TIMEOUT", "10"))

    # Message history
    MESSAGE_HISTORY_LIMIT: int = int(os.getenv("MESSAGE_HISTORY_LIMIT", "100"))

    # Rate Limiting
    RATELIMIT_STORAGE_URL: str = os.getenv("RATELIMIT_STORAGE_URL", "memory://")
    RATELIMIT_ENABLED: bool = os.getenv("RATELIMIT_ENABLED", "true").lower() == "true"

    # Monitoring
    SENTRY_DSN: Optional[str] = os.getenv("SENTRY_DSN")
    ENABLE_METRICS: bool = os.getenv("ENABLE_METRICS", "true").lower() == "true"

    # Application
    PORT: int = int(os.getenv("PORT", "3000"))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    @classmethod
    def missing_variables(cls) -> list:
        """Names of the required variables that are not set."""
        required_vars = [
            ("VERIFY_TOKEN", cls.VERIFY_TOKEN),
            ("WHATSAPP_TOKEN", cls.WHATSAPP_TOKEN),
            ("PHONE_NUMBER_ID", cls.PHONE_NUMBER_ID),
        ]
        return [name for name, value in required_vars if not value]

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration values."""
        missing = cls.missing_variables()
        if missing:
            raise ValueError(f"Missing required environment variables: {', '.join(missing)}")

    @classmethod
    def outbound_enabled(cls) -> bool:
        """Whether both outbound credentials are present."""
        return bool(cls.WHATSAPP_TOKEN and cls.PHONE_NUMBER_ID)


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    RATELIMIT_ENABLED = False
    ENABLE_METRICS = False
    SENTRY_DSN = None
    APP_SECRET = None


def get_config() -> type[Config]:
    """Factory method to get configuration based on environment."""
    env = os.getenv("FLASK_ENV", "development").lower()

    config_map = {
        "development": DevelopmentConfig,
        "production": ProductionConfig,
        "testing": TestingConfig,
    }

    return config_map.get(env, DevelopmentConfig)
