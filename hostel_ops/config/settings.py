"""
Environment configuration for the hostel facility desk.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @staticmethod
    def get_secret_key_default() -> str:
        """Generate a default secret key if not provided"""
        import secrets
        import string
        alphabet = string.ascii_letters + string.digits
        return ''.join(secrets.choice(alphabet) for _ in range(32))

    # Application configuration
    APP_NAME: str = "Hostel Facility Desk"
    API_VERSION: str = "0.1.0"
    API_PREFIX: str = "/api"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"
    CORS_ORIGINS: str = "*"

    # Database configuration
    DATABASE_URL: str = "sqlite:///./hostel_ops.db"
    DATABASE_ECHO: bool = False

    # Security configuration
    JWT_SECRET_KEY: str = Field(default_factory=lambda: Settings.get_secret_key_default())
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60
    PASSWORD_MIN_LENGTH: int = 6

    # Email configuration
    NOTIFICATIONS_ENABLED: bool = True
    SMTP_HOST: Optional[str] = None
    SMTP_PORT: int = 587
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[str] = None
    SMTP_USE_TLS: bool = True
    SMTP_TIMEOUT_SECONDS: float = 10.0
    EMAIL_FROM_NAME: str = "Hostel Management"
    EMAIL_FROM_ADDRESS: str = "noreply@hostel.local"

    # Background tasks (Celery, Redis broker)
    REDIS_URL: str = "redis://localhost:6379/0"
    TASK_BROKER_URL: Optional[str] = None
    TASK_ALWAYS_EAGER: bool = False
    TASK_TIMEOUT: int = 60

    # Default admin account, created at startup when both are set
    BOOTSTRAP_ADMIN_EMAIL: Optional[str] = None
    BOOTSTRAP_ADMIN_PASSWORD: Optional[str] = None
    BOOTSTRAP_ADMIN_NAME: str = "Admin User"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"

    @field_validator('LOG_FORMAT')
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in {"json", "text"}:
            raise ValueError("LOG_FORMAT must be 'json' or 'text'")
        return v

    @property
    def cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS from a comma separated or JSON list string"""
        v = self.CORS_ORIGINS.strip()
        # Handle JSON string format from .env
        if v.startswith('[') and v.endswith(']'):
            import json
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                pass
        return [origin.strip() for origin in v.split(",") if origin.strip()]

    @property
    def smtp_configured(self) -> bool:
        """True when outbound mail can actually be delivered"""
        return bool(self.SMTP_HOST)

    @property
    def task_broker_url(self) -> str:
        return self.TASK_BROKER_URL or self.REDIS_URL

    @property
    def bootstrap_admin_configured(self) -> bool:
        return bool(self.BOOTSTRAP_ADMIN_EMAIL and self.BOOTSTRAP_ADMIN_PASSWORD)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
