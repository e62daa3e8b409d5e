"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Optional, Union

from pydantic import Field, ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "your-jwt-secret-key-here-change-in-production"
MIN_JWT_SECRET_BYTES = 32


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "SkillSwapper API"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 5000
    API_PREFIX: str = "/api"
    CORS_ORIGINS: Union[str, List[str]] = "http://localhost:3000"
    FRONTEND_URL: str = "http://localhost:3000"

    # Database
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)
    DATABASE_POOL_SIZE: int = 10
    DATABASE_MAX_OVERFLOW: int = 20
    DATABASE_ECHO: bool = False
    DATABASE_POOL_TIMEOUT: int = 30
    DATABASE_POOL_RECYCLE: int = 3600

    # Security
    JWT_SECRET_KEY: str = DEFAULT_JWT_SECRET
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "skillswapper"
    JWT_AUDIENCE: str = "skillswapper-users"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days

    # Admin credentials (argon2 hash, never a plaintext password)
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD_HASH: Optional[str] = None
    ADMIN_NAME: str = "Admin"

    # Email
    EMAIL_PROVIDER: str = "console"
    SMTP_HOST: str = "smtp.gmail.com"
    SMTP_PORT: int = 587
    SMTP_USERNAME: str = ""
    SMTP_PASSWORD: str = ""
    SMTP_USE_TLS: bool = True
    EMAIL_FROM_ADDRESS: str = "noreply@skillswapper.local"
    EMAIL_FROM_NAME: str = "SkillSwapper"

    # Matching and listing limits
    MATCHES_DEFAULT_LIMIT: int = 10
    MATCHES_MAX_LIMIT: int = 50
    CONNECTIONS_DEFAULT_LIMIT: int = 20
    CONNECTIONS_MAX_LIMIT: int = 50
    NOTIFICATIONS_DEFAULT_LIMIT: int = 20
    NOTIFICATIONS_MAX_LIMIT: int = 100
    SKILLS_MAX_PER_REQUEST: int = 20

    # Monitoring
    ENABLE_METRICS: bool = True

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = True
    RATE_LIMIT_REQUESTS: int = 100
    RATE_LIMIT_WINDOW: int = 900  # 15 minutes
    AUTH_RATE_LIMIT_REQUESTS: int = 5

    # Development
    ENABLE_SWAGGER: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        return ["*"]

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> str:
        if isinstance(v, str) and v:
            return v
        # Build from individual components if DATABASE_URL is not provided
        values = info.data
        user = values.get("POSTGRES_USER") or "skillswapper"
        password = values.get("POSTGRES_PASSWORD") or "skillswapper"
        host = values.get("POSTGRES_SERVER") or "localhost"
        db = values.get("POSTGRES_DB") or "skillswapper"
        return f"postgresql+asyncpg://{user}:{password}@{host}:5432/{db}"

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("EMAIL_PROVIDER")
    @classmethod
    def validate_email_provider(cls, v: str) -> str:
        if v.lower() not in ["smtp", "console"]:
            raise ValueError("Email provider must be one of: smtp, console")
        return v.lower()

    @model_validator(mode="after")
    def check_jwt_secret(self) -> "Settings":
        if self.ENVIRONMENT == "production" and (
            self.JWT_SECRET_KEY == DEFAULT_JWT_SECRET
            or len(self.JWT_SECRET_KEY.encode()) < MIN_JWT_SECRET_BYTES
        ):
            raise ValueError(
                f"JWT_SECRET_KEY must be set to a secret of at least {MIN_JWT_SECRET_BYTES} bytes in production"
            )
        return self

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
