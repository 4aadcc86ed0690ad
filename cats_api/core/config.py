"""
Application configuration.

Loads settings from environment variables and the .env files.
All configuration is centralized here. Invalid production settings
abort startup instead of surfacing later at request time.
"""

from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_JWT_SECRET = "dev-jwt-secret-change-me"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: Runtime environment. Production hides error details,
            restricts CORS and writes logs to rotating files.
        debug: Enable the interactive docs.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_dir: Directory for production log files.
        port: Port the development server binds to.
        database_url: SQLAlchemy URL of the primary database.
        jwt_secret: HMAC secret used to sign access tokens.
        captcha_ttl_seconds: Lifetime of an emailed registration captcha.
        rate_limit_default: Default rate limit for limited endpoints.
        rate_limit_heavy: Rate limit for LLM-backed endpoints.
    """

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.development"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    project_name: str = "Cats API"
    version: str = "0.1.0"
    environment: Literal["development", "test", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_dir: str = "logs"
    port: int = 8866

    # Persistence
    database_url: str = "sqlite:///./cats.db"
    database_echo: bool = False

    # Auth
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60
    bcrypt_rounds: int = 12
    captcha_ttl_seconds: int = 300

    # Outbound mail
    nodemailer_host: str = "localhost"
    nodemailer_port: int = 587
    nodemailer_auth_user: str = ""
    nodemailer_auth_pass: str = ""
    nodemailer_timeout_seconds: float = 10.0

    # LLM provider (OpenAI-compatible, OpenRouter by default)
    openrouter_api_key: str = ""
    ai_base_url: str = "https://openrouter.ai/api/v1"
    openrouter_model: str = "anthropic/claude-3.5-sonnet"
    openrouter_referer: str = "http://localhost:8866"
    openrouter_app_name: str = "Cats API"
    ai_temperature: float = 0.7
    ai_max_tokens: int = 4000
    ai_timeout_seconds: float = 60.0

    # HTTP
    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"
    rate_limit_heavy: str = "10/minute"
    cors_origins: str = "http://localhost:3000"

    @model_validator(mode="after")
    def _check_production(self) -> "Settings":
        """Refuse to start in production with development secrets."""
        if self.environment != "production":
            return self

        problems = []
        if self.jwt_secret == DEV_JWT_SECRET:
            problems.append("JWT_SECRET: must be set in production")
        if not self.openrouter_api_key:
            problems.append("OPENROUTER_API_KEY: must not be empty")
        if problems:
            raise ValueError(
                "Environment validation failed:\n" + "\n".join(problems)
            )
        return self

    @property
    def is_production(self) -> bool:
        """Whether the app runs with production safeguards."""
        return self.environment == "production"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list of origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
