from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be configured via .env file or environment variables.
    """

    # =============================================================================
    # APPLICATION
    # =============================================================================
    PROJECT_NAME: str = "AI Teacher Helper API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # =============================================================================
    # SERVER
    # =============================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # =============================================================================
    # DATABASE
    # =============================================================================
    DATABASE_URL: str = "sqlite:///./database.sqlite"
    DB_ECHO_SQL: bool = False

    # Only used for non-sqlite backends
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600

    # =============================================================================
    # LLM (OpenAI compatible chat completions)
    # =============================================================================
    OPENAI_API_KEY: str = ""
    OPENAI_MODEL: str = "gpt-4o-mini"
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    LLM_TEMPERATURE: float = 0.7
    LLM_MAX_TOKENS: int = 2000

    # =============================================================================
    # CLIENT
    # =============================================================================
    CLIENT_API_BASE_URL: str = "http://localhost:3001/api"

    # =============================================================================
    # CORS
    # =============================================================================
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    # =============================================================================
    # LOGGING
    # =============================================================================
    LOG_LEVEL: str = "INFO"

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            import json
            return json.loads(v)
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="allow"  # Allow extra fields for future extensions
    )


# Create global settings instance
settings = Settings()


def mask_secret(value: str) -> str:
    if not value:
        return "(not set)"
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:3]}{'*' * (len(value) - 7)}{value[-4:]}"


# Helper function to display current config (for debugging)
def print_config(current: Settings = settings):
    """Print current configuration (hide sensitive data)."""
    print("=" * 80)
    print("📋 CURRENT CONFIGURATION")
    print("=" * 80)
    print(f"Project Name: {current.PROJECT_NAME}")
    print(f"Version: {current.APP_VERSION}")
    print(f"Debug Mode: {current.DEBUG}")
    print(f"API Prefix: {current.API_PREFIX}")
    print(f"Listen: {current.HOST}:{current.PORT}")
    print("-" * 80)
    print(f"Database URL: {current.DATABASE_URL}")
    print(f"Echo SQL: {current.DB_ECHO_SQL}")
    print("-" * 80)
    print(f"LLM Base URL: {current.OPENAI_BASE_URL}")
    print(f"LLM Model: {current.OPENAI_MODEL}")
    print(f"LLM API Key: {mask_secret(current.OPENAI_API_KEY)}")
    print(f"Temperature: {current.LLM_TEMPERATURE}")
    print(f"Max Tokens: {current.LLM_MAX_TOKENS}")
    print("-" * 80)
    print(f"Client API Base URL: {current.CLIENT_API_BASE_URL}")
    print("=" * 80)


if __name__ == "__main__":
    # Test config loading
    print_config()
