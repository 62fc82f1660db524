"""Application settings loaded from environment."""
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Vimeo Thumbnail Redirect configuration (env vars / .env)."""

    # REDIS is the variable name used by older deployments
    redis_url: str = Field(
        "redis://localhost:6379/0",
        validation_alias=AliasChoices("REDIS_URL", "REDIS"),
    )
    # Applies to both socket and connect timeouts; a slow Redis degrades to a cache miss.
    redis_timeout_seconds: float = 5.0
    vimeo_api_base_url: str = "https://vimeo.com"
    http_timeout_seconds: float = 10.0
    cache_key_prefix: str = "vimeo-thumbnail:"
    # About one month, counted from the moment of the write (absolute expiration).
    cache_ttl_seconds: int = 2629743
    app_host: str = "0.0.0.0"
    app_port: int = Field(3000, validation_alias=AliasChoices("PORT", "APP_PORT"))
    web_concurrency: int = 1
    log_level: str = "info"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
