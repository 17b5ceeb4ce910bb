"""
API Inspector Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
Every value has a default, so the service starts without any configuration.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Probing ──
    probe_timeout_seconds: float = Field(
        default=10.0, description="Timeout for each individual probe request"
    )
    probe_concurrency: int = Field(
        default=4, ge=1, description="Max candidate paths probed in parallel against one host"
    )
    probe_write_methods: bool = Field(
        default=True,
        description="Send exploratory POST/PUT/PATCH/DELETE probes (OPTIONS is always sent)",
    )
    probe_item_paths: bool = Field(
        default=True,
        description="Probe <collection>/<id> paths derived from collection bodies",
    )
    verify_host_resolution: bool = Field(
        default=True, description="Fail fast when the target host does not resolve"
    )
    user_agent: str = Field(
        default="api-inspector/1.0", description="User-Agent sent with every probe"
    )

    # ── Body sampling ──
    body_sample_items: int = Field(
        default=5, ge=1, description="Collection items kept from a GET body"
    )
    max_body_bytes: int = Field(
        default=2_000_000, description="GET bodies larger than this are not parsed"
    )

    # ── Analysis ──
    analysis_timeout_seconds: float = Field(
        default=60.0, description="Deadline for a whole analysis run"
    )
    openapi_fetch_timeout_seconds: float = Field(
        default=10.0, description="Timeout when fetching an existing OpenAPI document"
    )

    # ── Server ──
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )
    log_level: str = Field(default="INFO", description="Root log level")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported by other modules
settings = Settings()
