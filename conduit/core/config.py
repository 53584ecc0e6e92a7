"""
Pydantic Settings: centralized configuration loaded from environment variables.

Every variable is read with the ``CONDUIT_`` prefix, e.g.
``CONDUIT_BUBBLE_ERRORS=false``.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ───────────────────────────
    APP_ENV: str = "development"

    # ── Logging ───────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    # ── Pipeline error policy ─────────────────
    BUBBLE_ERRORS: bool = Field(
        default=True,
        description="Raise the first step failure from Pipeline.run()",
    )
    CONTINUE_ON_ERROR: bool = Field(
        default=False,
        description="Keep running after a recorded failure (BUBBLE_ERRORS=false only)",
    )

    model_config = SettingsConfigDict(
        env_prefix="CONDUIT_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
