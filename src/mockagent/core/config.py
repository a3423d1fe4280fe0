"""
Configuration management.

Loads settings from environment variables and .env file.
Prefix: MOCKAGENT_
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MOCKAGENT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Engine
    response_delay_ms: int = Field(default=1000, ge=0, description="Simulated backend latency")

    # Self-test pacing
    selftest_system_delay_ms: int = Field(
        default=800, ge=0, description="Pause after a system step"
    )
    selftest_typing_delay_ms: int = Field(
        default=500, ge=0, description="Pause after a scripted user message"
    )
    selftest_reading_delay_ms: int = Field(
        default=1000, ge=0, description="Pause after an agent answer"
    )

    # Storage
    data_dir: Path = Field(default=Path("data"), description="Log directory")
    log_name: str = Field(default="mockagent.log", description="Log file name")

    @property
    def log_path(self) -> Path:
        return self.data_dir / self.log_name


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
