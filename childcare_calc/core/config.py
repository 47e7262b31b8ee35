"""Application configuration using Pydantic Settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LOG_FORMATS = ("json", "console")


class Settings(BaseSettings):
    """Calculator settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Environment
    environment: str = "development"
    """Current environment (development, staging, production)."""

    debug: bool = False
    """Enable debug mode."""

    log_format: str | None = None
    """Logging format override (json or console). Defaults by environment."""

    # Policy
    policy_year: int = 2025
    """Financial year (starting year) whose policy tables are used by default."""

    # Curve defaults
    income_sweep_min: float = 0
    """Lowest returning-parent income sampled by income curves."""

    income_sweep_max: float = 160_000
    """Highest returning-parent income sampled by income curves."""

    income_sweep_step: float = 5_000
    """Income increment between samples on income curves."""

    hours_sweep_max: float = 38
    """Default upper bound (hours per week) for hours-worked curves."""

    @field_validator("log_format", mode="before")
    @classmethod
    def parse_log_format(cls, value: object) -> str | None:
        """Normalize the log format, treating blank values as unset."""
        if value is None:
            return None
        text = str(value).strip().lower()
        if not text:
            return None
        if text not in LOG_FORMATS:
            raise ValueError(
                f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got {value!r}."
            )
        return text

    @field_validator("income_sweep_step", "hours_sweep_max")
    @classmethod
    def validate_positive(cls, value: float) -> float:
        """Sweep step and bounds must be positive."""
        if value <= 0:
            raise ValueError(f"Value must be greater than 0, got {value}")
        return value


try:
    settings = Settings()
except Exception as exc:
    env_file = Path(".env")
    raise RuntimeError(
        "Failed to initialize calculator settings. "
        f"Check environment variables in {env_file.resolve() if env_file.exists() else '.env'}.\n"
        + f"Error: {exc}\n"
        + "LOG_FORMAT accepts json or console; INCOME_SWEEP_STEP and "
        "HOURS_SWEEP_MAX must be positive."
    ) from exc
