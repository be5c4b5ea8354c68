"""Configuration management using Pydantic Settings.

This module provides type-safe configuration management with automatic
environment variable loading and validation using Pydantic Settings v2.

The configuration is organized into logical groups:
- LoggingConfig: Logging levels, files, and debugging options
- MatchingConfig: Confidence floors used when reconciling statements
- PipelineSettings: Operator overrides for the pipeline valuation defaults
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path = Path("royaltyscope.log")
    real_time_debug: bool = True


class MatchingConfig(BaseModel):
    """Confidence floors for song-to-work matching."""

    review_min_confidence: float = 0.3  # Candidates shown to a human reviewer
    auto_link_min_confidence: float = 0.6  # Matches linked without review


class PipelineSettings(BaseModel):
    """Optional overrides applied on top of the built-in pipeline defaults.

    Every field left as None keeps the engine default.
    """

    platform_fee: float | None = None
    publishing_share_factor: float | None = None
    territory_weight_domestic: float | None = None
    territory_weight_international: float | None = None
    lag_months_domestic: int | None = None
    lag_months_international: int | None = None
    decay_base_k: float | None = None
    decay_min_k: float | None = None
    decay_max_k: float | None = None
    weight_performance: float | None = None
    weight_mechanical: float | None = None
    weight_sync: float | None = None

    def overrides(self) -> dict[str, Any]:
        """Collect the configured values as nested PipelineConfig overrides."""
        nested = {
            "platform_fee": self.platform_fee,
            "publishing_share_factor": self.publishing_share_factor,
            "territory_weights": {
                "domestic": self.territory_weight_domestic,
                "international": self.territory_weight_international,
            },
            "lag_months": {
                "domestic": self.lag_months_domestic,
                "international": self.lag_months_international,
            },
            "decay": {
                "base_k": self.decay_base_k,
                "min_k": self.decay_min_k,
                "max_k": self.decay_max_k,
            },
            "right_type_weights": {
                "performance": self.weight_performance,
                "mechanical": self.weight_mechanical,
                "sync": self.weight_sync,
            },
        }

        result: dict[str, Any] = {}
        for key, value in nested.items():
            if isinstance(value, dict):
                group = {k: v for k, v in value.items() if v is not None}
                if group:
                    result[key] = group
            elif value is not None:
                result[key] = value
        return result

    def to_pipeline_config(self):
        """Build a PipelineConfig from the defaults plus these overrides."""
        # Imported lazily: the domain layer never depends on settings
        from royaltyscope.domain.pipeline.config import DEFAULT_PIPELINE_CONFIG

        return DEFAULT_PIPELINE_CONFIG.with_overrides(**self.overrides())


class Settings(BaseSettings):
    """Main application settings with environment variable support.

    Values can be set using nested naming or flat naming:
    - Nested: LOGGING__CONSOLE_LEVEL, MATCHING__AUTO_LINK_MIN_CONFIDENCE,
      PIPELINE__PLATFORM_FEE (OS environment or .env file)
    - Flat: CONSOLE_LOG_LEVEL, LOG_FILE, MATCH_MIN_CONFIDENCE, PLATFORM_FEE
      (.env file only; OS environment variables must use the nested form)

    The .env file is automatically loaded for development convenience.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Nested configuration groups
    logging: LoggingConfig = LoggingConfig()
    matching: MatchingConfig = MatchingConfig()
    pipeline: PipelineSettings = PipelineSettings()

    @model_validator(mode="before")
    @classmethod
    def transform_flat_env_vars(cls, data: Any) -> Any:
        """Transform flat environment variables to nested structure.

        Handles flat env vars (CONSOLE_LOG_LEVEL) and maps them to the
        nested structure expected by the models (logging.console_level).
        """
        if not isinstance(data, dict):
            return data

        transformed = {}

        # Logging mappings
        log_mapping = {
            "console_log_level": "console_level",
            "file_log_level": "file_level",
            "log_file": "log_file",
            "log_real_time_debug": "real_time_debug",
        }
        for env_key, field_key in log_mapping.items():
            if env_key in data:
                transformed.setdefault("logging", {})[field_key] = data.pop(env_key)

        # Matching mappings
        match_mapping = {
            "match_review_min_confidence": "review_min_confidence",
            "match_min_confidence": "auto_link_min_confidence",
        }
        for env_key, field_key in match_mapping.items():
            if env_key in data:
                transformed.setdefault("matching", {})[field_key] = data.pop(env_key)

        # Pipeline mappings
        pipeline_mapping = {
            "platform_fee": "platform_fee",
            "publishing_share_factor": "publishing_share_factor",
        }
        for env_key, field_key in pipeline_mapping.items():
            if env_key in data:
                transformed.setdefault("pipeline", {})[field_key] = data.pop(env_key)

        # Merge without clobbering nested groups supplied directly
        for group, values in transformed.items():
            existing = data.get(group)
            if isinstance(existing, dict):
                data[group] = {**values, **existing}
            else:
                data[group] = values

        return data


# Singleton instance for application use
settings = Settings()


# =============================================================================
# FLAT KEY ACCESS
# =============================================================================

_FLAT_KEY_MAP = {
    # Logging settings
    "CONSOLE_LOG_LEVEL": lambda: settings.logging.console_level,
    "FILE_LOG_LEVEL": lambda: settings.logging.file_level,
    "LOG_FILE": lambda: settings.logging.log_file,
    "LOG_REAL_TIME_DEBUG": lambda: settings.logging.real_time_debug,
    # Matching settings
    "MATCH_REVIEW_MIN_CONFIDENCE": lambda: settings.matching.review_min_confidence,
    "MATCH_MIN_CONFIDENCE": lambda: settings.matching.auto_link_min_confidence,
}


def get_config(key: str, default=None):
    """Get configuration value by flat key with optional default.

    Args:
        key: Configuration key to retrieve
        default: Default value if key not found

    Returns:
        Configuration value or default

    Example:
        >>> floor = get_config("MATCH_MIN_CONFIDENCE", 0.6)
    """
    if key in _FLAT_KEY_MAP:
        return _FLAT_KEY_MAP[key]()

    return default
