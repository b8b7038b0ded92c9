"""Engine configuration loaded from environment variables and .env files.

Settings only supply defaults; every public operation accepts explicit
keyword arguments that take precedence.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from genomorph.model.genome import SpecimenType

logger = logging.getLogger(__name__)


class EngineSettings(BaseSettings):
    """Configuration for genome interpretation and generation.

    Environment Variables:
        GENOMORPH_DEBUG_BREAKDOWN: Attach per-trait breakdowns (default: false)
        GENOMORPH_PARALLEL_REGIONS: Run region interpreters on a thread pool (default: false)
        GENOMORPH_MAX_WORKERS: Thread pool size, 1-16 (default: 4)
        GENOMORPH_DEFAULT_SPECIMEN_TYPE: cat, alien or hybrid (default: hybrid)
        GENOMORPH_GENERATOR_SEED: Seed for the genome generator (default: unseeded)
        GENOMORPH_VALIDATION_REPORT_CAP: Invalid symbols listed individually (default: 10)

    Example:
        >>> settings = EngineSettings()  # Loads from environment
        >>> settings = EngineSettings(_env_file=".env")  # Explicit .env file
    """

    model_config = SettingsConfigDict(
        env_prefix="GENOMORPH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug_breakdown: bool = Field(
        default=False,
        description="Attach per-trait breakdowns and region debug info by default",
    )
    parallel_regions: bool = Field(
        default=False,
        description="Evaluate the four region interpreters concurrently",
    )
    max_workers: int = Field(
        default=4,
        ge=1,
        le=16,
        description="Worker threads for parallel region evaluation",
    )
    default_specimen_type: SpecimenType = Field(
        default=SpecimenType.HYBRID,
        description="Specimen type used when generation is not told one",
    )
    generator_seed: int | None = Field(
        default=None,
        description="Seed used when the caller passes neither rng nor seed",
    )
    validation_report_cap: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Invalid symbol positions enumerated before summarising",
    )

    @field_validator("default_specimen_type", mode="before")
    @classmethod
    def normalize_specimen_type(cls, v: Any) -> SpecimenType:
        """Normalize specimen type string to enum."""
        if isinstance(v, str):
            return SpecimenType(v.strip().lower())
        return v


@lru_cache
def get_engine_settings() -> EngineSettings:
    """Get cached engine settings.

    To reload configuration, call get_engine_settings.cache_clear() first.
    """
    settings = EngineSettings()
    logger.debug("Loaded engine settings: %s", settings)
    return settings
