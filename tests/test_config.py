"""Tests for engine settings (genomorph.config)."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from genomorph.config import EngineSettings, get_engine_settings
from genomorph.model.genome import SpecimenType


class TestEngineSettings:
    """Tests for EngineSettings defaults and environment loading."""

    def test_defaults(self) -> None:
        settings = EngineSettings(_env_file=None)
        assert settings.debug_breakdown is False
        assert settings.parallel_regions is False
        assert settings.max_workers == 4
        assert settings.default_specimen_type == SpecimenType.HYBRID
        assert settings.generator_seed is None
        assert settings.validation_report_cap == 10

    def test_reads_environment(self) -> None:
        env = {
            "GENOMORPH_DEBUG_BREAKDOWN": "true",
            "GENOMORPH_PARALLEL_REGIONS": "1",
            "GENOMORPH_MAX_WORKERS": "8",
            "GENOMORPH_GENERATOR_SEED": "42",
        }
        with patch.dict(os.environ, env):
            settings = EngineSettings(_env_file=None)
        assert settings.debug_breakdown is True
        assert settings.parallel_regions is True
        assert settings.max_workers == 8
        assert settings.generator_seed == 42

    def test_specimen_type_normalized(self) -> None:
        with patch.dict(os.environ, {"GENOMORPH_DEFAULT_SPECIMEN_TYPE": "  CAT "}):
            settings = EngineSettings(_env_file=None)
        assert settings.default_specimen_type == SpecimenType.CAT

    def test_invalid_specimen_type(self) -> None:
        with patch.dict(os.environ, {"GENOMORPH_DEFAULT_SPECIMEN_TYPE": "dragon"}):
            with pytest.raises(ValidationError):
                EngineSettings(_env_file=None)

    @pytest.mark.parametrize("workers", ["0", "17"])
    def test_max_workers_bounds(self, workers: str) -> None:
        with patch.dict(os.environ, {"GENOMORPH_MAX_WORKERS": workers}):
            with pytest.raises(ValidationError):
                EngineSettings(_env_file=None)

    def test_ignores_unrelated_variables(self) -> None:
        with patch.dict(os.environ, {"GENOMORPH_UNKNOWN_OPTION": "x"}):
            EngineSettings(_env_file=None)

    def test_env_file(self, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("GENOMORPH_VALIDATION_REPORT_CAP=25\n")
        settings = EngineSettings(_env_file=env_file)
        assert settings.validation_report_cap == 25


class TestGetEngineSettings:
    """Tests for the cached settings accessor."""

    def test_is_cached(self) -> None:
        assert get_engine_settings() is get_engine_settings()

    def test_cache_clear_reloads(self) -> None:
        first = get_engine_settings()
        with patch.dict(os.environ, {"GENOMORPH_MAX_WORKERS": "2"}):
            get_engine_settings.cache_clear()
            assert get_engine_settings().max_workers == 2
        assert first.max_workers == 4
