"""Shared fixtures for genomorph tests."""

from __future__ import annotations

import logging
import os

import pytest

from genomorph.config import get_engine_settings
from genomorph.engine.generation import generate_genome
from genomorph.model.genome import Genome


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch):
    """Drop GENOMORPH_* variables and cached settings around each test.

    Also undoes configure_logging() so caplog keeps receiving records.
    """
    for key in list(os.environ):
        if key.startswith("GENOMORPH_"):
            monkeypatch.delenv(key)
    get_engine_settings.cache_clear()
    yield
    get_engine_settings.cache_clear()
    package_logger = logging.getLogger("genomorph")
    package_logger.handlers.clear()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def hybrid_genome() -> Genome:
    """A reproducible hybrid genome."""
    return generate_genome("hybrid", seed=1234)


@pytest.fixture
def cat_genome() -> Genome:
    return generate_genome("cat", seed=99)


@pytest.fixture
def uniform_genome() -> Genome:
    """All-A genome: every segment is maximally homogeneous."""
    return Genome("A" * 1000)
