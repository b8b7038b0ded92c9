"""Scoring engine: pattern primitives, trait registry, opposing forces scorer, generator."""

from genomorph.engine.generation import generate_genome, generate_population
from genomorph.engine.scoring import (
    CalculationResult,
    DetectedPattern,
    GenomeInterpretationError,
    calculate_trait,
    detect_patterns,
    raw_score_to_final,
    score_segment,
)
from genomorph.engine.traits import (
    TRAIT_CONFIGS,
    Component,
    SegmentAnalysis,
    TraitConfig,
    get_trait_config,
)

__all__ = [
    "TRAIT_CONFIGS",
    "CalculationResult",
    "Component",
    "DetectedPattern",
    "GenomeInterpretationError",
    "SegmentAnalysis",
    "TraitConfig",
    "calculate_trait",
    "detect_patterns",
    "generate_genome",
    "generate_population",
    "get_trait_config",
    "raw_score_to_final",
    "score_segment",
]
