"""Power region (800-999): strength, psychic, psychic and radiation resistances."""

from __future__ import annotations

from genomorph.interpretation.base import RegionResult, describe_subregion, score_trait
from genomorph.model.regions import POWER
from genomorph.model.traits import TraitId


def interpret_power(
    sequence: str, include_patterns: bool = False, debug: bool = False
) -> RegionResult:
    """Score Strength (800-899), Psychic (900-999) and two resistances (900-949, 950-999)."""
    result = RegionResult(region=POWER.name)

    result.stats["strength"] = score_trait(result, sequence, TraitId.STRENGTH, include_patterns)
    result.stats["psychic"] = score_trait(result, sequence, TraitId.PSYCHIC, include_patterns)
    result.resistances["psychic"] = score_trait(
        result, sequence, TraitId.PSYCHIC_RESISTANCE, include_patterns
    )
    result.resistances["radiation"] = score_trait(
        result, sequence, TraitId.RADIATION, include_patterns
    )

    if debug:
        result.debug.extend(
            describe_subregion(POWER, subregion, sequence) for subregion in POWER.subregions
        )
    return result
