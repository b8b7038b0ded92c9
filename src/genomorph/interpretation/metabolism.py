"""Metabolism region (400-599): four resistances over 50-symbol slices."""

from __future__ import annotations

from genomorph.interpretation.base import RegionResult, describe_subregion, score_trait
from genomorph.model.regions import METABOLISM
from genomorph.model.traits import TraitId


def interpret_metabolism(
    sequence: str, include_patterns: bool = False, debug: bool = False
) -> RegionResult:
    """Score poison and acid (Toxin Processing), fire and cold (Thermal Regulation)."""
    result = RegionResult(region=METABOLISM.name)

    for field_name, trait_id in (
        ("poison", TraitId.POISON),
        ("acid", TraitId.ACID),
        ("fire", TraitId.FIRE),
        ("cold", TraitId.COLD),
    ):
        result.resistances[field_name] = score_trait(result, sequence, trait_id, include_patterns)

    if debug:
        result.debug.extend(
            describe_subregion(METABOLISM, subregion, sequence)
            for subregion in METABOLISM.subregions
        )
    return result
