"""Cognition region (600-799): intelligence and the four behaviors."""

from __future__ import annotations

from genomorph.interpretation.base import RegionResult, describe_subregion, score_trait
from genomorph.model.regions import COGNITION
from genomorph.model.traits import TraitId

BEHAVIOR_TRAITS = (
    ("aggression", TraitId.AGGRESSION),
    ("curiosity", TraitId.CURIOSITY),
    ("loyalty", TraitId.LOYALTY),
    ("chaos", TraitId.CHAOS),
)


def interpret_cognition(
    sequence: str, include_patterns: bool = False, debug: bool = False
) -> RegionResult:
    """Score Intelligence over 600-699 and behaviors over 50-symbol slices of 700-799.

    Aggression and loyalty share 700-749; curiosity and chaos share 750-799.
    """
    result = RegionResult(region=COGNITION.name)

    result.stats["intelligence"] = score_trait(
        result, sequence, TraitId.INTELLIGENCE, include_patterns
    )
    for field_name, trait_id in BEHAVIOR_TRAITS:
        result.behavior[field_name] = score_trait(result, sequence, trait_id, include_patterns)

    if debug:
        result.debug.extend(
            describe_subregion(COGNITION, subregion, sequence)
            for subregion in COGNITION.subregions
        )
    return result
