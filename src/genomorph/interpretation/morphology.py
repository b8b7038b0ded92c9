"""Morphology region (0-399): body plan, senses, locomotion, defense.

Appendage counts come from a 32-bit string hash of the first ten symbols
of a slice, folded into 0-10, so they depend on the genome bytes only.
"""

from __future__ import annotations

import logging

from genomorph.engine import patterns
from genomorph.interpretation.base import RegionResult, describe_subregion, score_trait
from genomorph.model.regions import (
    BODY_PLAN,
    CLAW_MOTIFS,
    COLOR_VALUES,
    DEFENSE,
    FANG_MOTIFS,
    LOCOMOTION,
    MORPHOLOGY,
    SENSORY,
    SIZE_THRESHOLDS,
    SKIN_TYPES,
)
from genomorph.model.traits import TraitId

logger = logging.getLogger(__name__)

HASH_PREFIX_LENGTH = 10
MAX_APPENDAGES = 10
DEFAULT_SIZE = "medium"


def appendage_count(segment: str) -> int:
    """Fold a 31-multiplier hash of the leading symbols into 0-10.

    The hash wraps to a signed 32-bit integer after every step.
    """
    value = 0
    for symbol in segment[:HASH_PREFIX_LENGTH]:
        value = (value * 31 + ord(symbol)) & 0xFFFFFFFF
    if value >= 0x80000000:
        value -= 0x100000000
    return abs(value) % (MAX_APPENDAGES + 1)


def size_for(dominant_count: int) -> str:
    """Size class for the dominant symbol count of the body plan."""
    for low, high, size in SIZE_THRESHOLDS:
        if low <= dominant_count <= high:
            return size
    return DEFAULT_SIZE


def color_for(segment: str) -> str:
    """Colour from the first three symbols mapped to red, green and blue."""
    channels = [COLOR_VALUES.get(symbol, 0) for symbol in segment[:3]]
    channels += [0] * (3 - len(channels))
    return patterns.rgb_to_hex(*channels)


def interpret_morphology(
    sequence: str, include_patterns: bool = False, debug: bool = False
) -> RegionResult:
    """Derive physical traits plus Perception, Agility and Endurance."""
    result = RegionResult(region=MORPHOLOGY.name)

    body = patterns.extract_region(sequence, BODY_PLAN.start, BODY_PLAN.end)
    result.physical["legs"] = appendage_count(body[:50])
    result.physical["tails"] = appendage_count(body[50:100])
    result.physical["size"] = size_for(patterns.dominant_count(body))

    sensory = patterns.extract_region(sequence, SENSORY.start, SENSORY.end)
    result.physical["eyes"] = appendage_count(sensory)
    result.stats["perception"] = score_trait(
        result, sequence, TraitId.PERCEPTION, include_patterns
    )

    locomotion = patterns.extract_region(sequence, LOCOMOTION.start, LOCOMOTION.end)
    result.physical["wings"] = appendage_count(locomotion)
    result.stats["agility"] = score_trait(result, sequence, TraitId.AGILITY, include_patterns)

    defense = patterns.extract_region(sequence, DEFENSE.start, DEFENSE.end)
    result.physical["skin_type"] = SKIN_TYPES[patterns.find_dominant_symbol(defense)]
    result.physical["has_claws"] = bool(patterns.find_motifs(defense, CLAW_MOTIFS))
    result.physical["has_fangs"] = bool(patterns.find_motifs(defense, FANG_MOTIFS))
    result.physical["color"] = color_for(defense)
    result.stats["endurance"] = score_trait(
        result, sequence, TraitId.ENDURANCE, include_patterns
    )

    if debug:
        result.debug.extend(
            describe_subregion(MORPHOLOGY, subregion, sequence)
            for subregion in (BODY_PLAN, SENSORY, LOCOMOTION)
        )
        result.debug.append(
            describe_subregion(MORPHOLOGY, DEFENSE, sequence, CLAW_MOTIFS + FANG_MOTIFS)
        )

    logger.debug("Morphology: %s", result.physical)
    return result
