"""Species normalization.

Remaps a raw phenotype into an archetype's realistic bounds. Stats and
behaviors on the raw 1-10 scale map linearly as

    target_min + (raw - 1) * (target_max - target_min) / 9

and resistances on the 0-100 scale as

    target_min + raw / 100 * (target_max - target_min)

both rounded half up. The input phenotype is never modified; a new value
is returned. Debug attachments (the per-trait breakdown and the region debug
block) describe the raw scores, so they are dropped from the result.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from genomorph.engine.patterns import round_half_up
from genomorph.model.genome import Genome, as_sequence
from genomorph.model.phenotype import Behavior, Phenotype, Resistances, Stats

logger = logging.getLogger(__name__)


class Archetype(StrEnum):
    """Named species profiles."""

    TERRESTRIAL = "terrestrial"
    XENOMORPH = "xenomorph"


def map_range(raw: int, target_min: int, target_max: int) -> int:
    """Remap a 1-10 value into [target_min, target_max]."""
    return round_half_up(target_min + (raw - 1) * (target_max - target_min) / 9)


def map_resistance_range(raw: int, target_min: int, target_max: int) -> int:
    """Remap a 0-100 value into [target_min, target_max]."""
    return round_half_up(target_min + raw / 100 * (target_max - target_min))


def normalize_terrestrial(phenotype: Phenotype) -> Phenotype:
    """Pin the canonical four-legged, furred body and drop the resistance block.

    Size and colour are kept; psychic is always 0.
    """
    physical = phenotype.physical_traits.model_copy(
        update={
            "eyes": 2,
            "legs": 4,
            "tails": 1,
            "wings": 0,
            "skin_type": "fur",
            "has_claws": True,
            "has_fangs": True,
        }
    )
    raw_stats = phenotype.stats
    stats = Stats(
        strength=map_range(raw_stats.strength, 3, 7),
        agility=map_range(raw_stats.agility, 6, 10),
        endurance=map_range(raw_stats.endurance, 4, 8),
        intelligence=map_range(raw_stats.intelligence, 5, 9),
        perception=map_range(raw_stats.perception, 7, 10),
        psychic=0,
    )
    raw_behavior = phenotype.behavior
    behavior = Behavior(
        aggression=map_range(raw_behavior.aggression, 2, 8),
        curiosity=map_range(raw_behavior.curiosity, 7, 10),
        loyalty=map_range(raw_behavior.loyalty, 3, 9),
        chaos=map_range(raw_behavior.chaos, 5, 9),
    )
    return phenotype.model_copy(
        update={
            "physical_traits": physical,
            "stats": stats,
            "resistances": None,
            "behavior": behavior,
        }
    ).without_debug()


def _non_fur_skin(first_symbol: str) -> str:
    if first_symbol in ("W", "A"):
        return "scales"
    if first_symbol in ("X", "T"):
        return "chitin"
    return "skin"


def normalize_xenomorph(phenotype: Phenotype, genome: Genome | str | None = None) -> Phenotype:
    """Winged, never furred, always psychic, with raised resistances.

    Args:
        phenotype: Raw phenotype.
        genome: Source genome; its first symbol decides the skin type that
            replaces fur. Without it fur becomes scales.
    """
    raw_physical = phenotype.physical_traits
    skin_type = raw_physical.skin_type
    if skin_type == "fur":
        sequence = as_sequence(genome) if genome is not None else ""
        skin_type = _non_fur_skin(sequence[:1] or "W")
    physical = raw_physical.model_copy(
        update={"wings": max(1, raw_physical.wings), "skin_type": skin_type}
    )

    raw_stats = phenotype.stats
    stats = Stats(
        strength=map_range(raw_stats.strength, 3, 9),
        agility=raw_stats.agility,
        endurance=map_range(raw_stats.endurance, 4, 10),
        intelligence=map_range(raw_stats.intelligence, 4, 10),
        perception=map_range(raw_stats.perception, 5, 10),
        psychic=map_range(max(raw_stats.psychic, 1), 3, 10),
    )

    resistances = None
    if phenotype.resistances is not None:
        raw = phenotype.resistances
        resistances = Resistances(
            poison=map_resistance_range(raw.poison, 30, 90),
            acid=map_resistance_range(raw.acid, 30, 90),
            fire=raw.fire,
            cold=raw.cold,
            psychic=map_resistance_range(raw.psychic, 40, 100),
            radiation=map_resistance_range(raw.radiation, 50, 100),
        )

    raw_behavior = phenotype.behavior
    behavior = Behavior(
        aggression=map_range(raw_behavior.aggression, 3, 10),
        curiosity=map_range(raw_behavior.curiosity, 5, 10),
        loyalty=raw_behavior.loyalty,
        chaos=map_range(raw_behavior.chaos, 4, 10),
    )
    return phenotype.model_copy(
        update={
            "physical_traits": physical,
            "stats": stats,
            "resistances": resistances,
            "behavior": behavior,
        }
    ).without_debug()


def normalize(
    phenotype: Phenotype,
    archetype: Archetype | str,
    genome: Genome | str | None = None,
) -> Phenotype:
    """Apply an archetype's normalization and return a new Phenotype.

    Raises:
        ValueError: If the archetype is unknown.
    """
    archetype = Archetype(archetype)
    logger.info("Normalizing phenotype to %s archetype", archetype.value)
    if archetype == Archetype.TERRESTRIAL:
        return normalize_terrestrial(phenotype)
    return normalize_xenomorph(phenotype, genome)
