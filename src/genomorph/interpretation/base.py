"""Shared plumbing for the region interpreters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from genomorph.engine import patterns
from genomorph.engine.scoring import CalculationResult, score_segment
from genomorph.engine.traits import TRAIT_CONFIGS
from genomorph.model.phenotype import SubregionDebug
from genomorph.model.regions import Region, Subregion
from genomorph.model.traits import TraitId


@dataclass
class RegionResult:
    """Contributions of one region interpreter to the phenotype.

    Each interpreter fills only the blocks its region controls; the
    assembler merges the four results.
    """

    region: str
    physical: dict[str, Any] = field(default_factory=dict)
    stats: dict[str, int] = field(default_factory=dict)
    resistances: dict[str, int] = field(default_factory=dict)
    behavior: dict[str, int] = field(default_factory=dict)
    calculations: dict[TraitId, CalculationResult] = field(default_factory=dict)
    debug: list[SubregionDebug] = field(default_factory=list)


def score_trait(
    result: RegionResult, sequence: str, trait_id: TraitId, include_patterns: bool = False
) -> int:
    """Score one trait over its configured slice and record the calculation."""
    config = TRAIT_CONFIGS[trait_id]
    segment = patterns.extract_region(sequence, config.start, config.end)
    calculation = score_segment(trait_id, segment, config.start, include_patterns)
    result.calculations[trait_id] = calculation
    return calculation.final_value


def subregion_motifs(subregion: Subregion) -> tuple[str, ...]:
    """Motifs of every trait whose slice starts inside the subregion."""
    motifs: dict[str, None] = {}
    for config in TRAIT_CONFIGS.values():
        if subregion.contains(config.start):
            motifs.update(dict.fromkeys(config.motifs))
    return tuple(motifs)


def describe_subregion(
    region: Region,
    subregion: Subregion,
    sequence: str,
    extra_motifs: tuple[str, ...] = (),
) -> SubregionDebug:
    """Symbol statistics of one subregion for exploration tooling."""
    segment = patterns.extract_region(sequence, subregion.start, subregion.end)
    motifs = subregion_motifs(subregion) + extra_motifs
    found = dict.fromkeys(motif for motif, _ in patterns.find_motifs(segment, motifs))
    return SubregionDebug(
        region=region.name,
        subregion=subregion.name,
        start=subregion.start,
        end=subregion.end,
        symbol_frequencies=patterns.count_symbols(segment),
        dominant_symbol=patterns.find_dominant_symbol(segment),
        entropy=round(patterns.calculate_entropy(segment), 4),
        found_motifs=list(found),
        repeating_patterns=patterns.detect_tandem_repeats(segment),
    )
