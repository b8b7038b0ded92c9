"""Trait registry for the opposing forces scorer.

Each of the 16 traits is described by one immutable ``TraitConfig``: the
genome slice it reads, its category, and two tuples of named components.
Specialization components reward the patterns a trait favours; chaos
components penalise the disorder it is harmed by. Every component is
non-negative and bounded by its cap; the ``formula`` text on each component
is what explanation tooling shows.
"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import cached_property

from genomorph.engine import patterns
from genomorph.model.genome import SECONDARY_SYMBOLS
from genomorph.model.regions import motifs_for
from genomorph.model.traits import PatternKind, TraitCategory, TraitId


class SegmentAnalysis:
    """Lazily computed measurements of one segment.

    A single instance is shared by all components of one trait so each
    primitive runs at most once per score.
    """

    def __init__(self, segment: str, motifs: tuple[str, ...] = ()) -> None:
        self.segment = segment
        self.motifs = motifs
        self._runs: dict[int, int] = {}
        self._rare: dict[int, int] = {}

    @property
    def length(self) -> int:
        # Avoids division by zero on empty input
        return max(1, len(self.segment))

    @cached_property
    def counts(self) -> dict[str, int]:
        return patterns.count_symbols(self.segment)

    @cached_property
    def dominant(self) -> str:
        return patterns.find_dominant_symbol(self.segment)

    @cached_property
    def dominant_count(self) -> int:
        return self.counts[self.dominant]

    @property
    def dominant_percentage(self) -> float:
        return self.dominant_count / self.length * 100

    @cached_property
    def entropy(self) -> float:
        return patterns.calculate_entropy(self.segment)

    @cached_property
    def transitions(self) -> int:
        return patterns.count_symbol_transitions(self.segment)

    @property
    def transition_rate(self) -> float:
        return self.transitions / self.length

    @cached_property
    def variance(self) -> float:
        return patterns.calculate_frequency_variance(self.segment)

    @cached_property
    def motif_matches(self) -> list[tuple[str, int]]:
        return patterns.find_motifs(self.segment, self.motifs)

    @cached_property
    def unique_motifs(self) -> int:
        return patterns.count_unique_motifs(self.segment, self.motifs)

    @cached_property
    def repeated_motifs(self) -> int:
        """Motifs occurring at least twice."""
        per_motif = Counter(motif for motif, _ in self.motif_matches)
        return sum(1 for count in per_motif.values() if count >= 2)

    @cached_property
    def tandem_repeats(self) -> int:
        return len(patterns.detect_tandem_repeats(self.segment))

    @cached_property
    def overlapping(self) -> int:
        return patterns.find_overlapping_patterns(self.segment)

    @cached_property
    def palindromes(self) -> int:
        return len(patterns.find_palindromes(self.segment, 4))

    @cached_property
    def alternation(self) -> int:
        return patterns.count_alternations(self.segment)

    @cached_property
    def balance(self) -> int:
        return patterns.calculate_symbol_balance(self.segment)

    @cached_property
    def present(self) -> int:
        return patterns.symbols_present(self.segment)

    @cached_property
    def primary(self) -> int:
        return patterns.count_primary(self.segment)

    @cached_property
    def secondary(self) -> int:
        return patterns.count_secondary(self.segment)

    @cached_property
    def secondary_fragments(self) -> int:
        return patterns.measure_fragmentation(self.segment, SECONDARY_SYMBOLS)

    @cached_property
    def dominant_fragments(self) -> int:
        return patterns.measure_fragmentation(self.segment, self.dominant)

    def runs(self, min_length: int) -> int:
        if min_length not in self._runs:
            self._runs[min_length] = patterns.count_symbol_runs(self.segment, min_length)
        return self._runs[min_length]

    def rare(self, threshold: int) -> int:
        if threshold not in self._rare:
            self._rare[threshold] = patterns.count_rare_symbols(self.segment, threshold)
        return self._rare[threshold]


@dataclass(frozen=True)
class Component:
    """One named, capped contribution to a score."""

    name: str
    cap: float
    compute: Callable[[SegmentAnalysis], float]
    formula: str = ""

    def evaluate(self, analysis: SegmentAnalysis) -> float:
        return patterns.clamp(self.compute(analysis), 0.0, self.cap)


@dataclass(frozen=True)
class TraitConfig:
    """Immutable scoring contract for one trait."""

    trait_id: TraitId
    category: TraitCategory
    display_name: str
    subregion: str
    start: int
    end: int
    philosophy: str
    favors: tuple[str, ...]
    penalized_by: tuple[str, ...]
    specialization: tuple[Component, ...]
    chaos: tuple[Component, ...]
    pattern_kinds: tuple[PatternKind, ...] = field(default=(PatternKind.MOTIF,))

    @property
    def motifs(self) -> tuple[str, ...]:
        return motifs_for(self.trait_id)

    @property
    def length(self) -> int:
        return self.end - self.start + 1


def _homogeneity(threshold: float, factor: float) -> Callable[[SegmentAnalysis], float]:
    def compute(a: SegmentAnalysis) -> float:
        excess = a.dominant_percentage - threshold
        return excess * factor if excess > 0 else 0.0

    return compute


def _entropy_above(threshold: float, factor: float) -> Callable[[SegmentAnalysis], float]:
    def compute(a: SegmentAnalysis) -> float:
        return (a.entropy - threshold) * factor if a.entropy > threshold else 0.0

    return compute


def _entropy_below(threshold: float, factor: float) -> Callable[[SegmentAnalysis], float]:
    def compute(a: SegmentAnalysis) -> float:
        return (threshold - a.entropy) * factor if a.entropy < threshold else 0.0

    return compute


def _motif_poverty(minimum: int, factor: float) -> Callable[[SegmentAnalysis], float]:
    def compute(a: SegmentAnalysis) -> float:
        return (minimum - a.unique_motifs) * factor if a.unique_motifs < minimum else 0.0

    return compute


def _missing_rhythm(a: SegmentAnalysis) -> float:
    has_pattern = a.alternation > 5 or a.palindromes > 0
    return 0.0 if has_pattern else len(a.segment) / 5


def _secondary_run_length(a: SegmentAnalysis) -> float:
    return max(1, math.ceil(a.secondary / max(1, a.secondary_fragments))) * 4


def _secondary_disorder(a: SegmentAnalysis) -> float:
    if a.secondary == 0:
        return 0.0
    return a.secondary_fragments / a.secondary * 100


STRENGTH = TraitConfig(
    trait_id=TraitId.STRENGTH,
    category=TraitCategory.STAT,
    display_name="Strength",
    subregion="Physical Power",
    start=800,
    end=899,
    philosophy="Raw power from genetic dominance and repetition",
    favors=("homogeneity", "long runs", "low entropy"),
    penalized_by=("diversity", "complexity", "rare symbols"),
    specialization=(
        Component(
            "dominantConcentration", 40, lambda a: a.dominant_count / a.length * 40,
            "dominant/len * 40",
        ),
        Component("consecutiveRuns", 40, lambda a: a.runs(4) * 8, "min(40, runs(4) * 8)"),
        Component(
            "motifDensity", 20, lambda a: len(a.motif_matches) * 2, "min(20, motifs * 2)"
        ),
        Component(
            "purityBonus", 40, _entropy_below(2.0, 20), "min(40, max(0, 2 - e) * 20)"
        ),
    ),
    chaos=(
        Component("entropyPenalty", 50, lambda a: a.entropy / 3 * 50, "e/3 * 50"),
        Component("rareSymbolPenalty", 40, lambda a: a.rare(5) * 5, "min(40, rare(5) * 5)"),
        Component(
            "fragmentationPenalty", 20, lambda a: a.dominant_fragments * 2,
            "min(20, fragments(dominant) * 2)",
        ),
    ),
    pattern_kinds=(PatternKind.MOTIF, PatternKind.RUN),
)

AGILITY = TraitConfig(
    trait_id=TraitId.AGILITY,
    category=TraitCategory.STAT,
    display_name="Agility",
    subregion="Locomotion",
    start=200,
    end=299,
    philosophy="Coordination from rhythmic patterns and balance",
    favors=("alternating patterns", "palindromes", "moderate entropy"),
    penalized_by=("chaos", "extreme homogeneity"),
    specialization=(
        Component(
            "alternationScore", 50, lambda a: a.alternation * 5, "min(50, alternation * 5)"
        ),
        Component(
            "palindromeBonus", 30, lambda a: a.palindromes * 6, "min(30, palindromes * 6)"
        ),
        Component("balanceScore", 20, lambda a: a.balance, "symbol balance (0-20)"),
    ),
    chaos=(
        Component(
            "homogeneityPenalty", 40, _homogeneity(70, 1.33), "dom% > 70: (dom% - 70) * 1.33"
        ),
        Component("diversityPenalty", 40, _entropy_above(2.7, 133), "e > 2.7: (e - 2.7) * 133"),
        Component(
            "randomPatternPenalty", 20, _missing_rhythm, "no alternation or palindrome: len/5"
        ),
    ),
    pattern_kinds=(PatternKind.MOTIF, PatternKind.PALINDROME, PatternKind.ALTERNATION),
)

ENDURANCE = TraitConfig(
    trait_id=TraitId.ENDURANCE,
    category=TraitCategory.STAT,
    display_name="Endurance",
    subregion="Defense",
    start=300,
    end=399,
    philosophy="Resilience from redundancy and stability",
    favors=("repeated motifs", "medium-length runs", "consistent symbols"),
    penalized_by=("rare symbols", "high chaos"),
    specialization=(
        Component(
            "redundancyScore", 50, lambda a: a.repeated_motifs * 10,
            "min(50, repeated motifs * 10)",
        ),
        Component(
            "mediumRunBonus", 30, lambda a: max(0, a.runs(3) - a.runs(6)) * 3,
            "min(30, (runs(3) - runs(6)) * 3)",
        ),
        Component(
            "consistencyBonus", 20, lambda a: 20 - a.variance / 5, "max(0, 20 - var/5)"
        ),
    ),
    chaos=(
        Component("rareSymbolPenalty", 40, lambda a: a.rare(3) * 7, "min(40, rare(3) * 7)"),
        Component(
            "volatilityPenalty", 40, lambda a: a.transition_rate * 40,
            "min(40, trans/len * 40)",
        ),
        Component(
            "motifAbsencePenalty", 20, _motif_poverty(2, 10), "unique < 2: (2 - unique) * 10"
        ),
    ),
    pattern_kinds=(PatternKind.MOTIF, PatternKind.RUN),
)

INTELLIGENCE = TraitConfig(
    trait_id=TraitId.INTELLIGENCE,
    category=TraitCategory.STAT,
    display_name="Intelligence",
    subregion="Intelligence Core",
    start=600,
    end=699,
    philosophy="Problem-solving from complexity and pattern recognition",
    favors=("high entropy", "motif diversity", "complex patterns"),
    penalized_by=("homogeneity", "simple repeats"),
    specialization=(
        Component("complexityScore", 40, lambda a: a.entropy / 3 * 40, "e/3 * 40"),
        Component("motifVariety", 40, lambda a: a.unique_motifs * 8, "min(40, unique * 8)"),
        Component(
            "patternLayering", 20, lambda a: a.overlapping * 4, "min(20, overlapping * 4)"
        ),
    ),
    chaos=(
        Component(
            "homogeneityPenalty", 50, _homogeneity(60, 1.25), "dom% > 60: (dom% - 60) * 1.25"
        ),
        Component(
            "simpleRepetitionPenalty", 30, lambda a: a.runs(6) * 6, "min(30, runs(6) * 6)"
        ),
        Component(
            "motifPovertyPenalty", 21, _motif_poverty(3, 7), "unique < 3: (3 - unique) * 7"
        ),
    ),
)

PERCEPTION = TraitConfig(
    trait_id=TraitId.PERCEPTION,
    category=TraitCategory.STAT,
    display_name="Perception",
    subregion="Sensory",
    start=100,
    end=199,
    philosophy="Awareness from rare symbol detection and sensitivity",
    favors=("rare symbols", "scattered patterns", "symbol variety"),
    penalized_by=("homogeneity", "dominant symbols"),
    specialization=(
        Component(
            "rareSymbolDetection", 50, lambda a: a.rare(8) * 10, "min(50, rare(8) * 10)"
        ),
        Component("symbolVariety", 30, lambda a: a.present * 3.75, "present symbols * 3.75"),
        Component("edgeDetection", 20, lambda a: a.transitions / 5, "min(20, trans/5)"),
    ),
    chaos=(
        Component(
            "dominantSymbolPenalty", 50, _homogeneity(40, 0.83),
            "dom% > 40: (dom% - 40) * 0.83",
        ),
        Component(
            "patternRepetitionPenalty", 30, lambda a: a.tandem_repeats * 6,
            "min(30, tandem * 6)",
        ),
        Component(
            "motifAbsencePenalty", 20, _motif_poverty(2, 10), "unique < 2: (2 - unique) * 10"
        ),
    ),
)

PSYCHIC = TraitConfig(
    trait_id=TraitId.PSYCHIC,
    category=TraitCategory.STAT,
    display_name="Psychic",
    subregion="Psychic Potential",
    start=900,
    end=999,
    philosophy="Mental power from specific esoteric patterns",
    favors=("secondary symbol concentration", "esoteric motif sequences"),
    penalized_by=("primary symbol dominance", "disorder"),
    specialization=(
        Component(
            "alienConcentration", 50, lambda a: a.secondary / a.length * 50,
            "secondary/len * 50",
        ),
        Component(
            "esotericMotifDensity", 30, lambda a: len(a.motif_matches) * 5,
            "min(30, motifs * 5)",
        ),
        Component(
            "alienRunBonus", 20, _secondary_run_length,
            "min(20, max(1, ceil(secondary / fragments)) * 4)",
        ),
    ),
    chaos=(
        Component(
            "catDNAInterference", 50, lambda a: a.primary / a.length * 50, "primary/len * 50"
        ),
        Component(
            "disorderPenalty", 30, _secondary_disorder, "min(30, fragments/secondary * 100)"
        ),
        Component(
            "motifPovertyPenalty", 20, _motif_poverty(2, 10), "unique < 2: (2 - unique) * 10"
        ),
    ),
)

POISON = TraitConfig(
    trait_id=TraitId.POISON,
    category=TraitCategory.RESISTANCE,
    display_name="Poison Resistance",
    subregion="Toxin Processing",
    start=400,
    end=449,
    philosophy="Resistance from repeated exposure and adaptation",
    favors=("redundant motifs", "repeated patterns", "consistency"),
    penalized_by=("rare symbols", "high volatility", "randomness"),
    specialization=(
        Component(
            "motifRedundancy", 50, lambda a: a.repeated_motifs * 15 + len(a.motif_matches) * 2,
            "min(50, repeated * 15 + total * 2)",
        ),
        Component(
            "patternConsistency", 30, lambda a: 30 - a.variance / 3, "max(0, 30 - var/3)"
        ),
        Component("adaptationScore", 20, lambda a: a.unique_motifs * 7, "min(20, unique * 7)"),
    ),
    chaos=(
        Component("rareSymbolPenalty", 40, lambda a: a.rare(4) * 8, "min(40, rare(4) * 8)"),
        Component(
            "volatilityPenalty", 40, lambda a: a.transition_rate * 50,
            "min(40, trans/len * 50)",
        ),
        Component(
            "randomnessPenalty", 20, _entropy_above(2.6, 50), "e > 2.6: (e - 2.6) * 50"
        ),
    ),
    pattern_kinds=(PatternKind.MOTIF, PatternKind.RUN),
)

ACID = TraitConfig(
    trait_id=TraitId.ACID,
    category=TraitCategory.RESISTANCE,
    display_name="Acid Resistance",
    subregion="Toxin Processing",
    start=450,
    end=499,
    philosophy="Resistance from thick protective coating",
    favors=("symbol runs", "homogeneity", "dominant concentration"),
    penalized_by=("diversity", "fragmentation", "scattered patterns"),
    specialization=(
        Component(
            "protectiveCoating", 40, lambda a: a.dominant_count / a.length * 40,
            "dominant/len * 40",
        ),
        Component("structuralRuns", 40, lambda a: a.runs(3) * 5, "min(40, runs(3) * 5)"),
        Component(
            "motifPresence", 20, lambda a: len(a.motif_matches) * 3, "min(20, motifs * 3)"
        ),
    ),
    chaos=(
        Component("diversityPenalty", 50, lambda a: a.entropy / 3 * 50, "e/3 * 50"),
        Component(
            "fragmentationPenalty", 30, lambda a: a.transition_rate * 40,
            "min(30, trans/len * 40)",
        ),
        Component("weaknessPenalty", 20, lambda a: a.rare(3) * 5, "min(20, rare(3) * 5)"),
    ),
    pattern_kinds=(PatternKind.MOTIF, PatternKind.RUN),
)

FIRE = TraitConfig(
    trait_id=TraitId.FIRE,
    category=TraitCategory.RESISTANCE,
    display_name="Fire Resistance",
    subregion="Thermal Regulation",
    start=500,
    end=549,
    philosophy="Resistance from heat-resistant proteins",
    favors=("low entropy", "dominance", "long runs"),
    penalized_by=("high diversity", "complexity", "scattered motifs"),
    specialization=(
        Component(
            "thermalStability", 50, lambda a: a.dominant_percentage / 2, "min(50, dom%/2)"
        ),
        Component(
            "heatResistanceMotifs", 30, lambda a: len(a.motif_matches) * 4,
            "min(30, motifs * 4)",
        ),
        Component(
            "structuralIntegrity", 20, lambda a: a.runs(5) * 5, "min(20, runs(5) * 5)"
        ),
    ),
    chaos=(
        Component("complexityPenalty", 50, lambda a: a.entropy / 3 * 50, "e/3 * 50"),
        Component(
            "instabilityPenalty", 30, lambda a: a.transition_rate * 35,
            "min(30, trans/len * 35)",
        ),
        Component(
            "vulnerabilityPenalty", 20, lambda a: a.rare(5) * 4, "min(20, rare(5) * 4)"
        ),
    ),
    pattern_kinds=(PatternKind.MOTIF, PatternKind.RUN),
)

COLD = TraitConfig(
    trait_id=TraitId.COLD,
    category=TraitCategory.RESISTANCE,
    display_name="Cold Resistance",
    subregion="Thermal Regulation",
    start=550,
    end=599,
    philosophy="Resistance from insulation layers",
    favors=("medium runs", "consistency", "repeated patterns"),
    penalized_by=("extreme transitions", "high volatility", "gaps"),
    specialization=(
        Component(
            "insulationLayers", 40, lambda a: max(0, a.runs(3) - a.runs(7)) * 4,
            "min(40, (runs(3) - runs(7)) * 4)",
        ),
        Component(
            "coldResistanceMotifs", 40, lambda a: len(a.motif_matches) * 5,
            "min(40, motifs * 5)",
        ),
        Component(
            "thermalConsistency", 20, lambda a: 20 - a.variance / 4, "max(0, 20 - var/4)"
        ),
    ),
    chaos=(
        Component(
            "transitionPenalty", 40, lambda a: a.transition_rate * 45,
            "min(40, trans/len * 45)",
        ),
        Component(
            "volatilityPenalty", 40, _entropy_above(2.5, 80), "e > 2.5: (e - 2.5) * 80"
        ),
        Component("gapPenalty", 20, lambda a: a.rare(4) * 5, "min(20, rare(4) * 5)"),
    ),
    pattern_kinds=(PatternKind.MOTIF, PatternKind.RUN),
)

PSYCHIC_RESISTANCE = TraitConfig(
    trait_id=TraitId.PSYCHIC_RESISTANCE,
    category=TraitCategory.RESISTANCE,
    display_name="Psychic Resistance",
    subregion="Psychic Potential",
    start=900,
    end=949,
    philosophy="Resistance from being grounded in physical reality",
    favors=("primary symbol concentration", "simplicity", "earthiness"),
    penalized_by=("secondary symbols", "complexity", "mystical patterns"),
    specialization=(
        Component("grounding", 50, lambda a: a.primary / a.length * 50, "primary/len * 50"),
        Component(
            "mentalFortitude", 30, lambda a: len(a.motif_matches) * 4, "min(30, motifs * 4)"
        ),
        Component("simplicityBonus", 20, _entropy_below(2.0, 10), "e < 2: (2 - e) * 10"),
    ),
    chaos=(
        Component(
            "alienInterference", 50, lambda a: (len(a.segment) - a.primary) / a.length * 50,
            "(len - primary)/len * 50",
        ),
        Component(
            "complexityPenalty", 30, _entropy_above(2.3, 43), "e > 2.3: (e - 2.3) * 43"
        ),
        Component(
            "mysticalPatternPenalty", 20, lambda a: a.overlapping * 3,
            "min(20, overlapping * 3)",
        ),
    ),
    pattern_kinds=(PatternKind.MOTIF, PatternKind.PALINDROME),
)

RADIATION = TraitConfig(
    trait_id=TraitId.RADIATION,
    category=TraitCategory.RESISTANCE,
    display_name="Radiation Resistance",
    subregion="Psychic Potential",
    start=950,
    end=999,
    philosophy="Resistance from DNA repair mechanisms",
    favors=("complex patterns", "motif variety", "repair sequences"),
    penalized_by=("homogeneity", "simple patterns", "lack of redundancy"),
    specialization=(
        Component("repairMechanisms", 40, lambda a: a.unique_motifs * 10, "min(40, unique * 10)"),
        Component("complexityScore", 40, lambda a: a.entropy / 3 * 40, "e/3 * 40"),
        Component(
            "redundancyBackup", 20, lambda a: len(a.motif_matches) * 2, "min(20, motifs * 2)"
        ),
    ),
    chaos=(
        Component(
            "homogeneityPenalty", 50, _homogeneity(50, 1.0), "dom% > 50: (dom% - 50) * 1.0"
        ),
        Component(
            "simplicityPenalty", 30, _entropy_below(2.0, 15), "e < 2: (2 - e) * 15"
        ),
        Component(
            "motifPovertyPenalty", 20, _motif_poverty(2, 10), "unique < 2: (2 - unique) * 10"
        ),
    ),
)

AGGRESSION = TraitConfig(
    trait_id=TraitId.AGGRESSION,
    category=TraitCategory.BEHAVIOR,
    display_name="Aggression",
    subregion="Behavioral Drivers",
    start=700,
    end=749,
    philosophy="Aggression from genetic dominance and focus",
    favors=("homogeneity", "long runs", "low entropy"),
    penalized_by=("diversity", "scattered patterns", "complexity"),
    specialization=(
        Component(
            "dominantFocus", 50, lambda a: a.dominant_count / a.length * 50, "dominant/len * 50"
        ),
        Component("aggressiveRuns", 30, lambda a: a.runs(4) * 6, "min(30, runs(4) * 6)"),
        Component(
            "singleMindedness", 20, _entropy_below(2.0, 10), "e < 2: (2 - e) * 10"
        ),
    ),
    chaos=(
        Component("diversityPenalty", 40, lambda a: a.entropy / 3 * 40, "e/3 * 40"),
        Component(
            "scatteredPatternPenalty", 40, lambda a: a.transition_rate * 50,
            "min(40, trans/len * 50)",
        ),
        Component("weaknessPenalty", 20, lambda a: a.rare(5) * 4, "min(20, rare(5) * 4)"),
    ),
    pattern_kinds=(PatternKind.RUN,),
)

CURIOSITY = TraitConfig(
    trait_id=TraitId.CURIOSITY,
    category=TraitCategory.BEHAVIOR,
    display_name="Curiosity",
    subregion="Behavioral Drivers",
    start=750,
    end=799,
    philosophy="Curiosity from diversity and novelty-seeking",
    favors=("rare symbols", "high diversity", "scattered patterns"),
    penalized_by=("homogeneity", "repetition", "predictability"),
    specialization=(
        Component("noveltySeeking", 50, lambda a: a.rare(8) * 10, "min(50, rare(8) * 10)"),
        Component(
            "exploratoryDiversity", 30, lambda a: a.entropy / 3 * 30, "e/3 * 30"
        ),
        Component("patternVariety", 20, lambda a: a.present * 2.5, "present symbols * 2.5"),
    ),
    chaos=(
        Component(
            "homogeneityPenalty", 50, _homogeneity(40, 0.83), "dom% > 40: (dom% - 40) * 0.83"
        ),
        Component(
            "repetitionPenalty", 30, lambda a: a.tandem_repeats * 6, "min(30, tandem * 6)"
        ),
        Component(
            "predictabilityPenalty", 20,
            lambda a: 20 - a.variance if a.variance < 20 else 0.0,
            "var < 20: 20 - var",
        ),
    ),
    pattern_kinds=(),
)

LOYALTY = TraitConfig(
    trait_id=TraitId.LOYALTY,
    category=TraitCategory.BEHAVIOR,
    display_name="Loyalty",
    subregion="Behavioral Drivers",
    start=700,
    end=749,
    philosophy="Loyalty from consistency and repeated patterns",
    favors=("tandem repeats", "consistency", "stable patterns"),
    penalized_by=("volatility", "rare symbols", "instability"),
    specialization=(
        Component(
            "patternConsistency", 50, lambda a: a.tandem_repeats * 10, "min(50, tandem * 10)"
        ),
        Component(
            "steadfastStability", 30, lambda a: 30 - a.variance / 3, "max(0, 30 - var/3)"
        ),
        Component("commitmentScore", 20, lambda a: a.runs(3) * 2, "min(20, runs(3) * 2)"),
    ),
    chaos=(
        Component(
            "volatilityPenalty", 40, lambda a: a.transition_rate * 50,
            "min(40, trans/len * 50)",
        ),
        Component("rareSymbolPenalty", 40, lambda a: a.rare(4) * 8, "min(40, rare(4) * 8)"),
        Component(
            "instabilityPenalty", 20, _entropy_above(2.6, 50), "e > 2.6: (e - 2.6) * 50"
        ),
    ),
    pattern_kinds=(PatternKind.TANDEM_REPEAT,),
)

CHAOS = TraitConfig(
    trait_id=TraitId.CHAOS,
    category=TraitCategory.BEHAVIOR,
    display_name="Chaos",
    subregion="Behavioral Drivers",
    start=750,
    end=799,
    philosophy="Chaos from entropy and unpredictability",
    favors=("high entropy", "complexity", "overlapping patterns"),
    penalized_by=("homogeneity", "simplicity", "predictable patterns"),
    specialization=(
        Component("entropyScore", 50, lambda a: a.entropy / 3 * 50, "e/3 * 50"),
        Component(
            "complexityBonus", 30, lambda a: a.overlapping * 5, "min(30, overlapping * 5)"
        ),
        Component(
            "unpredictabilityScore", 20, lambda a: a.transition_rate * 25,
            "min(20, trans/len * 25)",
        ),
    ),
    chaos=(
        Component(
            "homogeneityPenalty", 50, _homogeneity(50, 1.0), "dom% > 50: dom% - 50"
        ),
        Component(
            "simplicityPenalty", 30, _entropy_below(2.0, 15), "e < 2: (2 - e) * 15"
        ),
        Component("orderPenalty", 20, lambda a: a.tandem_repeats * 4, "min(20, tandem * 4)"),
    ),
    pattern_kinds=(),
)

TRAIT_CONFIGS: dict[TraitId, TraitConfig] = {
    config.trait_id: config
    for config in (
        STRENGTH,
        AGILITY,
        ENDURANCE,
        INTELLIGENCE,
        PERCEPTION,
        PSYCHIC,
        POISON,
        ACID,
        FIRE,
        COLD,
        PSYCHIC_RESISTANCE,
        RADIATION,
        AGGRESSION,
        CURIOSITY,
        LOYALTY,
        CHAOS,
    )
}

_missing = set(TraitId) - set(TRAIT_CONFIGS)
if _missing:
    raise RuntimeError(f"No TraitConfig for: {sorted(_missing)}")


def get_trait_config(trait_id: TraitId | str) -> TraitConfig:
    """Look up the config for a trait id (enum member or its string value).

    Raises:
        ValueError: If the id is not one of the 16 traits.
    """
    return TRAIT_CONFIGS[TraitId(trait_id)]
