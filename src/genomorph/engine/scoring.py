"""Opposing forces scoring engine.

Every trait is scored the same way:

    specialization = sum of capped favoured components
    chaos          = sum of capped penalty components
    raw            = clamp(specialization - chaos, -100, 100)
    final          = 1..10 for stats and behaviors, 0..100 for resistances

Example:
    >>> from genomorph.model.traits import TraitId
    >>> result = score_segment(TraitId.STRENGTH, "A" * 100)
    >>> result.final_value
    9
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from genomorph.engine import patterns
from genomorph.engine.traits import SegmentAnalysis, TraitConfig, get_trait_config
from genomorph.model.genome import Genome, as_sequence
from genomorph.model.phenotype import PatternReport, TraitBreakdown
from genomorph.model.traits import PatternKind, TraitCategory, TraitId
from genomorph.model.validation import validate_genome

logger = logging.getLogger(__name__)

RAW_SCORE_MIN = -100.0
RAW_SCORE_MAX = 100.0


class GenomeInterpretationError(Exception):
    """Raised when an invalid genome reaches interpretation."""

    pass


@dataclass(frozen=True)
class DetectedPattern:
    """A pattern found in a scored segment, with segment-relative positions."""

    kind: PatternKind
    value: str
    positions: tuple[int, ...] = ()

    @property
    def count(self) -> int:
        return len(self.positions)

    def to_report(self) -> PatternReport:
        return PatternReport(
            kind=self.kind.value,
            value=self.value,
            positions=list(self.positions),
            count=self.count,
        )


@dataclass(frozen=True)
class CalculationResult:
    """Full record of one trait score."""

    trait_id: TraitId
    category: TraitCategory
    start: int
    end: int
    segment: str
    specialization_components: Mapping[str, float]
    chaos_components: Mapping[str, float]
    raw_score: float
    final_value: int
    patterns: tuple[DetectedPattern, ...] = field(default_factory=tuple)

    @property
    def specialization_score(self) -> float:
        return sum(self.specialization_components.values())

    @property
    def chaos_penalty(self) -> float:
        return sum(self.chaos_components.values())

    @property
    def mapping(self) -> str:
        """Human-readable raw-to-final mapping, e.g. ``86/100 -> 9/10``."""
        scale = 100 if self.category == TraitCategory.RESISTANCE else 10
        return f"{patterns.round_half_up(self.raw_score)}/100 -> {self.final_value}/{scale}"

    def to_breakdown(self) -> TraitBreakdown:
        return TraitBreakdown(
            trait=self.trait_id,
            category=self.category,
            start=self.start,
            end=self.end,
            segment=self.segment,
            specialization_score=round(self.specialization_score, 2),
            specialization_components={
                name: round(value, 2) for name, value in self.specialization_components.items()
            },
            chaos_penalty=round(self.chaos_penalty, 2),
            chaos_components={
                name: round(value, 2) for name, value in self.chaos_components.items()
            },
            raw_score=round(self.raw_score, 2),
            final_value=self.final_value,
            patterns=[pattern.to_report() for pattern in self.patterns],
        )


def raw_score_to_final(raw_score: float, category: TraitCategory) -> int:
    """Map a raw score in [-100, 100] onto the category's final range.

    Stats and behaviors: ``round(1 + raw/100 * 9)`` clamped to [1, 10].
    Resistances: ``round(50 + raw/2)`` clamped to [0, 100].
    """
    if category == TraitCategory.RESISTANCE:
        value = patterns.clamp(50 + raw_score / 2, 0, 100)
    else:
        value = patterns.clamp(1 + raw_score / 100 * 9, 1, 10)
    return patterns.round_half_up(value)


def detect_patterns(config: TraitConfig, segment: str) -> tuple[DetectedPattern, ...]:
    """Collect the explanation patterns a trait shows for a segment."""
    found: list[DetectedPattern] = []
    kinds = config.pattern_kinds

    if PatternKind.MOTIF in kinds and config.motifs:
        by_motif: dict[str, list[int]] = {}
        for motif, position in patterns.find_motifs(segment, config.motifs):
            by_motif.setdefault(motif, []).append(position)
        found.extend(
            DetectedPattern(PatternKind.MOTIF, motif, tuple(positions))
            for motif, positions in by_motif.items()
        )

    if PatternKind.RUN in kinds:
        found.extend(
            DetectedPattern(PatternKind.RUN, symbol * length, (start,))
            for symbol, start, length in patterns.find_symbol_runs(segment, 3)
        )

    if PatternKind.PALINDROME in kinds:
        found.extend(
            DetectedPattern(PatternKind.PALINDROME, value, tuple(positions))
            for value, positions in patterns.locate_palindromes(segment, 4).items()
        )

    if PatternKind.ALTERNATION in kinds:
        _, start, length = patterns.find_alternations(segment)
        if length >= 4:
            found.append(
                DetectedPattern(PatternKind.ALTERNATION, segment[start : start + length], (start,))
            )

    if PatternKind.TANDEM_REPEAT in kinds:
        for unit in patterns.detect_tandem_repeats(segment):
            doubled = unit * 2
            positions = [
                i for i in range(len(segment) - len(doubled) + 1) if segment.startswith(doubled, i)
            ]
            found.append(DetectedPattern(PatternKind.TANDEM_REPEAT, unit, tuple(positions)))

    return tuple(found)


def score_segment(
    trait_id: TraitId | str,
    segment: str,
    start: int | None = None,
    include_patterns: bool = True,
) -> CalculationResult:
    """Score an already extracted segment for one trait.

    The segment is not validated; all primitives are total over any string.

    Args:
        trait_id: Trait to score.
        segment: Segment to analyse, normally the trait's own slice.
        start: Absolute start recorded in the result (defaults to the trait's).
        include_patterns: Whether to collect explanation patterns.

    Returns:
        CalculationResult with both component maps and the final value.
    """
    config = get_trait_config(trait_id)
    analysis = SegmentAnalysis(segment, config.motifs)

    specialization = {c.name: c.evaluate(analysis) for c in config.specialization}
    chaos = {c.name: c.evaluate(analysis) for c in config.chaos}

    raw_score = patterns.clamp(
        sum(specialization.values()) - sum(chaos.values()), RAW_SCORE_MIN, RAW_SCORE_MAX
    )
    final_value = raw_score_to_final(raw_score, config.category)

    if start is None:
        start = config.start
    logger.debug(
        "Scored %s: raw=%.2f final=%d", config.trait_id.value, raw_score, final_value
    )

    return CalculationResult(
        trait_id=config.trait_id,
        category=config.category,
        start=start,
        end=start + len(segment) - 1,
        segment=segment,
        specialization_components=MappingProxyType(specialization),
        chaos_components=MappingProxyType(chaos),
        raw_score=raw_score,
        final_value=final_value,
        patterns=detect_patterns(config, segment) if include_patterns else (),
    )


def calculate_trait(
    genome: Genome | str,
    trait_id: TraitId | str,
    include_patterns: bool = True,
) -> CalculationResult:
    """Validate a full genome and score one trait over its slice.

    Raises:
        GenomeInterpretationError: If the genome is invalid.
    """
    result = validate_genome(genome)
    if not result.valid:
        msg = f"Cannot score an invalid genome: {'; '.join(result.errors)}"
        raise GenomeInterpretationError(msg)

    config = get_trait_config(trait_id)
    segment = patterns.extract_region(as_sequence(genome), config.start, config.end)
    return score_segment(config.trait_id, segment, config.start, include_patterns)
