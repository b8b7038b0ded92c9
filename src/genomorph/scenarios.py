"""Scenario injection for exploring trait scoring.

A scenario is a named synthetic pattern for one trait's slice, with the
outcome band the scorer places it in. Applying a scenario splices the
pattern into a genome and returns a new Genome; a pattern of the wrong
length is padded with the original symbols or truncated, never rejected.

Patterns are deterministic. Bands are calibrated for patterns of the
trait's own slice length; a catalog built with a custom length keeps the
same bands but they are not guaranteed to hold.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from genomorph.engine.traits import get_trait_config
from genomorph.model.genome import ALPHABET, Genome, as_sequence
from genomorph.model.traits import TraitCategory, TraitId

logger = logging.getLogger(__name__)


class UnknownScenarioError(KeyError):
    """Raised when a scenario id does not exist for a trait."""

    pass


@dataclass(frozen=True)
class Scenario:
    """A synthetic segment pattern and the outcome band it lands in."""

    id: str
    name: str
    description: str
    pattern: str
    expected_low: int
    expected_high: int
    expected_label: str

    @property
    def expected_outcome(self) -> str:
        return f"{self.expected_label} ({self.expected_low}-{self.expected_high})"

    def expects(self, value: int) -> bool:
        return self.expected_low <= value <= self.expected_high

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "pattern": self.pattern,
            "expected_outcome": self.expected_outcome,
        }


# Pattern builders


def repeat_to(unit: str, length: int) -> str:
    """Repeat a unit and cut it to length."""
    if not unit:
        return ""
    return (unit * (length // len(unit) + 1))[:length]


def cycle_pattern(parts: list[str] | tuple[str, ...], length: int) -> str:
    """Concatenate parts round-robin until length is reached."""
    return repeat_to("".join(parts), length)


def balanced_pattern(length: int) -> str:
    """All eight symbols in turn."""
    return repeat_to("".join(ALPHABET), length)


def split_pattern(first: str, second: str, length: int) -> str:
    """First half repeats one unit, second half another."""
    half = length // 2
    return repeat_to(first, half) + repeat_to(second, length - half)


PALINDROME_UNITS = ("ATCGCGTA", "AGGA", "TAAT", "CGCG", "WXYZZYXW")

# Five rare symbols, each once per 20, between ATC permutations. No unit of
# 2-5 symbols ever repeats back to back.
RARE_SCATTER = ("TAC", "G", "ACT", "W", "CTA", "X", "ATC", "Y", "TCA", "Z")

ScenarioTable = list[tuple[str, str, str, str, int, int, str]]


def _trait_scenarios(trait_id: TraitId, length: int) -> ScenarioTable:
    """Rows of (id, name, description, pattern, low, high, label) per trait."""
    builders: dict[TraitId, Callable[[], ScenarioTable]] = {
        TraitId.STRENGTH: lambda: [
            ("extreme-homogeneity", "Extreme homogeneity", "All A (max dominance)",
             "A" * length, 9, 10, "Very High Strength"),
            ("perfect-runs", "Perfect runs", "Long A runs broken by short G runs",
             cycle_pattern(("A" * 20, "G" * 5), length), 7, 9, "High Strength"),
            ("motif-rich", "Motif rich", "Strength motifs without runs (fragmented)",
             cycle_pattern(("ATG", "GTA", "TAG"), length), 1, 2, "Very Low Strength"),
            ("chaos-pattern", "Chaos pattern", "Maximum entropy and diversity",
             balanced_pattern(length), 1, 3, "Very Low Strength"),
        ],
        TraitId.AGILITY: lambda: [
            ("perfect-alternation", "Perfect alternation", "ATATAT pattern",
             repeat_to("AT", length), 9, 10, "Very High Agility"),
            ("palindrome-rich", "Palindrome rich", "Multiple palindromes",
             cycle_pattern(PALINDROME_UNITS, length), 5, 7, "Moderate Agility"),
            ("too-homogeneous", "Too homogeneous", "All one symbol (penalized)",
             "G" * length, 5, 7, "Moderate Agility"),
            ("balanced-symbols", "Balanced symbols", "Perfect balance, no rhythm",
             balanced_pattern(length), 1, 2, "Very Low Agility"),
        ],
        TraitId.ENDURANCE: lambda: [
            ("redundant-layers", "Redundant layers", "Repeated motifs between runs of five",
             cycle_pattern(
                 ("CAG", "TTTTT", "GCA", "ZZZZZ", "YWX", "AAAAA", "XYW", "GGGGG", "C"), length
             ),
             6, 8, "High Endurance"),
            ("balanced-runs", "Balanced runs", "Repeated motifs between runs of three",
             cycle_pattern(("CAG", "TTT", "GCA", "YWX", "ZZZ", "XYW"), length),
             5, 7, "Moderate Endurance"),
            ("motif-rich", "Motif rich", "Endurance motifs, constant changes",
             cycle_pattern(("GCA", "CAG", "XYW", "YWX"), length), 1, 3, "Low Endurance"),
            ("extreme-chaos", "Extreme chaos", "High fragmentation, no motifs",
             balanced_pattern(length), 1, 2, "Very Low Endurance"),
        ],
        TraitId.INTELLIGENCE: lambda: [
            ("layered-complexity", "Layered complexity", "All 8 symbols with overlapping motifs",
             cycle_pattern(("GCGCG", "ZYZYZ", "ATWX"), length), 9, 10,
             "Very High Intelligence"),
            ("complex-patterns", "Complex patterns", "Overlapping GCGC motifs",
             repeat_to("GCGC", length), 5, 7, "Moderate Intelligence"),
            ("diverse-symbols", "Diverse symbols", "High symbol variety, no motifs",
             balanced_pattern(length), 2, 4, "Low Intelligence"),
            ("homogeneous", "Homogeneous", "All T (penalized)",
             "T" * length, 1, 2, "Very Low Intelligence"),
        ],
        TraitId.PERCEPTION: lambda: [
            ("rare-scatter", "Rare scatter", "Five rare symbols scattered through ATC",
             cycle_pattern(RARE_SCATTER, length), 9, 10, "Very High Perception"),
            ("moderate-diversity", "Moderate diversity", "Two rare symbols among motifs",
             cycle_pattern(("TAC", "X", "ACT", "W", "CTATCA"), length), 5, 7,
             "Moderate Perception"),
            ("perfect-balance", "Perfect balance", "All symbols equal",
             balanced_pattern(length), 3, 5, "Low Perception"),
            ("extreme-dominance", "Extreme dominance", "90% one symbol",
             cycle_pattern(("A" * 9 + "T", "A" * 9 + "C", "A" * 9 + "G"), length), 1, 2,
             "Very Low Perception"),
        ],
        TraitId.PSYCHIC: lambda: [
            ("pure-alien", "Pure alien", "Only WXYZ, esoteric motifs",
             repeat_to("YXWZ", length), 9, 10, "Very High Psychic"),
            ("complex-fusion", "Complex fusion", "Esoteric runs broken by CGAT",
             cycle_pattern(("YXWZ" * 3, "CGAT"), length), 6, 8, "High Psychic"),
            ("perfect-hybrid", "Perfect hybrid", "Half primary, half secondary",
             split_pattern("ATCG", "YXWZ", length), 4, 6, "Moderate Psychic"),
            ("pure-cat", "Pure cat", "Only ATCG (penalized)",
             repeat_to("ATCG", length), 1, 2, "Very Low Psychic"),
        ],
        TraitId.POISON: lambda: [
            ("motif-packed", "Motif packed", "Poison motifs everywhere",
             cycle_pattern(("ATT", "TTA", "AAT", "WXX"), length), 70, 85, "High Resistance"),
            ("defensive-runs", "Defensive runs", "Long consistent runs",
             cycle_pattern(("TTT", "AAA"), length), 70, 85, "High Resistance"),
            ("consistent-pattern", "Consistent pattern", "Low entropy pattern",
             repeat_to("ATTATTA", length), 65, 80, "Moderate-High Resistance"),
            ("scattered-chaos", "Scattered chaos", "High entropy (vulnerable)",
             balanced_pattern(length), 20, 40, "Low Resistance"),
        ],
        TraitId.ACID: lambda: [
            ("long-g-runs", "Long G runs", "Stable G sequences",
             cycle_pattern(("GGG", "CCC"), length), 70, 85, "High Resistance"),
            ("motif-dominant", "Motif dominant", "CGG GGC patterns",
             cycle_pattern(("CGG", "GGC", "CCG", "YZZ"), length), 55, 70,
             "Moderate Resistance"),
            ("low-diversity", "Low diversity", "70% G, minimal variety",
             cycle_pattern(("G" * 7, "CAT"), length), 55, 70, "Moderate Resistance"),
            ("fragmented", "Fragmented", "High volatility (vulnerable)",
             balanced_pattern(length), 5, 20, "Low Resistance"),
        ],
        TraitId.FIRE: lambda: [
            ("extreme-g-runs", "Extreme G runs", "All G (max resistance)",
             "G" * length, 90, 100, "Very High Resistance"),
            ("motif-rich", "Motif rich", "Fire motifs in long runs",
             cycle_pattern(("GGG", "GGGG", "ZZZ"), length), 75, 90, "High Resistance"),
            ("long-runs", "Long runs", "GGGG ZZZZ patterns",
             cycle_pattern(("GGGG", "ZZZZ"), length), 60, 75, "Moderate-High Resistance"),
            ("high-diversity", "High diversity", "Mixed symbols (vulnerable)",
             balanced_pattern(length), 10, 30, "Low Resistance"),
        ],
        TraitId.COLD: lambda: [
            ("long-runs", "Long runs", "AAAA WWWW patterns",
             cycle_pattern(("AAAA", "WWWW"), length), 80, 95, "High Resistance"),
            ("motif-rich", "Motif rich", "Cold motifs",
             cycle_pattern(("AAA", "AAAA", "WWW"), length), 70, 85, "High Resistance"),
            ("extreme-a-runs", "Extreme A runs", "All A (one run, no insulation layers)",
             "A" * length, 65, 75, "Moderate-High Resistance"),
            ("high-transitions", "High transitions", "Frequent changes (vulnerable)",
             repeat_to("ATCG", length), 25, 40, "Low Resistance"),
        ],
        TraitId.PSYCHIC_RESISTANCE: lambda: [
            ("motif-rich", "Motif rich", "CGCG patterns",
             cycle_pattern(("CGCG", "GCGC", "YXYX"), length), 65, 80,
             "Moderate-High Resistance"),
            ("palindrome-shield", "Palindrome shield", "Symmetric patterns",
             cycle_pattern(PALINDROME_UNITS, length), 55, 70, "Moderate Resistance"),
            ("balanced-structure", "Balanced structure", "Even entropy",
             balanced_pattern(length), 25, 45, "Low Resistance"),
            ("extreme-chaos", "Extreme chaos", "Repeating WXYZ (vulnerable)",
             repeat_to("WXYZ", length), 5, 25, "Very Low Resistance"),
        ],
        TraitId.RADIATION: lambda: [
            ("motif-redundant", "Motif redundant", "ATCG repair motifs",
             cycle_pattern(("ATCG", "GCTA", "WXYZ"), length), 85, 100,
             "Very High Resistance"),
            ("perfect-balance", "Perfect balance", "Balanced redundancy",
             balanced_pattern(length), 85, 95, "Very High Resistance"),
            ("consistent-pattern", "Consistent pattern", "Self-correcting sequences",
             repeat_to("ATCGATCG", length), 65, 80, "High Resistance"),
            ("extreme-dominance", "Extreme dominance", "Too homogeneous (vulnerable)",
             "C" * length, 0, 10, "Very Low Resistance"),
        ],
        TraitId.AGGRESSION: lambda: [
            ("dominant-force", "Dominant force", "Overwhelming A presence",
             cycle_pattern(("A" * 9, "G"), length), 7, 9, "High Aggression"),
            ("single-minded", "Single minded", "Ultra-low entropy",
             "G" * length, 7, 8, "High Aggression"),
            ("aggressive-runs", "Aggressive runs", "Two symbols in runs of five",
             cycle_pattern(("AAAAA", "GGGGG"), length), 4, 6, "Moderate Aggression"),
            ("scattered-weak", "Scattered weak", "High diversity (timid)",
             balanced_pattern(length), 1, 2, "Very Low Aggression"),
        ],
        TraitId.CURIOSITY: lambda: [
            ("maximum-novelty", "Maximum novelty", "Five rare symbols scattered through ATC",
             cycle_pattern(RARE_SCATTER, length), 9, 10, "Very High Curiosity"),
            ("exploratory-diversity", "Exploratory diversity", "All symbols evenly",
             balanced_pattern(length), 7, 9, "High Curiosity"),
            ("pattern-variety", "Pattern variety", "Two rare symbols among motifs",
             cycle_pattern(("TAC", "X", "ACT", "W", "CTATCA"), length), 5, 7,
             "Moderate Curiosity"),
            ("boring-repetition", "Boring repetition", "Same symbol (incurious)",
             "T" * length, 1, 3, "Very Low Curiosity"),
        ],
        TraitId.LOYALTY: lambda: [
            ("perfect-repeats", "Perfect repeats", "Steady runs of five",
             cycle_pattern(("AAAAA", "TTTTT", "CCCCC", "GGGGG", "WWWWW", "XXXXX"), length),
             8, 10, "Very High Loyalty"),
            ("consistent-pattern", "Consistent pattern", "Runs of four",
             cycle_pattern(("AAAA", "TTTT", "CCCC", "GGGG"), length), 6, 8, "High Loyalty"),
            ("short-repeats", "Short repeats", "Repeating ATCG, constant changes",
             repeat_to("ATCG", length), 2, 4, "Low Loyalty"),
            ("volatile-fickle", "Volatile fickle", "Constant changes (disloyal)",
             balanced_pattern(length), 1, 2, "Very Low Loyalty"),
        ],
        TraitId.CHAOS: lambda: [
            ("overlapping-patterns", "Overlapping patterns", "Colliding runs in an even mix",
             cycle_pattern(
                 ("ZZZZZ", "ATCGWXY", "AAAAA", "TCGWXYZ", "ATCGWXYZ" * 3, "AT"), length
             ),
             8, 10, "Very High Chaos"),
            ("maximum-entropy", "Maximum entropy", "All symbols evenly",
             balanced_pattern(length), 6, 8, "High Chaos"),
            ("predictable-blocks", "Predictable blocks", "Runs of four (orderly)",
             cycle_pattern(("AAAA", "TTTT", "CCCC", "GGGG"), length), 5, 7,
             "Moderate Chaos"),
            ("boring-order", "Boring order", "Single symbol (orderly)",
             "G" * length, 1, 2, "Very Low Chaos"),
        ],
    }
    return builders[trait_id]()


def scenario_catalog(trait_id: TraitId | str, length: int | None = None) -> list[Scenario]:
    """Build the four scenarios of a trait.

    Args:
        trait_id: Trait whose slice the patterns are meant for.
        length: Pattern length; defaults to the trait's slice length.

    Returns:
        Scenarios in catalog order.
    """
    config = get_trait_config(trait_id)
    if length is None:
        length = config.length
    return [
        Scenario(
            id=row[0],
            name=row[1],
            description=row[2],
            pattern=row[3],
            expected_low=row[4],
            expected_high=row[5],
            expected_label=row[6],
        )
        for row in _trait_scenarios(config.trait_id, length)
    ]


def get_scenario(trait_id: TraitId | str, scenario_id: str) -> Scenario:
    """Look up one scenario by id.

    Raises:
        UnknownScenarioError: If the trait has no scenario with that id.
    """
    for scenario in scenario_catalog(trait_id):
        if scenario.id == scenario_id:
            return scenario
    msg = f"Unknown scenario '{scenario_id}' for trait '{TraitId(trait_id).value}'"
    raise UnknownScenarioError(msg)


def splice_pattern(genome: Genome | str, start: int, end: int, pattern: str) -> Genome:
    """Replace [start, end] with pattern, padding or truncating to fit.

    A short pattern keeps the original symbols after it; a long pattern is
    cut at the range length. Returns a new Genome.
    """
    sequence = as_sequence(genome)
    target_length = end - start + 1
    original = sequence[start : end + 1]

    if len(pattern) < target_length:
        logger.warning(
            "Pattern length %d is shorter than range %d-%d; padding with original symbols",
            len(pattern),
            start,
            end,
        )
        fitted = pattern + original[len(pattern) :]
    elif len(pattern) > target_length:
        logger.warning(
            "Pattern length %d is longer than range %d-%d; truncating",
            len(pattern),
            start,
            end,
        )
        fitted = pattern[:target_length]
    else:
        fitted = pattern

    return Genome(sequence).replace_segment(start, end, fitted)


def apply_scenario(
    genome: Genome | str,
    trait_id: TraitId | str,
    scenario: Scenario | str,
) -> Genome:
    """Splice a scenario pattern into the trait's slice of a genome.

    Args:
        genome: Source genome; left untouched.
        trait_id: Trait whose slice receives the pattern.
        scenario: A Scenario, or a scenario id from the trait's catalog.

    Returns:
        A new Genome.

    Raises:
        UnknownScenarioError: If a scenario id is not in the trait's catalog.
    """
    config = get_trait_config(trait_id)
    if isinstance(scenario, str):
        scenario = get_scenario(config.trait_id, scenario)
    return splice_pattern(genome, config.start, config.end, scenario.pattern)


def band_scale(trait_id: TraitId | str) -> int:
    """Top of the final-value scale for a trait (10 or 100)."""
    config = get_trait_config(trait_id)
    return 100 if config.category == TraitCategory.RESISTANCE else 10
