"""Genome alphabet and the immutable Genome value."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

GENOME_LENGTH = 1000


class Symbol(StrEnum):
    """The eight genome symbols.

    A, T, C, G form the primary ("cat") sub-alphabet; W, X, Y, Z form the
    secondary ("alien") sub-alphabet.
    """

    A = "A"
    T = "T"
    C = "C"
    G = "G"
    W = "W"
    X = "X"
    Y = "Y"
    Z = "Z"


# Declaration order, used for per-symbol count tables
ALPHABET: tuple[str, ...] = tuple(s.value for s in Symbol)

# Fixed order used to break ties between equally frequent symbols
TIE_BREAK_ORDER: tuple[str, ...] = ("A", "C", "G", "T", "W", "X", "Y", "Z")

PRIMARY_SYMBOLS = frozenset("ATCG")
SECONDARY_SYMBOLS = frozenset("WXYZ")
VALID_SYMBOLS = PRIMARY_SYMBOLS | SECONDARY_SYMBOLS


class SpecimenType(StrEnum):
    """Specimen type selector: which sub-alphabet a generated genome draws from."""

    CAT = "cat"
    ALIEN = "alien"
    HYBRID = "hybrid"


SYMBOL_SETS: dict[SpecimenType, tuple[str, ...]] = {
    SpecimenType.CAT: ("A", "T", "C", "G"),
    SpecimenType.ALIEN: ("W", "X", "Y", "Z"),
    SpecimenType.HYBRID: ("A", "T", "C", "G", "W", "X", "Y", "Z"),
}


def is_valid_symbol(symbol: str) -> bool:
    """Return True if symbol belongs to the 8-symbol alphabet."""
    return symbol in VALID_SYMBOLS


@dataclass(frozen=True, slots=True)
class Genome:
    """An immutable genome sequence.

    The value may hold an invalid sequence when supplied externally; validity
    is checked by ``genomorph.model.validation`` before interpretation.
    Edits never mutate in place: ``replace_segment`` returns a new Genome.
    """

    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)

    def __str__(self) -> str:
        return self.sequence

    def __getitem__(self, index: int | slice) -> str:
        return self.sequence[index]

    def segment(self, start: int, end: int) -> str:
        """Return the inclusive [start, end] slice of the sequence."""
        return self.sequence[start : end + 1]

    def replace_segment(self, start: int, end: int, pattern: str) -> Genome:
        """Return a new Genome with [start, end] replaced by pattern.

        The caller is responsible for matching pattern length to the range;
        see ``genomorph.scenarios.apply_scenario`` for the padding rules.
        """
        return Genome(self.sequence[:start] + pattern + self.sequence[end + 1 :])


def as_sequence(genome: Genome | str) -> str:
    """Accept either a Genome or a raw string and return the raw string."""
    if isinstance(genome, Genome):
        return genome.sequence
    return genome


def is_pure_primary(genome: Genome | str) -> bool:
    """True if the genome contains no secondary (W/X/Y/Z) symbols."""
    return not any(s in SECONDARY_SYMBOLS for s in as_sequence(genome))


def is_pure_secondary(genome: Genome | str) -> bool:
    """True if the genome contains no primary (A/T/C/G) symbols."""
    return not any(s in PRIMARY_SYMBOLS for s in as_sequence(genome))


def is_hybrid(genome: Genome | str) -> bool:
    """True if the genome mixes both sub-alphabets."""
    sequence = as_sequence(genome)
    has_primary = any(s in PRIMARY_SYMBOLS for s in sequence)
    has_secondary = any(s in SECONDARY_SYMBOLS for s in sequence)
    return has_primary and has_secondary


def classify_specimen(genome: Genome | str) -> SpecimenType:
    """Classify a genome by the sub-alphabets it uses.

    An empty sequence is reported as hybrid since it excludes neither.
    """
    if is_hybrid(genome) or not as_sequence(genome):
        return SpecimenType.HYBRID
    if is_pure_primary(genome):
        return SpecimenType.CAT
    return SpecimenType.ALIEN
