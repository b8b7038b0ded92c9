"""Pattern detection primitives.

Every function here is a pure function of its string arguments. They are
shared by all trait scorers and region interpreters and hold no state.
Segments are expected to contain only alphabet symbols; unknown symbols
are ignored by the per-symbol counters.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from genomorph.model.genome import (
    ALPHABET,
    PRIMARY_SYMBOLS,
    SECONDARY_SYMBOLS,
    TIE_BREAK_ORDER,
    Genome,
    as_sequence,
)

MAX_PALINDROME_LENGTH = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def extract_region(genome: Genome | str, start: int, end: int) -> str:
    """Return the inclusive [start, end] slice; length is end - start + 1."""
    return as_sequence(genome)[start : end + 1]


def count_symbols(segment: str) -> dict[str, int]:
    """Occurrence count for each of the 8 alphabet symbols (zeros included)."""
    counts = dict.fromkeys(ALPHABET, 0)
    for symbol in segment:
        if symbol in counts:
            counts[symbol] += 1
    return counts


def find_dominant_symbol(segment: str) -> str:
    """Most frequent symbol; ties go to the earliest in A, C, G, T, W, X, Y, Z.

    An empty segment reports "A".
    """
    counts = count_symbols(segment)
    dominant = TIE_BREAK_ORDER[0]
    best = 0
    for symbol in TIE_BREAK_ORDER:
        if counts[symbol] > best:
            best = counts[symbol]
            dominant = symbol
    return dominant


def dominant_count(segment: str) -> int:
    """Occurrence count of the dominant symbol."""
    return count_symbols(segment)[find_dominant_symbol(segment)]


def dominant_percentage(segment: str) -> float:
    """Share of the dominant symbol in percent (0 for an empty segment)."""
    if not segment:
        return 0.0
    return dominant_count(segment) / len(segment) * 100


def calculate_entropy(segment: str) -> float:
    """Shannon entropy (base 2) of the symbol distribution.

    Ranges from 0 for a homogeneous segment to 3 for a perfectly even
    distribution over all 8 symbols.
    """
    if not segment:
        return 0.0
    length = len(segment)
    entropy = 0.0
    for count in count_symbols(segment).values():
        if count > 0:
            p = count / length
            entropy -= p * math.log2(p)
    return entropy


def find_symbol_runs(segment: str, min_length: int = 3) -> list[tuple[str, int, int]]:
    """Maximal single-symbol runs of at least min_length.

    Returns:
        List of (symbol, start, length) in segment order.
    """
    runs: list[tuple[str, int, int]] = []
    if not segment:
        return runs

    start = 0
    for i in range(1, len(segment) + 1):
        if i == len(segment) or segment[i] != segment[start]:
            length = i - start
            if length >= min_length:
                runs.append((segment[start], start, length))
            start = i
    return runs


def count_symbol_runs(segment: str, min_length: int = 3) -> int:
    """Number of maximal single-symbol runs of at least min_length."""
    return len(find_symbol_runs(segment, min_length))


def find_motifs(segment: str, motifs: Iterable[str]) -> list[tuple[str, int]]:
    """Every occurrence of every motif, overlaps included.

    Returns:
        List of (motif, position), grouped by motif in the given order.
    """
    matches: list[tuple[str, int]] = []
    for motif in motifs:
        if not motif:
            continue
        position = segment.find(motif)
        while position != -1:
            matches.append((motif, position))
            position = segment.find(motif, position + 1)
    return matches


def count_unique_motifs(segment: str, motifs: Iterable[str]) -> int:
    """Number of distinct motifs that occur at least once."""
    return sum(1 for motif in set(motifs) if motif and motif in segment)


def detect_tandem_repeats(segment: str, min_length: int = 2, max_length: int = 5) -> list[str]:
    """Distinct units that appear twice back to back (direct duplication).

    Returns:
        Units in first-found order, shorter units first.
    """
    repeats: dict[str, None] = {}
    for unit_length in range(min_length, max_length + 1):
        for i in range(len(segment) - unit_length * 2 + 1):
            unit = segment[i : i + unit_length]
            if unit == segment[i + unit_length : i + unit_length * 2]:
                repeats.setdefault(unit, None)
    return list(repeats)


def count_rare_symbols(segment: str, threshold: int = 5) -> int:
    """Number of symbols that occur at least once but fewer than threshold times."""
    return sum(1 for count in count_symbols(segment).values() if 0 < count < threshold)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Lowercase ``#rrggbb``; channels are rounded and clamped to 0-255."""

    def channel(value: float) -> str:
        return f"{int(clamp(round_half_up(value), 0, 255)):02x}"

    return f"#{channel(r)}{channel(g)}{channel(b)}"


def find_alternations(segment: str) -> tuple[str, int, int]:
    """Longest periodic repetition of a 2-6 symbol unit.

    Only units repeated at least twice count.

    Returns:
        (unit, start, length) of the longest repetition; ("", -1, 0) if none.
    """
    best = ("", -1, 0)
    for unit_length in range(2, 7):
        for i in range(len(segment) - unit_length * 2 + 1):
            unit = segment[i : i + unit_length]
            length = unit_length
            pos = i + unit_length
            while segment[pos : pos + unit_length] == unit:
                length += unit_length
                pos += unit_length
            if length >= unit_length * 2 and length > best[2]:
                best = (unit, i, length)
    return best


def count_alternations(segment: str) -> int:
    """Length of the longest periodic repetition (0 when nothing repeats)."""
    return find_alternations(segment)[2]


def locate_palindromes(
    segment: str, min_length: int = 4, max_length: int = MAX_PALINDROME_LENGTH
) -> dict[str, list[int]]:
    """Palindromic substrings with their start positions.

    Lengths are searched from min_length up to min(max_length, len(segment)).
    """
    found: dict[str, list[int]] = {}
    for length in range(min_length, min(max_length, len(segment)) + 1):
        for i in range(len(segment) - length + 1):
            candidate = segment[i : i + length]
            if candidate == candidate[::-1]:
                found.setdefault(candidate, []).append(i)
    return found


def find_palindromes(segment: str, min_length: int = 4) -> list[str]:
    """Distinct palindromic substrings of length min_length to 10."""
    return list(locate_palindromes(segment, min_length))


def calculate_symbol_balance(segment: str) -> int:
    """Evenness of the symbols present: 20 for perfect balance, 0 when skewed.

    Only symbols that actually occur take part in the dispersion.
    """
    if not segment:
        return 0
    present = [count for count in count_symbols(segment).values() if count > 0]
    if not present:
        return 0
    mean = len(segment) / len(present)
    variance = sum((count - mean) ** 2 for count in present) / len(present)
    normalized = math.sqrt(variance) / len(segment)
    return round_half_up(max(0.0, 20 - normalized * 100))


def count_symbol_transitions(segment: str) -> int:
    """Number of adjacent positions holding different symbols."""
    return sum(1 for a, b in zip(segment, segment[1:]) if a != b)


def measure_fragmentation(segment: str, target_symbols: Iterable[str]) -> int:
    """Number of separate blocks made of target symbols."""
    targets = set(target_symbols)
    fragments = 0
    inside = False
    for symbol in segment:
        is_target = symbol in targets
        if is_target and not inside:
            fragments += 1
        inside = is_target
    return fragments


def find_overlapping_patterns(segment: str) -> int:
    """Count self-overlapping occurrences of 3-6 symbol patterns.

    For each pattern occurrence at i and each offset 1 <= d < len(pattern),
    an overlap is counted when the same pattern also starts at i + d.
    """
    n = len(segment)
    overlaps = 0
    for length in range(3, 7):
        for i in range(n - length + 1):
            pattern = segment[i : i + length]
            for offset in range(1, length):
                if i + offset + length > n:
                    break
                if segment[i + offset : i + offset + length] == pattern:
                    overlaps += 1
    return overlaps


def count_primary(segment: str) -> int:
    """Number of primary (A/T/C/G) symbols."""
    return sum(1 for symbol in segment if symbol in PRIMARY_SYMBOLS)


def count_secondary(segment: str) -> int:
    """Number of secondary (W/X/Y/Z) symbols."""
    return sum(1 for symbol in segment if symbol in SECONDARY_SYMBOLS)


def symbols_present(segment: str) -> int:
    return sum(1 for count in count_symbols(segment).values() if count > 0)


def calculate_frequency_variance(segment: str) -> float:
    """Population variance of the 8 per-symbol counts (absent symbols count as 0)."""
    if not segment:
        return 0.0
    counts = list(count_symbols(segment).values())
    mean = len(segment) / len(counts)
    return sum((count - mean) ** 2 for count in counts) / len(counts)


def calculate_standard_deviation(segment: str) -> float:
    return math.sqrt(calculate_frequency_variance(segment))
