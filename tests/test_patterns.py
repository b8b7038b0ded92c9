"""Tests for pattern detection primitives (genomorph.engine.patterns)."""

from __future__ import annotations

import math

import pytest

from genomorph.engine import patterns


class TestRounding:
    """Tests for round_half_up and clamp."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(2.5, 3), (3.5, 4), (2.49, 2), (0.5, 1), (-2.5, -2), (7.0, 7)],
    )
    def test_halves_round_up(self, value: float, expected: int) -> None:
        assert patterns.round_half_up(value) == expected

    def test_clamp(self) -> None:
        assert patterns.clamp(-5, 0, 100) == 0
        assert patterns.clamp(150, 0, 100) == 100
        assert patterns.clamp(42.5, 0, 100) == 42.5


class TestCounting:
    """Tests for symbol counting and dominance."""

    def test_extract_region_is_inclusive(self) -> None:
        assert patterns.extract_region("ATCGWXYZ", 2, 4) == "CGW"

    def test_count_symbols_includes_zeros(self) -> None:
        counts = patterns.count_symbols("AAT")
        assert counts["A"] == 2
        assert counts["T"] == 1
        assert counts["Z"] == 0
        assert len(counts) == 8

    def test_dominant_symbol(self) -> None:
        assert patterns.find_dominant_symbol("WZZ") == "Z"

    def test_dominant_tie_breaks_in_fixed_order(self) -> None:
        """Ties go to the earliest of A, C, G, T, W, X, Y, Z."""
        assert patterns.find_dominant_symbol("TTAA") == "A"
        assert patterns.find_dominant_symbol("GGCC") == "C"
        assert patterns.find_dominant_symbol("TTGG") == "G"

    def test_dominant_of_empty_segment(self) -> None:
        assert patterns.find_dominant_symbol("") == "A"
        assert patterns.dominant_percentage("") == 0.0

    def test_dominant_percentage(self) -> None:
        assert patterns.dominant_percentage("AAAT") == 75.0
        assert patterns.dominant_count("AAAT") == 3

    def test_primary_and_secondary_counts(self) -> None:
        assert patterns.count_primary("ATWX") == 2
        assert patterns.count_secondary("ATWX") == 2
        assert patterns.symbols_present("AAW") == 2

    def test_count_rare_symbols(self) -> None:
        assert patterns.count_rare_symbols("AAAAAT", 5) == 1


class TestEntropy:
    """Tests for Shannon entropy."""

    def test_homogeneous_is_zero(self) -> None:
        assert patterns.calculate_entropy("AAAA") == 0.0

    def test_even_distribution_is_three(self) -> None:
        assert patterns.calculate_entropy("ATCGWXYZ") == pytest.approx(3.0)

    def test_two_symbols(self) -> None:
        assert patterns.calculate_entropy("ATAT") == pytest.approx(1.0)

    def test_empty_segment(self) -> None:
        assert patterns.calculate_entropy("") == 0.0


class TestRunsAndMotifs:
    """Tests for runs, motifs and tandem repeats."""

    def test_find_symbol_runs(self) -> None:
        assert patterns.find_symbol_runs("AAATTCCCC") == [("A", 0, 3), ("C", 5, 4)]

    def test_runs_respect_min_length(self) -> None:
        assert patterns.count_symbol_runs("AAATTCCCC", min_length=2) == 3
        assert patterns.count_symbol_runs("ATCG") == 0

    def test_find_motifs_counts_overlaps(self) -> None:
        assert patterns.find_motifs("AAAA", ["AA"]) == [("AA", 0), ("AA", 1), ("AA", 2)]

    def test_find_motifs_grouped_by_motif(self) -> None:
        matches = patterns.find_motifs("ATGATG", ["ATG", "TGA"])
        assert matches == [("ATG", 0), ("ATG", 3), ("TGA", 1)]

    def test_count_unique_motifs(self) -> None:
        assert patterns.count_unique_motifs("ATGCC", ["ATG", "CC", "GGG"]) == 2

    def test_detect_tandem_repeats(self) -> None:
        assert patterns.detect_tandem_repeats("ATAT") == ["AT"]
        assert patterns.detect_tandem_repeats("ATCG") == []


class TestAlternationAndPalindromes:
    """Tests for periodic repetition and palindromes."""

    def test_alternation_found(self) -> None:
        assert patterns.find_alternations("ATATAT") == ("AT", 0, 6)
        assert patterns.count_alternations("ATATAT") == 6

    def test_unit_must_repeat(self) -> None:
        assert patterns.find_alternations("ATCG") == ("", -1, 0)
        assert patterns.count_alternations("ATCG") == 0

    def test_homogeneous_counts_as_alternation(self) -> None:
        assert patterns.find_alternations("AAAA") == ("AA", 0, 4)

    def test_locate_palindromes(self) -> None:
        assert patterns.locate_palindromes("ATTA") == {"ATTA": [0]}
        assert patterns.locate_palindromes("AAAAA") == {"AAAA": [0, 1], "AAAAA": [0]}

    def test_find_palindromes_none(self) -> None:
        assert patterns.find_palindromes("ATCGWX") == []


class TestDispersion:
    """Tests for balance, variance, transitions and fragmentation."""

    def test_perfect_balance(self) -> None:
        assert patterns.calculate_symbol_balance("ATCG") == 20

    def test_skewed_balance(self) -> None:
        assert patterns.calculate_symbol_balance("AAAT") == 0

    def test_balance_of_empty(self) -> None:
        assert patterns.calculate_symbol_balance("") == 0

    def test_frequency_variance(self) -> None:
        assert patterns.calculate_frequency_variance("ATCGWXYZ") == 0.0
        assert patterns.calculate_frequency_variance("A" * 8) == pytest.approx(7.0)
        assert patterns.calculate_standard_deviation("A" * 8) == pytest.approx(math.sqrt(7))

    def test_transitions(self) -> None:
        assert patterns.count_symbol_transitions("AATTA") == 2
        assert patterns.count_symbol_transitions("") == 0

    def test_fragmentation(self) -> None:
        assert patterns.measure_fragmentation("WWAAWXAW", "WXYZ") == 3

    def test_overlapping_patterns(self) -> None:
        assert patterns.find_overlapping_patterns("AAAA") == 1
        assert patterns.find_overlapping_patterns("ATCG") == 0


class TestColor:
    """Tests for rgb_to_hex."""

    def test_lowercase_hex(self) -> None:
        assert patterns.rgb_to_hex(255, 0, 128) == "#ff0080"

    def test_channels_clamped_and_rounded(self) -> None:
        assert patterns.rgb_to_hex(300, -5, 15.5) == "#ff0010"
