"""Tests for species normalization (genomorph.interpretation.normalization)."""

from __future__ import annotations

import json

import pytest

from genomorph.engine.generation import generate_population
from genomorph.interpretation.assembler import interpret_genome
from genomorph.interpretation.normalization import (
    Archetype,
    map_range,
    map_resistance_range,
    normalize,
)
from genomorph.model.genome import Genome
from genomorph.model.phenotype import Phenotype


@pytest.fixture
def phenotypes() -> list[tuple[Genome, Phenotype]]:
    """Raw phenotypes for a small mixed population."""
    genomes = generate_population(4, "hybrid", seed=77) + generate_population(2, "cat", seed=78)
    return [(genome, interpret_genome(genome)) for genome in genomes]


class TestRangeMapping:
    """Tests for map_range and map_resistance_range."""

    def test_map_range_endpoints(self) -> None:
        assert map_range(1, 3, 7) == 3
        assert map_range(10, 3, 7) == 7

    def test_map_range_rounds_half_up(self) -> None:
        assert map_range(5, 3, 7) == 5
        assert map_range(2, 0, 9) == 1

    def test_map_resistance_range(self) -> None:
        assert map_resistance_range(50, 30, 90) == 60
        assert map_resistance_range(0, 50, 100) == 50
        assert map_resistance_range(100, 40, 100) == 100


class TestTerrestrial:
    """Tests for the terrestrial archetype."""

    def test_canonical_body(self, phenotypes: list[tuple[Genome, Phenotype]]) -> None:
        for _, raw in phenotypes:
            result = normalize(raw, Archetype.TERRESTRIAL)
            physical = result.physical_traits
            assert (physical.eyes, physical.legs, physical.tails, physical.wings) == (2, 4, 1, 0)
            assert physical.skin_type == "fur"
            assert physical.has_claws
            assert physical.has_fangs
            assert result.stats.psychic == 0
            assert result.resistances is None

    def test_stat_ranges(self, phenotypes: list[tuple[Genome, Phenotype]]) -> None:
        for _, raw in phenotypes:
            stats = normalize(raw, "terrestrial").stats
            assert 3 <= stats.strength <= 7
            assert 6 <= stats.agility <= 10
            assert 4 <= stats.endurance <= 8
            assert 5 <= stats.intelligence <= 9
            assert 7 <= stats.perception <= 10

    def test_behavior_ranges(self, phenotypes: list[tuple[Genome, Phenotype]]) -> None:
        for _, raw in phenotypes:
            behavior = normalize(raw, "terrestrial").behavior
            assert 2 <= behavior.aggression <= 8
            assert 7 <= behavior.curiosity <= 10
            assert 3 <= behavior.loyalty <= 9
            assert 5 <= behavior.chaos <= 9

    def test_keeps_size_and_color(self, phenotypes: list[tuple[Genome, Phenotype]]) -> None:
        _, raw = phenotypes[0]
        result = normalize(raw, "terrestrial")
        assert result.physical_traits.size == raw.physical_traits.size
        assert result.physical_traits.color == raw.physical_traits.color

    def test_input_untouched(self, phenotypes: list[tuple[Genome, Phenotype]]) -> None:
        _, raw = phenotypes[0]
        snapshot = raw.model_dump()
        normalize(raw, "terrestrial")
        assert raw.model_dump() == snapshot


class TestXenomorph:
    """Tests for the xenomorph archetype."""

    def test_never_furred_and_always_winged(
        self, phenotypes: list[tuple[Genome, Phenotype]]
    ) -> None:
        for genome, raw in phenotypes:
            result = normalize(raw, Archetype.XENOMORPH, genome=genome)
            assert result.physical_traits.wings >= 1
            assert result.physical_traits.skin_type != "fur"
            assert result.stats.psychic >= 3
            assert result.stats.agility == raw.stats.agility
            assert result.behavior.loyalty == raw.behavior.loyalty

    def test_resistance_ranges(self, phenotypes: list[tuple[Genome, Phenotype]]) -> None:
        for genome, raw in phenotypes:
            resistances = normalize(raw, "xenomorph", genome=genome).resistances
            assert resistances is not None
            assert raw.resistances is not None
            assert 30 <= resistances.poison <= 90
            assert 30 <= resistances.acid <= 90
            assert 40 <= resistances.psychic <= 100
            assert 50 <= resistances.radiation <= 100
            assert resistances.fire == raw.resistances.fire

    @pytest.mark.parametrize(
        ("first_symbol", "skin_type"),
        [("W", "scales"), ("A", "scales"), ("X", "chitin"), ("T", "chitin"), ("C", "skin")],
    )
    def test_fur_replacement_follows_first_symbol(self, first_symbol: str, skin_type: str) -> None:
        # Defense is all A, so the raw skin type is fur
        genome = Genome(first_symbol + "A" * 999)
        raw = interpret_genome(genome)
        assert raw.physical_traits.skin_type == "fur"
        result = normalize(raw, "xenomorph", genome=genome)
        assert result.physical_traits.skin_type == skin_type

    def test_fur_without_genome_becomes_scales(self, uniform_genome: Genome) -> None:
        raw = interpret_genome(uniform_genome)
        assert normalize(raw, "xenomorph").physical_traits.skin_type == "scales"

    def test_non_fur_skin_kept(self) -> None:
        genome = Genome("A" * 300 + "C" * 100 + "A" * 600)
        raw = interpret_genome(genome)
        assert raw.physical_traits.skin_type == "chitin"
        assert normalize(raw, "xenomorph", genome=genome).physical_traits.skin_type == "chitin"


class TestNormalize:
    """Tests for the normalize entry point."""

    def test_unknown_archetype(self, uniform_genome: Genome) -> None:
        raw = interpret_genome(uniform_genome)
        with pytest.raises(ValueError):
            normalize(raw, "aquatic")

    @pytest.mark.parametrize("archetype", ["terrestrial", "xenomorph"])
    def test_debug_attachments_dropped(self, hybrid_genome: Genome, archetype: str) -> None:
        raw = interpret_genome(hybrid_genome, debug=True)
        assert raw.breakdown is not None
        data = normalize(raw, archetype, hybrid_genome).to_dict()
        assert "breakdown" not in data
        assert "region_debug" not in data

    def test_terrestrial_output_has_no_resistance_scores(self, hybrid_genome: Genome) -> None:
        raw = interpret_genome(hybrid_genome, debug=True)
        data = normalize(raw, "terrestrial", hybrid_genome).to_dict()
        assert "resistances" not in data
        assert data["stats"]["psychic"] == 0
        assert "poison" not in json.dumps(data)
        assert raw.breakdown is not None
