"""Tests for region interpreters and phenotype assembly."""

from __future__ import annotations

import logging
import random

import pytest
from pydantic import ValidationError

from genomorph.config import get_engine_settings
from genomorph.engine.scoring import GenomeInterpretationError
from genomorph.interpretation.assembler import REGION_INTERPRETERS, interpret_genome, run_regions
from genomorph.interpretation.base import subregion_motifs
from genomorph.interpretation.morphology import appendage_count, color_for, size_for
from genomorph.model.genome import Genome
from genomorph.model.phenotype import Phenotype, Stats
from genomorph.model.regions import PHYSICAL_POWER, TOXIN
from genomorph.model.traits import TraitId


class TestMorphologyHelpers:
    """Tests for appendage, size and colour derivation."""

    def test_appendage_count(self) -> None:
        assert appendage_count("") == 0
        assert appendage_count("A") == 10
        assert appendage_count("AA") == 1

    def test_appendage_count_uses_first_ten_symbols(self) -> None:
        assert appendage_count("ATCGWXYZAT" + "A" * 40) == appendage_count("ATCGWXYZAT" + "Z" * 40)

    @pytest.mark.parametrize("seed", range(5))
    def test_appendage_count_in_range(self, seed: int) -> None:
        rng = random.Random(seed)
        segment = "".join(rng.choice("ATCGWXYZ") for _ in range(50))
        assert 0 <= appendage_count(segment) <= 10

    @pytest.mark.parametrize(
        ("count", "size"),
        [(0, "tiny"), (19, "tiny"), (20, "small"), (50, "medium"), (79, "large"), (100, "massive")],
    )
    def test_size_for(self, count: int, size: str) -> None:
        assert size_for(count) == size

    def test_color_for(self) -> None:
        assert color_for("ATC") == "#0040c0"
        assert color_for("G") == "#ff0000"


class TestInterpretGenome:
    """Tests for interpret_genome."""

    def test_uniform_genome(self, uniform_genome: Genome) -> None:
        phenotype = interpret_genome(uniform_genome)
        physical = phenotype.physical_traits
        assert physical.skin_type == "fur"
        assert physical.size == "massive"
        assert physical.color == "#000000"
        assert not physical.has_claws
        assert not physical.has_fangs
        assert phenotype.stats.strength == 9
        assert phenotype.stats.agility == 6

    def test_claws_and_fangs_from_defense_motifs(self) -> None:
        sequence = "A" * 300 + "ATGCGT" + "A" * 694
        physical = interpret_genome(sequence).physical_traits
        assert physical.has_claws
        assert physical.has_fangs

    def test_is_deterministic(self, hybrid_genome: Genome) -> None:
        assert interpret_genome(hybrid_genome) == interpret_genome(hybrid_genome)

    def test_accepts_raw_string(self, hybrid_genome: Genome) -> None:
        assert interpret_genome(hybrid_genome.sequence) == interpret_genome(hybrid_genome)

    def test_input_not_modified(self, hybrid_genome: Genome) -> None:
        before = hybrid_genome.sequence
        interpret_genome(hybrid_genome, debug=True)
        assert hybrid_genome.sequence == before

    def test_parallel_matches_sequential(self, hybrid_genome: Genome) -> None:
        sequential = interpret_genome(hybrid_genome, debug=True, parallel=False)
        parallel = interpret_genome(hybrid_genome, debug=True, parallel=True, max_workers=4)
        assert sequential == parallel

    def test_run_regions_keeps_order(self, hybrid_genome: Genome) -> None:
        results = run_regions(hybrid_genome.sequence, parallel=True, max_workers=2)
        assert [r.region for r in results] == [name for name, _ in REGION_INTERPRETERS]

    def test_all_blocks_filled(self, cat_genome: Genome) -> None:
        phenotype = interpret_genome(cat_genome)
        assert phenotype.resistances is not None
        assert 1 <= phenotype.stats.psychic <= 10
        assert 0 <= phenotype.resistances.radiation <= 100
        assert 1 <= phenotype.behavior.chaos <= 10

    def test_invalid_genome_raises(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="genomorph"):
            with pytest.raises(GenomeInterpretationError, match="Invalid symbol 'B'"):
                interpret_genome("B" + "A" * 999)
        assert "Refusing to interpret" in caplog.text

    def test_short_genome_raises(self) -> None:
        with pytest.raises(GenomeInterpretationError, match="got 999"):
            interpret_genome("A" * 999)


class TestDebugBreakdown:
    """Tests for per-trait breakdowns and region debug info."""

    def test_no_debug_by_default(self, hybrid_genome: Genome) -> None:
        phenotype = interpret_genome(hybrid_genome)
        assert phenotype.breakdown is None
        assert phenotype.region_debug is None
        assert "breakdown" not in phenotype.to_dict()

    def test_breakdown_covers_all_traits(self, hybrid_genome: Genome) -> None:
        phenotype = interpret_genome(hybrid_genome, debug=True)
        assert phenotype.breakdown is not None
        assert list(phenotype.breakdown) == list(TraitId)

    def test_breakdown_matches_phenotype(self, hybrid_genome: Genome) -> None:
        phenotype = interpret_genome(hybrid_genome, debug=True)
        assert phenotype.breakdown is not None
        assert phenotype.breakdown[TraitId.STRENGTH].final_value == phenotype.stats.strength
        assert phenotype.resistances is not None
        assert (
            phenotype.breakdown[TraitId.PSYCHIC_RESISTANCE].final_value
            == phenotype.resistances.psychic
        )
        assert phenotype.breakdown[TraitId.LOYALTY].final_value == phenotype.behavior.loyalty

    def test_debug_does_not_change_values(self, hybrid_genome: Genome) -> None:
        plain = interpret_genome(hybrid_genome)
        debug = interpret_genome(hybrid_genome, debug=True)
        assert debug.without_debug() == plain

    def test_region_debug_lists_every_subregion(self, hybrid_genome: Genome) -> None:
        phenotype = interpret_genome(hybrid_genome, debug=True)
        assert phenotype.region_debug is not None
        assert len(phenotype.region_debug) == 10
        assert [d.start for d in phenotype.region_debug] == sorted(
            d.start for d in phenotype.region_debug
        )

    def test_debug_from_settings(
        self, hybrid_genome: Genome, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("GENOMORPH_DEBUG_BREAKDOWN", "true")
        get_engine_settings.cache_clear()
        assert interpret_genome(hybrid_genome).breakdown is not None

    def test_to_dict_is_json_ready(self, hybrid_genome: Genome) -> None:
        data = interpret_genome(hybrid_genome, debug=True).to_dict()
        assert set(data) == {
            "physical_traits",
            "stats",
            "resistances",
            "behavior",
            "breakdown",
            "region_debug",
        }
        assert "strength" in data["breakdown"]

    def test_subregion_motifs(self) -> None:
        assert "ATG" in subregion_motifs(PHYSICAL_POWER)
        toxin = subregion_motifs(TOXIN)
        assert "ATT" in toxin
        assert "CGG" in toxin


class TestPhenotypeModel:
    """Tests for phenotype value bounds."""

    def test_stats_bounds_enforced(self) -> None:
        with pytest.raises(ValidationError):
            Stats(strength=11, agility=5, endurance=5, intelligence=5, perception=5, psychic=5)

    def test_phenotype_is_frozen(self, hybrid_genome: Genome) -> None:
        phenotype = interpret_genome(hybrid_genome)
        with pytest.raises(ValidationError):
            phenotype.stats = phenotype.stats  # type: ignore[misc]
        assert isinstance(phenotype, Phenotype)
