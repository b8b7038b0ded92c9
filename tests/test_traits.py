"""Tests for the trait registry (genomorph.engine.traits)."""

from __future__ import annotations

import pytest

from genomorph.engine.traits import TRAIT_CONFIGS, SegmentAnalysis, get_trait_config
from genomorph.model.regions import GENOME_REGIONS, locate
from genomorph.model.traits import TraitCategory, TraitId

STAT_TRAITS = {"strength", "agility", "endurance", "intelligence", "perception", "psychic"}
RESISTANCE_TRAITS = {"poison", "acid", "fire", "cold", "psychic_resistance", "radiation"}
BEHAVIOR_TRAITS = {"aggression", "curiosity", "loyalty", "chaos"}


class TestRegistry:
    """Tests for TRAIT_CONFIGS completeness and consistency."""

    def test_all_sixteen_traits_registered(self) -> None:
        assert len(TRAIT_CONFIGS) == 16
        assert set(TRAIT_CONFIGS) == set(TraitId)

    def test_categories(self) -> None:
        by_category: dict[TraitCategory, set[str]] = {}
        for trait_id, config in TRAIT_CONFIGS.items():
            by_category.setdefault(config.category, set()).add(trait_id.value)
        assert by_category[TraitCategory.STAT] == STAT_TRAITS
        assert by_category[TraitCategory.RESISTANCE] == RESISTANCE_TRAITS
        assert by_category[TraitCategory.BEHAVIOR] == BEHAVIOR_TRAITS

    @pytest.mark.parametrize("trait_id", list(TraitId))
    def test_slice_lies_inside_named_subregion(self, trait_id: TraitId) -> None:
        config = get_trait_config(trait_id)
        assert locate(config.start).subregion == config.subregion
        assert locate(config.end).subregion == config.subregion

    @pytest.mark.parametrize(
        ("trait_id", "start", "end"),
        [
            (TraitId.STRENGTH, 800, 899),
            (TraitId.AGILITY, 200, 299),
            (TraitId.POISON, 400, 449),
            (TraitId.RADIATION, 950, 999),
            (TraitId.LOYALTY, 700, 749),
            (TraitId.CHAOS, 750, 799),
        ],
    )
    def test_slices(self, trait_id: TraitId, start: int, end: int) -> None:
        config = get_trait_config(trait_id)
        assert (config.start, config.end) == (start, end)

    def test_every_config_has_both_forces(self) -> None:
        for config in TRAIT_CONFIGS.values():
            assert len(config.specialization) == 3 or config.trait_id == TraitId.STRENGTH
            assert len(config.chaos) == 3
            assert all(c.cap > 0 and c.formula for c in config.specialization + config.chaos)

    def test_subregions_are_known(self) -> None:
        names = {sub.name for region in GENOME_REGIONS for sub in region.subregions}
        assert {config.subregion for config in TRAIT_CONFIGS.values()} <= names

    def test_lookup_by_string(self) -> None:
        assert get_trait_config("fire").trait_id == TraitId.FIRE

    def test_unknown_trait(self) -> None:
        with pytest.raises(ValueError):
            get_trait_config("charisma")

    def test_behavior_traits_have_no_motifs(self) -> None:
        for trait_id in (TraitId.AGGRESSION, TraitId.CURIOSITY, TraitId.LOYALTY, TraitId.CHAOS):
            assert get_trait_config(trait_id).motifs == ()


class TestSegmentAnalysis:
    """Tests for shared per-segment measurements."""

    def test_measurements(self) -> None:
        analysis = SegmentAnalysis("AAAATTWW", ("AA",))
        assert analysis.dominant == "A"
        assert analysis.dominant_count == 4
        assert analysis.dominant_percentage == 50.0
        assert analysis.transitions == 2
        assert analysis.primary == 6
        assert analysis.secondary == 2
        assert analysis.present == 3
        assert analysis.runs(3) == 1
        assert len(analysis.motif_matches) == 3
        assert analysis.repeated_motifs == 1

    def test_empty_segment_length(self) -> None:
        assert SegmentAnalysis("").length == 1
