"""Phenotype record and its parts.

All models are frozen pydantic models so an assembled phenotype can be
shared freely and serialized straight to JSON. Derived copies (for example
species normalization) are produced with ``model_copy(update=...)``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from genomorph.model.traits import TraitCategory, TraitId


class PhysicalTraits(BaseModel):
    """Categorical and count-valued physical features."""

    model_config = ConfigDict(frozen=True)

    eyes: int = Field(ge=0, le=10, description="Eye count")
    legs: int = Field(ge=0, le=10, description="Leg count")
    tails: int = Field(ge=0, le=10, description="Tail count")
    wings: int = Field(ge=0, le=10, description="Wing count")
    size: str = Field(description="Size class: tiny, small, medium, large, massive")
    skin_type: str = Field(description="Skin type: fur, scales, chitin, skin")
    color: str = Field(pattern=r"^#[0-9a-f]{6}$", description="Base colour as #rrggbb")
    has_claws: bool = Field(description="Whether claw motifs are present")
    has_fangs: bool = Field(description="Whether fang motifs are present")


class Stats(BaseModel):
    """Numeric stats on the 1-10 scale (psychic may be 0 after normalization)."""

    model_config = ConfigDict(frozen=True)

    strength: int = Field(ge=1, le=10)
    agility: int = Field(ge=1, le=10)
    endurance: int = Field(ge=1, le=10)
    intelligence: int = Field(ge=1, le=10)
    perception: int = Field(ge=1, le=10)
    psychic: int = Field(ge=0, le=10)


class Resistances(BaseModel):
    """Resistances on the 0-100 scale."""

    model_config = ConfigDict(frozen=True)

    poison: int = Field(ge=0, le=100)
    acid: int = Field(ge=0, le=100)
    fire: int = Field(ge=0, le=100)
    cold: int = Field(ge=0, le=100)
    psychic: int = Field(ge=0, le=100)
    radiation: int = Field(ge=0, le=100)


class Behavior(BaseModel):
    """Behavioral scores on the 1-10 scale."""

    model_config = ConfigDict(frozen=True)

    aggression: int = Field(ge=1, le=10)
    curiosity: int = Field(ge=1, le=10)
    loyalty: int = Field(ge=1, le=10)
    chaos: int = Field(ge=1, le=10)


class PatternReport(BaseModel):
    """A detected pattern as shown in a trait breakdown."""

    model_config = ConfigDict(frozen=True)

    kind: str
    value: str
    positions: list[int] = Field(default_factory=list)
    count: int = 0


class TraitBreakdown(BaseModel):
    """Per-trait explanation: both force maps, raw score and final value."""

    model_config = ConfigDict(frozen=True)

    trait: TraitId
    category: TraitCategory
    start: int = Field(description="Absolute start of the scored slice")
    end: int = Field(description="Absolute inclusive end of the scored slice")
    segment: str
    specialization_score: float
    specialization_components: dict[str, float]
    chaos_penalty: float
    chaos_components: dict[str, float]
    raw_score: float = Field(ge=-100, le=100)
    final_value: int
    patterns: list[PatternReport] = Field(default_factory=list)


class SubregionDebug(BaseModel):
    """Symbol statistics for one subregion, used by exploration tooling."""

    model_config = ConfigDict(frozen=True)

    region: str
    subregion: str
    start: int
    end: int
    symbol_frequencies: dict[str, int]
    dominant_symbol: str
    entropy: float
    found_motifs: list[str] = Field(default_factory=list)
    repeating_patterns: list[str] = Field(default_factory=list)


class Phenotype(BaseModel):
    """The assembled interpretation of one genome.

    ``resistances`` is None only for archetypes that carry no resistance
    block. ``breakdown`` and ``region_debug`` are attached on request.
    """

    model_config = ConfigDict(frozen=True)

    physical_traits: PhysicalTraits
    stats: Stats
    resistances: Resistances | None = None
    behavior: Behavior
    breakdown: dict[TraitId, TraitBreakdown] | None = None
    region_debug: list[SubregionDebug] | None = None

    def to_dict(self, include_debug: bool = True) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, dropping absent optional blocks.

        Args:
            include_debug: Keep ``breakdown`` and ``region_debug`` when present.

        Returns:
            Plain dict suitable for ``json.dumps``.
        """
        exclude = None if include_debug else {"breakdown", "region_debug"}
        return self.model_dump(mode="json", exclude_none=True, exclude=exclude)

    def without_debug(self) -> Phenotype:
        """Copy of this phenotype with debug attachments removed."""
        return self.model_copy(update={"breakdown": None, "region_debug": None})
