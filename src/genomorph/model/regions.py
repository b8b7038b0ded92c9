"""Static genome architecture: regions, subregions, motifs and symbol tables.

Four top-level regions partition the 1000-position genome; each region's
subregions partition the region. All tables here are read-only lookups and
are shared by every interpreter.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from genomorph.model.genome import GENOME_LENGTH
from genomorph.model.traits import TraitId


class RegionMapError(Exception):
    """Fatal error in the region map or a lookup outside the genome.

    Indicates a programming or configuration error, never a recoverable
    runtime condition.
    """

    pass


@dataclass(frozen=True)
class Subregion:
    """A named inclusive interval inside a region."""

    name: str
    start: int
    end: int
    purpose: str

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def contains(self, position: int) -> bool:
        return self.start <= position <= self.end


@dataclass(frozen=True)
class Region:
    """A top-level genome region with its subregions."""

    name: str
    start: int
    end: int
    description: str
    subregions: tuple[Subregion, ...] = field(default_factory=tuple)

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def contains(self, position: int) -> bool:
        return self.start <= position <= self.end


@dataclass(frozen=True)
class RegionLocation:
    """Result of a position lookup."""

    position: int
    region: str
    subregion: str
    purpose: str


BODY_PLAN = Subregion("Body Plan", 0, 99, "Determines legs, tails, size")
SENSORY = Subregion("Sensory", 100, 199, "Determines eyes, perception stat")
LOCOMOTION = Subregion("Locomotion", 200, 299, "Determines wings, agility stat")
DEFENSE = Subregion(
    "Defense", 300, 399, "Determines skin type, claws, fangs, endurance, colour"
)
TOXIN = Subregion("Toxin Processing", 400, 499, "Determines poison, acid resistances")
THERMAL = Subregion("Thermal Regulation", 500, 599, "Determines fire, cold resistances")
INTELLIGENCE_CORE = Subregion("Intelligence Core", 600, 699, "Determines intelligence stat")
BEHAVIORAL_DRIVERS = Subregion(
    "Behavioral Drivers", 700, 799, "Determines aggression, curiosity, loyalty, chaos"
)
PHYSICAL_POWER = Subregion("Physical Power", 800, 899, "Determines strength stat")
PSYCHIC_POTENTIAL = Subregion(
    "Psychic Potential", 900, 999, "Determines psychic stat, psychic/radiation resistances"
)

MORPHOLOGY = Region(
    "Morphology",
    0,
    399,
    "Controls physical structure and appearance",
    (BODY_PLAN, SENSORY, LOCOMOTION, DEFENSE),
)
METABOLISM = Region(
    "Metabolism",
    400,
    599,
    "Controls internal systems and resistances",
    (TOXIN, THERMAL),
)
COGNITION = Region(
    "Cognition",
    600,
    799,
    "Controls mental attributes and behavior",
    (INTELLIGENCE_CORE, BEHAVIORAL_DRIVERS),
)
POWER = Region(
    "Power",
    800,
    999,
    "Controls raw attributes",
    (PHYSICAL_POWER, PSYCHIC_POTENTIAL),
)

GENOME_REGIONS: tuple[Region, ...] = (MORPHOLOGY, METABOLISM, COGNITION, POWER)

# Motif dictionaries: short literal patterns whose presence signals a trait
CLAW_MOTIFS: tuple[str, ...] = ("ATG", "WXZ")
FANG_MOTIFS: tuple[str, ...] = ("CGT", "YXW")

TRAIT_MOTIFS: dict[TraitId, tuple[str, ...]] = {
    TraitId.STRENGTH: ("ATG", "GTA", "TAG", "WXYZ", "XYZW"),
    TraitId.AGILITY: ("AGT", "GAT", "TGA", "WYXZ", "XWZY"),
    TraitId.ENDURANCE: ("CAG", "GCA", "ACG", "YWX", "XYW"),
    TraitId.INTELLIGENCE: ("GCG", "CGC", "GCGC", "ZYZ", "YZY"),
    TraitId.PERCEPTION: ("TAC", "ACT", "CTA", "XWY", "WYX"),
    TraitId.PSYCHIC: ("CGAT", "ATCG", "YXWZ", "WZYX"),
    TraitId.POISON: ("ATT", "TTA", "AAT", "WXX", "XXW"),
    TraitId.ACID: ("CGG", "GGC", "CCG", "YZZ", "ZZY"),
    TraitId.FIRE: ("GGG", "GGGG", "ZZZ", "ZZZZ"),
    TraitId.COLD: ("AAA", "AAAA", "WWW", "WWWW"),
    TraitId.PSYCHIC_RESISTANCE: ("CGCG", "GCGC", "YXYX", "XYXY"),
    TraitId.RADIATION: ("ATCG", "GCTA", "WXYZ", "ZYXW"),
}

# Dominant symbol of the Defense subregion -> skin type
SKIN_TYPES: dict[str, str] = {
    "A": "fur",
    "T": "scales",
    "C": "chitin",
    "G": "skin",
    "W": "fur",
    "X": "scales",
    "Y": "chitin",
    "Z": "skin",
}

# Dominant symbol count in the Body Plan subregion -> size
SIZE_THRESHOLDS: tuple[tuple[float, float, str], ...] = (
    (0, 19, "tiny"),
    (20, 39, "small"),
    (40, 59, "medium"),
    (60, 79, "large"),
    (80, 100, "massive"),
)

# Direct symbol -> colour channel mapping
COLOR_VALUES: dict[str, int] = {
    "A": 0,
    "T": 64,
    "C": 192,
    "G": 255,
    "W": 0,
    "X": 64,
    "Y": 192,
    "Z": 255,
}


def motifs_for(trait_id: TraitId) -> tuple[str, ...]:
    """Motif list for a trait; behaviors have none."""
    return TRAIT_MOTIFS.get(trait_id, ())


def locate(position: int) -> RegionLocation:
    """Find the region and subregion enclosing an absolute genome position.

    Raises:
        RegionMapError: If the position lies outside every region.
    """
    for region in GENOME_REGIONS:
        if not region.contains(position):
            continue
        for subregion in region.subregions:
            if subregion.contains(position):
                return RegionLocation(
                    position=position,
                    region=region.name,
                    subregion=subregion.name,
                    purpose=subregion.purpose,
                )
        msg = f"Position {position} is inside region '{region.name}' but no subregion"
        raise RegionMapError(msg)

    msg = f"Position {position} is outside the genome range [0, {GENOME_LENGTH - 1}]"
    raise RegionMapError(msg)


def find_region(name: str) -> Region:
    """Look up a top-level region by name (case-insensitive)."""
    for region in GENOME_REGIONS:
        if region.name.lower() == name.lower():
            return region
    msg = f"Unknown region '{name}'"
    raise RegionMapError(msg)


def _check_partition(
    label: str, start: int, end: int, intervals: list[tuple[int, int, str]]
) -> None:
    expected = start
    for lo, hi, name in sorted(intervals):
        if lo != expected:
            msg = f"{label}: '{name}' starts at {lo}, expected {expected} (gap or overlap)"
            raise RegionMapError(msg)
        if hi < lo:
            msg = f"{label}: '{name}' has end {hi} before start {lo}"
            raise RegionMapError(msg)
        expected = hi + 1
    if expected != end + 1:
        msg = f"{label}: coverage ends at {expected - 1}, expected {end}"
        raise RegionMapError(msg)


def verify_region_map(
    regions: tuple[Region, ...] = GENOME_REGIONS, length: int = GENOME_LENGTH
) -> None:
    """Check that regions partition [0, length-1] and subregions partition each region.

    Raises:
        RegionMapError: On any gap, overlap or missing coverage.
    """
    _check_partition(
        "genome", 0, length - 1, [(r.start, r.end, r.name) for r in regions]
    )
    for region in regions:
        _check_partition(
            region.name,
            region.start,
            region.end,
            [(s.start, s.end, s.name) for s in region.subregions],
        )


verify_region_map()
