"""Domain model: Genome, region map, trait ids, Phenotype, validation."""

from genomorph.model.genome import (
    GENOME_LENGTH,
    Genome,
    SpecimenType,
    Symbol,
    classify_specimen,
    is_hybrid,
    is_pure_primary,
    is_pure_secondary,
    is_valid_symbol,
)
from genomorph.model.phenotype import (
    Behavior,
    PatternReport,
    Phenotype,
    PhysicalTraits,
    Resistances,
    Stats,
    SubregionDebug,
    TraitBreakdown,
)
from genomorph.model.regions import (
    GENOME_REGIONS,
    Region,
    RegionLocation,
    RegionMapError,
    Subregion,
    locate,
    motifs_for,
    verify_region_map,
)
from genomorph.model.traits import PatternKind, TraitCategory, TraitId
from genomorph.model.validation import (
    GenomeValidationError,
    IssueKind,
    ValidationIssue,
    ValidationResult,
    ensure_valid,
    validate_genome,
)

__all__ = [
    "GENOME_LENGTH",
    "GENOME_REGIONS",
    "Behavior",
    "Genome",
    "GenomeValidationError",
    "IssueKind",
    "PatternKind",
    "PatternReport",
    "Phenotype",
    "PhysicalTraits",
    "Region",
    "RegionLocation",
    "RegionMapError",
    "Resistances",
    "SpecimenType",
    "Stats",
    "Subregion",
    "SubregionDebug",
    "Symbol",
    "TraitBreakdown",
    "TraitCategory",
    "TraitId",
    "ValidationIssue",
    "ValidationResult",
    "classify_specimen",
    "ensure_valid",
    "is_hybrid",
    "is_pure_primary",
    "is_pure_secondary",
    "is_valid_symbol",
    "locate",
    "motifs_for",
    "validate_genome",
    "verify_region_map",
]
