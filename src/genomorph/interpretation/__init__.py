"""Region interpreters, phenotype assembly and species normalization."""

from genomorph.interpretation.assembler import (
    REGION_INTERPRETERS,
    assemble_phenotype,
    interpret_genome,
    run_regions,
)
from genomorph.interpretation.base import RegionResult
from genomorph.interpretation.cognition import interpret_cognition
from genomorph.interpretation.metabolism import interpret_metabolism
from genomorph.interpretation.morphology import (
    appendage_count,
    color_for,
    interpret_morphology,
    size_for,
)
from genomorph.interpretation.normalization import (
    Archetype,
    map_range,
    map_resistance_range,
    normalize,
)
from genomorph.interpretation.power import interpret_power

__all__ = [
    "REGION_INTERPRETERS",
    "Archetype",
    "RegionResult",
    "appendage_count",
    "assemble_phenotype",
    "color_for",
    "interpret_cognition",
    "interpret_genome",
    "interpret_metabolism",
    "interpret_morphology",
    "interpret_power",
    "map_range",
    "map_resistance_range",
    "normalize",
    "run_regions",
    "size_for",
]
