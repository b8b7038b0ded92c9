"""Phenotype assembler.

Validates a genome, runs the four region interpreters and merges their
contributions into a single ``Phenotype``. The interpreters share no
mutable state, so they can run on a thread pool when asked to.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from genomorph.config import get_engine_settings
from genomorph.engine.scoring import CalculationResult, GenomeInterpretationError
from genomorph.interpretation.base import RegionResult
from genomorph.interpretation.cognition import interpret_cognition
from genomorph.interpretation.metabolism import interpret_metabolism
from genomorph.interpretation.morphology import interpret_morphology
from genomorph.interpretation.power import interpret_power
from genomorph.model.genome import Genome, as_sequence
from genomorph.model.phenotype import (
    Behavior,
    Phenotype,
    PhysicalTraits,
    Resistances,
    Stats,
)
from genomorph.model.traits import TraitId
from genomorph.model.validation import validate_genome

logger = logging.getLogger(__name__)

RegionInterpreter = Callable[[str, bool, bool], RegionResult]

REGION_INTERPRETERS: tuple[tuple[str, RegionInterpreter], ...] = (
    ("Morphology", interpret_morphology),
    ("Metabolism", interpret_metabolism),
    ("Cognition", interpret_cognition),
    ("Power", interpret_power),
)


def _run_region(
    name: str, interpreter: RegionInterpreter, sequence: str, debug: bool
) -> RegionResult:
    started = time.perf_counter()
    result = interpreter(sequence, debug, debug)
    logger.debug("Interpreted %s in %.2f ms", name, (time.perf_counter() - started) * 1000)
    return result


def run_regions(
    sequence: str,
    debug: bool = False,
    parallel: bool = False,
    max_workers: int = 4,
) -> list[RegionResult]:
    """Run every region interpreter over a validated sequence.

    Results come back in region order whether or not they ran in parallel.
    """
    if not parallel:
        return [
            _run_region(name, interpreter, sequence, debug)
            for name, interpreter in REGION_INTERPRETERS
        ]

    with ThreadPoolExecutor(
        max_workers=max_workers, thread_name_prefix="region_worker"
    ) as executor:
        futures = [
            executor.submit(_run_region, name, interpreter, sequence, debug)
            for name, interpreter in REGION_INTERPRETERS
        ]
        return [future.result() for future in futures]


def assemble_phenotype(results: list[RegionResult], debug: bool = False) -> Phenotype:
    """Merge region contributions into a Phenotype."""
    physical: dict[str, Any] = {}
    stats: dict[str, int] = {}
    resistances: dict[str, int] = {}
    behavior: dict[str, int] = {}
    calculations: dict[TraitId, CalculationResult] = {}
    region_debug = []

    for result in results:
        physical.update(result.physical)
        stats.update(result.stats)
        resistances.update(result.resistances)
        behavior.update(result.behavior)
        calculations.update(result.calculations)
        region_debug.extend(result.debug)

    breakdown = None
    if debug:
        breakdown = {
            trait_id: calculations[trait_id].to_breakdown()
            for trait_id in TraitId
            if trait_id in calculations
        }

    return Phenotype(
        physical_traits=PhysicalTraits(**physical),
        stats=Stats(**stats),
        resistances=Resistances(**resistances),
        behavior=Behavior(**behavior),
        breakdown=breakdown,
        region_debug=region_debug if debug else None,
    )


def interpret_genome(
    genome: Genome | str,
    *,
    debug: bool | None = None,
    parallel: bool | None = None,
    max_workers: int | None = None,
) -> Phenotype:
    """Interpret a genome into its Phenotype.

    The call is pure: the same genome always yields an equal Phenotype and
    the input is never modified.

    Args:
        genome: Genome value or raw 1000-symbol sequence.
        debug: Attach per-trait breakdowns and region debug info.
            Defaults to ``EngineSettings.debug_breakdown``.
        parallel: Run the region interpreters on a thread pool.
            Defaults to ``EngineSettings.parallel_regions``.
        max_workers: Thread pool size. Defaults to ``EngineSettings.max_workers``.

    Returns:
        The assembled Phenotype.

    Raises:
        GenomeInterpretationError: If the genome fails validation.
    """
    settings = get_engine_settings()
    if debug is None:
        debug = settings.debug_breakdown
    if parallel is None:
        parallel = settings.parallel_regions
    if max_workers is None:
        max_workers = settings.max_workers

    validation = validate_genome(genome, report_cap=settings.validation_report_cap)
    if not validation.valid:
        logger.error(
            "Refusing to interpret invalid genome (%d defect(s))", validation.defect_count
        )
        msg = f"Cannot interpret an invalid genome: {'; '.join(validation.errors)}"
        raise GenomeInterpretationError(msg)

    sequence = as_sequence(genome)
    results = run_regions(sequence, debug=debug, parallel=parallel, max_workers=max_workers)
    return assemble_phenotype(results, debug=debug)
