"""Command-line interface for genomorph."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from genomorph import __version__
from genomorph.engine.generation import generate_genome, generate_population
from genomorph.engine.scoring import GenomeInterpretationError, calculate_trait
from genomorph.interpretation.assembler import interpret_genome
from genomorph.interpretation.normalization import Archetype, normalize
from genomorph.logging_config import configure_logging
from genomorph.model.genome import SpecimenType
from genomorph.model.traits import TraitId
from genomorph.model.validation import validate_genome
from genomorph.scenarios import UnknownScenarioError, apply_scenario, scenario_catalog

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2))


def _read_genome(parsed: argparse.Namespace) -> str:
    """Genome text from --file, stdin ('-') or the positional argument."""
    if parsed.file:
        text = Path(parsed.file).read_text()
    elif parsed.genome == "-" or parsed.genome is None:
        text = sys.stdin.read()
    else:
        text = parsed.genome
    return text.strip()


def _non_negative_int(value: str) -> int:
    count = int(value)
    if count < 0:
        msg = f"must be non-negative, got {count}"
        raise argparse.ArgumentTypeError(msg)
    return count


def _add_genome_input(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "genome",
        nargs="?",
        default=None,
        help="Genome sequence, or '-' to read it from stdin",
    )
    parser.add_argument("--file", help="Read the genome from a file")


def _cmd_generate(parsed: argparse.Namespace) -> int:
    if parsed.count == 1:
        genomes = [generate_genome(parsed.type, seed=parsed.seed)]
    else:
        genomes = generate_population(parsed.count, parsed.type, seed=parsed.seed)
    for genome in genomes:
        print(genome)
    return EXIT_OK


def _cmd_validate(parsed: argparse.Namespace) -> int:
    result = validate_genome(_read_genome(parsed))
    _emit(
        {
            "valid": result.valid,
            "length": result.length,
            "invalid_symbol_count": result.invalid_symbol_count,
            "errors": result.errors,
        }
    )
    return EXIT_OK if result.valid else EXIT_INVALID


def _cmd_interpret(parsed: argparse.Namespace) -> int:
    sequence = _read_genome(parsed)
    phenotype = interpret_genome(sequence, debug=parsed.debug, parallel=parsed.parallel)
    if parsed.normalize:
        phenotype = normalize(phenotype, parsed.normalize, genome=sequence)
    _emit(phenotype.to_dict(include_debug=parsed.debug))
    return EXIT_OK


def _cmd_explain(parsed: argparse.Namespace) -> int:
    result = calculate_trait(_read_genome(parsed), parsed.trait)
    _emit(result.to_breakdown().model_dump(mode="json"))
    return EXIT_OK


def _cmd_scenarios(parsed: argparse.Namespace) -> int:
    catalog = scenario_catalog(parsed.trait)
    if parsed.apply is None:
        _emit([scenario.to_dict() for scenario in catalog])
        return EXIT_OK

    modified = apply_scenario(_read_genome(parsed), parsed.trait, parsed.apply)
    result = calculate_trait(modified, parsed.trait, include_patterns=False)
    scenario = next(s for s in catalog if s.id == parsed.apply)
    _emit(
        {
            "scenario": scenario.to_dict(),
            "final_value": result.final_value,
            "raw_score": round(result.raw_score, 2),
            "within_expected": scenario.expects(result.final_value),
            "genome": str(modified),
        }
    )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genomorph",
        description="genomorph - genome-to-phenotype interpretation engine",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=None,
        help="Log format (default: LOG_FORMAT or text)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate = subparsers.add_parser("generate", help="Generate random genomes")
    generate.add_argument(
        "--type",
        choices=[s.value for s in SpecimenType],
        default=None,
        help="Specimen type (default: GENOMORPH_DEFAULT_SPECIMEN_TYPE or hybrid)",
    )
    generate.add_argument("--seed", type=int, default=None, help="Random seed")
    generate.add_argument(
        "--count", type=_non_negative_int, default=1, help="Number of genomes"
    )
    generate.set_defaults(handler=_cmd_generate)

    validate = subparsers.add_parser("validate", help="Check a genome's length and symbols")
    _add_genome_input(validate)
    validate.set_defaults(handler=_cmd_validate)

    interpret = subparsers.add_parser("interpret", help="Interpret a genome into a phenotype")
    _add_genome_input(interpret)
    interpret.add_argument(
        "--debug",
        action="store_true",
        help="Include trait breakdowns and region debug info (dropped by --normalize)",
    )
    interpret.add_argument(
        "--normalize",
        choices=[a.value for a in Archetype],
        default=None,
        help="Normalize the phenotype to an archetype",
    )
    interpret.add_argument(
        "--parallel",
        action="store_true",
        default=None,
        help="Run region interpreters on a thread pool",
    )
    interpret.set_defaults(handler=_cmd_interpret)

    explain = subparsers.add_parser("explain", help="Explain one trait's score")
    explain.add_argument("trait", choices=[t.value for t in TraitId])
    _add_genome_input(explain)
    explain.set_defaults(handler=_cmd_explain)

    scenarios = subparsers.add_parser("scenarios", help="List or apply trait scenarios")
    scenarios.add_argument("trait", choices=[t.value for t in TraitId])
    _add_genome_input(scenarios)
    scenarios.add_argument("--apply", metavar="SCENARIO_ID", help="Apply a scenario to a genome")
    scenarios.set_defaults(handler=_cmd_scenarios)

    return parser


def main(args: list[str] | None = None) -> int:
    """Run the genomorph CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success, 1 for an invalid genome or scenario).
    """
    parser = build_parser()
    parsed = parser.parse_args(args)

    level = None
    if parsed.log_level:
        level = logging.getLevelName(parsed.log_level.upper())
        if not isinstance(level, int):
            parser.error(f"unknown log level: {parsed.log_level}")
    configure_logging(level=level, format_type=parsed.log_format)

    try:
        return parsed.handler(parsed)
    except (GenomeInterpretationError, UnknownScenarioError) as e:
        logger.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID
    except OSError as e:
        logger.error("Could not read genome: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
