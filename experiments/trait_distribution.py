#!/usr/bin/env python3
"""Trait distribution experiments.

Interprets seeded populations of cat, alien and hybrid genomes and records
how each trait's final values are distributed, then checks every scenario
against its expected outcome band.
"""

from __future__ import annotations

import json
from collections import Counter
from pathlib import Path

from genomorph.engine.generation import generate_population
from genomorph.engine.scoring import calculate_trait
from genomorph.engine.traits import get_trait_config
from genomorph.interpretation.assembler import interpret_genome
from genomorph.model.genome import SpecimenType
from genomorph.model.traits import TraitCategory, TraitId
from genomorph.scenarios import apply_scenario, scenario_catalog

# Experiment configuration
POPULATION_SIZE = 200
SEED = 42  # For reproducibility


def trait_values(specimen_type: SpecimenType) -> dict[str, list[int]]:
    """Final value of every trait for a seeded population."""
    values: dict[str, list[int]] = {trait.value: [] for trait in TraitId}
    for genome in generate_population(POPULATION_SIZE, specimen_type, seed=SEED):
        phenotype = interpret_genome(genome, debug=True, parallel=False)
        for trait_id, breakdown in (phenotype.breakdown or {}).items():
            values[TraitId(trait_id).value].append(breakdown.final_value)
    return values


def summarize(values: list[int]) -> dict:
    if not values:
        return {"mean": 0, "min": 0, "max": 0, "histogram": {}}
    counts = Counter(values)
    return {
        "mean": round(sum(values) / len(values), 2),
        "min": min(values),
        "max": max(values),
        "histogram": {str(k): counts[k] for k in sorted(counts)},
    }


def check_scenarios() -> list[dict]:
    """Score each scenario on a neutral hybrid background."""
    background = generate_population(1, SpecimenType.HYBRID, seed=SEED)[0]
    rows = []
    for trait_id in TraitId:
        for scenario in scenario_catalog(trait_id):
            modified = apply_scenario(background, trait_id, scenario)
            result = calculate_trait(modified, trait_id, include_patterns=False)
            rows.append(
                {
                    "trait": trait_id.value,
                    "scenario": scenario.id,
                    "expected": scenario.expected_outcome,
                    "final_value": result.final_value,
                    "within_expected": scenario.expects(result.final_value),
                }
            )
    return rows


def save_results(results: dict, output_dir: Path) -> None:
    """Save experiment results to JSON files.

    Args:
        results: Dictionary of results by experiment name.
        output_dir: Directory to save results.
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    for name, data in results.items():
        filename = output_dir / f"{name}.json"
        with open(filename, "w") as f:
            json.dump(data, f, indent=2)
        print(f"Saved {name} results to {filename}")


def print_summary(distributions: dict[str, dict[str, dict]]) -> None:
    print(f"\n{'=' * 60}")
    print("TRAIT DISTRIBUTION SUMMARY (mean final value)")
    print(f"{'=' * 60}")

    header = f"{'trait':<20}" + "".join(f"{t:>10}" for t in distributions)
    print(header)
    for trait_id in TraitId:
        resistance = get_trait_config(trait_id).category == TraitCategory.RESISTANCE
        scale = "/100" if resistance else "/10"
        cells = "".join(
            f"{distributions[t][trait_id.value]['mean']:>10}" for t in distributions
        )
        print(f"{trait_id.value + scale:<20}{cells}")


def print_scenario_report(rows: list[dict]) -> None:
    print(f"\n{'=' * 60}")
    print("SCENARIO BANDS")
    print(f"{'=' * 60}")
    hits = sum(1 for row in rows if row["within_expected"])
    for row in rows:
        mark = "✓" if row["within_expected"] else "✗"
        print(
            f"  {mark} {row['trait']:<20} {row['scenario']:<24} "
            f"{row['final_value']:>4}  expected {row['expected']}"
        )
    print(f"\n{hits}/{len(rows)} scenarios within their expected band")


def main() -> None:
    """Run distribution and scenario experiments."""
    print("=" * 60)
    print("GENOMORPH TRAIT EXPERIMENTS")
    print("=" * 60)
    print("Configuration:")
    print(f"  Population Size: {POPULATION_SIZE}")
    print(f"  Seed: {SEED}")
    print(f"  Resistance scale: {TraitCategory.RESISTANCE.value} 0-100")

    distributions = {
        specimen.value: {trait: summarize(v) for trait, v in trait_values(specimen).items()}
        for specimen in SpecimenType
    }
    scenario_rows = check_scenarios()

    output_dir = Path(__file__).parent / "results"
    save_results({"trait_distributions": distributions, "scenario_bands": scenario_rows}, output_dir)

    print_summary(distributions)
    print_scenario_report(scenario_rows)

    print(f"\n{'=' * 60}")
    print("EXPERIMENTS COMPLETE")
    print(f"Results saved to {output_dir}")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()
