"""Profile interpret_genome() to identify performance bottlenecks."""

import cProfile
import pstats
import time
from io import StringIO

from genomorph.engine.generation import generate_population
from genomorph.interpretation.assembler import interpret_genome
from genomorph.model.genome import Genome

SEED = 42
POPULATION = 50


def measure_rate(genomes: list[Genome], debug: bool, parallel: bool) -> float:
    """Interpretations per second over a fixed population."""
    start_time = time.perf_counter()
    for genome in genomes:
        interpret_genome(genome, debug=debug, parallel=parallel)
    elapsed = time.perf_counter() - start_time
    return len(genomes) / elapsed if elapsed > 0 else 0


def profile_interpretation(genomes: list[Genome], debug: bool) -> str:
    """Profile interpret_genome and return profiling results."""
    profiler = cProfile.Profile()

    profiler.enable()
    for genome in genomes:
        interpret_genome(genome, debug=debug, parallel=False)
    profiler.disable()

    stats_stream = StringIO()
    stats = pstats.Stats(profiler, stream=stats_stream)
    stats.sort_stats("cumulative")
    stats.print_stats(30)

    return stats_stream.getvalue()


def main():
    print("=" * 60)
    print("Performance Profiling: interpret_genome()")
    print("=" * 60)

    genomes = generate_population(POPULATION, "hybrid", seed=SEED)
    print(f"\nPopulation: {len(genomes)} hybrid genomes (seed={SEED})")

    # Warm-up
    measure_rate(genomes[:5], debug=False, parallel=False)

    print("\n--- Sequential, no debug ---")
    rate_plain = measure_rate(genomes, debug=False, parallel=False)
    print(f"Rate: {rate_plain:.1f} genomes/sec")

    print("\n--- Sequential, debug breakdown ---")
    rate_debug = measure_rate(genomes, debug=True, parallel=False)
    print(f"Rate: {rate_debug:.1f} genomes/sec")

    print("\n--- Parallel regions, debug breakdown ---")
    rate_parallel = measure_rate(genomes, debug=True, parallel=True)
    print(f"Rate: {rate_parallel:.1f} genomes/sec")

    print("\n--- Profiling Breakdown (debug) ---")
    print(profile_interpretation(genomes, debug=True))

    print("=" * 60)
    print("Performance Assessment")
    print("=" * 60)

    target_rate = 20
    if rate_debug >= target_rate:
        print(f"✓ PASS: {rate_debug:.0f} genomes/sec with debug (target: {target_rate})")
    else:
        print(f"✗ FAIL: {rate_debug:.0f} genomes/sec with debug (target: {target_rate})")


if __name__ == "__main__":
    main()
