"""
bitga demonstration: evolve the largest unsigned integer.

Runs the three stop conditions on UIntIndividual from an all-zero population
and prints each result next to the known optimum.

Usage:
    bitga-demo
    bitga-demo --generations 2000 --seed 42
    bitga-demo --config config/uint.yaml --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .core.genes import zeros
from .optimization.config import EngineConfig
from .optimization.engine import GeneticAlgorithm
from .samples.uint import make_uint_individual

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Evolve an unsigned integer towards its maximum value",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Default run: 1000 generations, fitness 4000000000, 1.0 second
  bitga-demo

  # Reproducible run
  bitga-demo --seed 42

  # Problem size and operator tunables from YAML
  bitga-demo --config config/uint.yaml
        """
    )

    parser.add_argument("--generations", type=int, default=1000,
                        help="Generation count for the generation-bound run (default: 1000)")
    parser.add_argument("--fitness", type=float, default=4000000000,
                        help="Threshold for the fitness-bound run (default: 4000000000)")
    parser.add_argument("--time", type=float, default=1.0,
                        help="Budget in seconds for the time-bound run (default: 1.0)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: OS entropy)")
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML file with engine configuration")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")

    return parser.parse_args(argv)


def _run_one(base: EngineConfig, population_size: int, label: str, seed: Optional[int], **stop) -> int:
    """Build an engine for one stop condition and run it from all-zero genes."""
    settings = base.to_dict()
    settings.update(population_size=population_size, **stop)
    config = EngineConfig(**settings)

    individual_type = make_uint_individual(config.gene_length)
    engine = GeneticAlgorithm(individual_type, config)
    engine.initialize_population(genes=zeros(config.gene_length), seed=seed)

    print(f"Running Genetic Algorithm with {label}...")
    result = engine.run()
    print(f"Result: {result}")
    print(f"Gold Result: {(1 << config.gene_length) - 1}")
    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the bitga-demo console script."""
    args = parse_arguments(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )

    try:
        base = EngineConfig.from_yaml(args.config) if args.config else EngineConfig()
    except (OSError, ValueError, TypeError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    # Engines apply their own log level to the bitga logger; keep the CLI's choice
    base.log_level = args.log_level
    base.log_generation_stats = False

    max_value = (1 << base.gene_length) - 1
    if args.fitness > max_value:
        logger.error(f"Fitness threshold {args.fitness} is unreachable with {base.gene_length} bits")
        return 1

    print("SimpleUInt")
    try:
        _run_one(base, 100, "Generations", args.seed,
                 stop_condition="generation", n_generations=args.generations)
        _run_one(base, 10, "Fitness", args.seed,
                 stop_condition="fitness", fitness_threshold=args.fitness)
        _run_one(base, 100, "Time", args.seed,
                 stop_condition="time", time_budget=args.time)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
