#!/usr/bin/env python3
"""
Basic example of using the bitga engine.

This script demonstrates how to:
1. Write a candidate type that satisfies the Individual contract
2. Configure the engine
3. Run it under each of the three stop conditions

The candidate type here encodes a point x in [0, 1) as a 16-bit fixed-point
number and scores it with f(x) = x * (1 - x), which peaks at x = 0.5.
"""

import logging

import numpy as np

from bitga import EngineConfig, GeneticAlgorithm
from bitga.core.genes import frozen, genes_to_int, int_to_genes

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

BITS = 16
SCALE = 1 << BITS


class FixedPointIndividual:
    """Point in [0, 1) stored as a 16-bit fixed-point fraction."""

    def __init__(self, genes):
        self._genes = frozen(genes)
        self._fitness = self.fitness()

    @classmethod
    def encode(cls, value: float) -> np.ndarray:
        return int_to_genes(int(value * SCALE) % SCALE, BITS)

    @classmethod
    def decode(cls, genes: np.ndarray) -> float:
        return genes_to_int(genes) / SCALE

    def fitness(self) -> float:
        x = self.decode(self._genes)
        return x * (1.0 - x)

    @property
    def genes(self) -> np.ndarray:
        return self._genes

    @property
    def fitness_score(self) -> float:
        return self._fitness


def main():
    config = EngineConfig(gene_length=BITS, population_size=50, mutations_per_generation=3)
    engine = GeneticAlgorithm(FixedPointIndividual, config)

    logger.info("=" * 60)
    logger.info("Generation-bound run")
    engine.initialize_population(seed=1)
    x = engine.run_generations(500)
    logger.info(f"x = {x:.5f}, f(x) = {engine.best_individual.fitness_score:.6f}")

    logger.info("=" * 60)
    logger.info("Fitness-bound run")
    engine.initialize_population(seed=2)
    x = engine.run_until_fitness(0.2499)
    logger.info(f"x = {x:.5f} after {engine.generation} generations")

    logger.info("=" * 60)
    logger.info("Time-bound run")
    engine.initialize_population()
    x = engine.run_for(0.5)
    logger.info(f"x = {x:.5f} after {engine.generation} generations")


if __name__ == "__main__":
    main()
