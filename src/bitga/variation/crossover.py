"""
Elitist crossover for bitga.

The two fittest individuals (slots 0 and 1 after Selection) are the only
parents of the next generation. Their gene suffixes are exchanged at a cut
point drawn once per call, and the resulting children replace the whole
population.
"""

import logging
from typing import List, Tuple
import numpy as np

from ..core.population import Population

logger = logging.getLogger(__name__)


class ElitistCrossover:
    """
    Single-point (or k-point) recombination of the two fittest individuals.

    With one cut point c drawn uniformly from [0, N-1]:
        child A = parent1[:c] + parent2[c:]
        child B = parent2[:c] + parent1[c:]

    Children fill the population as A, B, A, B, ...; for an odd size the last
    slot receives A only. c = 0 (full swap) and c = N-1 are ordinary draws.

    Individuals are immutable, so each child is constructed once and the same
    instance is installed in every slot it occupies.
    """

    def __init__(self, individual_type: type, gene_length: int, crossover_points: int = 1):
        """
        Initialize the crossover operator.

        Args:
            individual_type: Class used to construct children from genes
            gene_length: Number of bits per individual (N)
            crossover_points: Number of distinct cut points per call (1 <= k <= N)
        """
        if gene_length < 1:
            raise ValueError("gene_length must be at least 1")
        if not 1 <= crossover_points <= gene_length:
            raise ValueError(f"crossover_points must be between 1 and {gene_length}")

        self.individual_type = individual_type
        self.gene_length = gene_length
        self.crossover_points = crossover_points

    def draw_cut_points(self, rng: np.random.Generator) -> List[int]:
        """Draw the sorted cut points for one call."""
        if self.crossover_points == 1:
            return [int(rng.integers(0, self.gene_length))]
        cuts = rng.choice(self.gene_length, size=self.crossover_points, replace=False)
        return sorted(int(c) for c in cuts)

    def recombine(
        self,
        parent1: np.ndarray,
        parent2: np.ndarray,
        cut_points: List[int]
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Exchange gene segments of two parents at the given cut points.

        Every cut toggles which parent the following bits come from, so a
        single cut exchanges the suffix [c, N).

        Returns:
            Tuple of (child A genes, child B genes)
        """
        from_second = np.zeros(self.gene_length, dtype=bool)
        for cut in cut_points:
            from_second[cut:] = ~from_second[cut:]

        parent1 = np.asarray(parent1, dtype=bool)
        parent2 = np.asarray(parent2, dtype=bool)
        child_a = np.where(from_second, parent2, parent1)
        child_b = np.where(from_second, parent1, parent2)
        return child_a, child_b

    def crossover(self, population: Population, rng: np.random.Generator) -> List[int]:
        """
        Replace the population with the offspring of its two leading individuals.

        Must be called right after Selection so that slots 0 and 1 hold the
        fittest individuals.

        Args:
            population: Ranked population; replaced in place
            rng: Random generator owned by the engine

        Returns:
            The cut points used
        """
        cut_points = self.draw_cut_points(rng)
        genes_a, genes_b = self.recombine(population[0].genes, population[1].genes, cut_points)

        child_a = self.individual_type(genes_a)
        child_b = self.individual_type(genes_b)

        offspring = [child_a if i % 2 == 0 else child_b for i in range(population.size)]
        population.replace_all(offspring)

        logger.debug(
            f"Crossover at {cut_points}: children fitness "
            f"{child_a.fitness_score} / {child_b.fitness_score}"
        )
        return cut_points
