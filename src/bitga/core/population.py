"""
Population management for bitga.

This module defines the Population class, a fixed-size ordered collection of
individuals that the engine mutates in place from one generation to the next.
"""

import logging
from typing import List, Dict, Iterator, Any, Optional
import numpy as np

from .individual import Individual

logger = logging.getLogger(__name__)


class Population:
    """
    Fixed-size ordered collection of individuals.

    The size is set at construction and never changes: operators reorder
    slots (Selection), replace the whole set (Crossover) or replace a single
    slot (Mutation). Order carries meaning only right after Selection.

    Attributes:
        individuals: Individuals in slot order
    """

    def __init__(self, individuals: List[Individual]):
        """
        Initialize a Population.

        Args:
            individuals: Initial individuals (at least one)
        """
        if not individuals:
            raise ValueError("population must contain at least one individual")
        self.individuals = list(individuals)
        self._size = len(self.individuals)

    @property
    def size(self) -> int:
        """Get the fixed population size."""
        return self._size

    def sort_by_fitness(self) -> None:
        """Reorder in place by fitness_score, highest first (stable)."""
        self.individuals.sort(key=lambda ind: ind.fitness_score, reverse=True)

    def replace_all(self, individuals: List[Individual]) -> None:
        """
        Install a full replacement set of individuals.

        Raises:
            ValueError: If the replacement does not have exactly `size` individuals
        """
        if len(individuals) != self._size:
            raise ValueError(
                f"replacement must contain {self._size} individuals, got {len(individuals)}"
            )
        self.individuals = list(individuals)

    def fitness_scores(self) -> np.ndarray:
        """Fitness scores in slot order."""
        return np.array([ind.fitness_score for ind in self.individuals], dtype=float)

    def genes_matrix(self) -> np.ndarray:
        """Stack gene vectors into a (size, gene_length) bool matrix."""
        return np.stack([np.asarray(ind.genes, dtype=bool) for ind in self.individuals])

    def n_unique(self) -> int:
        """Number of distinct genomes in the population."""
        return int(np.unique(self.genes_matrix(), axis=0).shape[0])

    def statistics(self) -> Dict[str, Any]:
        """
        Compute population statistics.

        Non-finite fitness values are excluded from the aggregates and reported
        in the `non_finite` count.

        Returns:
            Dictionary containing population statistics
        """
        scores = self.fitness_scores()
        finite = scores[np.isfinite(scores)]
        n_non_finite = int(scores.size - finite.size)

        if n_non_finite:
            logger.warning(f"{n_non_finite} individuals have non-finite fitness")

        return {
            "size": self._size,
            "unique": self.n_unique(),
            "non_finite": n_non_finite,
            "avg_fitness": float(np.mean(finite)) if finite.size else None,
            "best_fitness": float(np.max(finite)) if finite.size else None,
            "worst_fitness": float(np.min(finite)) if finite.size else None,
        }

    def __getitem__(self, index: int) -> Individual:
        return self.individuals[index]

    def __setitem__(self, index: int, individual: Individual) -> None:
        self.individuals[index] = individual

    def __repr__(self) -> str:
        """String representation of the population."""
        stats = self.statistics()
        best: Optional[float] = stats["best_fitness"]
        best_str = f"{best:.4g}" if best is not None else "None"
        return f"Population(size={stats['size']}, unique={stats['unique']}, best={best_str})"

    def __len__(self) -> int:
        """Get the population size."""
        return len(self.individuals)

    def __iter__(self) -> Iterator[Individual]:
        """Iterate over individuals."""
        return iter(self.individuals)
