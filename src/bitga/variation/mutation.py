"""
Bit-flip mutation for bitga.
"""

import logging
from typing import List, Tuple
import numpy as np

from ..core.genes import flip_bit
from ..core.population import Population

logger = logging.getLogger(__name__)


class BitFlipMutation:
    """
    Flips one random bit in one random individual per flip.

    The default of one flip per generation is a very low mutation pressure.
    `flips` raises it; each flip draws its own individual and bit.
    """

    def __init__(self, individual_type: type, gene_length: int, flips: int = 1):
        """
        Initialize the mutation operator.

        Args:
            individual_type: Class used to rebuild the mutated individual
            gene_length: Number of bits per individual (N)
            flips: Number of independent bit-flips per call
        """
        if gene_length < 1:
            raise ValueError("gene_length must be at least 1")
        if flips < 0:
            raise ValueError("flips must be non-negative")

        self.individual_type = individual_type
        self.gene_length = gene_length
        self.flips = flips

    def mutate(self, population: Population, rng: np.random.Generator) -> List[Tuple[int, int]]:
        """
        Apply the configured number of bit-flips to the population in place.

        The mutated slot is replaced with a newly constructed individual; the
        previous instance is left untouched, since it may still occupy other slots.

        Args:
            population: Population to mutate
            rng: Random generator owned by the engine

        Returns:
            List of (individual index, bit index) pairs that were flipped
        """
        flipped = []
        for _ in range(self.flips):
            index = int(rng.integers(0, population.size))
            bit = int(rng.integers(0, self.gene_length))

            population[index] = self.individual_type(flip_bit(population[index].genes, bit))
            flipped.append((index, bit))

            logger.debug(f"Mutation: flipped bit {bit} of individual {index}")

        return flipped
