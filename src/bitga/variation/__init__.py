"""
Variation operators for bitga.

- ElitistCrossover: recombines the two fittest individuals into a full new population
- BitFlipMutation: flips single bits in randomly chosen individuals
"""

from .crossover import ElitistCrossover
from .mutation import BitFlipMutation

__all__ = ["ElitistCrossover", "BitFlipMutation"]
