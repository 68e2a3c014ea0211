"""
Unsigned-integer individual.

The genes are the binary representation of an unsigned integer (least
significant bit at index 0) and the fitness is the integer itself, kept as a
Python int so that distinct values rank strictly at any width. The optimum is
the all-ones vector.
"""

import numpy as np

from ..core.genes import frozen, genes_to_int, int_to_genes


class UIntIndividual:
    """Individual encoding an unsigned integer of GENE_LENGTH bits."""

    GENE_LENGTH = 32

    __slots__ = ("_genes", "_fitness")

    def __init__(self, genes):
        self._genes = frozen(genes)
        if self._genes.shape != (self.GENE_LENGTH,):
            raise ValueError(f"expected {self.GENE_LENGTH} genes, got {self._genes.shape[0]}")
        self._fitness = self.fitness()

    @classmethod
    def encode(cls, value: int) -> np.ndarray:
        return int_to_genes(value, cls.GENE_LENGTH)

    @classmethod
    def decode(cls, genes: np.ndarray) -> int:
        return genes_to_int(genes)

    def fitness(self) -> int:
        return genes_to_int(self._genes)

    @property
    def genes(self) -> np.ndarray:
        return self._genes

    @property
    def fitness_score(self) -> int:
        return self._fitness

    @property
    def value(self) -> int:
        return self.decode(self._genes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UIntIndividual):
            return NotImplemented
        return np.array_equal(self._genes, other._genes)

    def __hash__(self):
        return hash(self._genes.tobytes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.value})"


def make_uint_individual(gene_length: int) -> type:
    """Create a UIntIndividual variant for a different bit width."""
    if gene_length < 1:
        raise ValueError("gene_length must be at least 1")
    return type(f"UInt{gene_length}Individual", (UIntIndividual,), {"GENE_LENGTH": gene_length, "__slots__": ()})
