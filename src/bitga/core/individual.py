"""
Individual contract for bitga.

Any candidate-solution type can be evolved by the engine as long as it provides
the members of the Individual protocol below. There is no base class to inherit
from; conformance is structural and is verified at runtime by
check_individual_type().
"""

import logging
import numbers
from typing import Any, Protocol, runtime_checkable
import numpy as np

from .genes import zeros

logger = logging.getLogger(__name__)


@runtime_checkable
class Individual(Protocol):
    """
    Structural contract for a candidate solution encoded as a fixed-width bit vector.

    Implementations must provide:
        encode(value): classmethod, domain value -> gene vector (pure)
        decode(genes): classmethod, gene vector -> domain value (pure, inverts encode)
        __init__(genes): construct from a gene vector, storing it exactly
        fitness(): score computed from the genes, higher is better, defined for
            every bit pattern (crossover and mutation reach genes encode never produces)
        genes: read accessor for the gene vector
        fitness_score: read accessor, equal to fitness() (may be memoized)

    Individuals are value types: the engine may hold one instance in several
    population slots, so an implementation must not expose writable genes.
    """

    @classmethod
    def encode(cls, value: Any) -> np.ndarray:
        ...

    @classmethod
    def decode(cls, genes: np.ndarray) -> Any:
        ...

    def fitness(self) -> float:
        ...

    @property
    def genes(self) -> np.ndarray:
        ...

    @property
    def fitness_score(self) -> float:
        ...


def check_individual_type(individual_type: type, gene_length: int) -> None:
    """
    Verify that a type satisfies the Individual contract.

    Constructs one probe individual from an all-zero gene vector and checks
    every member of the protocol against it.

    Args:
        individual_type: Candidate-solution class to check
        gene_length: Gene-vector length the engine will use

    Raises:
        TypeError: If a member is missing or behaves inconsistently
    """
    name = getattr(individual_type, "__name__", repr(individual_type))

    if not isinstance(individual_type, type):
        raise TypeError(f"{name} is not a class")

    for member in ("encode", "decode", "fitness"):
        if not callable(getattr(individual_type, member, None)):
            raise TypeError(f"{name} does not implement {member}()")

    probe_genes = zeros(gene_length)
    try:
        probe = individual_type(probe_genes)
    except Exception as e:
        raise TypeError(f"{name} cannot be constructed from a gene vector: {e}") from e

    if not isinstance(probe, Individual):
        raise TypeError(f"{name} does not provide the genes and fitness_score accessors")

    genes = np.asarray(probe.genes)
    if genes.shape != (gene_length,) or not np.array_equal(genes.astype(bool), probe_genes):
        raise TypeError(f"{name}.genes does not return the genes it was constructed from")

    score = probe.fitness_score
    if not isinstance(score, numbers.Real):
        raise TypeError(f"{name}.fitness_score must be a real number, got {type(score).__name__}")

    # NaN never equals itself; comparison is only meaningful for finite scores
    recomputed = probe.fitness()
    finite = isinstance(score, numbers.Integral) or bool(np.isfinite(score))
    if finite and score != recomputed:
        raise TypeError(f"{name}.fitness_score ({score}) differs from fitness() ({recomputed})")

    logger.debug(f"{name} satisfies the Individual contract for {gene_length}-bit genes")
