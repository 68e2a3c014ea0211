"""
Fixtures for unit tests.
"""

import pytest
import numpy as np

from bitga.core.genes import int_to_genes
from bitga.core.population import Population
from bitga.samples.uint import UIntIndividual, make_uint_individual


@pytest.fixture
def uint8_type():
    """An 8-bit unsigned-integer individual type."""
    return make_uint_individual(8)


@pytest.fixture
def sample_individual():
    """Create a sample 32-bit individual holding 12345."""
    return UIntIndividual(UIntIndividual.encode(12345))


@pytest.fixture
def sample_population(uint8_type):
    """Create a sample population of 10 individuals with values 0, 10, ..., 90."""
    individuals = [uint8_type(int_to_genes(i * 10, 8)) for i in range(10)]
    return Population(individuals)


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(42)
