"""
Unit tests for the UIntIndividual sample.
"""

import pytest
import numpy as np

from bitga.core.genes import zeros
from bitga.samples.uint import UIntIndividual, make_uint_individual


class TestUIntIndividual:
    """Test cases for UIntIndividual."""

    def test_fitness_is_value(self, sample_individual):
        """Test that fitness equals the encoded integer."""
        assert sample_individual.fitness() == 12345.0
        assert sample_individual.fitness_score == 12345.0
        assert sample_individual.value == 12345

    def test_fitness_exact_beyond_float_precision(self):
        """Test that neighbouring 64-bit values keep distinct fitness."""
        UInt64 = make_uint_individual(64)
        top = UInt64(UInt64.encode(2**64 - 1))
        below = UInt64(UInt64.encode(2**64 - 2))

        assert isinstance(top.fitness_score, int)
        assert top.fitness_score > below.fitness_score
        assert top.fitness_score == 2**64 - 1

    def test_round_trip_law(self):
        """Test decode(encode(x)) == x across the 32-bit range."""
        for value in [0, 1, 7, 1 << 31, 123456789, 4294967295]:
            assert UIntIndividual.decode(UIntIndividual.encode(value)) == value

    def test_constructor_keeps_genes_exactly(self):
        """Test that genes are stored without normalization."""
        genes = np.zeros(32, dtype=bool)
        genes[[0, 5, 31]] = True

        individual = UIntIndividual(genes)

        assert np.array_equal(individual.genes, genes)

    def test_genes_are_private_copy(self):
        """Test that changing the source array does not affect the individual."""
        genes = zeros(32)
        individual = UIntIndividual(genes)
        genes[0] = True

        assert individual.fitness_score == 0.0
        assert not individual.genes[0]

    def test_genes_are_read_only(self, sample_individual):
        """Test that genes cannot be modified through the accessor."""
        with pytest.raises(ValueError):
            sample_individual.genes[0] = True

    def test_wrong_length_rejected(self):
        """Test that a wrong gene length is rejected."""
        with pytest.raises(ValueError, match="expected 32 genes"):
            UIntIndividual(zeros(16))

    def test_equality_and_hash(self):
        """Test value semantics of equality."""
        a = UIntIndividual(UIntIndividual.encode(9))
        b = UIntIndividual(UIntIndividual.encode(9))

        assert a == b
        assert hash(a) == hash(b)
        assert a != UIntIndividual(UIntIndividual.encode(10))

    def test_repr(self, sample_individual):
        """Test string representation."""
        assert repr(sample_individual) == "UIntIndividual(value=12345)"

    def test_make_uint_individual(self):
        """Test creating a narrower variant."""
        uint4 = make_uint_individual(4)

        individual = uint4(uint4.encode(15))

        assert uint4.GENE_LENGTH == 4
        assert individual.fitness_score == 15.0
        assert individual.genes.shape == (4,)

    def test_make_uint_individual_invalid(self):
        """Test that a zero width is rejected."""
        with pytest.raises(ValueError):
            make_uint_individual(0)
