"""
Unit tests for gene-vector helpers.
"""

import pytest
import numpy as np

from bitga.core.genes import (
    zeros,
    random_genes,
    as_genes,
    frozen,
    flip_bit,
    int_to_genes,
    genes_to_int,
)


class TestGenes:
    """Test cases for gene-vector helpers."""

    def test_zeros(self):
        """Test all-zero vector shape and dtype."""
        genes = zeros(12)

        assert genes.shape == (12,)
        assert genes.dtype == bool
        assert not genes.any()

    def test_random_genes_reproducible(self):
        """Test that the same seed yields the same genes."""
        a = random_genes(np.random.default_rng(3), 64)
        b = random_genes(np.random.default_rng(3), 64)

        assert a.dtype == bool
        assert np.array_equal(a, b)

    def test_random_genes_mixes_bits(self):
        """Test that random genes are not constant for a long vector."""
        genes = random_genes(np.random.default_rng(0), 256)

        assert 0 < genes.sum() < 256

    def test_as_genes_copies_input(self):
        """Test that as_genes never returns a view of the input."""
        source = np.zeros(4, dtype=bool)
        genes = as_genes(source, 4)
        source[0] = True

        assert not genes[0]

    def test_as_genes_accepts_lists(self):
        """Test conversion from a list of ints."""
        genes = as_genes([1, 0, 1], 3)

        assert genes.tolist() == [True, False, True]

    def test_as_genes_wrong_length(self):
        """Test that a wrong length is rejected."""
        with pytest.raises(ValueError, match="genes must have length 8"):
            as_genes([0, 1], 8)

    def test_as_genes_rejects_non_binary_values(self):
        """Test that values other than 0 and 1 are not coerced to True."""
        with pytest.raises(ValueError, match="only 0 and 1"):
            as_genes([0, 1, 2], 3)

        with pytest.raises(ValueError, match="only 0 and 1"):
            as_genes(np.array([0.5, 1.0]), 2)

    def test_as_genes_wrong_shape(self):
        """Test that a 2-D input is rejected."""
        with pytest.raises(ValueError, match="one-dimensional"):
            as_genes(np.zeros((2, 2)), 4)

    def test_frozen_is_read_only(self):
        """Test that frozen genes cannot be written."""
        genes = frozen(zeros(4))

        with pytest.raises(ValueError):
            genes[0] = True

    def test_flip_bit_returns_copy(self):
        """Test that flip_bit leaves the original untouched."""
        original = frozen(zeros(8))
        flipped = flip_bit(original, 5)

        assert flipped[5]
        assert not original[5]
        assert np.count_nonzero(original != flipped) == 1

    def test_int_to_genes_bit_order(self):
        """Test that index 0 holds the least significant bit."""
        genes = int_to_genes(0b110, 4)

        assert genes.tolist() == [False, True, True, False]

    def test_int_to_genes_rejects_overflow(self):
        """Test that values wider than the vector are rejected."""
        with pytest.raises(ValueError, match="does not fit"):
            int_to_genes(256, 8)

    def test_int_to_genes_rejects_negative(self):
        """Test that negative values are rejected."""
        with pytest.raises(ValueError, match="non-negative"):
            int_to_genes(-1, 8)

    @pytest.mark.parametrize("value", [0, 1, 2, 255, 65535, 4294967295, 2863311530])
    def test_round_trip(self, value):
        """Test that decoding an encoded value returns it unchanged."""
        assert genes_to_int(int_to_genes(value, 32)) == value

    def test_wide_vectors(self):
        """Test encoding beyond 64 bits."""
        value = (1 << 100) + 7
        assert genes_to_int(int_to_genes(value, 128)) == value
