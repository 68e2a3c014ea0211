"""
Gene-vector helpers for bitga.

A gene vector is a 1-D numpy array of dtype bool. Index i holds bit i, so the
least significant bit of an encoded integer sits at index 0.
"""

from typing import Sequence, Union
import numpy as np

GeneLike = Union[np.ndarray, Sequence[int], Sequence[bool]]


def zeros(gene_length: int) -> np.ndarray:
    """Return an all-zero gene vector of the given length."""
    return np.zeros(gene_length, dtype=bool)


def random_genes(rng: np.random.Generator, gene_length: int) -> np.ndarray:
    """
    Draw a gene vector with every bit independently 0 or 1 (p = 1/2).

    Args:
        rng: Random generator owned by the caller
        gene_length: Number of bits

    Returns:
        Fresh gene vector
    """
    return rng.integers(0, 2, size=gene_length).astype(bool)


def as_genes(genes: GeneLike, gene_length: int) -> np.ndarray:
    """
    Convert a gene-like sequence into a private bool array of fixed length.

    Args:
        genes: Array or sequence of 0/1 (or bool) values
        gene_length: Required number of bits

    Returns:
        A new bool array (never a view of the input)

    Raises:
        ValueError: If the input is not one-dimensional, has the wrong length
            or holds values other than 0 and 1
    """
    raw = np.asarray(genes)
    if raw.ndim != 1:
        raise ValueError(f"genes must be one-dimensional, got shape {raw.shape}")
    if raw.dtype != bool:
        invalid = raw[(raw != 0) & (raw != 1)]
        if invalid.size:
            raise ValueError(f"genes must contain only 0 and 1, got {np.unique(invalid).tolist()}")
    array = raw.astype(bool)
    if array.shape[0] != gene_length:
        raise ValueError(f"genes must have length {gene_length}, got {array.shape[0]}")
    return array


def frozen(genes: np.ndarray) -> np.ndarray:
    """Return a read-only copy of a gene vector."""
    array = np.array(genes, dtype=bool, copy=True)
    array.flags.writeable = False
    return array


def flip_bit(genes: np.ndarray, index: int) -> np.ndarray:
    """Return a copy of genes with the bit at index complemented."""
    flipped = np.array(genes, dtype=bool, copy=True)
    flipped[index] = not flipped[index]
    return flipped


def int_to_genes(value: int, gene_length: int) -> np.ndarray:
    """
    Encode a non-negative integer as a gene vector (LSB at index 0).

    Raises:
        ValueError: If value is negative or needs more than gene_length bits
    """
    value = int(value)
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")
    if value.bit_length() > gene_length:
        raise ValueError(f"value {value} does not fit in {gene_length} bits")
    return np.array([(value >> i) & 1 for i in range(gene_length)], dtype=bool)


def genes_to_int(genes: np.ndarray) -> int:
    """Decode a gene vector (LSB at index 0) into a Python int."""
    value = 0
    for i in np.flatnonzero(genes):
        value |= 1 << int(i)
    return value
