"""Sample individuals for bitga."""

from .uint import UIntIndividual, make_uint_individual

__all__ = ["UIntIndividual", "make_uint_individual"]
