"""
Core data structures for bitga: gene vectors, the Individual contract and the
Population container.
"""

from .individual import Individual, check_individual_type
from .population import Population

__all__ = [
    "Individual",
    "check_individual_type",
    "Population",
]
