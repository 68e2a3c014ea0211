"""Selection operators for bitga."""

from .ranking import RankSelection

__all__ = ["RankSelection"]
