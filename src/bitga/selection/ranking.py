"""
Rank selection for bitga.

Selection does not sample parents; it ranks the population so that the two
fittest individuals sit in slots 0 and 1, where Crossover expects them.
"""

import logging

from ..core.population import Population

logger = logging.getLogger(__name__)


class RankSelection:
    """
    Reorders a population in place by descending fitness.

    No individuals are created and no genes change. The sort is stable, so
    running it twice without an intervening change leaves the order as is.
    Individuals whose fitness is NaN are ordered without error, but where they
    end up is unspecified.
    """

    def select(self, population: Population) -> None:
        """
        Rank the population, fittest first.

        Args:
            population: Population to reorder in place
        """
        population.sort_by_fitness()
        logger.debug(
            f"Selection: top fitness {population[0].fitness_score}, "
            f"runner-up {population[1].fitness_score if population.size > 1 else None}"
        )
