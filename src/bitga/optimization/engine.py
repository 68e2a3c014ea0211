"""
Genetic algorithm engine for bitga.

This module ties the Individual contract, the Population and the three
operators (Selection, Crossover, Mutation) into one generational loop whose
termination is delegated to a StopCondition strategy.
"""

import logging
import numbers
from typing import Any, List, Optional
import numpy as np

from ..core.genes import GeneLike, as_genes, frozen, random_genes, zeros
from ..core.individual import Individual, check_individual_type
from ..core.population import Population
from ..selection.ranking import RankSelection
from ..variation.crossover import ElitistCrossover
from ..variation.mutation import BitFlipMutation
from .config import EngineConfig, GenerationHistory
from .stop_conditions import StopCondition, GenerationLimit, FitnessThreshold, TimeBudget

logger = logging.getLogger(__name__)


class GeneticAlgorithm:
    """
    Generational genetic algorithm over fixed-width bit-string individuals.

    The engine owns its population and its random generator; nothing is
    shared with other engine instances, so separate instances can run on
    separate threads.

    Example usage:
        ```python
        config = EngineConfig(gene_length=32, population_size=100)
        engine = GeneticAlgorithm(UIntIndividual, config)

        engine.initialize_population(genes=zeros(32), seed=7)
        best_value = engine.run_generations(1000)
        ```
    """

    def __init__(self, individual_type: type, config: Optional[EngineConfig] = None):
        """
        Initialize the engine.

        Args:
            individual_type: Candidate-solution class satisfying the Individual contract
            config: Engine configuration (defaults to EngineConfig())

        Raises:
            TypeError: If individual_type does not satisfy the Individual contract
        """
        self.config = config if config is not None else EngineConfig()
        check_individual_type(individual_type, self.config.gene_length)

        self.individual_type = individual_type
        self.gene_length = self.config.gene_length
        self.population_size = self.config.population_size

        self.selection = RankSelection()
        self.crossover_operator = ElitistCrossover(
            individual_type,
            self.gene_length,
            crossover_points=self.config.crossover_points
        )
        self.mutation_operator = BitFlipMutation(
            individual_type,
            self.gene_length,
            flips=self.config.mutations_per_generation
        )

        # State tracking
        self.population: Optional[Population] = None
        self.rng: Optional[np.random.Generator] = None
        self.generation: int = 0
        self.history: List[GenerationHistory] = []
        self.stop_condition: Optional[StopCondition] = None
        self.best_individual: Optional[Individual] = None
        self.result: Any = None

        logging.getLogger("bitga").setLevel(self.config.log_level.upper())

        logger.info(
            f"Initialized GeneticAlgorithm for {individual_type.__name__}: "
            f"{self.gene_length} bits, population size {self.population_size}"
        )

    # ------------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------------

    def _create_rng(self, seed: Optional[int]) -> np.random.Generator:
        """Create the engine's generator; seed=None draws entropy from the OS."""
        if seed is not None:
            if isinstance(seed, bool) or not isinstance(seed, numbers.Integral) or seed < 0:
                raise ValueError(f"seed must be a non-negative integer, got {seed!r}")
            seed = int(seed)

        bit_generator = getattr(np.random, self.config.bit_generator)
        return np.random.Generator(bit_generator(seed))

    def initialize_population(
        self,
        genes: Optional[GeneLike] = None,
        seed: Optional[int] = None
    ) -> None:
        """
        Create the initial population and (re)seed the random generator.

        The mode follows from the arguments supplied:
            ()                 all-zero genes, OS-entropy seed
            (seed=s)           uniformly random genes, seeded with s
            (genes=g)          g in every individual, OS-entropy seed
            (genes=g, seed=s)  g in every individual, seeded with s

        Any previous population, generation counter and history are discarded.
        If the random source cannot be created the error propagates and the
        previous state is left untouched.

        Args:
            genes: Gene vector applied to every individual
            seed: Non-negative integer seed for reproducible runs

        Raises:
            ValueError: If genes has the wrong length or seed is invalid
        """
        template = as_genes(genes, self.gene_length) if genes is not None else None
        rng = self._create_rng(seed)

        if template is not None:
            shared = self.individual_type(frozen(template))
            individuals = [shared] * self.population_size
            mode = "custom genes"
        elif seed is not None:
            individuals = [
                self.individual_type(random_genes(rng, self.gene_length))
                for _ in range(self.population_size)
            ]
            mode = "random genes"
        else:
            shared = self.individual_type(zeros(self.gene_length))
            individuals = [shared] * self.population_size
            mode = "zero genes"

        self.rng = rng
        self.population = Population(individuals)
        self.generation = 0
        self.history = []
        self.best_individual = None
        self.result = None

        seed_str = f"seed {seed}" if seed is not None else "OS entropy"
        logger.info(f"Initialized population of {self.population.size} with {mode} ({seed_str})")

    def _require_population(self) -> Population:
        if self.population is None or self.rng is None:
            raise RuntimeError("Population is not initialized; call initialize_population() first")
        return self.population

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def select(self) -> None:
        """Rank the population by descending fitness, in place."""
        self.selection.select(self._require_population())

    def crossover(self) -> List[int]:
        """Replace the population with the offspring of slots 0 and 1."""
        population = self._require_population()
        return self.crossover_operator.crossover(population, self.rng)

    def mutate(self) -> List[tuple]:
        """Flip mutations_per_generation random bits in random individuals."""
        population = self._require_population()
        return self.mutation_operator.mutate(population, self.rng)

    # ------------------------------------------------------------------
    # Run loop
    # ------------------------------------------------------------------

    def run(self, stop_condition: Optional[StopCondition] = None) -> Any:
        """
        Evolve until the stop condition is met and return the best decoded value.

        Each iteration performs Selection, Crossover and Mutation. The stop
        condition is consulted before each cycle and again right after each
        Selection; after the loop one final Selection ranks the population
        and the individual in slot 0 is decoded. The generation counter and
        history start over with every run.

        Args:
            stop_condition: Strategy ending the loop (defaults to the configured one)

        Returns:
            Decoded domain value of the best individual

        Raises:
            RuntimeError: If the population has not been initialized
        """
        population = self._require_population()
        condition = stop_condition if stop_condition is not None else self.config.build_stop_condition()

        self.stop_condition = condition
        self.generation = 0
        self.history = []
        logger.info(f"Starting run with {condition!r}")

        condition.start()
        while True:
            if condition.should_stop_before_cycle(self):
                break

            self.select()
            self._log_generation_stats(population)

            if condition.should_stop_after_selection(self):
                break

            self.crossover()
            self.mutate()
            self.generation += 1

        self.select()

        self.best_individual = population[0]
        self.result = self.individual_type.decode(self.best_individual.genes)

        logger.info(
            f"Run complete ({condition.reason}). "
            f"Best fitness: {self.best_individual.fitness_score} after {self.generation} generations"
        )
        return self.result

    def run_generations(self, n_generations: int) -> Any:
        """Run exactly n_generations cycles and return the best decoded value."""
        return self.run(GenerationLimit(n_generations))

    def run_until_fitness(self, threshold: float) -> Any:
        """
        Run until the best fitness reaches threshold and return its decoded value.

        Does not terminate if the threshold is unreachable.
        """
        return self.run(FitnessThreshold(threshold))

    def run_for(self, seconds: float) -> Any:
        """Run until the wall-clock budget is spent and return the best decoded value."""
        return self.run(TimeBudget(seconds))

    def _log_generation_stats(self, population: Population) -> None:
        """
        Record statistics for the ranked population of the current generation.

        Args:
            population: Population right after Selection
        """
        if not self.config.log_generation_stats:
            return

        stats = population.statistics()

        history = GenerationHistory(
            generation=self.generation,
            population_size=stats["size"],
            avg_fitness=stats["avg_fitness"],
            best_fitness=stats["best_fitness"],
            worst_fitness=stats["worst_fitness"],
            n_unique=stats["unique"]
        )
        self.history.append(history)

        logger.debug(
            f"Gen {self.generation}: "
            f"fitness={stats['avg_fitness']}/{stats['best_fitness']}, "
            f"unique={stats['unique']}, "
            f"pop_size={stats['size']}"
        )
