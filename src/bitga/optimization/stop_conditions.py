"""
Stop conditions for the bitga run loop.

Every run shares one loop body (Selection, Crossover, Mutation). A stop
condition decides where the loop is tested and what ends it:

- GenerationLimit: before each cycle, stops once G cycles have run
- FitnessThreshold: right after each Selection, stops once the best individual
  reaches the threshold
- TimeBudget: before each cycle, stops once the wall-clock budget is spent
"""

import logging
import time
from abc import ABC
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .engine import GeneticAlgorithm

logger = logging.getLogger(__name__)


class StopCondition(ABC):
    """
    Base class for run-loop stop conditions.

    Subclasses override one or both hooks; the defaults never stop.
    """

    reason: str = ""

    def start(self) -> None:
        """Called once before the first cycle of a run."""

    def should_stop_before_cycle(self, engine: "GeneticAlgorithm") -> bool:
        """Checked at the top of every iteration, before Selection."""
        return False

    def should_stop_after_selection(self, engine: "GeneticAlgorithm") -> bool:
        """Checked after Selection, before Crossover and Mutation."""
        return False


class GenerationLimit(StopCondition):
    """Run exactly `n_generations` full cycles, with no early exit."""

    def __init__(self, n_generations: int):
        if n_generations < 0:
            raise ValueError("n_generations must be non-negative")
        self.n_generations = n_generations

    def should_stop_before_cycle(self, engine: "GeneticAlgorithm") -> bool:
        if engine.generation >= self.n_generations:
            self.reason = f"reached {self.n_generations} generations"
            return True
        return False

    def __repr__(self) -> str:
        return f"GenerationLimit(n_generations={self.n_generations})"


class FitnessThreshold(StopCondition):
    """
    Run until the fittest individual scores at least `threshold`.

    The test follows each Selection, so the returned individual is the one
    that met the threshold. An unreachable threshold never terminates; the
    caller is responsible for choosing a feasible one.
    """

    def __init__(self, threshold: float):
        self.threshold = threshold

    def should_stop_after_selection(self, engine: "GeneticAlgorithm") -> bool:
        best = engine.population[0].fitness_score
        if best >= self.threshold:
            self.reason = f"fitness {best} >= {self.threshold} at generation {engine.generation}"
            return True
        return False

    def __repr__(self) -> str:
        return f"FitnessThreshold(threshold={self.threshold})"


class TimeBudget(StopCondition):
    """
    Run until `seconds` of wall-clock time have elapsed.

    Elapsed time is read from a monotonic clock once per iteration, so a run
    may overshoot by up to one cycle.
    """

    def __init__(self, seconds: float):
        if seconds < 0:
            raise ValueError("time budget must be non-negative")
        self.seconds = seconds
        self._start: Optional[float] = None

    def start(self) -> None:
        self._start = time.monotonic()

    @property
    def elapsed(self) -> float:
        """Seconds since start(), or 0.0 before the run begins."""
        if self._start is None:
            return 0.0
        return time.monotonic() - self._start

    def should_stop_before_cycle(self, engine: "GeneticAlgorithm") -> bool:
        elapsed = self.elapsed
        if elapsed >= self.seconds:
            self.reason = f"{elapsed:.3f}s elapsed after {engine.generation} generations"
            return True
        return False

    def __repr__(self) -> str:
        return f"TimeBudget(seconds={self.seconds})"
