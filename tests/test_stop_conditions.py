"""
Unit tests for run-loop stop conditions.
"""

import pytest
from unittest.mock import MagicMock

from bitga.optimization.stop_conditions import (
    StopCondition,
    GenerationLimit,
    FitnessThreshold,
    TimeBudget,
)


def engine_stub(generation=0, best_fitness=0.0):
    """Minimal stand-in for the engine state a stop condition reads."""
    engine = MagicMock()
    engine.generation = generation
    engine.population = [MagicMock(fitness_score=best_fitness)]
    return engine


class TestStopConditions:
    """Test suite for the stop-condition strategies."""

    def test_base_never_stops(self):
        """Test default hooks."""
        condition = StopCondition()
        condition.start()

        assert not condition.should_stop_before_cycle(engine_stub())
        assert not condition.should_stop_after_selection(engine_stub())

    def test_generation_limit(self):
        """Test the before-cycle generation test."""
        condition = GenerationLimit(3)

        assert not condition.should_stop_before_cycle(engine_stub(generation=2))
        assert condition.should_stop_before_cycle(engine_stub(generation=3))
        assert not condition.should_stop_after_selection(engine_stub(generation=5))
        assert "3 generations" in condition.reason

    def test_generation_limit_negative(self):
        """Test validation of the generation count."""
        with pytest.raises(ValueError, match="n_generations must be non-negative"):
            GenerationLimit(-1)

    def test_fitness_threshold(self):
        """Test the after-selection fitness test, inclusive."""
        condition = FitnessThreshold(10.0)

        assert not condition.should_stop_after_selection(engine_stub(best_fitness=9.5))
        assert condition.should_stop_after_selection(engine_stub(best_fitness=10.0))
        assert not condition.should_stop_before_cycle(engine_stub(best_fitness=100.0))

    def test_time_budget(self, mocker):
        """Test the before-cycle elapsed-time test on a monotonic clock."""
        clock = mocker.patch("bitga.optimization.stop_conditions.time.monotonic")
        clock.return_value = 100.0
        condition = TimeBudget(2.0)
        condition.start()

        clock.return_value = 101.5
        assert not condition.should_stop_before_cycle(engine_stub())

        clock.return_value = 102.0
        assert condition.should_stop_before_cycle(engine_stub(generation=7))
        assert "after 7 generations" in condition.reason

    def test_time_budget_elapsed_before_start(self):
        """Test elapsed is zero until the run starts."""
        assert TimeBudget(1.0).elapsed == 0.0

    def test_time_budget_negative(self):
        """Test validation of the budget."""
        with pytest.raises(ValueError, match="time budget must be non-negative"):
            TimeBudget(-0.5)

    def test_repr(self):
        """Test string representations."""
        assert repr(GenerationLimit(5)) == "GenerationLimit(n_generations=5)"
        assert repr(FitnessThreshold(1.5)) == "FitnessThreshold(threshold=1.5)"
        assert repr(TimeBudget(0.25)) == "TimeBudget(seconds=0.25)"
