"""
bitga: a generational genetic algorithm over fixed-width bit strings.

Plug in any class satisfying the Individual contract, pick a stop condition
(generation count, fitness threshold or time budget) and run.
"""

__version__ = "0.1.0"

from .core import Individual, Population, check_individual_type
from .optimization import (
    GeneticAlgorithm,
    EngineConfig,
    GenerationHistory,
    StopCondition,
    GenerationLimit,
    FitnessThreshold,
    TimeBudget,
)

__all__ = [
    "Individual",
    "Population",
    "check_individual_type",
    "GeneticAlgorithm",
    "EngineConfig",
    "GenerationHistory",
    "StopCondition",
    "GenerationLimit",
    "FitnessThreshold",
    "TimeBudget",
]
