"""
Optimization module for bitga.

This module contains the engine that runs the generational loop
(Selection, Crossover, Mutation) under a pluggable stop condition.
"""

from .engine import GeneticAlgorithm
from .config import EngineConfig, GenerationHistory
from .stop_conditions import StopCondition, GenerationLimit, FitnessThreshold, TimeBudget

__all__ = [
    "GeneticAlgorithm",
    "EngineConfig",
    "GenerationHistory",
    "StopCondition",
    "GenerationLimit",
    "FitnessThreshold",
    "TimeBudget",
]
