"""
Configuration and data classes for the bitga engine.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Any
from pathlib import Path
import yaml
import numpy as np
from datetime import datetime

from .stop_conditions import StopCondition, GenerationLimit, FitnessThreshold, TimeBudget

logger = logging.getLogger(__name__)

STOP_CONDITIONS = ("generation", "fitness", "time")


def _is_bit_generator(name: str) -> bool:
    candidate = getattr(np.random, name, None)
    return isinstance(candidate, type) and issubclass(candidate, np.random.BitGenerator)


def _optional_float(value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    return float(value)


@dataclass
class EngineConfig:
    """
    Configuration for the genetic algorithm engine.

    Fixed per engine instance. Describes the problem size, the random source,
    the operator tunables and the default stop condition used by run().
    """

    # Problem size
    gene_length: int = 32
    population_size: int = 100

    # Random source: name of a numpy.random bit generator
    bit_generator: str = "PCG64"

    # Variation parameters
    crossover_points: int = 1
    mutations_per_generation: int = 1

    # Stop condition
    stop_condition: str = "generation"
    n_generations: int = 1000
    fitness_threshold: Optional[float] = None
    time_budget: Optional[float] = None

    # Logging
    log_level: str = "INFO"
    log_generation_stats: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.gene_length < 1:
            raise ValueError("gene_length must be at least 1")
        if self.population_size < 2:
            raise ValueError("population_size must be at least 2")
        if not 1 <= self.crossover_points <= self.gene_length:
            raise ValueError("crossover_points must be between 1 and gene_length")
        if self.mutations_per_generation < 0:
            raise ValueError("mutations_per_generation must be non-negative")
        if not _is_bit_generator(self.bit_generator):
            raise ValueError(f"Unknown bit generator: {self.bit_generator}")

        if self.stop_condition not in STOP_CONDITIONS:
            raise ValueError(
                f"stop_condition must be one of {', '.join(STOP_CONDITIONS)}, got {self.stop_condition}"
            )
        if self.n_generations < 0:
            raise ValueError("n_generations must be non-negative")
        if self.stop_condition == "fitness" and self.fitness_threshold is None:
            raise ValueError("fitness_threshold is required for the fitness stop condition")
        if self.stop_condition == "time" and self.time_budget is None:
            raise ValueError("time_budget is required for the time stop condition")
        if self.time_budget is not None and self.time_budget < 0:
            raise ValueError("time_budget must be non-negative")

        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

        if self.mutations_per_generation > self.population_size:
            logger.warning(
                f"mutations_per_generation ({self.mutations_per_generation}) exceeds "
                f"population_size ({self.population_size})"
            )

    def build_stop_condition(self) -> StopCondition:
        """Create the stop condition described by this configuration."""
        if self.stop_condition == "fitness":
            return FitnessThreshold(self.fitness_threshold)
        if self.stop_condition == "time":
            return TimeBudget(self.time_budget)
        return GenerationLimit(self.n_generations)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "gene_length": self.gene_length,
            "population_size": self.population_size,
            "bit_generator": self.bit_generator,
            "crossover_points": self.crossover_points,
            "mutations_per_generation": self.mutations_per_generation,
            "stop_condition": self.stop_condition,
            "n_generations": self.n_generations,
            "fitness_threshold": self.fitness_threshold,
            "time_budget": self.time_budget,
            "log_level": self.log_level,
            "log_generation_stats": self.log_generation_stats,
        }

    @classmethod
    def from_yaml(cls, config_path: Path) -> "EngineConfig":
        """
        Load configuration from YAML file.

        Parameters may sit under an `evolution:` section or at the top level.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            EngineConfig instance
        """
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}

        evolution_config = config.get("evolution", config)
        return cls(**evolution_config)

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """
        Load configuration from environment variables.

        Reads the following environment variables:
        - GENE_LENGTH: gene_length
        - POPULATION_SIZE: population_size
        - BIT_GENERATOR: bit_generator
        - CROSSOVER_POINTS: crossover_points
        - MUTATIONS_PER_GENERATION: mutations_per_generation
        - STOP_CONDITION: stop_condition (generation, fitness or time)
        - MAX_GENERATIONS: n_generations
        - FITNESS_THRESHOLD: fitness_threshold
        - TIME_BUDGET: time_budget (seconds)
        - LOG_LEVEL: log_level

        Returns:
            EngineConfig instance
        """
        return cls(
            gene_length=int(os.getenv("GENE_LENGTH", "32")),
            population_size=int(os.getenv("POPULATION_SIZE", "100")),
            bit_generator=os.getenv("BIT_GENERATOR", "PCG64"),
            crossover_points=int(os.getenv("CROSSOVER_POINTS", "1")),
            mutations_per_generation=int(os.getenv("MUTATIONS_PER_GENERATION", "1")),
            stop_condition=os.getenv("STOP_CONDITION", "generation"),
            n_generations=int(os.getenv("MAX_GENERATIONS", "1000")),
            fitness_threshold=_optional_float(os.getenv("FITNESS_THRESHOLD")),
            time_budget=_optional_float(os.getenv("TIME_BUDGET")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

    def to_yaml(self, save_path: Path) -> None:
        """
        Save configuration to YAML file.

        Args:
            save_path: Path where to save the configuration
        """
        with open(save_path, 'w') as f:
            yaml.dump({"evolution": self.to_dict()}, f, default_flow_style=False)

        logger.info(f"Saved configuration to {save_path}")


@dataclass
class GenerationHistory:
    """
    Statistics for a single generation of evolution.

    Recorded right after the generation's Selection, so best_fitness is the
    fitness of the individual in slot 0.
    """

    generation: int
    population_size: int
    avg_fitness: Optional[float]
    best_fitness: Optional[float]
    worst_fitness: Optional[float]
    n_unique: int
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "generation": self.generation,
            "population_size": self.population_size,
            "avg_fitness": self.avg_fitness,
            "best_fitness": self.best_fitness,
            "worst_fitness": self.worst_fitness,
            "n_unique": self.n_unique,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GenerationHistory":
        """Create instance from dictionary."""
        return cls(**data)
