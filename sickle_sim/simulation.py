"""Simulation engine for sickle_sim."""

import logging
from datetime import datetime
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from .config import load_config, default_config, SimulationConfig
from .exceptions import SimulationError, InvariantError
from .models.allele import AllelePool, generate_alleles
from .models.frequency import GenerationSummary, summarize, regenerate
from .models.generation import Generation, GenerationStats
from .models.selection import SelectionFilter

logger = logging.getLogger(__name__)


class SimulationState(Enum):
    """Lifecycle of a single population run."""
    INITIALIZING = "initializing"
    STEPPING = "stepping"
    DONE = "done"


@dataclass
class SimulationResults:
    """Results from a completed simulation."""
    percent_a: int
    percent_s: int
    final_summary: GenerationSummary
    generations_completed: int
    seed: Optional[int]
    start_time: datetime
    end_time: datetime
    duration_seconds: float
    
    def as_tuple(self) -> Tuple[int, int]:
        """Final (percent_A, percent_S) of the population."""
        return self.percent_a, self.percent_s


class Simulation:
    """Drives one population through a fixed number of generations."""
    
    def __init__(self, config: Optional[SimulationConfig] = None, rng: Optional[np.random.Generator] = None):
        """
        Initialize simulation.
        
        Args:
            config: Simulation configuration. Defaults to the reference constants.
            rng: Optional random number generator. If None, one is seeded from
                 config.seed (fresh entropy when the seed is None).
        """
        self.config = config or default_config()
        self.rng = rng
        self.state = SimulationState.INITIALIZING
        self.selection: Optional[SelectionFilter] = None
        self.generation: Optional[Generation] = None
        self.pool: AllelePool = []
    
    @classmethod
    def from_config(cls, config_path: str, rng: Optional[np.random.Generator] = None) -> 'Simulation':
        """
        Create a Simulation instance from a configuration file (convenience factory method).
        
        Args:
            config_path: Path to YAML/JSON configuration file
            rng: Optional random number generator
        
        Returns:
            Initialized Simulation instance
        """
        return cls(load_config(config_path), rng)
    
    def initialize(self) -> None:
        """Build the founding allele pool and selection policy."""
        if self.rng is None:
            self.rng = np.random.Generator(np.random.PCG64(self.config.seed))
        
        self.selection = SelectionFilter(self.config.malaria_survival)
        self.generation = Generation(0, self.config.total_alleles, self.config.debug)
        self.pool = generate_alleles(
            self.config.initial_a, self.config.initial_s, self.config.total_alleles
        )
        self.state = SimulationState.STEPPING
    
    def step(self) -> GenerationStats:
        """
        Run one generation and replace the pool with the regenerated one.
        
        Returns:
            GenerationStats of the generation just executed
        """
        if self.state is SimulationState.INITIALIZING:
            self.initialize()
        elif self.state is SimulationState.DONE:
            raise SimulationError("Simulation has already finished")
        
        stats = self.generation.execute_cycle(self.pool, self.selection, self.rng)
        if self.config.debug:
            logger.debug("gen %d | %s", stats.generation, stats.summary)
        
        self.pool = regenerate(
            stats.summary.percent_a, stats.summary.percent_s, self.config.total_alleles
        )
        self.generation.advance()
        return stats
    
    def run(self, generations: Optional[int] = None) -> SimulationResults:
        """
        Execute the simulation from initialization through all generations.
        
        Args:
            generations: Number of generations. Defaults to config.generations.
        
        Returns:
            SimulationResults object with the final composition
        
        Raises:
            InvariantError: If an internal invariant is violated
            SimulationError: If simulation fails during execution
        """
        if generations is None:
            generations = self.config.generations
        if generations < 0:
            raise SimulationError(f"generations must be non-negative, got {generations}")
        
        start_time = datetime.now()
        
        try:
            if self.state is not SimulationState.STEPPING:
                self.initialize()
            
            final_summary = None
            for _ in range(generations):
                final_summary = self.step().summary
            
            if final_summary is None:
                final_summary = summarize(self.pool, self.rng, self.config.total_alleles)
            
            self.state = SimulationState.DONE
        except InvariantError:
            raise
        except Exception as e:
            raise SimulationError(f"Simulation failed: {e}") from e
        
        end_time = datetime.now()
        logger.info("total | %s", final_summary)
        
        return SimulationResults(
            percent_a=final_summary.percent_a,
            percent_s=final_summary.percent_s,
            final_summary=final_summary,
            generations_completed=generations,
            seed=self.config.seed,
            start_time=start_time,
            end_time=end_time,
            duration_seconds=(end_time - start_time).total_seconds()
        )


def run_simulation(
    generations: int,
    config: Optional[SimulationConfig] = None,
    rng: Optional[np.random.Generator] = None
) -> Tuple[int, int]:
    """
    Run one population for `generations` generations.
    
    Returns:
        Final (percent_A, percent_S)
    """
    return Simulation(config, rng).run(generations).as_tuple()
