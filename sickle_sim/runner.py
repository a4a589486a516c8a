"""Run many independent populations and collect their final compositions."""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from typing import List, Tuple, Optional

import numpy as np

from .config import SimulationConfig, default_config
from .exceptions import SimulationError
from .simulation import Simulation
from .statistics import AlleleStatistics, compute_statistics

logger = logging.getLogger(__name__)


@dataclass
class PopulationResults:
    """Final compositions of every population plus their aggregates."""
    results: List[Tuple[int, int]]  # (percent_A, percent_S) in population order
    a: AlleleStatistics
    s: AlleleStatistics
    seed: Optional[int]
    duration_seconds: float
    
    @property
    def percents_a(self) -> List[int]:
        return [a for a, _ in self.results]
    
    @property
    def percents_s(self) -> List[int]:
        return [s for _, s in self.results]


def run_population(config: SimulationConfig, seed_seq: np.random.SeedSequence) -> Tuple[int, int]:
    """Run one population on its own random stream. Must stay picklable."""
    rng = np.random.Generator(np.random.PCG64(seed_seq))
    return Simulation(config, rng).run().as_tuple()


class PopulationRunner:
    """
    Fans out one simulation per population and waits for all of them.
    
    Every population gets a child SeedSequence spawned from the master seed,
    so a fixed seed reproduces the whole batch regardless of worker count
    or completion order.
    """
    
    def __init__(self, config: Optional[SimulationConfig] = None):
        self.config = config or default_config()
    
    def spawn_seeds(self) -> List[np.random.SeedSequence]:
        """Create one independent seed sequence per population."""
        master = np.random.SeedSequence(self.config.seed)
        return master.spawn(self.config.populations)
    
    def run(self) -> PopulationResults:
        """
        Run all populations and aggregate their final shares.
        
        Returns:
            PopulationResults with per-population results and statistics
        
        Raises:
            SimulationError: If any population fails
        """
        start_time = datetime.now()
        seeds = self.spawn_seeds()
        logger.info(
            "running %d populations for %d generations",
            self.config.populations, self.config.generations
        )
        
        if self.config.workers == 1:
            results = self._run_serial(seeds)
        else:
            results = self._run_parallel(seeds)
        
        duration = (datetime.now() - start_time).total_seconds()
        logger.info("finished %d populations in %.2f seconds", len(results), duration)
        
        return PopulationResults(
            results=results,
            a=compute_statistics([a for a, _ in results]),
            s=compute_statistics([s for _, s in results]),
            seed=self.config.seed,
            duration_seconds=duration
        )
    
    def _run_serial(self, seeds: List[np.random.SeedSequence]) -> List[Tuple[int, int]]:
        results = []
        for index, seed_seq in enumerate(seeds):
            try:
                results.append(run_population(self.config, seed_seq))
            except Exception as e:
                raise SimulationError(f"Population {index} failed: {e}") from e
        return results
    
    def _run_parallel(self, seeds: List[np.random.SeedSequence]) -> List[Tuple[int, int]]:
        results = []
        with ProcessPoolExecutor(max_workers=self.config.workers) as pool:
            futures = [
                pool.submit(run_population, self.config, seed_seq)
                for seed_seq in seeds
            ]
            # Every future is awaited before aggregation
            for index, future in enumerate(futures):
                try:
                    results.append(future.result())
                except Exception as e:
                    for pending in futures[index + 1:]:
                        pending.cancel()
                    raise SimulationError(f"Population {index} failed: {e}") from e
        return results
