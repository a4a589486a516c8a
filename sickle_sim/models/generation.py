"""Generation model for coordinating generation cycles."""

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

import numpy as np

from .allele import AllelePool
from .genotype import pair_alleles, flatten_genotypes
from .frequency import GenerationSummary, summarize
from ..exceptions import InvariantError

if TYPE_CHECKING:
    from .selection import SelectionFilter

logger = logging.getLogger(__name__)


@dataclass
class GenerationStats:
    """Statistics for a single generation."""
    generation: int
    individuals: int
    survivors: int
    parents: GenerationSummary  # Composition before selection
    summary: GenerationSummary  # Composition of the survivors


class Generation:
    """Represents a single generation in the simulation."""
    
    def __init__(self, generation_number: int, total_alleles: int = 100, debug: bool = False):
        """
        Initialize generation.
        
        Args:
            generation_number: Generation number (0 = founders)
            total_alleles: Canonical pool size
            debug: Log the pre-selection composition of every cycle
        """
        self.generation_number = generation_number
        self.total_alleles = total_alleles
        self.debug = debug
    
    def execute_cycle(
        self,
        pool: AllelePool,
        selection: 'SelectionFilter',
        rng: np.random.Generator
    ) -> GenerationStats:
        """
        Execute one complete generation cycle.
        
        1. Pair the pool into individuals
        2. Apply malaria/sickle-cell selection
        3. Summarize the survivors
        
        If nobody survives, the pre-selection shares are carried forward with
        zero counts so an extinct population keeps its last composition.
        
        Args:
            pool: Canonical allele pool of the current generation
            selection: Survival policy
            rng: Random number generator
            
        Returns:
            GenerationStats object with both compositions
        """
        genotypes = pair_alleles(pool, rng)
        if len(genotypes) != self.total_alleles // 2:
            raise InvariantError(
                f"Expected {self.total_alleles // 2} individuals, got {len(genotypes)}"
            )
        
        # Canonical pools never hit the tie-break, so this consumes no draws.
        parents = summarize(flatten_genotypes(genotypes), rng, self.total_alleles)
        if self.debug:
            logger.debug("> %s", parents)
        
        survivors = selection.apply(genotypes, rng)
        if survivors:
            summary = summarize(survivors, rng, self.total_alleles)
        else:
            logger.debug("generation %d died out, keeping %s", self.generation_number, parents)
            summary = replace(parents, count_a=0, count_s=0)
        
        return GenerationStats(
            generation=self.generation_number,
            individuals=len(genotypes),
            survivors=len(survivors) // 2,
            parents=parents,
            summary=summary
        )
    
    def advance(self) -> int:
        """
        Advance to next generation.
        
        Returns:
            New generation number
        """
        self.generation_number += 1
        return self.generation_number
