"""Malaria/sickle-cell survival filter applied to each generation's individuals."""

from typing import List

import numpy as np

from .allele import Allele, AllelePool
from .genotype import Genotype


class SelectionFilter:
    """
    Heterozygote-advantage survival policy.
    
    (A,A) survives malaria with probability `malaria_survival`, drawn fresh per
    individual. (A,S) always survives. (S,S) never survives.
    """
    
    def __init__(self, malaria_survival: float = 0.5):
        """
        Initialize selection filter.
        
        Args:
            malaria_survival: Survival probability of an (A,A) individual (0.0-1.0)
        """
        if not (0.0 <= malaria_survival <= 1.0):
            raise ValueError(f"malaria_survival must be between 0.0 and 1.0, got {malaria_survival}")
        self.malaria_survival = malaria_survival
    
    def survives(self, genotype: Genotype, rng: np.random.Generator) -> bool:
        """
        Decide whether one individual survives.
        
        Consumes one random draw for (A,A) individuals and none otherwise.
        """
        if genotype.is_heterozygous:
            return True
        if genotype.is_homozygous(Allele.S):
            return False
        return rng.random() < self.malaria_survival
    
    def apply(self, genotypes: List[Genotype], rng: np.random.Generator) -> AllelePool:
        """
        Filter a generation's individuals.
        
        Args:
            genotypes: Individuals of the current generation
            rng: NumPy random number generator
            
        Returns:
            New pool holding both alleles of every survivor
        """
        survivors: AllelePool = []
        for genotype in genotypes:
            if self.survives(genotype, rng):
                survivors.extend(genotype.alleles())
        return survivors
