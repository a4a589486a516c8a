"""Genotype model and random pairing of an allele pool into individuals."""

from dataclasses import dataclass
from typing import List

import numpy as np

from .allele import Allele, AllelePool
from ..exceptions import InvariantError


@dataclass(frozen=True)
class Genotype:
    """An individual's unordered pair of alleles at the locus."""
    first: Allele
    second: Allele
    
    @property
    def is_heterozygous(self) -> bool:
        return self.first is not self.second
    
    def is_homozygous(self, allele: Allele) -> bool:
        return self.first is allele and self.second is allele
    
    def alleles(self) -> List[Allele]:
        return [self.first, self.second]
    
    def __str__(self) -> str:
        return f"{self.first.value}{self.second.value}"


def pair_alleles(pool: AllelePool, rng: np.random.Generator) -> List[Genotype]:
    """
    Randomly partition an allele pool into genotypes.
    
    The pool is uniformly shuffled and consecutive alleles are paired, so every
    allele ends up in exactly one genotype. The input pool is left untouched.
    
    Args:
        pool: Allele pool of even length
        rng: NumPy random number generator
        
    Returns:
        List of len(pool) // 2 genotypes
        
    Raises:
        InvariantError: If the pool has odd length
    """
    if len(pool) % 2 != 0:
        raise InvariantError(f"Cannot pair an allele pool of odd length {len(pool)}")
    
    order = rng.permutation(len(pool))
    shuffled = [pool[i] for i in order]
    return [
        Genotype(shuffled[i], shuffled[i + 1])
        for i in range(0, len(shuffled), 2)
    ]


def flatten_genotypes(genotypes: List[Genotype]) -> AllelePool:
    """Collect the alleles of a list of genotypes back into a pool."""
    return [allele for genotype in genotypes for allele in genotype.alleles()]
