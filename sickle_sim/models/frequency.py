"""Conversion between raw allele pools and integer allele shares.

Shares are expressed in units of the canonical pool size (`total_alleles`),
which makes them integer percentages for the default pool of 100 alleles.
Regenerating a pool from its shares is how the population is renormalized
back to the canonical size every generation: survival only changes the ratio
of alleles carried forward, never the pool size.
"""

from dataclasses import dataclass

import numpy as np

from .allele import AllelePool, count_alleles, generate_alleles
from ..exceptions import InvariantError


@dataclass(frozen=True)
class GenerationSummary:
    """Composition of one generation's allele pool."""
    percent_a: int
    percent_s: int
    count_a: int
    count_s: int
    
    @property
    def is_extinct(self) -> bool:
        """True when no alleles were left to count."""
        return self.count_a + self.count_s == 0
    
    def __str__(self) -> str:
        return f"A: {self.count_a} ({self.percent_a}%), S: {self.count_s} ({self.percent_s}%)"


def summarize(pool: AllelePool, rng: np.random.Generator, total_alleles: int = 100) -> GenerationSummary:
    """
    Count a pool's alleles and convert them to integer shares.
    
    Each share is truncated toward zero. When truncation drops a unit (the
    shares sum to `total_alleles - 1`) a fair coin decides whether A or S gets
    it, regardless of which fractional remainder was larger.
    
    Args:
        pool: Non-empty allele pool of any length
        rng: NumPy random number generator (used only for the tie-break)
        total_alleles: Unit the shares are expressed in
        
    Returns:
        GenerationSummary whose shares sum to `total_alleles`
        
    Raises:
        InvariantError: If the pool is empty or its counts are inconsistent
    """
    if not pool:
        raise InvariantError("Cannot summarize an empty allele pool")
    
    count_a, count_s = count_alleles(pool)
    size = len(pool)
    
    # Integer arithmetic keeps exact shares (e.g. 29/100) from truncating to one less.
    percent_a = count_a * total_alleles // size
    percent_s = count_s * total_alleles // size
    
    shortfall = total_alleles - (percent_a + percent_s)
    if shortfall == 1:
        if rng.random() < 0.5:
            percent_a += 1
        else:
            percent_s += 1
    elif shortfall != 0:
        raise InvariantError(
            f"Truncated shares A={percent_a}, S={percent_s} cannot be completed to {total_alleles}"
        )
    
    return GenerationSummary(
        percent_a=percent_a,
        percent_s=percent_s,
        count_a=count_a,
        count_s=count_s
    )


def regenerate(percent_a: int, percent_s: int, total_alleles: int = 100) -> AllelePool:
    """
    Build the next generation's canonical pool from integer shares.
    
    Raises:
        InvariantError: If the shares don't sum to `total_alleles`
    """
    if percent_a + percent_s != total_alleles:
        raise InvariantError(
            f"Shares A={percent_a}, S={percent_s} must sum to {total_alleles}"
        )
    return generate_alleles(percent_a, percent_s, total_alleles)
