"""Allele model and allele pool helpers for sickle_sim."""

from enum import Enum
from typing import List, Tuple

from ..exceptions import InvariantError


class Allele(Enum):
    """The two variants of the beta-globin locus."""
    A = "A"  # Normal haemoglobin
    S = "S"  # Sickle haemoglobin


# One generation's gamete supply. Order only matters to the pairing step.
AllelePool = List[Allele]


def generate_alleles(count_a: int, count_s: int, total_alleles: int) -> AllelePool:
    """
    Build a canonical pool of `count_a` A alleles followed by `count_s` S alleles.
    
    Args:
        count_a: Number of A alleles
        count_s: Number of S alleles
        total_alleles: Required pool size
        
    Returns:
        New allele pool of exactly `total_alleles` alleles
        
    Raises:
        InvariantError: If the counts don't add up to `total_alleles`
    """
    if count_a < 0 or count_s < 0 or count_a + count_s != total_alleles:
        raise InvariantError(
            f"Cannot generate pool of {total_alleles} alleles from A={count_a}, S={count_s}"
        )
    return [Allele.A] * count_a + [Allele.S] * count_s


def count_alleles(pool: AllelePool) -> Tuple[int, int]:
    """
    Count the A and S alleles in a pool.
    
    Raises:
        InvariantError: If the pool holds anything other than A and S alleles
    """
    count_a = sum(1 for allele in pool if allele is Allele.A)
    count_s = sum(1 for allele in pool if allele is Allele.S)
    if count_a + count_s != len(pool):
        raise InvariantError(
            f"Allele counts A={count_a}, S={count_s} don't match pool size {len(pool)}"
        )
    return count_a, count_s
