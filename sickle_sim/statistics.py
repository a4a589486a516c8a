"""Aggregate statistics over the final allele shares of many populations."""

from dataclasses import dataclass
from typing import Sequence

import numpy as np


@dataclass
class AlleleStatistics:
    """Summary of one allele's final share across populations."""
    median: float
    mean: float
    minimum: int
    maximum: int
    range: int


def compute_statistics(values: Sequence[int]) -> AlleleStatistics:
    """
    Compute median, mean, min, max and range of a series of shares.
    
    Args:
        values: Final shares, one per population
        
    Returns:
        AlleleStatistics for the series
        
    Raises:
        ValueError: If `values` is empty
    """
    if len(values) == 0:
        raise ValueError("Cannot compute statistics of an empty series")
    
    data = np.asarray(values, dtype=np.int64)
    minimum = int(data.min())
    maximum = int(data.max())
    return AlleleStatistics(
        median=float(np.median(data)),
        mean=float(data.mean()),
        minimum=minimum,
        maximum=maximum,
        range=maximum - minimum
    )
