"""Console report of aggregated population results."""

import sys
from typing import List, TextIO, Optional

from .runner import PopulationResults


def format_report(results: PopulationResults) -> List[str]:
    """Format the aggregate statistics, one line per statistic."""
    a, s = results.a, results.s
    return [
        f"  med | A: {a.median}, S: {s.median}",
        f"  avg | A: {a.mean}, S: {s.mean}",
        f"  min | A: {a.minimum}, S: {s.minimum}",
        f"  max | A: {a.maximum}, S: {s.maximum}",
        f"range | A: {a.range}, S: {s.range}",
    ]


def print_report(results: PopulationResults, stream: Optional[TextIO] = None) -> None:
    """Write the report preceded by a blank line."""
    stream = stream or sys.stdout
    print(file=stream)
    for line in format_report(results):
        print(line, file=stream)
