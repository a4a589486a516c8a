"""Domain models for sickle_sim."""

from .allele import Allele, AllelePool, generate_alleles, count_alleles
from .genotype import Genotype, pair_alleles, flatten_genotypes
from .selection import SelectionFilter
from .frequency import GenerationSummary, summarize, regenerate
from .generation import Generation, GenerationStats

__all__ = [
    'Allele', 'AllelePool', 'generate_alleles', 'count_alleles',
    'Genotype', 'pair_alleles', 'flatten_genotypes',
    'SelectionFilter',
    'GenerationSummary', 'summarize', 'regenerate',
    'Generation', 'GenerationStats',
]
