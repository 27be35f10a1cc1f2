"""Public API for the genetic-algorithm recombination components."""

from .crossover import (
    Crossover,
    CrossoverFunction,
    CrossoverOperator,
    LengthPolicy,
    crossover_factory,
    multi_point_crossover,
    single_point_crossover,
    uniform_crossover,
)
from .errors import CrossoverError, GenotypeLengthMismatch, GenotypeTooShort, InvalidRange
from .genotype import ArrayGenotype, Genotype, ListGenotype
from .recombination import RecombinationResult, recombine_pairs
from .rng import (
    RandomSource,
    UniformIntSource,
    as_random_source,
    seed_thread_sources,
    thread_local_source,
)

__all__ = [
    "ArrayGenotype",
    "Crossover",
    "CrossoverError",
    "CrossoverFunction",
    "CrossoverOperator",
    "Genotype",
    "GenotypeLengthMismatch",
    "GenotypeTooShort",
    "InvalidRange",
    "LengthPolicy",
    "ListGenotype",
    "RandomSource",
    "RecombinationResult",
    "UniformIntSource",
    "as_random_source",
    "crossover_factory",
    "multi_point_crossover",
    "recombine_pairs",
    "seed_thread_sources",
    "single_point_crossover",
    "thread_local_source",
    "uniform_crossover",
]
