"""genecross: operadores de recombinação para algoritmos genéticos.

O código-fonte vive em `src/genecross/`. Os operadores de crossover ficam em
:mod:`genecross.ga` e a configuração (settings, YAML, logging) em
:mod:`genecross.config`.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .ga import (
    CrossoverFunction,
    CrossoverOperator,
    RandomSource,
    crossover_factory,
    recombine_pairs,
)

try:  # pragma: no cover - depende de instalação do pacote
    __version__ = version("genecross")
except PackageNotFoundError:  # pragma: no cover - fallback para ambiente sem install
    __version__ = "0.0.0"

__all__ = [
    "CrossoverFunction",
    "CrossoverOperator",
    "RandomSource",
    "crossover_factory",
    "recombine_pairs",
    "__version__",
]
