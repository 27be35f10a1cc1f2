"""Constantes centrais utilizadas pelos operadores de recombinação.

Centralizar os limites evita literais mágicos espalhados entre o operador de
crossover, os esquemas de configuração e os testes.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "DEFAULT_CROSSOVER_METHOD",
    "DEFAULT_LENGTH_POLICY",
    "LOG_FILE_NAME",
    "MIN_CROSS_LENGTH",
    "MIN_POINT_MAXIMUM",
]


MIN_CROSS_LENGTH: Final[int] = 2
"""Menor comprimento compartilhado que admite um ponto de corte interior."""

MIN_POINT_MAXIMUM: Final[int] = 3
"""Piso do limite superior (exclusivo) dos passos do crossover multiponto."""

DEFAULT_CROSSOVER_METHOD: Final[str] = "uniform"

DEFAULT_LENGTH_POLICY: Final[str] = "truncate"

LOG_FILE_NAME: Final[str] = "genecross.log"
