"""Crossover operators for genotype pairs."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Protocol, Sequence, TypeVar

import numpy as np

from ..config.constants import (
    DEFAULT_CROSSOVER_METHOD,
    DEFAULT_LENGTH_POLICY,
    MIN_CROSS_LENGTH,
    MIN_POINT_MAXIMUM,
)
from .errors import GenotypeLengthMismatch, GenotypeTooShort
from .genotype import Genotype
from .rng import UniformIntSource, as_random_source

if TYPE_CHECKING:
    from ..config.schemas import CrossoverConfig

__all__ = [
    "CrossoverFunction",
    "LengthPolicy",
    "Crossover",
    "CrossoverOperator",
    "shared_length",
    "single_cross_point",
    "multi_cross_points",
    "single_point_mask",
    "multi_point_mask",
    "uniform_mask",
    "single_point_crossover",
    "multi_point_crossover",
    "uniform_crossover",
    "config_values",
    "crossover_factory",
]

logger = logging.getLogger(__name__)

G = TypeVar("G", bound=Genotype[Any])
RngLike = UniformIntSource | np.random.Generator | int | None


class CrossoverFunction(str, Enum):
    SINGLE_POINT = "single_point"
    MULTI_POINT = "multi_point"
    UNIFORM = "uniform"

    @classmethod
    def parse(cls, name: "CrossoverFunction | str") -> "CrossoverFunction":
        """Resolve enum members, their values or tags such as ``SinglePoint``."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "").replace("_", "")
        for noise in ("crosspoint", "cross"):
            key = key.replace(noise, "")
        aliases = {
            "singlepoint": cls.SINGLE_POINT,
            "single": cls.SINGLE_POINT,
            "multipoint": cls.MULTI_POINT,
            "multi": cls.MULTI_POINT,
            "uniform": cls.UNIFORM,
        }
        try:
            return aliases[key]
        except KeyError:
            raise ValueError(f"unsupported crossover method '{name}'") from None


class LengthPolicy(str, Enum):
    """What to do when parents have different lengths."""

    TRUNCATE = "truncate"
    STRICT = "strict"


class Crossover(Protocol):
    def cross(self, ind1: G, ind2: G, rng: RngLike = None) -> tuple[G, G]: ...


def shared_length(
    ind1: Genotype[Any],
    ind2: Genotype[Any],
    policy: LengthPolicy | str = LengthPolicy.TRUNCATE,
) -> int:
    length1, length2 = len(ind1), len(ind2)
    if length1 != length2 and LengthPolicy(policy) is LengthPolicy.STRICT:
        raise GenotypeLengthMismatch(length1, length2)
    return min(length1, length2)


def _require_cross_length(length: int) -> None:
    if length < MIN_CROSS_LENGTH:
        raise GenotypeTooShort(length, MIN_CROSS_LENGTH)


def single_cross_point(length: int, source: UniformIntSource) -> int:
    """Draw the single cross point from ``[1, length)``."""
    _require_cross_length(length)
    return source.uniform_int(1, length)


def multi_cross_points(length: int, source: UniformIntSource) -> list[int]:
    """Draw ascending segment boundaries ending with ``length`` itself.

    Steps are drawn from ``[1, point_maximum)`` with
    ``point_maximum = max(length // 2, 3)`` and accumulated until the running
    total reaches ``length``.
    """
    _require_cross_length(length)
    point_maximum = max(length // 2, MIN_POINT_MAXIMUM)
    points: list[int] = []
    position = source.uniform_int(1, point_maximum)
    while position < length:
        points.append(position)
        position += source.uniform_int(1, point_maximum)
    points.append(length)
    return points


def single_point_mask(length: int, cross_point: int) -> np.ndarray:
    return np.arange(length) < cross_point


def multi_point_mask(length: int, cross_points: Sequence[int]) -> np.ndarray:
    # Segment of i is the index of the first boundary strictly greater than i.
    segments = np.searchsorted(np.asarray(cross_points), np.arange(length), side="right")
    return segments % 2 == 0


def uniform_mask(length: int) -> np.ndarray:
    return np.arange(length) % 2 == 0


def _recombine(ind1: G, ind2: G, mask: np.ndarray) -> tuple[G, G]:
    # ``mask[i]`` true: child1 takes ind1's gene and child2 takes ind2's.
    child1 = ind1.clone()
    child2 = ind2.clone()
    length = mask.size
    genes1 = list(child1)[:length]
    genes2 = list(child2)[:length]
    child1.rebuild(
        gene1 if first else gene2 for gene1, gene2, first in zip(genes1, genes2, mask)
    )
    child2.rebuild(
        gene2 if first else gene1 for gene1, gene2, first in zip(genes1, genes2, mask)
    )
    return child1, child2


def single_point_crossover(
    ind1: G,
    ind2: G,
    rng: RngLike = None,
    *,
    length_policy: LengthPolicy | str = LengthPolicy.TRUNCATE,
) -> tuple[G, G]:
    length = shared_length(ind1, ind2, length_policy)
    cross_point = single_cross_point(length, as_random_source(rng))
    logger.debug("single-point crossover: length=%d cross_point=%d", length, cross_point)
    return _recombine(ind1, ind2, single_point_mask(length, cross_point))


def multi_point_crossover(
    ind1: G,
    ind2: G,
    rng: RngLike = None,
    *,
    length_policy: LengthPolicy | str = LengthPolicy.TRUNCATE,
) -> tuple[G, G]:
    length = shared_length(ind1, ind2, length_policy)
    cross_points = multi_cross_points(length, as_random_source(rng))
    logger.debug("multi-point crossover: length=%d cross_points=%s", length, cross_points)
    return _recombine(ind1, ind2, multi_point_mask(length, cross_points))


def uniform_crossover(
    ind1: G,
    ind2: G,
    rng: RngLike = None,
    *,
    length_policy: LengthPolicy | str = LengthPolicy.TRUNCATE,
) -> tuple[G, G]:
    """Alternate parents by position parity.

    Even positions of ``child1`` come from ``ind1`` and odd ones from ``ind2``;
    ``child2`` is the complement. No random draws are made, ``rng`` is
    accepted for signature compatibility only.
    """
    length = shared_length(ind1, ind2, length_policy)
    return _recombine(ind1, ind2, uniform_mask(length))


_DISPATCH = {
    CrossoverFunction.SINGLE_POINT: single_point_crossover,
    CrossoverFunction.MULTI_POINT: multi_point_crossover,
    CrossoverFunction.UNIFORM: uniform_crossover,
}


@dataclass(frozen=True)
class CrossoverOperator:
    """Stateless crossover selection, safe to share between threads."""

    function: CrossoverFunction = CrossoverFunction.UNIFORM
    length_policy: LengthPolicy = LengthPolicy.TRUNCATE

    def __post_init__(self) -> None:
        object.__setattr__(self, "function", CrossoverFunction.parse(self.function))
        object.__setattr__(self, "length_policy", LengthPolicy(self.length_policy))

    def cross(self, ind1: G, ind2: G, rng: RngLike = None) -> tuple[G, G]:
        return _DISPATCH[self.function](ind1, ind2, rng, length_policy=self.length_policy)

    __call__ = cross


def config_values(config: "Mapping[str, object] | CrossoverConfig | None") -> dict[str, Any]:
    """Plain dict view of a crossover configuration mapping or model."""
    if config is None:
        return {}
    if isinstance(config, Mapping):
        return dict(config)
    return config.model_dump()


def crossover_factory(
    config: "Mapping[str, object] | CrossoverConfig | None" = None,
) -> CrossoverOperator:
    cfg = config_values(config)
    method = cfg.get("method") or DEFAULT_CROSSOVER_METHOD
    policy = cfg.get("length_policy") or DEFAULT_LENGTH_POLICY
    return CrossoverOperator(
        function=CrossoverFunction.parse(method),
        length_policy=LengthPolicy(policy),
    )
