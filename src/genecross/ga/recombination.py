"""Population-wide recombination pass running crossover pairs on worker threads."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Mapping, Sequence, TypeVar

from ..config.settings import get_settings
from .crossover import Crossover, config_values, crossover_factory
from .genotype import Genotype
from .rng import RandomSource

if TYPE_CHECKING:
    from ..config.schemas import CrossoverConfig

__all__ = ["RecombinationResult", "recombine_pairs"]

logger = logging.getLogger(__name__)

G = TypeVar("G", bound=Genotype[Any])


@dataclass(frozen=True)
class RecombinationResult(Generic[G]):
    parents: tuple[G, G]
    children: tuple[G, G]


def recombine_pairs(
    pairs: Sequence[tuple[G, G]],
    operator: Crossover | None = None,
    *,
    seed: int | None = None,
    max_workers: int | None = None,
    config: "Mapping[str, object] | CrossoverConfig | None" = None,
) -> list[RecombinationResult[G]]:
    """Cross every parent pair, possibly in parallel.

    ``seed`` and ``max_workers`` fall back to ``config`` and then to
    :class:`~genecross.config.settings.Settings`; without any seed the root
    source draws fresh entropy. ``operator`` defaults to
    ``crossover_factory(config)``.

    Each pair receives its own :class:`RandomSource` spawned from the root
    source, so for a fixed seed the output does not depend on scheduling or on
    ``max_workers``. Results follow the order of ``pairs``. The first failing
    pair re-raises its exception.
    """

    cfg = config_values(config)
    settings = get_settings()
    if seed is None:
        seed = cfg.get("seed")
    if seed is None:
        seed = settings.random_seed
    if max_workers is None:
        max_workers = cfg.get("max_workers")
    if max_workers is None and settings.max_workers > 0:
        max_workers = settings.max_workers
    if operator is None:
        operator = crossover_factory(cfg)

    pairs = list(pairs)
    if not pairs:
        return []
    sources = RandomSource.from_seed(seed).spawn(len(pairs))

    def cross_pair(index: int) -> RecombinationResult[G]:
        ind1, ind2 = pairs[index]
        child1, child2 = operator.cross(ind1, ind2, sources[index])
        return RecombinationResult(parents=(ind1, ind2), children=(child1, child2))

    logger.info(
        "recombining %d pairs", len(pairs), extra={"seed": seed, "max_workers": max_workers}
    )
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = list(executor.map(cross_pair, range(len(pairs))))
    logger.info("recombination finished", extra={"children": 2 * len(results)})
    return results
