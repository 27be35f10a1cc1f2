"""Reusable random sources for the recombination operators."""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

import numpy as np

from .errors import InvalidRange

__all__ = [
    "UniformIntSource",
    "RandomSource",
    "as_random_source",
    "seed_thread_sources",
    "thread_local_source",
]


@runtime_checkable
class UniformIntSource(Protocol):
    def uniform_int(self, low: int, high: int) -> int: ...


class RandomSource:
    """Uniform integer sampler backed by a :class:`numpy.random.Generator`.

    One instance is meant to be reused across many draws. Instances are not
    safe to share between threads; hand each worker its own via :meth:`spawn`
    or use :func:`thread_local_source`.
    """

    __slots__ = ("_generator",)

    def __init__(
        self,
        generator: np.random.Generator | None = None,
        *,
        seed: int | np.random.SeedSequence | None = None,
    ) -> None:
        if generator is not None and seed is not None:
            raise ValueError("pass either generator or seed, not both")
        self._generator = generator if generator is not None else np.random.default_rng(seed)

    @classmethod
    def from_seed(cls, seed: int | np.random.SeedSequence | None) -> "RandomSource":
        return cls(seed=seed)

    @property
    def generator(self) -> np.random.Generator:
        return self._generator

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer drawn uniformly from ``[low, high)``."""
        if high <= low:
            raise InvalidRange(low, high)
        return int(self._generator.integers(low, high))

    def spawn(self, n: int) -> list["RandomSource"]:
        """Return ``n`` independent sources derived from this one."""
        if n < 0:
            raise ValueError("n must be non-negative")
        return [RandomSource(child) for child in self._generator.spawn(n)]

    def __repr__(self) -> str:
        return f"RandomSource({self._generator.bit_generator.__class__.__name__})"


_LOCAL = threading.local()
_ROOT_LOCK = threading.Lock()
_ROOT_SEQUENCE = np.random.SeedSequence()
_ROOT_EPOCH = 0


def seed_thread_sources(seed: int | None) -> None:
    """Reseed the root sequence that per-thread sources are spawned from.

    Sources already held by threads are replaced on their next use.
    """

    global _ROOT_SEQUENCE, _ROOT_EPOCH
    with _ROOT_LOCK:
        _ROOT_SEQUENCE = np.random.SeedSequence(seed)
        _ROOT_EPOCH += 1


def thread_local_source() -> RandomSource:
    """Return the calling thread's own :class:`RandomSource`."""
    epoch = getattr(_LOCAL, "epoch", None)
    source = getattr(_LOCAL, "source", None)
    if source is None or epoch != _ROOT_EPOCH:
        with _ROOT_LOCK:
            (child,) = _ROOT_SEQUENCE.spawn(1)
            epoch = _ROOT_EPOCH
        source = RandomSource(seed=child)
        _LOCAL.source = source
        _LOCAL.epoch = epoch
    return source


def as_random_source(
    rng: UniformIntSource | np.random.Generator | int | None,
) -> UniformIntSource:
    """Coerce the accepted ``rng`` arguments into a uniform integer source.

    ``None`` selects the calling thread's own source and integers seed a new
    one. Objects already exposing ``uniform_int`` are used as they are.
    """
    if rng is None:
        return thread_local_source()
    if isinstance(rng, UniformIntSource):
        return rng
    if isinstance(rng, np.random.Generator):
        return RandomSource(rng)
    if isinstance(rng, (int, np.integer)) and not isinstance(rng, bool):
        return RandomSource(seed=int(rng))
    raise TypeError(f"unsupported random source: {type(rng).__name__}")
