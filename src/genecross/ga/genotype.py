"""Genotype capability contract and two reference representations."""

from __future__ import annotations

import copy
from typing import Any, Iterable, Iterator, Protocol, Sequence, TypeVar, runtime_checkable

import numpy as np

__all__ = [
    "Genotype",
    "ListGenotype",
    "ArrayGenotype",
]

GeneT = TypeVar("GeneT")
G = TypeVar("G", bound="Genotype[Any]")


@runtime_checkable
class Genotype(Protocol[GeneT]):
    """Ordered, cloneable sequence of genes.

    The crossover operators only rely on these four methods; genes just need
    to support equality comparison.
    """

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[GeneT]: ...

    def clone(self: G) -> G: ...

    def rebuild(self, genes: Iterable[GeneT]) -> None: ...


class ListGenotype:
    """Genotype backed by a Python list of arbitrary genes."""

    __slots__ = ("_genes",)

    def __init__(self, genes: Iterable[Any] = ()) -> None:
        self._genes = list(genes)

    def __len__(self) -> int:
        return len(self._genes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._genes)

    def __getitem__(self, index: int) -> Any:
        return self._genes[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ListGenotype):
            return NotImplemented
        return self._genes == other._genes

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ListGenotype({self._genes!r})"

    def clone(self) -> "ListGenotype":
        return ListGenotype(copy.deepcopy(self._genes))

    def rebuild(self, genes: Iterable[Any]) -> None:
        self._genes = list(genes)

    def to_list(self) -> list[Any]:
        return list(self._genes)


class ArrayGenotype:
    """Genotype backed by a 1-dimensional numpy array.

    Suited to bit strings and real-valued vectors. The dtype chosen at
    construction is kept across :meth:`rebuild`.
    """

    __slots__ = ("_genes",)

    def __init__(self, genes: Sequence[Any] | np.ndarray, dtype: Any = None) -> None:
        array = np.array(genes, dtype=dtype)
        if array.ndim != 1:
            raise ValueError("genes must be 1-dimensional")
        self._genes = array

    @property
    def dtype(self) -> np.dtype:
        return self._genes.dtype

    def __len__(self) -> int:
        return int(self._genes.size)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._genes.tolist())

    def __getitem__(self, index: int) -> Any:
        return self._genes[index].item()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ArrayGenotype):
            return NotImplemented
        return bool(np.array_equal(self._genes, other._genes))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ArrayGenotype({self._genes.tolist()!r}, dtype={self._genes.dtype})"

    def clone(self) -> "ArrayGenotype":
        return ArrayGenotype(self._genes.copy())

    def rebuild(self, genes: Iterable[Any]) -> None:
        """Replace the genes, widening the dtype when a gene would not fit it.

        Values of the same kind (ints into a float array, floats into a
        narrower float) keep the current dtype; otherwise the dtype becomes
        ``np.result_type`` of both, so no gene is silently truncated.
        """
        values = np.array(list(genes))
        dtype = self._genes.dtype
        if values.size and not np.can_cast(values.dtype, dtype, casting="same_kind"):
            dtype = np.result_type(dtype, values.dtype)
        self._genes = values.astype(dtype).reshape(-1)

    def to_numpy(self) -> np.ndarray:
        return self._genes.copy()
