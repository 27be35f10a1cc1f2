"""Exceptions raised by the crossover operators."""

from __future__ import annotations

__all__ = [
    "CrossoverError",
    "GenotypeTooShort",
    "GenotypeLengthMismatch",
    "InvalidRange",
]


class CrossoverError(ValueError):
    """Base class for recombination failures caused by invalid inputs."""


class GenotypeTooShort(CrossoverError):
    """Raised when parents share too few genes to place a cross point."""

    def __init__(self, length: int, minimum: int = 2) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"genotypes must share at least {minimum} genes, got {length}"
        )


class GenotypeLengthMismatch(CrossoverError):
    """Raised under the strict length policy when parent lengths differ."""

    def __init__(self, length1: int, length2: int) -> None:
        self.length1 = length1
        self.length2 = length2
        super().__init__(f"parent lengths differ: {length1} != {length2}")


class InvalidRange(CrossoverError):
    """Raised when sampling from an empty or inverted half-open range."""

    def __init__(self, low: int, high: int) -> None:
        self.low = low
        self.high = high
        super().__init__(f"empty sampling range [{low}, {high})")
