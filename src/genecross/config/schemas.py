"""Pydantic schemas for configuration validation.

YAML files describing a recombination pass (operator choice, length policy,
seed and worker count) validate against :class:`CrossoverConfig`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..ga.crossover import CrossoverFunction, LengthPolicy

__all__ = ["CrossoverConfig"]


class CrossoverConfig(BaseModel):
    """Crossover operator configuration.

    Attributes
    ----------
    method : CrossoverFunction
        Operator to apply; accepts ``single_point``, ``multi_point``,
        ``uniform`` or tags such as ``SinglePoint``
    length_policy : LengthPolicy
        ``truncate`` drops the longer parent's extra genes, ``strict`` rejects
        parents of different lengths
    seed : Optional[int]
        Root seed of the recombination pass
    max_workers : Optional[int]
        Worker threads used by the recombination pass
    """

    model_config = ConfigDict(extra="forbid")

    method: CrossoverFunction = Field(
        default=CrossoverFunction.UNIFORM, description="Crossover operator"
    )
    length_policy: LengthPolicy = Field(
        default=LengthPolicy.TRUNCATE, description="Parent length mismatch policy"
    )
    seed: int | None = Field(default=None, ge=0, description="Root random seed")
    max_workers: int | None = Field(default=None, ge=1, description="Worker threads")

    @field_validator("method", mode="before")
    @classmethod
    def normalise_method(cls, v: object) -> CrossoverFunction:
        """Accept the tag spellings understood by :meth:`CrossoverFunction.parse`."""
        return CrossoverFunction.parse(v)  # type: ignore[arg-type]

    @field_validator("length_policy", mode="before")
    @classmethod
    def lowercase_policy(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v
