"""Configuration for the sequence classification pipeline."""

from __future__ import annotations
import logging
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional

from hdseq.core.errors import (
    InvalidDimensionError,
    InvalidNeighborCountError,
    InvalidSequenceLengthError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HDCConfig:
    """
    Parameters of an encode-and-classify run.

    Attributes:
        dim: Hypervector dimension D
        n: N-gram length
        n_symbols: Number of distinct symbol values (symbols 0..n_symbols-1)
        k: Number of neighbours that vote
        seed: Seed for the hypervector tables (None = unseeded)
        clamp_k: Clamp k to the training set size instead of raising
    """
    dim: int = 10000
    n: int = 3
    n_symbols: int = 10
    k: int = 1
    seed: Optional[int] = None
    clamp_k: bool = True

    def __post_init__(self):
        if self.dim <= 0:
            raise InvalidDimensionError(f"dim must be positive, got {self.dim}")
        if self.n_symbols <= 0:
            raise InvalidDimensionError(f"n_symbols must be positive, got {self.n_symbols}")
        if self.n < 1:
            raise InvalidSequenceLengthError(f"n must be at least 1, got {self.n}")
        if self.k <= 0:
            raise InvalidNeighborCountError(f"k must be positive, got {self.k}")

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> HDCConfig:
        """Build a config from a mapping, ignoring keys that are not fields."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{key: values[key] for key in values if key in known})

    def with_overrides(self, **overrides: Any) -> HDCConfig:
        """Copy of this config with some fields replaced."""
        return replace(self, **overrides)
