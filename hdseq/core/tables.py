"""
Fixed tables of seed hypervectors.

A VectorTable maps dense integer keys ``0..size-1`` to random hypervectors.
The encoder uses two of them: one indexed by symbol value, one indexed by
position inside an n-gram. Tables are generated once and never modified.
"""

from __future__ import annotations
import numbers
import numpy as np
from typing import Iterator, Optional, Sequence, Tuple

from hdseq.core.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    UnknownSymbolError,
)
from hdseq.core.hypervector import Hypervector, generate_hypervectors


class VectorTable:
    """
    Read-only mapping from integer key to Hypervector.

    Attributes:
        dim: Dimension shared by every vector in the table
        vectors: Tuple of hypervectors, indexed by key

    Example:
        >>> rng = np.random.default_rng(0)
        >>> values = VectorTable.random(10, 10000, rng=rng)
        >>> values[3].dim
        10000
    """

    __slots__ = ('vectors', 'dim')

    def __init__(self, vectors: Sequence[Hypervector]):
        if not vectors:
            raise InvalidDimensionError("A vector table needs at least one entry")
        dim = vectors[0].dim
        for v in vectors:
            if v.dim != dim:
                raise DimensionMismatchError(f"Dimension mismatch: {dim} vs {v.dim}")
        self.vectors: Tuple[Hypervector, ...] = tuple(vectors)
        self.dim = dim

    @classmethod
    def random(
        cls,
        size: int,
        dim: int,
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
    ) -> VectorTable:
        """Build a table of ``size`` independent random hypervectors."""
        return cls(generate_hypervectors(size, dim, rng=rng, seed=seed))

    def __len__(self) -> int:
        return len(self.vectors)

    def __iter__(self) -> Iterator[Hypervector]:
        return iter(self.vectors)

    def __contains__(self, key: object) -> bool:
        return is_index(key) and 0 <= key < len(self.vectors)

    def __getitem__(self, key: int) -> Hypervector:
        if key not in self:
            raise UnknownSymbolError(
                f"No hypervector for symbol {key!r} (table holds 0..{len(self) - 1})"
            )
        return self.vectors[key]

    def __repr__(self) -> str:
        return f"VectorTable(size={len(self)}, dim={self.dim})"


def is_index(key: object) -> bool:
    # bool is an Integral but never a valid symbol
    return isinstance(key, numbers.Integral) and not isinstance(key, (bool, np.bool_))
