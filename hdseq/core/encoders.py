"""
Encoders for mapping symbol sequences to hypervectors.

A sequence is cut into overlapping n-grams. Inside an n-gram the symbol at
offset j is rotated by j and bound to the position vector for j; the n
bound vectors are XOR-ed into one n-gram vector. All n-gram vectors of the
sequence are then bundled by majority vote:

    gram_i   = XOR_j bind(perm^j(value[s_{i+j}]), position[j])
    sequence = majority(gram_0, ..., gram_{L-n})

Key property: sequences sharing many n-grams produce similar hypervectors,
and the output dimension does not depend on the sequence length.
"""

from __future__ import annotations
import logging
import numpy as np
from typing import Dict, List, Optional, Sequence, Tuple, Union

from hdseq.core.errors import (
    DimensionMismatchError,
    InvalidSequenceLengthError,
    UnknownSymbolError,
)
from hdseq.core.hypervector import (
    BundleAccumulator,
    Hypervector,
    bind,
    permute,
)
from hdseq.core.tables import VectorTable

logger = logging.getLogger(__name__)

TableLike = Union[VectorTable, Sequence[Hypervector]]


def _as_table(vectors: TableLike) -> VectorTable:
    if isinstance(vectors, VectorTable):
        return vectors
    return VectorTable(list(vectors))


def _check_tables(values: VectorTable, positions: VectorTable, n: int) -> None:
    if n < 1:
        raise InvalidSequenceLengthError(f"n-gram length must be at least 1, got {n}")
    if len(positions) != n:
        raise InvalidSequenceLengthError(
            f"Position table has {len(positions)} entries, expected n={n}"
        )
    if values.dim != positions.dim:
        raise DimensionMismatchError(
            f"Dimension mismatch: value table {values.dim} vs position table {positions.dim}"
        )


def _check_sequence(sequence: Sequence[int], values: VectorTable, n: int) -> List[int]:
    symbols = list(sequence)
    if len(symbols) < n:
        raise InvalidSequenceLengthError(
            f"Sequence of length {len(symbols)} is shorter than n={n}"
        )
    for position, symbol in enumerate(symbols):
        if symbol not in values:
            raise UnknownSymbolError(
                f"Unknown symbol {symbol!r} at position {position} "
                f"(value table holds 0..{len(values) - 1})"
            )
    return [int(s) for s in symbols]


def ngram_vectors(
    sequence: Sequence[int],
    value_vectors: TableLike,
    position_vectors: TableLike,
    n: int,
) -> List[Hypervector]:
    """
    Compute the n-gram vectors of a sequence, before bundling.

    Args:
        sequence: Symbol values, each a key of ``value_vectors``
        value_vectors: Table of symbol hypervectors
        position_vectors: Table of exactly ``n`` position hypervectors
        n: N-gram length

    Returns:
        ``len(sequence) - n + 1`` hypervectors, one per window offset
    """
    values = _as_table(value_vectors)
    positions = _as_table(position_vectors)
    _check_tables(values, positions, n)
    symbols = _check_sequence(sequence, values, n)

    bound: Dict[Tuple[int, int], Hypervector] = {}
    grams = []
    for i in range(len(symbols) - n + 1):
        gram = Hypervector.zeros(values.dim)
        for j in range(n):
            key = (symbols[i + j], j)
            if key not in bound:
                bound[key] = bind(permute(values[key[0]], j), positions[j])
            gram = bind(gram, bound[key])
        grams.append(gram)
    return grams


def encode_sequence(
    sequence: Sequence[int],
    value_vectors: TableLike,
    position_vectors: TableLike,
    n: int,
) -> Hypervector:
    """
    Encode a symbol sequence into a single hypervector.

    Args:
        sequence: Symbol values, at least ``n`` of them
        value_vectors: Table of symbol hypervectors
        position_vectors: Table of exactly ``n`` position hypervectors
        n: N-gram length

    Returns:
        Majority bundle of the sequence's n-gram vectors

    Raises:
        InvalidSequenceLengthError: If n < 1, len(sequence) < n, or the
            position table does not hold n vectors
        UnknownSymbolError: If a symbol has no value vector
        DimensionMismatchError: If the two tables differ in dimension
    """
    grams = ngram_vectors(sequence, value_vectors, position_vectors, n)
    acc = BundleAccumulator(grams[0].dim)
    for gram in grams:
        acc.add(gram)
    return acc.finalize()


class NGramSequenceEncoder:
    """
    Sequence encoder that owns its value and position tables.

    Both tables are drawn from one explicitly owned random generator, so a
    seed makes the whole encoder reproducible. The products
    ``bind(permute(value[s], j), position[j])`` depend only on (s, j) and are
    precomputed once, which turns encoding into XOR reductions and a popcount
    over packed rows.

    Output is identical to :func:`encode_sequence` with the same tables.

    Example:
        >>> encoder = NGramSequenceEncoder(dim=10000, n=3, n_symbols=10, seed=0)
        >>> hv = encoder.encode([1, 2, 3, 4, 5])
        >>> hv.dim
        10000

    Attributes:
        dim: Hypervector dimension
        n: N-gram length
        value_vectors: Symbol table (n_symbols entries)
        position_vectors: Position table (n entries)
    """

    def __init__(
        self,
        dim: int = 10000,
        n: int = 3,
        n_symbols: int = 10,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Initialize the encoder with freshly generated tables.

        Args:
            dim: Hypervector dimension
            n: N-gram length
            n_symbols: Number of distinct symbol values (symbols 0..n_symbols-1)
            seed: Random seed, used when no generator is given
            rng: Random generator shared with the caller
        """
        if n < 1:
            raise InvalidSequenceLengthError(f"n-gram length must be at least 1, got {n}")
        if rng is None:
            rng = np.random.default_rng(seed)
        values = VectorTable.random(n_symbols, dim, rng=rng)
        positions = VectorTable.random(n, dim, rng=rng)
        self._init_tables(values, positions, n)

    @classmethod
    def from_tables(
        cls,
        value_vectors: TableLike,
        position_vectors: TableLike,
    ) -> NGramSequenceEncoder:
        """Build an encoder around existing tables; n is the position table size."""
        positions = _as_table(position_vectors)
        encoder = cls.__new__(cls)
        encoder._init_tables(_as_table(value_vectors), positions, len(positions))
        return encoder

    def _init_tables(self, values: VectorTable, positions: VectorTable, n: int) -> None:
        _check_tables(values, positions, n)
        self.value_vectors = values
        self.position_vectors = positions
        self.dim = values.dim
        self.n = n

        # _bound[j, s] holds the packed bind(permute(value[s], j), position[j])
        self._bound = np.stack([
            np.stack([
                bind(permute(values[s], j), positions[j]).data
                for s in range(len(values))
            ])
            for j in range(n)
        ])
        logger.debug(
            "Encoder tables ready: %d symbols, n=%d, dim=%d",
            len(values), n, self.dim,
        )

    @property
    def n_symbols(self) -> int:
        return len(self.value_vectors)

    def _gram_matrix(self, sequence: Sequence[int]) -> np.ndarray:
        """Packed n-gram vectors, shape (num_grams, ceil(dim / 8))."""
        symbols = np.asarray(_check_sequence(sequence, self.value_vectors, self.n))
        num_grams = len(symbols) - self.n + 1
        offsets = np.arange(self.n)
        window = np.arange(num_grams)[:, None] + offsets[None, :]
        parts = self._bound[offsets[None, :], symbols[window]]
        return np.bitwise_xor.reduce(parts, axis=1)

    def encode(self, sequence: Sequence[int]) -> Hypervector:
        """
        Encode one sequence.

        Args:
            sequence: Symbol values in 0..n_symbols-1, at least n of them

        Returns:
            Sequence hypervector
        """
        grams = self._gram_matrix(sequence)
        counts = np.unpackbits(grams, axis=1)[:, :self.dim].sum(axis=0, dtype=np.int64)
        return Hypervector.from_bits(2 * counts > len(grams))

    def encode_batch(self, sequences: Sequence[Sequence[int]]) -> List[Hypervector]:
        """Encode multiple sequences."""
        return [self.encode(seq) for seq in sequences]

    def encode_ngrams(self, sequence: Sequence[int]) -> List[Hypervector]:
        """
        Encode all n-grams of a sequence without bundling them.

        Returns:
            List of n-gram hypervectors, one per window offset
        """
        return [
            Hypervector(row.copy(), self.dim)
            for row in self._gram_matrix(sequence)
        ]

    def __repr__(self) -> str:
        return (
            f"NGramSequenceEncoder(dim={self.dim}, n={self.n}, "
            f"n_symbols={self.n_symbols})"
        )
