"""
Binary hypervector type and the core HDC algebra.

Hypervectors live in the Boolean hypercube {0, 1}^D, typically with
D = 10,000. They are stored as packed bit-sets so that binding and distance
computations run as bytewise numpy operations.

Operations:
- Binding: XOR (self-inverse, result dissimilar to both inputs)
- Bundling: per-component majority vote (result similar to the majority)
- Permutation: cyclic shift (encodes position/role)
- Hamming distance: popcount of the XOR
"""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence

from hdseq.core.errors import DimensionMismatchError, InvalidDimensionError


# Lookup table for fast popcount on bytes
_POPCOUNT_TABLE = np.array([bin(i).count('1') for i in range(256)], dtype=np.uint32)


def _n_bytes(dim: int) -> int:
    return (dim + 7) // 8


def _clear_padding(data: np.ndarray, dim: int) -> np.ndarray:
    """Zero the unused low bits of the last byte (in place)."""
    used = dim % 8
    if used:
        data[-1] &= np.uint8((0xFF << (8 - used)) & 0xFF)
    return data


def _padding_set(data: np.ndarray, dim: int) -> bool:
    used = dim % 8
    return bool(used) and bool(data[-1] & ((1 << (8 - used)) - 1))


def _check_dim(dim: int) -> None:
    if dim <= 0:
        raise InvalidDimensionError(f"Dimension must be positive, got {dim}")


class Hypervector:
    """
    A binary hypervector in the Hamming cube H^D.

    Internally stored as a packed numpy array of uint8 (each byte = 8 bits,
    component ``p`` in bit ``7 - p % 8`` of byte ``p // 8``). Padding bits
    past ``dim`` are always zero so popcounts and distances stay exact.

    The constructor copies the packed buffer, rejects set padding bits and
    marks the copy read-only; every operation returns a new vector.

    Attributes:
        dim: The dimension D of the hypervector
        data: The packed binary data as uint8 array

    Example:
        >>> hv = Hypervector.random(10000)
        >>> print(hv.dim)  # 10000
        >>> print(len(hv.data))  # 1250 bytes
    """

    __slots__ = ('dim', 'data')

    def __init__(self, data: np.ndarray, dim: Optional[int] = None):
        """
        Initialize a hypervector from packed uint8 data.

        Args:
            data: Packed binary data as uint8 numpy array
            dim: Original dimension (needed if dim % 8 != 0)
        """
        if data.dtype != np.uint8:
            raise ValueError(f"Data must be uint8, got {data.dtype}")
        dim = dim if dim is not None else len(data) * 8
        _check_dim(dim)
        if data.ndim != 1 or len(data) != _n_bytes(dim):
            raise ValueError(
                f"Packed length {len(data)} does not fit dimension {dim}"
            )
        data = data.copy()
        if _padding_set(data, dim):
            raise ValueError(f"Padding bits past dimension {dim} must be zero")
        data.setflags(write=False)
        self.data = data
        self.dim = dim

    @classmethod
    def random(cls, dim: int, rng: Optional[np.random.Generator] = None) -> Hypervector:
        """
        Generate a random binary hypervector.

        Each bit is independently set to 0 or 1 with equal probability.

        Args:
            dim: Dimension of the hypervector
            rng: Optional numpy random generator for reproducibility

        Returns:
            A random Hypervector of the specified dimension
        """
        _check_dim(dim)
        if rng is None:
            rng = np.random.default_rng()
        data = rng.integers(0, 256, size=_n_bytes(dim), dtype=np.uint8)
        return cls(_clear_padding(data, dim), dim)

    @classmethod
    def zeros(cls, dim: int) -> Hypervector:
        """Create an all-zeros hypervector (identity for XOR)."""
        _check_dim(dim)
        return cls(np.zeros(_n_bytes(dim), dtype=np.uint8), dim)

    @classmethod
    def ones(cls, dim: int) -> Hypervector:
        """Create an all-ones hypervector."""
        _check_dim(dim)
        data = np.full(_n_bytes(dim), 255, dtype=np.uint8)
        return cls(_clear_padding(data, dim), dim)

    @classmethod
    def from_bits(cls, bits: np.ndarray) -> Hypervector:
        """
        Create a hypervector from an unpacked bit array.

        Args:
            bits: 1D array of 0s and 1s (or booleans)

        Returns:
            Packed Hypervector
        """
        bits = np.asarray(bits).astype(bool)
        if bits.ndim != 1:
            raise ValueError(f"Expected a 1D bit array, got shape {bits.shape}")
        _check_dim(len(bits))
        # packbits zero-pads the final byte
        return cls(np.packbits(bits), len(bits))

    def to_bits(self) -> np.ndarray:
        """Unpack to an array of individual bits."""
        return np.unpackbits(self.data)[:self.dim]

    def copy(self) -> Hypervector:
        """Create a deep copy."""
        return Hypervector(self.data.copy(), self.dim)

    def __repr__(self) -> str:
        return f"Hypervector(dim={self.dim}, popcount={popcount(self)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hypervector):
            return False
        return self.dim == other.dim and np.array_equal(self.data, other.data)

    def __hash__(self) -> int:
        return hash((self.dim, self.data.tobytes()))

    def __xor__(self, other: Hypervector) -> Hypervector:
        """Bind operation via XOR."""
        return bind(self, other)

    def __invert__(self) -> Hypervector:
        """Bitwise NOT (the exact complement)."""
        data = np.bitwise_not(self.data)
        return Hypervector(_clear_padding(data, self.dim), self.dim)


def _check_same_dim(a: Hypervector, b: Hypervector) -> None:
    if a.dim != b.dim:
        raise DimensionMismatchError(f"Dimension mismatch: {a.dim} vs {b.dim}")


def generate_hypervectors(
    count: int,
    dim: int,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> List[Hypervector]:
    """
    Generate ``count`` independent random hypervectors of dimension ``dim``.

    The random source is explicit: pass a numpy Generator to share one
    stream across several calls, or a seed for a reproducible fresh stream.
    With neither, an unseeded generator is used.

    Raises:
        InvalidDimensionError: If count or dim is not positive
    """
    if count <= 0:
        raise InvalidDimensionError(f"Vector count must be positive, got {count}")
    _check_dim(dim)
    if rng is None:
        rng = np.random.default_rng(seed)
    return [Hypervector.random(dim, rng) for _ in range(count)]


def random_hypervector(dim: int, seed: Optional[int] = None) -> Hypervector:
    """
    Convenience function to generate a random hypervector.

    Args:
        dim: Dimension
        seed: Optional random seed

    Returns:
        Random Hypervector
    """
    return Hypervector.random(dim, np.random.default_rng(seed))


def bind(a: Hypervector, b: Hypervector) -> Hypervector:
    """
    Binding operation using XOR.

    Properties:
    - Commutative: bind(a, b) = bind(b, a)
    - Self-inverse: bind(a, bind(a, b)) = b, bind(a, a) = 0
    - Preserves distance: d(bind(a,c), bind(b,c)) = d(a, b)
    - Result is dissimilar to both inputs (orthogonal in expectation)

    Raises:
        DimensionMismatchError: If dimensions don't match
    """
    _check_same_dim(a, b)
    return Hypervector(np.bitwise_xor(a.data, b.data), a.dim)


def bind_multiple(*vectors: Hypervector) -> Hypervector:
    """
    Bind multiple vectors together via chained XOR.

    Each component of the result is the parity of the inputs at that index.
    """
    if not vectors:
        raise ValueError("Need at least one vector")
    result = vectors[0]
    for v in vectors[1:]:
        result = bind(result, v)
    return result


class BundleAccumulator:
    """
    Running per-component counts for majority bundling.

    Vectors are added one at a time and thresholded once at the end, so the
    inputs never have to be held in memory together.

    Example:
        >>> acc = BundleAccumulator(10000)
        >>> for hv in vectors:
        ...     acc.add(hv)
        >>> result = acc.finalize()
    """

    def __init__(self, dim: int):
        _check_dim(dim)
        self.dim = dim
        self.count = 0
        self.counts = np.zeros(dim, dtype=np.int64)

    def add(self, vector: Hypervector) -> None:
        if vector.dim != self.dim:
            raise DimensionMismatchError(
                f"Dimension mismatch: {self.dim} vs {vector.dim}"
            )
        self.counts += vector.to_bits()
        self.count += 1

    def finalize(self) -> Hypervector:
        """
        Threshold the counts: a bit is set iff strictly more than half of
        the added vectors had it set. Exact ties resolve to 0.
        """
        if self.count == 0:
            raise ValueError("Need at least one vector to bundle")
        return Hypervector.from_bits(2 * self.counts > self.count)


def bundle(vectors: Sequence[Hypervector]) -> Hypervector:
    """
    Bundling operation using majority vote.

    Creates a hypervector that is similar to the majority of its inputs.

    Algorithm:
    1. For each bit position, count the 1s across all vectors
    2. If count > n/2: output 1, else output 0 (ties give 0)

    Raises:
        ValueError: If no vectors are given
        DimensionMismatchError: If vectors have different dimensions
    """
    if not vectors:
        raise ValueError("Need at least one vector to bundle")

    acc = BundleAccumulator(vectors[0].dim)
    for v in vectors:
        acc.add(v)
    return acc.finalize()


def permute(v: Hypervector, shifts: int = 1) -> Hypervector:
    """
    Permutation operation via circular bit shift.

    The component at index p moves to index (p + shifts) mod D.

    Properties:
    - permute(v, 0) = v
    - permute(permute(v, k), D - k) = v
    - similarity(v, permute(v, k)) ≈ 0 for 0 < k < D

    Args:
        v: Input hypervector
        shifts: Number of positions to shift (positive = towards higher indices)

    Returns:
        Circularly shifted hypervector
    """
    shifts %= v.dim
    if shifts == 0:
        return v
    return Hypervector.from_bits(np.roll(v.to_bits(), shifts))


def inverse_permute(v: Hypervector, shifts: int = 1) -> Hypervector:
    """Inverse of permute: shift in opposite direction."""
    return permute(v, -shifts)


def popcount(v: Hypervector) -> int:
    """
    Population count: number of 1-bits in the hypervector.

    Uses a byte lookup table over the packed data.
    """
    return int(np.sum(_POPCOUNT_TABLE[v.data]))


def hamming_distance(a: Hypervector, b: Hypervector) -> int:
    """
    Hamming distance: number of bit positions that differ.

    d_H(a, b) = popcount(a XOR b)
    """
    _check_same_dim(a, b)
    xor_result = np.bitwise_xor(a.data, b.data)
    return int(np.sum(_POPCOUNT_TABLE[xor_result]))


def pack_matrix(vectors: Sequence[Hypervector]) -> np.ndarray:
    """
    Stack the packed data of equal-dimension vectors into a 2D uint8 matrix.

    Raises:
        ValueError: If no vectors are given
        DimensionMismatchError: If vectors have different dimensions
    """
    if not vectors:
        raise ValueError("Need at least one vector to stack")
    dim = vectors[0].dim
    for v in vectors:
        if v.dim != dim:
            raise DimensionMismatchError(f"Dimension mismatch: {dim} vs {v.dim}")
    return np.stack([v.data for v in vectors])


def hamming_distances(query: Hypervector, matrix: np.ndarray, dim: int) -> np.ndarray:
    """
    Hamming distance from ``query`` to every row of a packed matrix.

    Args:
        query: Query hypervector
        matrix: Output of :func:`pack_matrix`, shape (n, ceil(D / 8))
        dim: Dimension D of the vectors packed into ``matrix``

    Returns:
        int64 array of n distances
    """
    if query.dim != dim:
        raise DimensionMismatchError(f"Dimension mismatch: {dim} vs {query.dim}")
    if matrix.ndim != 2 or matrix.shape[1] != _n_bytes(dim):
        raise ValueError(
            f"Matrix of shape {matrix.shape} does not hold packed {dim}-dim rows"
        )
    xor_result = np.bitwise_xor(matrix, query.data)
    return _POPCOUNT_TABLE[xor_result].sum(axis=1).astype(np.int64)


def similarity(a: Hypervector, b: Hypervector) -> float:
    """
    Cosine-like similarity in Hamming space.

    sim(a, b) = 1 - 2 * d_H(a, b) / D

    Properties:
    - Range: [-1, 1]
    - sim(a, a) = 1
    - sim(a, ~a) = -1
    - E[sim(random, random)] ≈ 0
    """
    d = hamming_distance(a, b)
    return 1.0 - 2.0 * d / a.dim


def normalized_hamming(a: Hypervector, b: Hypervector) -> float:
    """Normalized Hamming distance in [0, 1] (0 = identical, 1 = opposite)."""
    return hamming_distance(a, b) / a.dim
