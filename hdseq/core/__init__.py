"""Core HDC operations module."""

from hdseq.core.hypervector import (
    Hypervector,
    BundleAccumulator,
    bind,
    bind_multiple,
    bundle,
    permute,
    inverse_permute,
    similarity,
    hamming_distance,
    hamming_distances,
    normalized_hamming,
    pack_matrix,
    popcount,
    generate_hypervectors,
    random_hypervector,
)
from hdseq.core.tables import VectorTable
from hdseq.core.encoders import (
    NGramSequenceEncoder,
    encode_sequence,
    ngram_vectors,
)
from hdseq.core.errors import (
    HDCError,
    InvalidDimensionError,
    DimensionMismatchError,
    InvalidSequenceLengthError,
    UnknownSymbolError,
    InvalidNeighborCountError,
    EmptyTrainingSetError,
)

__all__ = [
    "Hypervector",
    "BundleAccumulator",
    "bind",
    "bind_multiple",
    "bundle",
    "permute",
    "inverse_permute",
    "similarity",
    "hamming_distance",
    "hamming_distances",
    "normalized_hamming",
    "pack_matrix",
    "popcount",
    "generate_hypervectors",
    "random_hypervector",
    "VectorTable",
    "NGramSequenceEncoder",
    "encode_sequence",
    "ngram_vectors",
    "HDCError",
    "InvalidDimensionError",
    "DimensionMismatchError",
    "InvalidSequenceLengthError",
    "UnknownSymbolError",
    "InvalidNeighborCountError",
    "EmptyTrainingSetError",
]
