"""
hdseq: Hyperdimensional Sequence Classification

Encodes symbol sequences as binary hypervectors with n-gram binding and
majority bundling, and classifies them by k-nearest neighbours in Hamming
space.
"""

from hdseq.core.hypervector import (
    Hypervector,
    bind,
    bundle,
    permute,
    similarity,
    hamming_distance,
    generate_hypervectors,
    random_hypervector,
)
from hdseq.core.tables import VectorTable
from hdseq.core.encoders import NGramSequenceEncoder, encode_sequence
from hdseq.classify.knn import HammingKNNClassifier, classify, classify_all
from hdseq.config import HDCConfig
from hdseq.pipeline import SequenceClassifier

__version__ = "0.1.0"
__all__ = [
    "Hypervector",
    "bind",
    "bundle",
    "permute",
    "similarity",
    "hamming_distance",
    "generate_hypervectors",
    "random_hypervector",
    "VectorTable",
    "NGramSequenceEncoder",
    "encode_sequence",
    "HammingKNNClassifier",
    "classify",
    "classify_all",
    "HDCConfig",
    "SequenceClassifier",
]
