"""Nearest-neighbour classification module."""

from hdseq.classify.knn import (
    HammingKNNClassifier,
    classify,
    classify_all,
    nearest_neighbors,
)

__all__ = [
    "HammingKNNClassifier",
    "classify",
    "classify_all",
    "nearest_neighbors",
]
