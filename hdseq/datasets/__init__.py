"""Datasets module."""

from hdseq.datasets.synthetic import (
    demo_sequences,
    MotifSequences,
    SequenceSample,
    train_test_split,
)

__all__ = [
    "demo_sequences",
    "MotifSequences",
    "SequenceSample",
    "train_test_split",
]
