"""
End-to-end sequence classifier.

Ties the pieces together the way a caller normally uses them:
- Phase I: generate the tables and encode the labelled training sequences
- Phase II: encode query sequences and label them by k-NN in Hamming space
"""

from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence

from hdseq.classify.knn import HammingKNNClassifier
from hdseq.config import HDCConfig
from hdseq.core.encoders import NGramSequenceEncoder
from hdseq.core.hypervector import Hypervector
from hdseq.utils.metrics import accuracy

logger = logging.getLogger(__name__)


class SequenceClassifier:
    """
    Hyperdimensional n-gram encoder followed by a Hamming k-NN classifier.

    Example:
        >>> clf = SequenceClassifier(dim=10000, n=3, k=1, seed=0)
        >>> clf.fit([[1, 2, 3, 4, 5], [6, 7, 8, 9, 0]], [0, 1])
        >>> clf.predict([[1, 2, 3, 4, 5]])
        [0]

    Attributes:
        config: The HDCConfig in effect
        encoder: NGramSequenceEncoder owning the value/position tables
        knn: HammingKNNClassifier holding the encoded training set
    """

    def __init__(self, config: Optional[HDCConfig] = None, **overrides: Any):
        """
        Initialize the classifier.

        Args:
            config: Base configuration (defaults to HDCConfig())
            **overrides: Individual HDCConfig fields to replace
        """
        config = config or HDCConfig()
        if overrides:
            config = config.with_overrides(**overrides)
        self.config = config
        self.encoder = NGramSequenceEncoder(
            dim=config.dim,
            n=config.n,
            n_symbols=config.n_symbols,
            seed=config.seed,
        )
        self.knn = HammingKNNClassifier(k=config.k, clamp_k=config.clamp_k)
        self._fitted = False

    def encode(self, sequences: Sequence[Sequence[int]]) -> List[Hypervector]:
        """Encode sequences with this classifier's tables."""
        return self.encoder.encode_batch(sequences)

    def fit(
        self,
        sequences: Sequence[Sequence[int]],
        labels: Sequence[int],
    ) -> SequenceClassifier:
        """
        Encode and store the labelled training sequences.

        Args:
            sequences: Training sequences
            labels: One non-negative class label per sequence

        Returns:
            self
        """
        if len(sequences) != len(labels):
            raise ValueError(
                f"Got {len(labels)} labels for {len(sequences)} sequences"
            )
        self.knn.fit(self.encode(sequences), labels)
        self._fitted = True
        logger.info(
            "Fitted on %d sequences (dim=%d, n=%d, k=%d)",
            len(sequences), self.config.dim, self.config.n, self.config.k,
        )
        return self

    def _check_fitted(self) -> None:
        if not self._fitted:
            raise RuntimeError("Must call fit() before predict()")

    def predict_one(self, sequence: Sequence[int]) -> int:
        """Predict the label of a single sequence."""
        self._check_fitted()
        return self.knn.predict(self.encoder.encode(sequence))

    def predict(self, sequences: Sequence[Sequence[int]]) -> List[int]:
        """Predict one label per sequence."""
        self._check_fitted()
        return self.knn.predict_batch(self.encode(sequences))

    def score(self, sequences: Sequence[Sequence[int]], labels: Sequence[int]) -> float:
        """Accuracy of the predictions against ``labels``."""
        result = accuracy(self.predict(sequences), labels)
        logger.info("Accuracy %.4f on %d sequences", result, len(labels))
        return result

    def __repr__(self) -> str:
        return f"SequenceClassifier({self.config})"
