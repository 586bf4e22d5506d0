"""
k-nearest-neighbour classification in Hamming space.

The query is compared to every training hypervector by Hamming distance,
the k closest are kept (earlier training examples win distance ties), and
their labels are combined by majority vote (the lowest label wins vote
ties). Everything here is a pure function of its inputs.
"""

from __future__ import annotations
import heapq
import logging
import numpy as np
from typing import List, Optional, Sequence, Tuple

from hdseq.core.errors import (
    EmptyTrainingSetError,
    InvalidNeighborCountError,
)
from hdseq.core.hypervector import Hypervector, hamming_distances, pack_matrix
from hdseq.core.tables import is_index
from hdseq.utils.metrics import accuracy

logger = logging.getLogger(__name__)


def _check_training_set(
    train_vectors: Sequence[Hypervector],
    train_labels: Optional[Sequence[int]] = None,
) -> None:
    if len(train_vectors) == 0:
        raise EmptyTrainingSetError("Cannot classify without training examples")
    if train_labels is None:
        return
    if len(train_labels) != len(train_vectors):
        raise ValueError(
            f"Got {len(train_labels)} labels for {len(train_vectors)} training vectors"
        )
    if not all(is_index(label) and label >= 0 for label in train_labels):
        raise ValueError("Class labels must be non-negative integers")


def _resolve_k(k: int, n_train: int, clamp_k: bool) -> int:
    if k <= 0:
        raise InvalidNeighborCountError(f"k must be positive, got {k}")
    if k > n_train:
        if not clamp_k:
            raise InvalidNeighborCountError(
                f"k={k} exceeds the training set size {n_train}"
            )
        logger.debug("Clamping k=%d to training set size %d", k, n_train)
        return n_train
    return k


def _select(distances: np.ndarray, k: int) -> List[Tuple[int, int]]:
    """
    Keep the k smallest distances with a bounded max-heap.

    Heap entries are (-distance, -index), so the root is the current worst
    neighbour: largest distance, and among equal distances the latest index.
    A candidate replaces the root only when strictly closer.
    """
    heap: List[Tuple[int, int]] = []
    for index, distance in enumerate(distances.tolist()):
        if len(heap) < k:
            heapq.heappush(heap, (-distance, -index))
        elif distance < -heap[0][0]:
            heapq.heapreplace(heap, (-distance, -index))
    return sorted((-d, -i) for d, i in heap)


def _vote(labels: np.ndarray) -> int:
    # argmax returns the first maximum, i.e. the lowest tied label
    return int(np.argmax(np.bincount(labels)))


def _labels_array(train_labels: Sequence[int]) -> np.ndarray:
    return np.asarray(train_labels, dtype=np.int64)


def nearest_neighbors(
    train_vectors: Sequence[Hypervector],
    test_vector: Hypervector,
    k: int,
    clamp_k: bool = True,
) -> List[Tuple[int, int]]:
    """
    Find the k training vectors closest to a query.

    Args:
        train_vectors: Reference hypervectors
        test_vector: Query hypervector
        k: Number of neighbours
        clamp_k: If True, k larger than the training set selects every
            training vector; if False it raises

    Returns:
        List of (distance, training index), ascending by distance then index

    Raises:
        EmptyTrainingSetError: If there are no training vectors
        InvalidNeighborCountError: If k <= 0, or k is too large and not clamped
    """
    _check_training_set(train_vectors)
    k = _resolve_k(k, len(train_vectors), clamp_k)
    distances = hamming_distances(test_vector, pack_matrix(train_vectors), train_vectors[0].dim)
    return _select(distances, k)


def classify(
    train_vectors: Sequence[Hypervector],
    train_labels: Sequence[int],
    test_vector: Hypervector,
    k: int,
    clamp_k: bool = True,
) -> int:
    """
    Predict the label of one query hypervector.

    Args:
        train_vectors: Reference hypervectors
        train_labels: Non-negative label per reference vector
        test_vector: Query hypervector
        k: Number of neighbours that vote
        clamp_k: Treat k larger than the training set as "all vectors"

    Returns:
        The label with the most votes among the k nearest neighbours
    """
    return classify_all(train_vectors, train_labels, [test_vector], k, clamp_k)[0]


def classify_all(
    train_vectors: Sequence[Hypervector],
    train_labels: Sequence[int],
    test_vectors: Sequence[Hypervector],
    k: int,
    clamp_k: bool = True,
) -> List[int]:
    """
    Predict labels for a batch of query hypervectors.

    The training matrix is packed once; each query is then an independent
    distance row, neighbour selection and vote.

    Returns:
        One predicted label per query, in query order
    """
    _check_training_set(train_vectors, train_labels)
    k = _resolve_k(k, len(train_vectors), clamp_k)

    matrix = pack_matrix(train_vectors)
    dim = train_vectors[0].dim
    labels = _labels_array(train_labels)

    predictions = []
    for query in test_vectors:
        neighbours = _select(hamming_distances(query, matrix, dim), k)
        predictions.append(_vote(labels[[i for _, i in neighbours]]))
    return predictions


class HammingKNNClassifier:
    """
    k-NN classifier over binary hypervectors.

    Stores the training set on fit() and classifies queries with
    :func:`classify_all`.

    Example:
        >>> clf = HammingKNNClassifier(k=1)
        >>> clf.fit(train_hvs, train_labels)
        >>> clf.predict(query_hv)
        0

    Attributes:
        k: Number of voting neighbours
        clamp_k: Whether k larger than the training set is clamped
    """

    def __init__(self, k: int = 1, clamp_k: bool = True):
        if k <= 0:
            raise InvalidNeighborCountError(f"k must be positive, got {k}")
        self.k = k
        self.clamp_k = clamp_k
        self.train_vectors: List[Hypervector] = []
        self.train_labels: List[int] = []
        self._matrix: Optional[np.ndarray] = None
        self._labels: Optional[np.ndarray] = None

    def fit(
        self,
        vectors: Sequence[Hypervector],
        labels: Sequence[int],
    ) -> HammingKNNClassifier:
        """
        Store the labelled reference set.

        Returns:
            self
        """
        _check_training_set(vectors, labels)
        _resolve_k(self.k, len(vectors), self.clamp_k)
        self.train_vectors = list(vectors)
        self.train_labels = [int(label) for label in labels]
        self._matrix = pack_matrix(self.train_vectors)
        self._labels = _labels_array(self.train_labels)
        logger.debug("Fitted k-NN on %d vectors (k=%d)", len(vectors), self.k)
        return self

    @property
    def is_fitted(self) -> bool:
        return self._matrix is not None

    def kneighbors(self, vector: Hypervector) -> List[Tuple[int, int]]:
        """(distance, index) pairs of the k nearest training vectors."""
        if not self.is_fitted:
            raise EmptyTrainingSetError("Must call fit() before kneighbors()")
        k = _resolve_k(self.k, len(self.train_vectors), self.clamp_k)
        return _select(hamming_distances(vector, self._matrix, self.train_vectors[0].dim), k)

    def predict(self, vector: Hypervector) -> int:
        """Predict the label of one hypervector."""
        neighbours = self.kneighbors(vector)
        return _vote(self._labels[[i for _, i in neighbours]])

    def predict_batch(self, vectors: Sequence[Hypervector]) -> List[int]:
        """Predict labels for multiple hypervectors."""
        return [self.predict(v) for v in vectors]

    def score(self, vectors: Sequence[Hypervector], labels: Sequence[int]) -> float:
        """Fraction of ``vectors`` whose predicted label matches ``labels``."""
        return accuracy(self.predict_batch(vectors), labels)
