"""
Evaluation metrics for sequence classification.

Provides standard metrics:
- Accuracy: fraction of predictions matching the ground truth
- Confusion matrix: counts of (true label, predicted label) pairs
- Per-class accuracy: recall of each true label
"""

from __future__ import annotations
import numpy as np
from typing import Dict, Optional, Sequence


def _as_label_arrays(predicted: Sequence[int], truth: Sequence[int]):
    predicted = np.asarray(predicted, dtype=np.int64)
    truth = np.asarray(truth, dtype=np.int64)
    if predicted.shape != truth.shape:
        raise ValueError(
            f"Got {len(predicted)} predictions for {len(truth)} ground-truth labels"
        )
    if len(truth) == 0:
        raise ValueError("Cannot evaluate an empty set of predictions")
    return predicted, truth


def accuracy(predicted: Sequence[int], truth: Sequence[int]) -> float:
    """
    Compute classification accuracy.

    Args:
        predicted: Predicted labels
        truth: Ground-truth labels, same length

    Returns:
        Fraction of predictions equal to the ground truth, in [0, 1]

    Raises:
        ValueError: If the inputs are empty or differ in length
    """
    predicted, truth = _as_label_arrays(predicted, truth)
    return float(np.mean(predicted == truth))


def confusion_matrix(
    predicted: Sequence[int],
    truth: Sequence[int],
    n_classes: Optional[int] = None,
) -> np.ndarray:
    """
    Compute the confusion matrix.

    Rows are true labels, columns are predicted labels.

    Args:
        predicted: Predicted labels
        truth: Ground-truth labels
        n_classes: Matrix size; defaults to 1 + the largest label seen

    Returns:
        Integer matrix of shape (n_classes, n_classes)
    """
    predicted, truth = _as_label_arrays(predicted, truth)
    if predicted.min() < 0 or truth.min() < 0:
        raise ValueError("Class labels must be non-negative integers")
    largest = int(max(predicted.max(), truth.max()))
    if n_classes is None:
        n_classes = largest + 1
    elif n_classes <= largest:
        raise ValueError(f"n_classes={n_classes} is too small for label {largest}")

    matrix = np.zeros((n_classes, n_classes), dtype=np.int64)
    np.add.at(matrix, (truth, predicted), 1)
    return matrix


def per_class_accuracy(
    predicted: Sequence[int],
    truth: Sequence[int],
) -> Dict[int, float]:
    """
    Accuracy restricted to each true label.

    Returns:
        Dict mapping every label present in ``truth`` to its accuracy
    """
    predicted, truth = _as_label_arrays(predicted, truth)
    return {
        int(label): float(np.mean(predicted[truth == label] == label))
        for label in np.unique(truth)
    }


def evaluate_classifier(
    predicted: Sequence[int],
    truth: Sequence[int],
    n_classes: Optional[int] = None,
) -> dict:
    """
    Compute all evaluation metrics.

    Returns:
        Dict with accuracy, per-class accuracy, confusion matrix and counts
    """
    predicted_arr, truth_arr = _as_label_arrays(predicted, truth)
    return {
        'accuracy': accuracy(predicted_arr, truth_arr),
        'per_class_accuracy': per_class_accuracy(predicted_arr, truth_arr),
        'confusion_matrix': confusion_matrix(predicted_arr, truth_arr, n_classes),
        'n_samples': int(len(truth_arr)),
        'n_correct': int(np.sum(predicted_arr == truth_arr)),
    }
