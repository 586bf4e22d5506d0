"""
Visualization utilities for hypervector classification.

Provides plotting functions for:
- Pairwise Hamming distance matrices of encoded sequences
- Confusion matrices of classification results
"""

from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence, Tuple
import matplotlib.pyplot as plt

from hdseq.core.hypervector import Hypervector, hamming_distances, pack_matrix


def pairwise_distances(vectors: Sequence[Hypervector]) -> np.ndarray:
    """Symmetric matrix of Hamming distances between all vectors."""
    matrix = pack_matrix(vectors)
    return np.stack([hamming_distances(v, matrix, vectors[0].dim) for v in vectors])


def plot_distance_matrix(
    vectors: Sequence[Hypervector],
    labels: Optional[Sequence[int]] = None,
    normalize: bool = True,
    title: str = "Pairwise Hamming Distance",
    figsize: Tuple[int, int] = (7, 6),
    save_path: Optional[str] = None
) -> plt.Figure:
    """
    Heat map of pairwise distances between hypervectors.

    When labels are given, vectors are reordered so that each class forms a
    contiguous block, and the class boundaries are drawn.

    Args:
        vectors: Hypervectors to compare
        labels: Optional class label per vector
        normalize: Divide distances by the dimension
        title: Plot title
        figsize: Figure size
        save_path: Path to save figure (optional)

    Returns:
        Matplotlib Figure
    """
    order = np.arange(len(vectors))
    if labels is not None:
        order = np.argsort(np.asarray(labels), kind='stable')
    ordered = [vectors[i] for i in order]

    distances = pairwise_distances(ordered).astype(float)
    if normalize:
        distances /= ordered[0].dim

    fig, ax = plt.subplots(figsize=figsize)
    im = ax.imshow(distances, cmap='viridis', interpolation='nearest')
    cbar = plt.colorbar(im, ax=ax, shrink=0.8)
    cbar.set_label('Normalized distance' if normalize else 'Hamming distance')

    if labels is not None:
        sorted_labels = np.asarray(labels)[order]
        boundaries = np.flatnonzero(np.diff(sorted_labels)) + 0.5
        for b in boundaries:
            ax.axhline(y=b, color='white', linewidth=1.0)
            ax.axvline(x=b, color='white', linewidth=1.0)

    ax.set_xlabel('Sequence', fontsize=11)
    ax.set_ylabel('Sequence', fontsize=11)
    ax.set_title(title, fontsize=13)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig


def plot_confusion_matrix(
    matrix: np.ndarray,
    class_names: Optional[List[str]] = None,
    title: str = "Confusion Matrix",
    figsize: Tuple[int, int] = (6, 5),
    save_path: Optional[str] = None
) -> plt.Figure:
    """
    Plot a confusion matrix with per-cell counts.

    Args:
        matrix: Square matrix, rows = true label, columns = predicted label
        class_names: Tick labels (defaults to the label values)
        title: Plot title
        figsize: Figure size
        save_path: Save path

    Returns:
        Figure
    """
    n_classes = matrix.shape[0]
    if class_names is None:
        class_names = [str(i) for i in range(n_classes)]

    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(matrix, cmap='Blues', interpolation='nearest')

    threshold = matrix.max() / 2 if matrix.size else 0
    for i in range(n_classes):
        for j in range(n_classes):
            color = 'white' if matrix[i, j] > threshold else 'black'
            ax.annotate(str(matrix[i, j]), (j, i), ha='center', va='center',
                        color=color, fontsize=10)

    ax.set_xticks(range(n_classes))
    ax.set_yticks(range(n_classes))
    ax.set_xticklabels(class_names)
    ax.set_yticklabels(class_names)
    ax.set_xlabel('Predicted label', fontsize=11)
    ax.set_ylabel('True label', fontsize=11)
    ax.set_title(title, fontsize=13)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=150, bbox_inches='tight')

    return fig
