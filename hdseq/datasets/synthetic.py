"""
Synthetic labelled symbol sequences for classification experiments.

Provides:
- demo_sequences: the four hand-written sequences of the basic demo
- MotifSequences: classes defined by a repeating motif, corrupted by noise
- train_test_split: shuffled split of sequences and labels
"""

from __future__ import annotations
import numpy as np
from typing import Iterator, List, Optional, Tuple
from dataclasses import dataclass


def demo_sequences() -> Tuple[List[List[int]], List[int]]:
    """
    Four short sequences over the symbols 0-9 and their class labels.

    Class 0 holds increasing runs starting from odd symbols, class 1 the
    others. Intended for n=3 and k=1.
    """
    sequences = [
        [1, 2, 3, 4, 5],
        [6, 7, 8, 9, 0],
        [1, 3, 5, 7, 9],
        [2, 4, 6, 8, 0],
    ]
    labels = [0, 1, 0, 1]
    return sequences, labels


@dataclass
class SequenceSample:
    """A labelled sequence."""
    symbols: List[int]
    label: int


class MotifSequences:
    """
    Motif-based sequence classes.

    Every class owns a random motif of ``motif_length`` symbols. A sample of
    that class repeats the motif (starting at a random phase) up to
    ``length`` symbols, then replaces each symbol by a uniformly random one
    with probability ``noise``. Classes therefore differ in their n-gram
    statistics, which is exactly what the n-gram encoder captures.

    Example:
        >>> data = MotifSequences(n_classes=3, n_samples=60, seed=0)
        >>> sequences, labels = data.generate()
        >>> len(sequences), len(set(labels))
        (60, 3)
    """

    def __init__(
        self,
        n_classes: int = 3,
        n_symbols: int = 10,
        length: int = 30,
        n_samples: int = 100,
        motif_length: int = 5,
        noise: float = 0.1,
        seed: Optional[int] = None
    ):
        """
        Initialize the generator.

        Args:
            n_classes: Number of classes (labels 0..n_classes-1)
            n_symbols: Alphabet size (symbols 0..n_symbols-1)
            length: Length of every generated sequence
            n_samples: Total number of sequences, assigned round-robin to classes
            motif_length: Length of each class motif
            noise: Per-symbol substitution probability
            seed: Random seed
        """
        if n_classes <= 0 or n_symbols <= 0 or length <= 0 or motif_length <= 0:
            raise ValueError("Class count, alphabet size and lengths must be positive")
        if not 0.0 <= noise <= 1.0:
            raise ValueError(f"noise must be in [0, 1], got {noise}")
        self.n_classes = n_classes
        self.n_symbols = n_symbols
        self.length = length
        self.n_samples = n_samples
        self.noise = noise
        self.rng = np.random.default_rng(seed)
        self.motifs = self.rng.integers(0, n_symbols, size=(n_classes, motif_length))

    def sample(self, label: int) -> SequenceSample:
        """Draw one sequence of class ``label``."""
        motif = self.motifs[label]
        phase = int(self.rng.integers(0, len(motif)))
        symbols = np.resize(np.roll(motif, -phase), self.length)
        flip = self.rng.random(self.length) < self.noise
        symbols[flip] = self.rng.integers(0, self.n_symbols, size=int(flip.sum()))
        return SequenceSample(symbols=symbols.tolist(), label=label)

    def __iter__(self) -> Iterator[SequenceSample]:
        for i in range(self.n_samples):
            yield self.sample(i % self.n_classes)

    def generate(self) -> Tuple[List[List[int]], List[int]]:
        """
        Generate all samples as parallel lists.

        Returns:
            Tuple of (sequences, labels)
        """
        samples = list(self)
        return [s.symbols for s in samples], [s.label for s in samples]


def train_test_split(
    sequences: List[List[int]],
    labels: List[int],
    test_fraction: float = 0.25,
    seed: Optional[int] = None
) -> Tuple[List[List[int]], List[int], List[List[int]], List[int]]:
    """
    Shuffle and split sequences and labels.

    Returns:
        Tuple of (train_sequences, train_labels, test_sequences, test_labels)
    """
    if len(sequences) != len(labels):
        raise ValueError(f"Got {len(labels)} labels for {len(sequences)} sequences")
    if not 0.0 < test_fraction < 1.0:
        raise ValueError(f"test_fraction must be in (0, 1), got {test_fraction}")

    order = np.random.default_rng(seed).permutation(len(sequences))
    n_test = max(1, int(round(len(sequences) * test_fraction)))
    test_idx, train_idx = order[:n_test], order[n_test:]
    return (
        [sequences[i] for i in train_idx],
        [labels[i] for i in train_idx],
        [sequences[i] for i in test_idx],
        [labels[i] for i in test_idx],
    )
