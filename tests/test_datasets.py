"""Tests for synthetic sequence datasets."""

import pytest
import numpy as np
from hdseq.datasets.synthetic import MotifSequences, demo_sequences, train_test_split


class TestDemoSequences:

    def test_shape(self):
        sequences, labels = demo_sequences()
        assert len(sequences) == len(labels) == 4
        assert all(len(s) == 5 for s in sequences)
        assert labels == [0, 1, 0, 1]


class TestMotifSequences:
    """Test motif-based generator."""

    def test_generate(self):
        data = MotifSequences(n_classes=3, n_symbols=6, length=20, n_samples=30, seed=0)
        sequences, labels = data.generate()

        assert len(sequences) == 30
        assert sorted(set(labels)) == [0, 1, 2]
        assert all(len(s) == 20 for s in sequences)
        assert all(0 <= x < 6 for s in sequences for x in s)

    def test_no_noise_repeats_motif(self):
        data = MotifSequences(n_classes=2, length=12, motif_length=4, noise=0.0, seed=1)
        sample = data.sample(1)
        motif = data.motifs[1].tolist()

        assert sample.label == 1
        # every window of motif_length is a rotation of the motif
        phase = [motif[i:] + motif[:i] for i in range(4)].index(sample.symbols[:4])
        rotated = np.resize(np.roll(motif, -phase), 12).tolist()
        assert sample.symbols == rotated

    def test_seed_reproducible(self):
        a = MotifSequences(seed=4).generate()
        b = MotifSequences(seed=4).generate()
        assert a == b

    def test_invalid_noise(self):
        with pytest.raises(ValueError):
            MotifSequences(noise=1.5)


class TestTrainTestSplit:

    def test_sizes(self):
        sequences = [[i, i, i] for i in range(20)]
        labels = [i % 2 for i in range(20)]
        train_x, train_y, test_x, test_y = train_test_split(sequences, labels, 0.25, seed=0)

        assert len(test_x) == len(test_y) == 5
        assert len(train_x) == len(train_y) == 15
        assert sorted(s[0] for s in train_x + test_x) == list(range(20))
        for s, y in zip(train_x + test_x, train_y + test_y):
            assert y == s[0] % 2

    def test_invalid_fraction(self):
        with pytest.raises(ValueError):
            train_test_split([[1]], [0], test_fraction=1.0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
