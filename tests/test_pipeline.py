"""Tests for the configuration and the end-to-end sequence classifier."""

import logging
import subprocess
import sys

import pytest
from hdseq.config import HDCConfig
from hdseq.core.errors import (
    InvalidDimensionError,
    InvalidNeighborCountError,
    InvalidSequenceLengthError,
    UnknownSymbolError,
)
from hdseq.datasets.synthetic import MotifSequences, demo_sequences, train_test_split
from hdseq.pipeline import SequenceClassifier


class TestHDCConfig:
    """Test configuration validation."""

    def test_defaults(self):
        config = HDCConfig()
        assert config.dim == 10000
        assert config.n == 3
        assert config.n_symbols == 10
        assert config.k == 1
        assert config.clamp_k

    @pytest.mark.parametrize("field,value,error", [
        ("dim", 0, InvalidDimensionError),
        ("n_symbols", -1, InvalidDimensionError),
        ("n", 0, InvalidSequenceLengthError),
        ("k", 0, InvalidNeighborCountError),
    ])
    def test_rejects_invalid(self, field, value, error):
        with pytest.raises(error):
            HDCConfig(**{field: value})

    def test_from_dict_ignores_unknown(self, caplog):
        with caplog.at_level(logging.WARNING, logger="hdseq.config"):
            config = HDCConfig.from_dict({"dim": 2000, "k": 3, "colour": "blue"})
        assert config.dim == 2000
        assert config.k == 3
        assert "colour" in caplog.text

    def test_with_overrides(self):
        config = HDCConfig(seed=1).with_overrides(n=4)
        assert config.n == 4
        assert config.seed == 1


class TestSequenceClassifier:
    """Test the encode-and-classify pipeline."""

    def test_demo_self_classification(self):
        sequences, labels = demo_sequences()
        clf = SequenceClassifier(dim=10000, n=3, n_symbols=10, k=1, seed=0)
        clf.fit(sequences, labels)

        assert clf.predict(sequences) == labels
        assert clf.score(sequences, labels) == 1.0

    def test_predict_one(self):
        sequences, labels = demo_sequences()
        clf = SequenceClassifier(seed=3).fit(sequences, labels)
        assert clf.predict_one([6, 7, 8, 9, 0]) == 1

    def test_deterministic_with_seed(self):
        sequences, _ = demo_sequences()
        a = SequenceClassifier(dim=2000, seed=5).encode(sequences)
        b = SequenceClassifier(dim=2000, seed=5).encode(sequences)
        assert a == b

    def test_config_object(self):
        clf = SequenceClassifier(HDCConfig(dim=512, n=2), k=3)
        assert clf.config.dim == 512
        assert clf.config.k == 3
        assert clf.encoder.n == 2

    def test_predict_before_fit(self):
        with pytest.raises(RuntimeError):
            SequenceClassifier(dim=512).predict([[1, 2, 3]])

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            SequenceClassifier(dim=512).fit([[1, 2, 3]], [0, 1])

    def test_invalid_inputs_propagate(self):
        sequences, labels = demo_sequences()
        clf = SequenceClassifier(dim=512, seed=0).fit(sequences, labels)
        with pytest.raises(InvalidSequenceLengthError):
            clf.predict([[1, 2]])
        with pytest.raises(UnknownSymbolError):
            clf.predict([[1, 2, 11]])

    def test_motif_generalization(self):
        data = MotifSequences(n_classes=3, n_symbols=10, length=30,
                              n_samples=90, noise=0.05, seed=7)
        sequences, labels = data.generate()
        train_x, train_y, test_x, test_y = train_test_split(
            sequences, labels, test_fraction=0.3, seed=7
        )

        clf = SequenceClassifier(dim=4000, n=3, n_symbols=10, k=1, seed=7)
        clf.fit(train_x, train_y)
        assert clf.score(test_x, test_y) >= 0.8


class TestPackageImport:
    """Importing the package stays light."""

    def test_import_does_not_load_pyplot(self):
        code = (
            "import sys, hdseq, hdseq.utils; "
            "print('matplotlib.pyplot' in sys.modules)"
        )
        result = subprocess.run([sys.executable, "-c", code],
                                capture_output=True, text=True, check=True)
        assert result.stdout.strip() == "False"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
