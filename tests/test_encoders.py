"""Tests for the n-gram sequence encoder."""

import pytest
import numpy as np
from hdseq.core.encoders import NGramSequenceEncoder, encode_sequence, ngram_vectors
from hdseq.core.errors import (
    DimensionMismatchError,
    InvalidSequenceLengthError,
    UnknownSymbolError,
)
from hdseq.core.hypervector import (
    Hypervector,
    bind,
    bundle,
    generate_hypervectors,
    hamming_distance,
    permute,
)
from hdseq.core.tables import VectorTable


@pytest.fixture
def tables():
    rng = np.random.default_rng(1234)
    values = VectorTable.random(10, 2000, rng=rng)
    positions = VectorTable.random(3, 2000, rng=rng)
    return values, positions


def reference_gram(symbols, values, positions):
    """N-gram vector built directly from the algebra."""
    gram = Hypervector.zeros(values.dim)
    for j, s in enumerate(symbols):
        gram = bind(gram, bind(permute(values[s], j), positions[j]))
    return gram


class TestVectorTable:
    """Test value/position tables."""

    def test_random_table(self, tables):
        values, positions = tables
        assert len(values) == 10
        assert len(positions) == 3
        assert values.dim == positions.dim == 2000

    def test_unknown_key(self, tables):
        values, _ = tables
        for key in (10, -1, 2.0, True, "3"):
            with pytest.raises(UnknownSymbolError):
                values[key]

    def test_numpy_integer_key(self, tables):
        values, _ = tables
        assert values[np.int64(4)] == values[4]

    def test_mixed_dimensions(self):
        with pytest.raises(DimensionMismatchError):
            VectorTable([Hypervector.random(10), Hypervector.random(11)])


class TestEncodeSequence:
    """Test the functional encoder."""

    def test_output_dimension(self, tables):
        values, positions = tables
        hv = encode_sequence([1, 2, 3, 4, 5], values, positions, 3)
        assert hv.dim == 2000

    def test_deterministic(self, tables):
        values, positions = tables
        seq = [3, 1, 4, 1, 5, 9, 2, 6]
        assert encode_sequence(seq, values, positions, 3) == encode_sequence(seq, values, positions, 3)

    def test_ngram_count(self, tables):
        values, positions = tables
        grams = ngram_vectors([0, 1, 2, 3, 4, 5, 6], values, positions, 3)
        assert len(grams) == 5

    def test_matches_algebra(self, tables):
        values, positions = tables
        seq = [7, 7, 2, 0, 9, 4]
        grams = [reference_gram(seq[i:i + 3], values, positions) for i in range(4)]
        assert ngram_vectors(seq, values, positions, 3) == grams
        assert encode_sequence(seq, values, positions, 3) == bundle(grams)

    def test_length_equals_n(self, tables):
        """One n-gram passes through bundling unchanged."""
        values, positions = tables
        hv = encode_sequence([4, 8, 1], values, positions, 3)
        assert hv == reference_gram([4, 8, 1], values, positions)

    def test_accepts_plain_lists(self):
        values = generate_hypervectors(4, 500, seed=0)
        positions = generate_hypervectors(2, 500, seed=1)
        hv = encode_sequence(np.array([0, 1, 2, 3]), values, positions, 2)
        assert hv.dim == 500

    def test_sequence_too_short(self, tables):
        values, positions = tables
        with pytest.raises(InvalidSequenceLengthError):
            encode_sequence([1, 2], values, positions, 3)
        with pytest.raises(InvalidSequenceLengthError):
            encode_sequence([], values, positions, 3)

    def test_invalid_n(self, tables):
        values, positions = tables
        with pytest.raises(InvalidSequenceLengthError):
            encode_sequence([1, 2, 3], values, positions, 0)

    def test_position_table_size(self, tables):
        values, positions = tables
        with pytest.raises(InvalidSequenceLengthError):
            encode_sequence([1, 2, 3, 4], values, positions, 2)

    def test_unknown_symbol(self, tables):
        values, positions = tables
        with pytest.raises(UnknownSymbolError):
            encode_sequence([1, 2, 10], values, positions, 3)
        with pytest.raises(UnknownSymbolError):
            encode_sequence([1, -2, 3], values, positions, 3)

    def test_table_dimension_mismatch(self, tables):
        values, _ = tables
        positions = VectorTable.random(3, 1000, seed=0)
        with pytest.raises(DimensionMismatchError):
            encode_sequence([1, 2, 3], values, positions, 3)

    def test_order_sensitive(self, tables):
        """Same symbols in a different order give a different n-gram."""
        values, positions = tables
        a = encode_sequence([1, 2, 3], values, positions, 3)
        b = encode_sequence([3, 2, 1], values, positions, 3)
        assert hamming_distance(a, b) > 600


class TestNGramSequenceEncoder:
    """Test the table-owning encoder."""

    def test_matches_functional(self, tables):
        values, positions = tables
        encoder = NGramSequenceEncoder.from_tables(values, positions)
        for seq in ([1, 2, 3, 4, 5], [9, 9, 9], [0, 5, 0, 5, 0, 5, 0, 5, 1]):
            assert encoder.encode(seq) == encode_sequence(seq, values, positions, 3)

    def test_ngrams_match_functional(self, tables):
        values, positions = tables
        encoder = NGramSequenceEncoder.from_tables(values, positions)
        seq = [2, 7, 1, 8, 2, 8]
        assert encoder.encode_ngrams(seq) == ngram_vectors(seq, values, positions, 3)

    def test_seed_reproducible(self):
        a = NGramSequenceEncoder(dim=1000, n=3, n_symbols=10, seed=7)
        b = NGramSequenceEncoder(dim=1000, n=3, n_symbols=10, seed=7)
        assert a.encode([1, 2, 3, 4]) == b.encode([1, 2, 3, 4])

    def test_odd_dimension(self):
        encoder = NGramSequenceEncoder(dim=1001, n=2, n_symbols=5, seed=3)
        seq = [0, 1, 2, 3, 4, 0]
        expected = encode_sequence(seq, encoder.value_vectors, encoder.position_vectors, 2)
        assert encoder.encode(seq) == expected

    def test_encode_batch(self):
        encoder = NGramSequenceEncoder(dim=1000, n=2, n_symbols=4, seed=0)
        batch = encoder.encode_batch([[0, 1, 2], [3, 2, 1, 0]])
        assert len(batch) == 2
        assert batch[1] == encoder.encode([3, 2, 1, 0])

    def test_unigram(self):
        """n=1 reduces to bundling the (unshifted) bound value vectors."""
        encoder = NGramSequenceEncoder(dim=1000, n=1, n_symbols=3, seed=0)
        pos = encoder.position_vectors[0]
        v = encoder.value_vectors
        assert encoder.encode([2, 2, 0]) == bind(v[2], pos)

    def test_similar_sequences_closer(self):
        encoder = NGramSequenceEncoder(dim=10000, n=3, n_symbols=10, seed=21)
        base = list(range(10)) * 3
        variant = list(base)
        variant[14] = 0
        other = list(range(9, -1, -1)) * 3

        near = hamming_distance(encoder.encode(base), encoder.encode(variant))
        far = hamming_distance(encoder.encode(base), encoder.encode(other))
        assert near < far

    def test_errors(self):
        encoder = NGramSequenceEncoder(dim=500, n=3, n_symbols=4, seed=0)
        with pytest.raises(InvalidSequenceLengthError):
            encoder.encode([0, 1])
        with pytest.raises(UnknownSymbolError):
            encoder.encode([0, 1, 4])
        with pytest.raises(InvalidSequenceLengthError):
            NGramSequenceEncoder(dim=500, n=0)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
