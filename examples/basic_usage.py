#!/usr/bin/env python3
"""
Basic usage example for hdseq.

Demonstrates:
1. Creating hypervectors and using core operations
2. Encoding symbol sequences with n-gram binding
3. Classifying the encoded sequences with Hamming k-NN
"""

import numpy as np
from hdseq.core.hypervector import (
    bind,
    bundle,
    permute,
    similarity,
    hamming_distance,
    generate_hypervectors,
)
from hdseq.core.encoders import encode_sequence
from hdseq.classify.knn import classify_all
from hdseq.datasets.synthetic import demo_sequences
from hdseq.utils.metrics import accuracy


def demo_hypervector_operations(rng):
    """Demonstrate core HDC operations."""
    print("=" * 60)
    print("PART 1: Hypervector Operations")
    print("=" * 60)

    dim = 10000
    a, b = generate_hypervectors(2, dim, rng=rng)

    print(f"\nCreated two random {dim}-dimensional hypervectors")
    print(f"  Vector A: {a}")
    print(f"  Vector B: {b}")
    print(f"\nSimilarity(A, B) = {similarity(a, b):.4f}")
    print("  (Random vectors are nearly orthogonal)")

    c = bind(a, b)
    print(f"\nBinding (XOR):")
    print(f"  Similarity(A xor B, A) = {similarity(c, a):.4f}")
    print(f"  Similarity(A xor B, B) = {similarity(c, b):.4f}")
    print(f"  (A xor B) xor B == A: {bind(c, b) == a}")

    vectors = generate_hypervectors(5, dim, rng=rng)
    bundled = bundle(vectors)
    print(f"\nBundling (Majority Vote) of 5 random vectors:")
    for i, v in enumerate(vectors):
        print(f"  Similarity(bundled, v{i}) = {similarity(bundled, v):.4f}")

    p = permute(a, 1)
    print(f"\nPermutation:")
    print(f"  Similarity(permute(A, 1), A) = {similarity(p, a):.4f}")
    print(f"  permute(permute(A, 1), D - 1) == A: {permute(p, dim - 1) == a}")


def demo_sequence_classification(rng):
    """Encode the demo sequences and classify them against themselves."""
    print("\n" + "=" * 60)
    print("PART 2: Sequence Classification")
    print("=" * 60)

    dim = 10000
    n = 3
    sequences, labels = demo_sequences()

    # Values are in the range 0-9, positions index the n-gram
    value_vectors = generate_hypervectors(10, dim, rng=rng)
    position_vectors = generate_hypervectors(n, dim, rng=rng)

    encoded = [encode_sequence(s, value_vectors, position_vectors, n) for s in sequences]

    print("\nPairwise Hamming distances:")
    for i, a in enumerate(encoded):
        row = "  ".join(f"{hamming_distance(a, b):5d}" for b in encoded)
        print(f"  {sequences[i]}  {row}")

    predicted = classify_all(encoded, labels, encoded, k=1)
    print()
    for seq, label in zip(sequences, predicted):
        print(f"Sequence {seq} is classified as {label}")
    print(f"Classification accuracy: {accuracy(predicted, labels)}")


def main():
    rng = np.random.default_rng(42)
    demo_hypervector_operations(rng)
    demo_sequence_classification(rng)


if __name__ == "__main__":
    main()
