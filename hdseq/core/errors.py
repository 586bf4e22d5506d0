"""
Exceptions raised by hdseq.

Every error is an input-contract violation detected at the offending call.
They all derive from ValueError so existing ``except ValueError`` handlers
keep working.
"""


class HDCError(ValueError):
    """Base class for hyperdimensional computing errors."""


class InvalidDimensionError(HDCError):
    """Requested vector count or dimensionality is not positive."""


class DimensionMismatchError(HDCError):
    """Two hypervectors (or tables) with different dimensions were combined."""


class InvalidSequenceLengthError(HDCError):
    """Sequence is shorter than the n-gram length, or n itself is invalid."""


class UnknownSymbolError(HDCError):
    """Sequence contains a symbol with no entry in the value table."""


class InvalidNeighborCountError(HDCError):
    """k is not positive, or exceeds the training set in strict mode."""


class EmptyTrainingSetError(HDCError):
    """Classification attempted without any labeled examples."""
