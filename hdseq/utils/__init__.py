"""
Utils module.

Plotting helpers live in ``hdseq.utils.visualization`` and are imported from
there directly, so that importing the package does not load matplotlib.
"""

from hdseq.utils.metrics import (
    accuracy,
    confusion_matrix,
    per_class_accuracy,
    evaluate_classifier,
)

__all__ = [
    "accuracy",
    "confusion_matrix",
    "per_class_accuracy",
    "evaluate_classifier",
]
