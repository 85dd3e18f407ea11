"""
Similarity utilities: cosine similarity for embedding matches.
"""

from typing import Sequence

import numpy as np


def cosine_similarity(v1: Sequence[float], v2: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Returns 0.0 when the vectors differ in length, either is empty,
    either has zero norm, or either holds a NaN/infinite entry.
    """
    if len(v1) == 0 or len(v2) == 0 or len(v1) != len(v2):
        return 0.0
    a = np.asarray(v1, dtype=float)
    b = np.asarray(v2, dtype=float)
    if not (np.isfinite(a).all() and np.isfinite(b).all()):
        return 0.0
    # Rescale so norms neither underflow nor overflow for extreme magnitudes.
    scale_a = np.max(np.abs(a))
    scale_b = np.max(np.abs(b))
    if scale_a == 0 or scale_b == 0:
        return 0.0
    a = a / scale_a
    b = b / scale_b
    norm_product = np.linalg.norm(a) * np.linalg.norm(b)
    return float(np.clip(np.dot(a, b) / norm_product, -1.0, 1.0))
