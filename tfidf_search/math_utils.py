"""Standalone vector math for similarity ranking."""

import math

from tfidf_search.exceptions import DimensionMismatchError


def _check_dimensions(a, b):
    if len(a) != len(b):
        raise DimensionMismatchError(
            "vectors must have the same dimension: len(a)=%d, len(b)=%d"
            % (len(a), len(b))
        )


def dot_product(a, b):
    """Dot product of two vectors."""
    _check_dimensions(a, b)
    return sum(ai * bi for ai, bi in zip(a, b))


def scale_to_unit_max(v):
    """Divide v by its largest absolute entry. Returns None for a zero vector."""
    peak = max((abs(vi) for vi in v), default=0.0)
    if peak == 0.0:
        return None
    return [vi / peak for vi in v]


def cosine_similarity(a, b):
    """Cosine similarity between two vectors. Returns 0.0 for zero vectors.

    Both vectors are first scaled so their largest entry is 1, which keeps
    the squared norms in [1, len(v)] for any magnitude of input. A single
    square root over their product makes cosine_similarity(v, v) exactly
    1.0 for any non-zero v.
    """
    _check_dimensions(a, b)
    scaled_a = scale_to_unit_max(a)
    scaled_b = scale_to_unit_max(b)
    if scaled_a is None or scaled_b is None:
        return 0.0
    norm_a = dot_product(scaled_a, scaled_a)
    norm_b = dot_product(scaled_b, scaled_b)
    return dot_product(scaled_a, scaled_b) / math.sqrt(norm_a * norm_b)
