"""
Barycentric blending of terrain distributions.

A distribution is a point on the simplex: one non-negative share per terrain
type, summing to 1.0. New tiles are drawn from a blend of two such points:

- the local distribution, describing the candidate cell's neighborhood
- the ideal distribution, derived from the configured population weights

The blend weight measures how far the world's running mix has drifted from the
ideal. While the world matches the ideal the local character wins and terrain
clusters naturally; as the world drifts, draws are pulled back toward the
ideal, which keeps any one terrain from running away.
"""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

# Largest possible L1 distance between two points on the simplex
# (all mass on one category versus all mass on another).
MAX_L1_DISTANCE = 2.0

ArrayLike = Union[Sequence[float], np.ndarray]


def normalize(raw: ArrayLike) -> np.ndarray:
    """
    Scale raw non-negative weights to shares summing to 1.0.

    All-zero input has no shape to preserve, so it maps to the uniform
    distribution instead of dividing by zero.

    Args:
        raw: Counts or weights, one per terrain type

    Returns:
        Float array of shares
    """
    values = np.asarray(raw, dtype=np.float64)
    if values.ndim != 1 or len(values) == 0:
        raise ValueError(f"Expected a non-empty 1-D weight vector, got shape {values.shape}")
    if np.any(values < 0):
        raise ValueError("Distribution weights must be non-negative")

    total = values.sum()
    if total <= 0:
        return np.full(len(values), 1.0 / len(values))
    return values / total


def blend_weight(global_dist: ArrayLike, ideal: ArrayLike) -> float:
    """
    Drift of the world's mix from the ideal, scaled to [0, 1].

    Computed as the L1 distance divided by MAX_L1_DISTANCE and clamped, so
    floating-point noise can never push the blend past the ideal.
    """
    g = np.asarray(global_dist, dtype=np.float64)
    i = np.asarray(ideal, dtype=np.float64)
    if g.shape != i.shape:
        raise ValueError(f"Distribution shapes differ: {g.shape} vs {i.shape}")
    w = float(np.abs(g - i).sum()) / MAX_L1_DISTANCE
    return min(max(w, 0.0), 1.0)


def blend(local: ArrayLike, ideal: ArrayLike, w: float, exponent: float = 3.0) -> np.ndarray:
    """
    Mix the local and ideal distributions.

    B = normalize(local * (1 - f(w)) + ideal * f(w)) with f(w) = w ** exponent.

    Args:
        local: Normalized neighborhood distribution
        ideal: Normalized target distribution
        w: Blend weight in [0, 1]
        exponent: Shaping exponent; 1 is linear, 3 is cubic

    Returns:
        Normalized blended distribution
    """
    l = np.asarray(local, dtype=np.float64)
    i = np.asarray(ideal, dtype=np.float64)
    if l.shape != i.shape:
        raise ValueError(f"Distribution shapes differ: {l.shape} vs {i.shape}")
    if not 0.0 <= w <= 1.0:
        raise ValueError(f"Blend weight must be within [0, 1], got {w}")

    f = w ** exponent
    return normalize(l * (1.0 - f) + i * f)


@dataclass
class BlendResult:
    """Everything that went into one terrain decision."""

    local: np.ndarray
    global_dist: np.ndarray
    ideal: np.ndarray
    weight: float
    blended: np.ndarray


class BlendEngine:
    """Turns neighborhood and world counts into a draw distribution."""

    def __init__(self, ideal: ArrayLike, shaping_exponent: float = 3.0):
        """
        Args:
            ideal: Target distribution (normalized here if it isn't already)
            shaping_exponent: Exponent of the response curve f(w) = w ** k
        """
        if shaping_exponent <= 0:
            raise ValueError("Shaping exponent must be positive")
        self.ideal = normalize(ideal)
        self.shaping_exponent = shaping_exponent

    def blend_for(self, local_raw: ArrayLike, world_counts: ArrayLike) -> BlendResult:
        local = normalize(local_raw)
        global_dist = normalize(world_counts)
        w = blend_weight(global_dist, self.ideal)
        blended = blend(local, self.ideal, w, self.shaping_exponent)
        return BlendResult(
            local=local,
            global_dist=global_dist,
            ideal=self.ideal,
            weight=w,
            blended=blended,
        )
