"""Lightweight vector helpers for 2D slingshot dynamics."""
from __future__ import annotations

import math
from typing import Iterable

import numpy as np

Vector = np.ndarray


def to_vector(value: Iterable[float] | Vector) -> Vector:
    """Convert any iterable to a float64 numpy vector."""
    return np.asarray(list(value), dtype=np.float64)


def zeros() -> Vector:
    return np.zeros(2, dtype=np.float64)


def magnitude(vec: Vector) -> float:
    return float(np.linalg.norm(vec))


def distance(a: Vector, b: Vector) -> float:
    return magnitude(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64))


def from_polar(angle: float, length: float) -> Vector:
    """Vector of the given length pointing along angle (radians, screen axes)."""
    return np.array([math.cos(angle), math.sin(angle)], dtype=np.float64) * length


def clamp(value: float, min_value: float, max_value: float) -> float:
    return max(min_value, min(max_value, value))
