"""Convex hull of points in the plane, given as complex numbers."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Callable, Iterable

EPS = 1e-9


def dcmp(a: float, b: float) -> int:
    """Compare with tolerance: 0 if within ``EPS``, else -1 or 1."""
    if abs(a - b) <= EPS:
        return 0
    return -1 if a < b else 1


def cross(a: complex, b: complex) -> float:
    """Z component of the cross product of two vectors."""
    return (a.conjugate() * b).imag


def _angle_order(center: complex) -> Callable[[complex, complex], int]:
    def compare(lhs: complex, rhs: complex) -> int:
        turn = cross(lhs - center, rhs - center)
        if dcmp(turn, 0) == 0:
            if abs(lhs.imag - rhs.imag) < EPS:
                a, b = lhs.real, rhs.real
            else:
                a, b = lhs.imag, rhs.imag
            return (a > b) - (a < b)
        return -1 if turn < 0 else 1

    return compare


def convex_hull(points: Iterable[complex]) -> list[complex]:
    """Hull vertices in clockwise order from the lowest point.

    Collinear points on the boundary may be kept. When the hull has at
    least three vertices its first vertex is repeated at the end.
    """
    pts = [complex(p) for p in points]
    if len(pts) <= 1:
        return pts
    pivot_index = min(range(len(pts)), key=lambda i: (pts[i].imag, pts[i].real))
    pivot = pts.pop(pivot_index)
    ordered = [pivot, *sorted(pts, key=cmp_to_key(_angle_order(pivot)))]
    hull: list[complex] = []
    for point in ordered:
        while len(hull) > 1 and cross(hull[-2] - hull[-1], point - hull[-1]) < 0:
            hull.pop()
        hull.append(point)
    if len(hull) >= 3:
        hull.append(hull[0])
    return hull