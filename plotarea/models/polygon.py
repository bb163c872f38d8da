from __future__ import annotations
from dataclasses import dataclass, field
import numpy as np


def _segments_cross(p1, p2, q1, q2) -> bool:
    def orient(a, b, c):
        v = (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])
        return int(v > 0) - int(v < 0)

    def on_segment(a, b, c):
        return (min(a[0], b[0]) <= c[0] <= max(a[0], b[0])
                and min(a[1], b[1]) <= c[1] <= max(a[1], b[1]))

    o1, o2 = orient(p1, p2, q1), orient(p1, p2, q2)
    o3, o4 = orient(q1, q2, p1), orient(q1, q2, p2)
    if o1 != o2 and o3 != o4:
        return True
    return ((o1 == 0 and on_segment(p1, p2, q1))
            or (o2 == 0 and on_segment(p1, p2, q2))
            or (o3 == 0 and on_segment(q1, q2, p1))
            or (o4 == 0 and on_segment(q1, q2, p2)))


@dataclass
class Polygon:
    """
    Ordered (x, y) vertices in plot coordinates (origin bottom-left),
    implicitly closed: the last vertex connects back to the first.
    """
    vertices: np.ndarray = field(default_factory=lambda: np.empty((0, 2), dtype=float))

    def __post_init__(self):
        self.vertices = np.asarray(self.vertices, dtype=float).reshape(-1, 2)

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def is_degenerate(self) -> bool:
        return len(self.vertices) < 3

    def reversed(self) -> "Polygon":
        return Polygon(self.vertices[::-1].copy())

    def translated(self, dx: float, dy: float) -> "Polygon":
        return Polygon(self.vertices + np.array([dx, dy], dtype=float))

    def is_simple(self) -> bool:
        """
        O(n^2) check that no two non-adjacent edges touch or cross.
        Consecutive duplicate vertices are collapsed first.
        """
        pts = [tuple(p) for p in self.vertices]
        pts = [p for i, p in enumerate(pts) if i == 0 or p != pts[i - 1]]
        if len(pts) > 1 and pts[0] == pts[-1]:
            pts.pop()
        n = len(pts)
        if n < 3:
            return False
        edges = [(pts[i], pts[(i + 1) % n]) for i in range(n)]
        for i in range(n):
            for j in range(i + 1, n):
                # adjacent edges share a vertex
                if j == i + 1 or (i == 0 and j == n - 1):
                    continue
                if _segments_cross(*edges[i], *edges[j]):
                    return False
        return True
