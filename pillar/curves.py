"""Smooth curves through ordered vertices."""

from dataclasses import dataclass, field

import numpy as np


def _bezier_basis(t):
    """Cubic Bernstein basis, shape (len(t), 4)."""
    s = 1.0 - t
    return np.stack([s * s * s, 3 * s * s * t, 3 * s * t * t, t * t * t], axis=-1)


@dataclass
class Curve:
    """A smooth open curve passing through ``points`` in order."""

    points: np.ndarray

    def __post_init__(self):
        self.points = np.asarray(self.points, dtype=np.float64).reshape(-1, 2)

    def __len__(self):
        return len(self.points)

    def segments(self):
        """Cubic Bezier control polygons, shape (N-1, 4, 2).

        Tangents are Catmull-Rom central differences, one-sided at the
        two ends, so a two-point curve is a straight segment.
        """
        pts = self.points
        if len(pts) < 2:
            return np.empty((0, 4, 2))

        tangents = np.gradient(pts, axis=0)
        segs = np.empty((len(pts) - 1, 4, 2))
        segs[:, 0] = pts[:-1]
        segs[:, 1] = pts[:-1] + tangents[:-1] / 3.0
        segs[:, 2] = pts[1:] - tangents[1:] / 3.0
        segs[:, 3] = pts[1:]
        return segs

    def flatten(self, samples=16):
        """Evaluate the curve as a dense polyline.

        Args:
            samples: Points evaluated per Bezier segment.

        Returns:
            Array of shape (M, 2) starting and ending on the first and
            last vertex.
        """
        if len(self.points) < 2:
            return self.points.copy()

        t = np.linspace(0.0, 1.0, max(1, int(samples)), endpoint=False)
        segs = self.segments()
        dense = np.einsum("tk,skd->std", _bezier_basis(t), segs)
        dense = dense.reshape(-1, 2)
        return np.vstack([dense, self.points[-1:]])

    def path_data(self, precision=3):
        """SVG path ``d`` attribute for the smooth curve."""
        if len(self.points) == 0:
            return ""

        def fmt(p):
            return f"{p[0]:.{precision}f},{p[1]:.{precision}f}"

        parts = [f"M {fmt(self.points[0])}"]
        for _, c1, c2, p in self.segments():
            parts.append(f"C {fmt(c1)} {fmt(c2)} {fmt(p)}")
        return " ".join(parts)


def smooth(points):
    """Fit a smooth curve through raw vertices."""
    return Curve(np.asarray(points, dtype=np.float64))


@dataclass
class CurveCollection:
    """Output of one generation pass: row curves, then fabric curves."""

    rows: list = field(default_factory=list)
    fabric: list = field(default_factory=list)

    def __iter__(self):
        yield from self.rows
        yield from self.fabric

    def __len__(self):
        return len(self.rows) + len(self.fabric)
