"""Curve field generation.

Builds a grid of ``n_lines`` rows of ``n_vertices + 1`` vertices inside
the drawable region, then for every vertex, in this order:

1. clamps x into the row's rounded extent (``rounded``),
2. samples noise at ``(x / smooth_x, y / smooth_y, seed)``,
3. weights the noise by distance from the canvas center
   (``enable_exp_center_amp``),
4. displaces x by the noise (unless ``straight_edges``),
5. displaces x again by independent river noise (``river_enable``),
6. displaces y by the noise.

Each row is then smoothed into a curve. With ``draw_fabric`` a post-pass
threads vertical curves through matching vertex indices of all rows.
"""

import logging
import math

import numpy as np

from .curves import CurveCollection, smooth
from .shaping import clamp_range, exp_amplitude, rounding_thresholds

logger = logging.getLogger(__name__)

# River noise is sampled on a separate slice of the field.
RIVER_SEED_FACTOR = 10


def canvas_center(view_width, view_height):
    return view_width / 2.0, view_height / 2.0


def generate_curves(params, noise, view_width, view_height):
    """Generate the curve field for a parameter set.

    Args:
        params: ParameterSet; read only, a normalized copy is used.
        noise: Callable ``noise(x, y, z) -> float`` in [-1, 1].
        view_width: Canvas width.
        view_height: Canvas height.

    Returns:
        CurveCollection with ``n_lines`` row curves followed by
        ``n_vertices`` fabric curves when ``draw_fabric`` is set.

    Raises:
        ValueError: If no noise field is given.
    """
    if noise is None:
        raise ValueError("A noise field is required to generate curves")

    p = params.normalized()
    n_lines = p.n_lines
    n_vertices = p.n_vertices

    center_x, center_y = canvas_center(view_width, view_height)
    margin_x = view_width * (1 - p.width) / 2
    margin_y = view_height * (1 - p.height) / 2
    # n_vertices == 0 degenerates to one column at the left margin
    step_x = view_width * p.width / n_vertices if n_vertices else 0.0
    step_y = view_height * p.height / n_lines if n_lines else 0.0
    falloff = p.width * view_width * p.exp_width

    rows = []
    for i in range(n_lines):
        if p.rounded:
            thresh_l, thresh_r = rounding_thresholds(
                i, n_lines, p.how_round, center_x, margin_x)

        vertices = np.empty((n_vertices + 1, 2))
        for j in range(n_vertices + 1):
            x = margin_x + step_x * j
            y = margin_y + step_y * i

            if p.rounded:
                x = clamp_range(x, thresh_l, thresh_r)

            value = noise(x / p.smooth_x, y / p.smooth_y, p.seed)

            exp_amp = 1.0
            if p.enable_exp_center_amp:
                dist = math.hypot(x - center_x, y - center_y)
                exp_amp = exp_amplitude(dist, falloff, p.base, p.exponent)

            if not p.straight_edges:
                x += value * p.amp_x * exp_amp

            if p.river_enable:
                river = noise(x / p.river_smooth, y / p.river_smooth,
                              p.seed * RIVER_SEED_FACTOR)
                x += river * p.river_amp

            y += value * p.amp_y * exp_amp

            vertices[j] = (x, y)

        rows.append(smooth(vertices))

    fabric = fabric_curves(rows, n_vertices) if p.draw_fabric else []

    logger.debug("Generated %d row curves and %d fabric curves on %gx%g",
                 len(rows), len(fabric), view_width, view_height)
    return CurveCollection(rows=rows, fabric=fabric)


def fabric_curves(rows, n_vertices):
    """Vertical curves through the k-th vertex of every row.

    Reads the already generated rows; one curve per ``k`` in
    ``[0, n_vertices)``.
    """
    if not rows:
        return []
    stacked = np.stack([row.points for row in rows])
    return [smooth(stacked[:, k]) for k in range(n_vertices)]
