"""Scalar shaping functions used by the curve generator.

Remapping, clamping, the quintic ease used for corner rounding, and the
two-stage center amplitude curve.
"""

# Upper bound of the center amplitude multiplier.
MAX_AMPLITUDE = 1e6


def _power(value, exponent):
    """value ** exponent for value >= 0, capped at MAX_AMPLITUDE."""
    try:
        return min(MAX_AMPLITUDE, value ** exponent)
    except OverflowError:
        return MAX_AMPLITUDE


def map_range(value, in_min, in_max, out_min, out_max):
    """Linearly remap ``value`` from [in_min, in_max] to [out_min, out_max].

    The result is not clamped. A zero-width input range maps to ``out_min``.
    """
    if in_max == in_min:
        return out_min
    return (value - in_min) * (out_max - out_min) / (in_max - in_min) + out_min


def clamp_range(value, low, high):
    """Clamp ``value`` into [low, high]."""
    return max(low, min(high, value))


def ease_out_quint(t):
    """Quintic ease-out: 0 -> 0, 1 -> 1, fast start and slow finish."""
    return 1 + (t - 1) ** 5


def rounding_thresholds(row, n_lines, how_round, center_x, margin_x):
    """Allowed horizontal extent ``(thresh_l, thresh_r)`` of a row.

    Rows within ``how_round * n_lines`` rows of the top or bottom edge get
    an extent that eases from the canvas center (edge row) out to the
    margin (band boundary). All other rows get the full drawable width.
    """
    band = how_round * n_lines
    if band <= 0:
        t = 1.0
    else:
        d = min(row, n_lines - 1 - row)
        t = clamp_range(d / band, 0.0, 1.0)

    thresh_l = map_range(ease_out_quint(t), 0.0, 1.0, center_x, margin_x)
    thresh_r = 2 * center_x - thresh_l
    return thresh_l, thresh_r


def center_amplitude(dist, radius, base, exponent):
    """Inverse-distance weight raised to ``exponent``.

    ``dist`` is mapped from [0, radius] onto [base, 0]; anything past the
    radius is zero.
    """
    if radius <= 0:
        return 0.0
    value = max(0.0, map_range(dist, 0.0, radius, base, 0.0))
    if value == 0.0:
        return 0.0
    return max(0.0, _power(value, exponent))


def exp_amplitude(dist, radius, base, exponent):
    """Final center amplitude multiplier.

    Rescales :func:`center_amplitude` from [0, base] onto [0, 5] and cubes
    it. Both stages are kept exactly; the curve shape is part of the look.
    Extreme exponents saturate at MAX_AMPLITUDE instead of overflowing.
    """
    if base <= 0:
        return 0.0
    amp = center_amplitude(dist, radius, base, exponent)
    return max(0.0, _power(max(0.0, map_range(amp, 0.0, base, 0.0, 5.0)), 3))
