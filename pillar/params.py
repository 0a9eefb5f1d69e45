"""Generation parameters and named presets."""

import logging
import math
from dataclasses import dataclass, asdict, fields, replace

logger = logging.getLogger(__name__)

# Smallest divisor allowed for the noise smoothing parameters.
EPSILON = 1e-6


def _real(value, default):
    """float(value), or the default when value is NaN or infinite."""
    value = float(value)
    return value if math.isfinite(value) else float(default)


def _fraction(value, default):
    return min(1.0, max(0.0, _real(value, default)))


def _count(value, default):
    return max(0, int(round(_real(value, default))))


def _divisor(value, default):
    return max(EPSILON, _real(value, default))


@dataclass
class ParameterSet:
    """All knobs of the curve field.

    Instances are mutated by whoever drives the sketch and only read by
    the generator, which works on a :meth:`normalized` copy.
    """

    # Noise
    seed: float = 0.0
    smooth_x: float = 20.0
    smooth_y: float = 20.0
    amp_x: float = 1.0
    amp_y: float = 1.0

    # Shape
    width: float = 0.3
    height: float = 0.9
    n_lines: int = 450
    n_vertices: int = 5
    straight_edges: bool = True

    # Style
    stroke_width: float = 1.0
    draw_fabric: bool = False

    # Exponential center amplitude
    enable_exp_center_amp: bool = True
    exp_width: float = 1.0
    exponent: float = 0.8
    base: float = 20.0

    # River
    river_enable: bool = False
    river_amp: float = 100.0
    river_smooth: float = 500.0

    # Rounded corners
    rounded: bool = False
    how_round: float = 0.2

    def normalized(self):
        """Return a copy with every field clamped into its usable range.

        NaN and infinite values fall back to the field's default.
        """
        d = ParameterSet
        return replace(
            self,
            seed=_real(self.seed, d.seed),
            smooth_x=_divisor(self.smooth_x, d.smooth_x),
            smooth_y=_divisor(self.smooth_y, d.smooth_y),
            amp_x=_real(self.amp_x, d.amp_x),
            amp_y=_real(self.amp_y, d.amp_y),
            width=_fraction(self.width, d.width),
            height=_fraction(self.height, d.height),
            n_lines=_count(self.n_lines, d.n_lines),
            n_vertices=_count(self.n_vertices, d.n_vertices),
            straight_edges=bool(self.straight_edges),
            stroke_width=max(0.0, _real(self.stroke_width, d.stroke_width)),
            draw_fabric=bool(self.draw_fabric),
            enable_exp_center_amp=bool(self.enable_exp_center_amp),
            exp_width=_fraction(self.exp_width, d.exp_width),
            exponent=_real(self.exponent, d.exponent),
            base=max(0.0, _real(self.base, d.base)),
            river_enable=bool(self.river_enable),
            river_amp=_real(self.river_amp, d.river_amp),
            river_smooth=_divisor(self.river_smooth, d.river_smooth),
            rounded=bool(self.rounded),
            how_round=_fraction(self.how_round, d.how_round),
        )

    def to_dict(self):
        return asdict(self)

    @classmethod
    def from_dict(cls, data):
        """Build a ParameterSet from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown parameters: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known})

    @classmethod
    def from_preset(cls, name, **overrides):
        """Build a ParameterSet from a named preset plus overrides."""
        if name not in PRESETS:
            raise KeyError(
                f"Unknown preset {name!r}; available: {', '.join(sorted(PRESETS))}"
            )
        data = dict(PRESETS[name])
        data.update(overrides)
        return cls.from_dict(data)


PRESETS = {
    "default": {},
    "lines": {
        "n_lines": 120,
        "n_vertices": 40,
        "width": 0.8,
        "height": 0.8,
        "straight_edges": False,
        "enable_exp_center_amp": False,
        "amp_x": 4.0,
        "amp_y": 12.0,
        "smooth_x": 150.0,
        "smooth_y": 60.0,
    },
    "river": {
        "river_enable": True,
        "river_amp": 60.0,
        "river_smooth": 400.0,
        "n_lines": 300,
        "n_vertices": 12,
    },
    "fabric": {
        "draw_fabric": True,
        "n_lines": 80,
        "n_vertices": 30,
        "width": 0.6,
        "straight_edges": False,
        "stroke_width": 0.5,
    },
    "rounded": {
        "rounded": True,
        "how_round": 0.25,
        "width": 0.5,
        "n_vertices": 20,
    },
}
