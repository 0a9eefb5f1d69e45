"""Pillar - noise-warped line field sketches exported as SVG."""

from .curves import Curve, CurveCollection
from .generator import generate_curves
from .noise import NoiseField
from .params import ParameterSet, PRESETS
from .sketch import Sketch

__version__ = "0.1.0"
__all__ = [
    "generate", "generate_curves", "Curve", "CurveCollection",
    "NoiseField", "ParameterSet", "PRESETS", "Sketch",
]


def generate(view_width=800, view_height=800, noise_seed=None, preset=None,
             **params):
    """Generate a curve field.

    Args:
        view_width: Canvas width.
        view_height: Canvas height.
        noise_seed: Seed of the noise permutation. Time based if None.
        preset: Name of a preset in PRESETS to start from.
        **params: ParameterSet fields (seed, n_lines, river_enable, etc.)
            overriding the preset.

    Returns:
        CurveCollection of row curves followed by fabric curves.
    """
    if preset is not None:
        parameters = ParameterSet.from_preset(preset, **params)
    else:
        parameters = ParameterSet(**params)
    noise = NoiseField(noise_seed)
    return generate_curves(parameters, noise, view_width, view_height)
