"""Interactive sketch state: parameters, noise and the current curves."""

import logging
from dataclasses import replace

import numpy as np

from .export import export_svg
from .generator import generate_curves
from .noise import NoiseField
from .params import ParameterSet
from .renderer import render

logger = logging.getLogger(__name__)

# Upper bound for randomized parameter seeds.
SEED_RANGE = 2000.0


class Sketch:
    """Holds a mutable ParameterSet and regenerates on every change.

    Listeners passed as ``on_update`` (or added with :meth:`subscribe`)
    are called with the sketch after each regeneration; this is the hook
    a display or control panel uses.
    """

    def __init__(self, params=None, noise=None, size=(800, 800),
                 on_update=None):
        self.params = params if params is not None else ParameterSet()
        self.noise = noise if noise is not None else NoiseField()
        self.view_width, self.view_height = size
        self.curves = None
        self._listeners = []
        if on_update is not None:
            self._listeners.append(on_update)
        self.reset()

    def subscribe(self, listener):
        """Call ``listener(sketch)`` after every regeneration."""
        self._listeners.append(listener)

    def reset(self):
        """Regenerate the curves from scratch and notify listeners."""
        self.curves = generate_curves(self.params, self.noise,
                                      self.view_width, self.view_height)
        for listener in self._listeners:
            listener(self)
        return self.curves

    def update(self, **changes):
        """Change parameters by name, then regenerate."""
        self.params = replace(self.params, **changes)
        return self.reset()

    def randomize(self, rng=None):
        """Pick a new parameter seed in [0, SEED_RANGE), then regenerate."""
        if rng is None:
            rng = np.random.RandomState()
        self.params.seed = float(rng.uniform(0, SEED_RANGE))
        logger.debug("Randomized seed to %s", self.params.seed)
        return self.reset()

    def load_preset(self, name):
        """Switch to a named preset, keeping the current seed, then regenerate."""
        self.params = ParameterSet.from_preset(name, seed=self.params.seed)
        return self.reset()

    def render(self, **style):
        style.setdefault("stroke_width", self.params.normalized().stroke_width)
        return render(self.curves, self.view_width, self.view_height, **style)

    def export_svg(self, directory=".", **kwargs):
        return export_svg(self.curves, self.params, self.view_width,
                          self.view_height, directory=directory, **kwargs)
