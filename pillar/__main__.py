"""CLI entry point for Pillar."""

import argparse
import logging
from pathlib import Path

from .noise import NoiseField
from .params import ParameterSet, PRESETS
from .sketch import Sketch

# (flag, type, help) per control panel folder
PARAMETER_GROUPS = {
    "shape": [
        ("n_lines", int, "Number of curve rows"),
        ("n_vertices", int, "Vertices per row minus one"),
        ("straight_edges", bool, "Only warp vertices vertically"),
        ("width", float, "Fraction of canvas width used (0-1)"),
        ("height", float, "Fraction of canvas height used (0-1)"),
        ("rounded", bool, "Ease the top and bottom rows inward"),
        ("how_round", float, "Fraction of rows affected by rounding (0-1)"),
    ],
    "exp center amp": [
        ("enable_exp_center_amp", bool, "Weight noise by distance from center"),
        ("exp_width", float, "Falloff radius as fraction of drawn width"),
        ("exponent", float, "Falloff exponent"),
        ("base", float, "Falloff base value"),
    ],
    "river": [
        ("river_enable", bool, "Add a second horizontal noise displacement"),
        ("river_amp", float, "River amplitude"),
        ("river_smooth", float, "River smoothness"),
    ],
    "noise": [
        ("seed", float, "Noise slice, selects a composition"),
        ("smooth_x", float, "Horizontal noise smoothing"),
        ("smooth_y", float, "Vertical noise smoothing"),
        ("amp_x", float, "Horizontal noise amplitude"),
        ("amp_y", float, "Vertical noise amplitude"),
    ],
    "style": [
        ("stroke_width", float, "Stroke width"),
        ("draw_fabric", bool, "Connect rows with vertical curves"),
    ],
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pillar",
        description="Generate a noise-warped line field and export it as SVG"
    )
    parser.add_argument(
        "--preset", "-p", default="default", choices=sorted(PRESETS),
        help="Parameter preset to start from (default: default)"
    )
    parser.add_argument(
        "--size", nargs=2, type=int, default=(800, 800),
        metavar=("W", "H"), help="Canvas size (default: 800 800)"
    )
    parser.add_argument(
        "--noise-seed", type=int, default=None,
        help="Seed of the noise permutation (default: time based)"
    )
    parser.add_argument(
        "--randomize", "-r", action="store_true",
        help="Pick a random parameter seed"
    )
    parser.add_argument(
        "--output-dir", "-o", default=".",
        help="Directory for the SVG file (default: current directory)"
    )
    parser.add_argument(
        "--preview", default=None,
        help="Also write a raster preview (PNG) to this path"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Debug logging"
    )

    for title, options in PARAMETER_GROUPS.items():
        group = parser.add_argument_group(title)
        for name, kind, text in options:
            flag = "--" + name.replace("_", "-")
            if kind is bool:
                group.add_argument(flag, dest=name, default=None,
                                   action=argparse.BooleanOptionalAction,
                                   help=text)
            else:
                group.add_argument(flag, dest=name, type=kind, default=None,
                                   help=text)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    overrides = {
        name: getattr(args, name)
        for options in PARAMETER_GROUPS.values()
        for name, _, _ in options
        if getattr(args, name) is not None
    }
    params = ParameterSet.from_preset(args.preset, **overrides)

    sketch = Sketch(params, NoiseField(args.noise_seed), size=tuple(args.size))
    if args.randomize:
        sketch.randomize()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = sketch.export_svg(output_dir)
    print(f"Saved {len(sketch.curves)} curves "
          f"({sketch.view_width}x{sketch.view_height}) to {path}")

    if args.preview:
        preview = Path(args.preview)
        preview.parent.mkdir(parents=True, exist_ok=True)
        sketch.render().save(str(preview))
        print(f"Saved preview to {preview}")


if __name__ == "__main__":
    main()
