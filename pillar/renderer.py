"""Raster preview of a curve collection."""

import numpy as np
from PIL import Image, ImageDraw


def render(curves, view_width, view_height, stroke_width=1.0,
           stroke_color=(0, 0, 0), background=(255, 255, 255, 255),
           supersample=2, samples=16):
    """Draw curves onto a new image.

    Args:
        curves: Iterable of Curve (e.g. a CurveCollection).
        view_width: Canvas width in pixels.
        view_height: Canvas height in pixels.
        stroke_width: Line width in pixels. Zero draws nothing.
        stroke_color: Any Pillow colour value.
        background: Any Pillow colour value.
        supersample: Drawing scale factor; the result is downsampled
            back to the canvas size for anti-aliasing.
        samples: Points evaluated per Bezier segment.

    Returns:
        PIL Image in RGBA mode.
    """
    w = max(1, int(round(view_width)))
    h = max(1, int(round(view_height)))
    scale = max(1, int(supersample))

    if stroke_width <= 0:
        return Image.new('RGBA', (w, h), background)

    img = Image.new('RGBA', (w * scale, h * scale), background)
    draw = ImageDraw.Draw(img)
    line_w = max(1, int(round(stroke_width * scale)))

    for curve in curves:
        pts = curve.flatten(samples) * scale
        if len(pts) == 0:
            continue
        if len(pts) == 1 or np.allclose(pts, pts[0]):
            # Degenerate curve: draw a dot of stroke size
            x, y = pts[0]
            r = line_w / 2
            draw.ellipse([x - r, y - r, x + r, y + r], fill=stroke_color)
            continue
        draw.line([tuple(p) for p in pts], fill=stroke_color,
                  width=line_w, joint="curve")

    if scale > 1:
        img = img.resize((w, h), Image.LANCZOS)
    return img
