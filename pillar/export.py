"""SVG export of a curve collection."""

import hashlib
import json
import logging
import re
import xml.etree.ElementTree as ET
from pathlib import Path

import svgwrite

from .params import ParameterSet

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "pillar"

# Most file systems cap a single name at 255 bytes.
MAX_FILENAME_BYTES = 255

_UNSAFE = re.compile(r"[^A-Za-z0-9._=+-]")


def _parameters_json(params):
    return json.dumps(params.to_dict(), separators=(",", ":"))


def _format_value(value):
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def to_svg(curves, view_width, view_height, stroke_width=1.0,
           stroke_color="black", precision=3, params=None):
    """Serialize curves to an SVG document string.

    One ``<path>`` per curve, unfilled, all sharing the same stroke. When
    ``params`` is given, the full parameter set is stored as JSON in the
    document's ``<desc>``.
    """
    dwg = svgwrite.Drawing(size=(view_width, view_height))
    dwg.viewbox(0, 0, view_width, view_height)
    if params is not None:
        dwg.set_desc(desc=_parameters_json(params))
    group = dwg.g(fill="none", stroke=stroke_color, stroke_width=stroke_width)
    for curve in curves:
        d = curve.path_data(precision)
        if d:
            group.add(dwg.path(d=d))
    dwg.add(group)
    return dwg.tostring()


def read_parameters(svg):
    """Recover the ParameterSet stored in an exported SVG document string.

    Returns None if the document carries no parameters.
    """
    root = ET.fromstring(svg)
    for elem in root.iter():
        if elem.tag.split("}", 1)[-1] == "desc" and elem.text:
            return ParameterSet.from_dict(json.loads(elem.text))
    return None


def export_filename(params, prefix=DEFAULT_PREFIX):
    """File name identifying a parameter set.

    Lists the fields that differ from the defaults as ``key=value`` and
    ends with a short hash of the full parameters, so distinct parameter
    sets get distinct names. Only filename-safe characters are used and
    the name never exceeds MAX_FILENAME_BYTES; the complete parameters
    live in the document itself (see :func:`read_parameters`).
    """
    payload = _parameters_json(params).encode("utf-8")
    digest = hashlib.sha1(payload).hexdigest()[:10]
    defaults = ParameterSet().to_dict()
    changed = [
        f"{key}={_format_value(value)}"
        for key, value in params.to_dict().items()
        if value != defaults[key]
    ]

    tail = f"-{digest}.svg"
    name = _UNSAFE.sub("_", prefix)
    for item in changed:
        candidate = f"{name}-{_UNSAFE.sub('_', item)}"
        if len(candidate) + len(tail) > MAX_FILENAME_BYTES:
            break
        name = candidate
    return name[:MAX_FILENAME_BYTES - len(tail)] + tail


def export_svg(curves, params, view_width, view_height, directory=".",
               prefix=DEFAULT_PREFIX, stroke_color="black"):
    """Write curves to ``directory`` under the provenance file name.

    Returns:
        Path of the written file.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(directory) / export_filename(params, prefix)
    svg = to_svg(curves, view_width, view_height,
                 stroke_width=params.normalized().stroke_width,
                 stroke_color=stroke_color, params=params)
    path.write_text(svg, encoding="utf-8")
    logger.info("Exported %d curves to %s", len(curves), path)
    return path
