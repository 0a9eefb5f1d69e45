"""Tests for curves, SVG export and raster rendering."""

import re
import xml.etree.ElementTree as ET

import numpy as np
import pytest

from pillar.curves import Curve, CurveCollection, smooth
from pillar.export import (
    MAX_FILENAME_BYTES, export_filename, export_svg, read_parameters, to_svg,
)
from pillar.params import ParameterSet
from pillar.renderer import render


def _collection():
    rows = [smooth([(10, 10 + 20 * i), (50, 15 + 20 * i), (90, 10 + 20 * i)])
            for i in range(3)]
    fabric = [smooth([(10, 10), (10, 30), (10, 50)])]
    return CurveCollection(rows=rows, fabric=fabric)


def test_segments_pass_through_points():
    curve = smooth([(0, 0), (10, 5), (20, -5), (30, 0)])
    segs = curve.segments()
    assert segs.shape == (3, 4, 2)
    np.testing.assert_array_equal(segs[:, 0], curve.points[:-1])
    np.testing.assert_array_equal(segs[:, 3], curve.points[1:])


def test_two_points_make_a_straight_segment():
    segs = smooth([(0, 0), (30, 0)]).segments()
    np.testing.assert_allclose(segs[0], [[0, 0], [10, 0], [20, 0], [30, 0]])


def test_flatten_endpoints():
    curve = smooth([(0, 0), (10, 5), (20, 0)])
    dense = curve.flatten(8)
    assert dense.shape == (17, 2)
    np.testing.assert_array_equal(dense[0], [0, 0])
    np.testing.assert_array_equal(dense[-1], [20, 0])
    np.testing.assert_allclose(dense[8], [10, 5])


def test_single_point_curve():
    curve = Curve([(3, 4)])
    assert len(curve) == 1
    assert curve.segments().shape == (0, 4, 2)
    np.testing.assert_array_equal(curve.flatten(), [[3, 4]])
    assert curve.path_data(1) == "M 3.0,4.0"
    assert Curve([]).path_data() == ""


def test_path_data():
    d = smooth([(0, 0), (10, 0), (20, 0)]).path_data(precision=1)
    assert d.startswith("M 0.0,0.0 C ")
    assert d.count("C") == 2
    assert d.endswith("20.0,0.0")


def test_collection_order():
    curves = _collection()
    assert len(curves) == 4
    assert list(curves)[-1] is curves.fabric[0]


def test_to_svg_document():
    svg = to_svg(_collection(), 100, 80, stroke_width=0.5)
    root = ET.fromstring(svg)
    ns = {"svg": "http://www.w3.org/2000/svg"}
    paths = root.findall(".//svg:path", ns)
    assert len(paths) == 4
    group = root.find("svg:g", ns)
    assert group.get("fill") == "none"
    assert group.get("stroke-width") == "0.5"
    viewbox = root.get("viewBox").replace(",", " ").split()
    assert viewbox == ["0", "0", "100", "80"]


def test_export_filename_lists_changed_parameters():
    params = ParameterSet(seed=12.25, n_lines=7, river_enable=True)
    name = export_filename(params, prefix="pillar")
    assert name.startswith("pillar-seed=12.25-n_lines=7-river_enable=on-")
    assert name.endswith(".svg")
    assert export_filename(ParameterSet()).startswith("pillar-")


@pytest.mark.parametrize("seed", [0.0, 1234.5678901234, 1e300, -7.125])
def test_export_filename_is_short_and_safe(seed):
    params = ParameterSet(
        seed=seed, smooth_x=123.456789, smooth_y=0.000123, amp_x=-41.5,
        amp_y=9.75, width=0.123456, height=0.654321, n_lines=1234,
        n_vertices=567, straight_edges=False, stroke_width=0.333,
        draw_fabric=True, enable_exp_center_amp=False, exp_width=0.42,
        exponent=1.1111, base=3.3, river_enable=True, river_amp=12.5,
        river_smooth=777.7, rounded=True, how_round=0.45,
    )
    name = export_filename(params, prefix="pillar")
    assert len(name.encode("utf-8")) <= MAX_FILENAME_BYTES
    assert re.fullmatch(r"[A-Za-z0-9._=+-]+", name)
    assert name.endswith(".svg")


def test_export_filename_distinguishes_parameter_sets():
    names = {export_filename(ParameterSet(seed=s)) for s in
             (1.0000001, 1.0000002, 1.0000003)}
    assert len(names) == 3


def test_export_filename_sanitizes_prefix():
    name = export_filename(ParameterSet(), prefix='my "sketch": v1')
    assert name.startswith("my__sketch___v1-")


def test_export_svg_writes_file(tmp_path):
    params = ParameterSet(stroke_width=2.0)
    path = export_svg(_collection(), params, 100, 80, directory=tmp_path)
    assert path.parent == tmp_path
    assert path.name == export_filename(params)
    root = ET.parse(path).getroot()
    assert root.tag.endswith("svg")


def test_exported_document_carries_parameters(tmp_path):
    params = ParameterSet(seed=1234.5678901234, n_lines=7, river_enable=True,
                          exponent=0.95, rounded=True)
    path = export_svg(_collection(), params, 100, 80, directory=tmp_path)
    assert read_parameters(path.read_text(encoding="utf-8")) == params


def test_read_parameters_without_desc():
    assert read_parameters(to_svg(_collection(), 100, 80)) is None


def test_export_svg_failure(tmp_path):
    with pytest.raises(OSError):
        export_svg(_collection(), ParameterSet(), 100, 80,
                   directory=tmp_path / "missing")


def test_render_draws_curves():
    img = render(_collection(), 100, 80, stroke_width=2.0)
    assert img.mode == "RGBA"
    assert img.size == (100, 80)
    arr = np.array(img)
    assert arr[..., :3].min() < 128


def test_render_zero_stroke_is_blank():
    img = render(_collection(), 60, 40, stroke_width=0)
    assert img.size == (60, 40)
    arr = np.array(img)
    assert (arr[..., :3] == 255).all()


def test_render_single_point_curves():
    curves = CurveCollection(rows=[Curve([(20, 20)])])
    img = render(curves, 40, 40, stroke_width=4.0, supersample=1)
    assert np.array(img)[20, 20, 0] == 0
