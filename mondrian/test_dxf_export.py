"""Tests for DXF export."""
import random

import ezdxf
import pytest

from mondrian.services.art_engine import CustomGenerator
from mondrian.services.dxf_export import HATCH_PATTERNS, generate_dxf


class TestGenerateDxf:
    def test_outline_per_shape(self, tmp_path, small_canvas):
        out = tmp_path / "mondrian.dxf"
        assert generate_dxf(small_canvas, out) == str(out)

        msp = ezdxf.readfile(str(out)).modelspace()
        outlines = msp.query("LWPOLYLINE")
        # canvas frame plus one outline per shape
        assert len(outlines) == 1 + len(small_canvas.shapes)
        assert len(msp.query('LWPOLYLINE[layer=="DIVIDERS"]')) == 1
        assert len(msp.query('LWPOLYLINE[layer=="LEAVES"]')) == 4

    def test_hatches_for_styled_leaves(self, tmp_path, small_canvas):
        out = tmp_path / "mondrian.dxf"
        generate_dxf(small_canvas, out)

        hatches = list(ezdxf.readfile(str(out)).modelspace().query("HATCH"))
        # red, dots, crosshatch; the white leaf stays unfilled
        assert len(hatches) == 3

        solid = [h for h in hatches if h.dxf.solid_fill == 1]
        assert len(solid) == 1
        assert tuple(solid[0].rgb) == (255, 0, 0)

        names = sorted(h.dxf.pattern_name for h in hatches if h.dxf.solid_fill == 0)
        assert names == sorted([HATCH_PATTERNS["dots"], HATCH_PATTERNS["crosshatch"]])

    def test_y_axis_flipped(self, tmp_path, small_canvas):
        out = tmp_path / "mondrian.dxf"
        generate_dxf(small_canvas, out)

        leaves = ezdxf.readfile(str(out)).modelspace().query('LWPOLYLINE[layer=="LEAVES"]')
        # first leaf is (0, 0, 40, 30) in screen coordinates
        points = [tuple(round(v) for v in p) for p in leaves[0].get_points("xy")]
        assert points == [(0, 70), (40, 70), (40, 100), (0, 100)]

    def test_generated_canvas_round_trip(self, tmp_path):
        canvas = CustomGenerator(800, 600, rng=random.Random(2)).generate()
        out = tmp_path / "mondrian_custom.dxf"
        generate_dxf(canvas, out)

        msp = ezdxf.readfile(str(out)).modelspace()
        assert len(msp.query("LWPOLYLINE")) == 1 + len(canvas.shapes)
        # every custom leaf is colored or patterned
        assert len(msp.query("HATCH")) == len(canvas.leaves)

    def test_write_failure_propagates(self, tmp_path, small_canvas):
        with pytest.raises(OSError):
            generate_dxf(small_canvas, tmp_path)
