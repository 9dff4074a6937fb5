"""Tests for composition statistics and the tiling check."""
from mondrian.services.art_engine.composition import (
    composition_report,
    fill_area_shares,
    tiles_exactly,
)
from mondrian.services.art_engine.shape_model import Canvas, Region


class TestTilesExactly:
    def test_exact_tiling(self):
        parent = Region(0, 0, 10, 10)
        assert tiles_exactly(parent, [Region(0, 0, 4, 10), Region(4, 0, 6, 10)])

    def test_gap_detected(self):
        parent = Region(0, 0, 10, 10)
        assert not tiles_exactly(parent, [Region(0, 0, 4, 10), Region(5, 0, 5, 10)])

    def test_overlap_detected(self):
        # same total area as the parent, but overlapping and leaving a gap
        parent = Region(0, 0, 10, 10)
        children = [Region(0, 0, 6, 10), Region(3, 0, 4, 10)]
        assert not tiles_exactly(parent, children)

    def test_negative_size_rejected(self):
        parent = Region(0, 0, 10, 10)
        children = [Region(0, 0, 12, 10), Region(12, 0, -2, 10)]
        assert not tiles_exactly(parent, children)

    def test_zero_area_children_ignored(self):
        parent = Region(0, 0, 10, 10)
        assert tiles_exactly(parent, [Region(0, 0, 10, 10), Region(10, 0, 0, 10)])


class TestReport:
    def test_report_fields(self, small_canvas):
        report = composition_report(small_canvas)
        assert report["leaves"] == 4
        assert report["dividers"] == 1
        assert report["max_depth"] == 1
        assert report["tiled"] is True
        assert report["fills"] == {"red": 1, "dots": 1, "white": 1, "crosshatch": 1}

    def test_fill_shares(self, small_canvas):
        shares = fill_area_shares(small_canvas)
        assert shares["color"] == 0.12
        assert shares["pattern"] == 0.6
        assert shares["background"] == 0.28
        assert abs(sum(shares.values()) - 1.0) < 1e-9

    def test_empty_canvas_not_tiled(self):
        report = composition_report(Canvas(10, 10))
        assert report["leaves"] == 0
        assert report["tiled"] is False


class TestShapeGeometry:
    def test_leaf_geometry_comes_from_region(self, small_canvas):
        leaf = small_canvas.leaves[1]
        assert leaf.region == Region(40, 0, 60, 30)
        assert leaf.region.polygon.bounds == (40.0, 0.0, 100.0, 30.0)
        assert leaf.area == leaf.region.polygon.area == 1800
