"""
CAD drawing export using ezdxf.

Writes the same shape list as the SVG serializer into a DXF drawing:
- Every shape is a closed LWPOLYLINE outline (dividers and leaves on
  separate layers)
- Colored leaves get a solid HATCH carrying the named color as true color
- Patterned leaves get a pattern HATCH from the standard pattern library
- Background leaves are outline only

DXF is y-up, so shapes are mirrored about the canvas height.
"""

import logging
from pathlib import Path
from typing import List, Tuple

import ezdxf

from mondrian.services.art_engine.shape_model import (
    FILL_COLOR,
    FILL_PATTERN,
    Canvas,
    Shape,
)
from mondrian.services.art_engine.styles import color_to_rgb


logger = logging.getLogger(__name__)

# Pattern name → ezdxf/AutoCAD hatch pattern
HATCH_PATTERNS = {
    "stripes": "ANSI31",
    "dots": "DOTS",
    "crosshatch": "ANSI37",
}
HATCH_SCALE = 2.0


def _outline(shape: Shape, canvas_height: int) -> List[Tuple[int, int]]:
    """Corner points of *shape* in DXF (y-up) coordinates."""
    x0 = shape.x
    y0 = canvas_height - shape.y - shape.height
    x1 = x0 + shape.width
    y1 = y0 + shape.height
    return [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]


def generate_dxf(canvas: Canvas, output_path) -> str:
    """
    Generate a DXF drawing of *canvas*.

    Args:
        canvas: Generated canvas.
        output_path: Path to save the DXF file.

    Returns:
        Path to the generated DXF file.
    """
    doc = ezdxf.new("R2010")
    msp = doc.modelspace()

    doc.layers.add("CANVAS", color=7)
    doc.layers.add("DIVIDERS", color=7)
    doc.layers.add("LEAVES", color=7)
    doc.layers.add("FILLS", color=7)

    msp.add_lwpolyline(
        [(0, 0), (canvas.width, 0), (canvas.width, canvas.height), (0, canvas.height)],
        close=True,
        dxfattribs={"layer": "CANVAS", "lineweight": 50},
    )

    hatches = 0
    for shape in canvas.shapes:
        points = _outline(shape, canvas.height)
        msp.add_lwpolyline(
            points,
            close=True,
            dxfattribs={"layer": "LEAVES" if shape.is_leaf else "DIVIDERS", "lineweight": 25},
        )

        if not shape.is_leaf or shape.area <= 0:
            continue

        if shape.fill_type == FILL_COLOR:
            hatch = msp.add_hatch(dxfattribs={"layer": "FILLS"})
            hatch.set_solid_fill(color=7, rgb=color_to_rgb(shape.fill))
        elif shape.fill_type == FILL_PATTERN and shape.fill in HATCH_PATTERNS:
            hatch = msp.add_hatch(color=7, dxfattribs={"layer": "FILLS"})
            hatch.set_pattern_fill(HATCH_PATTERNS[shape.fill], scale=HATCH_SCALE)
        else:
            continue
        hatch.paths.add_polyline_path(points, is_closed=True)
        hatches += 1

    path = Path(output_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        doc.saveas(str(path))
    except OSError as exc:
        logger.error("Could not write DXF to %s: %s", path, exc)
        raise
    logger.info("Wrote %d outlines and %d hatches to %s", len(canvas.shapes), hatches, path)
    return str(path)
