"""
SVG markup serialization.

The document is a ``<svg>`` container sized to the canvas holding one
``<rect>`` per shape, in generation order.  Markup is assembled from
strings; pattern fills are written as bare names unless pattern
definitions are requested, in which case a ``<defs>`` block is emitted and
patterned rects reference it with ``url(#name)``.
"""

import logging
from pathlib import Path
from typing import Iterable

from mondrian.services.art_engine.shape_model import FILL_PATTERN, Canvas, Shape


logger = logging.getLogger(__name__)

PATTERN_SIZE = 10

PATTERN_DEFS = {
    "stripes": (
        '<line x1="0" y1="0" x2="0" y2="{s}" stroke="black" stroke-width="4" />'
    ),
    "dots": (
        '<circle cx="{c}" cy="{c}" r="2" fill="black" />'
    ),
    "crosshatch": (
        '<path d="M0,0 L{s},{s} M{s},0 L0,{s}" stroke="black" stroke-width="1" />'
    ),
}


def _pattern_def(name: str) -> str:
    body = PATTERN_DEFS[name].format(s=PATTERN_SIZE, c=PATTERN_SIZE // 2)
    return (
        f'<pattern id="{name}" width="{PATTERN_SIZE}" height="{PATTERN_SIZE}" '
        f'patternUnits="userSpaceOnUse">'
        f'<rect width="{PATTERN_SIZE}" height="{PATTERN_SIZE}" fill="white" />'
        f'{body}</pattern>'
    )


def render_defs(names: Iterable[str]) -> str:
    """``<defs>`` block for the given pattern names (unknown names skipped)."""
    defs = [_pattern_def(n) for n in names if n in PATTERN_DEFS]
    return f"<defs>{''.join(defs)}</defs>" if defs else ""


def shape_markup(shape: Shape, pattern_refs: bool = False) -> str:
    """Single ``<rect>`` element for *shape*."""
    fill = shape.fill
    if pattern_refs and shape.fill_type == FILL_PATTERN and fill in PATTERN_DEFS:
        fill = f"url(#{fill})"
    return (
        f'<rect x="{shape.x}" y="{shape.y}" width="{shape.width}" '
        f'height="{shape.height}" stroke="{shape.stroke}" fill="{fill}" />'
    )


def render_svg(canvas: Canvas, pattern_defs: bool = False) -> str:
    """Full document for *canvas*."""
    parts = [f'<svg width="{canvas.width}" height="{canvas.height}">']
    if pattern_defs:
        used = sorted({s.fill for s in canvas.shapes if s.fill_type == FILL_PATTERN})
        parts.append(render_defs(used))
    parts.extend(shape_markup(s, pattern_refs=pattern_defs) for s in canvas.shapes)
    parts.append("</svg>")
    return "".join(parts)


def write_svg(canvas: Canvas, output_path, pattern_defs: bool = False) -> str:
    """
    Write the SVG document for *canvas*, replacing any existing file.

    Args:
        canvas: Generated canvas.
        output_path: Target file path.
        pattern_defs: Emit renderable pattern definitions.

    Returns:
        Path to the written file.
    """
    path = Path(output_path)
    markup = render_svg(canvas, pattern_defs=pattern_defs)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(markup, encoding="utf-8")
    except OSError as exc:
        logger.error("Could not write SVG to %s: %s", path, exc)
        raise
    logger.info("Wrote %d shapes to %s", len(canvas.shapes), path)
    return str(path)
