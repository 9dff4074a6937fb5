"""
Composition statistics for generated canvases.

Reports how the canvas area is shared between colored, patterned and
background leaves, and checks that the leaves tile the canvas:

  1. **Coverage** — union of leaf boxes equals the canvas box.
  2. **No overlap** — leaf areas sum to exactly the canvas area.
"""

from typing import Dict, List

from shapely.ops import unary_union

from .shape_model import FILL_BACKGROUND, FILL_COLOR, FILL_PATTERN, Canvas, Region


def tiles_exactly(parent: Region, children: List[Region]) -> bool:
    """
    True if *children* cover *parent* with no gap and no overlap.

    Zero-area children are allowed and ignored.
    """
    if any(c.width < 0 or c.height < 0 for c in children):
        return False
    if sum(c.area for c in children) != parent.area:
        return False
    solid = [c.polygon for c in children if c.area > 0]
    if not solid:
        return parent.area == 0
    union = unary_union(solid)
    return union.symmetric_difference(parent.polygon).area < 1e-6


def fill_area_shares(canvas: Canvas) -> Dict[str, float]:
    """Fraction of canvas area held by each fill type."""
    total = canvas.width * canvas.height
    shares = {FILL_COLOR: 0.0, FILL_PATTERN: 0.0, FILL_BACKGROUND: 0.0}
    if total <= 0:
        return shares
    for leaf in canvas.leaves:
        shares[leaf.fill_type] = shares.get(leaf.fill_type, 0.0) + leaf.area / total
    return {k: round(v, 4) for k, v in shares.items()}


def composition_report(canvas: Canvas) -> dict:
    """
    Summarise a generated canvas.

    Returns
    -------
    dict
        ``leaves``, ``dividers``, ``max_depth``, ``fill_shares`` (per
        fill type), ``fills`` (leaf count per fill name) and ``tiled``.
    """
    leaves = canvas.leaves
    fills: Dict[str, int] = {}
    for leaf in leaves:
        fills[leaf.fill] = fills.get(leaf.fill, 0) + 1

    return {
        "leaves": len(leaves),
        "dividers": len(canvas.dividers),
        "max_depth": max((s.depth for s in canvas.shapes), default=0),
        "fill_shares": fill_area_shares(canvas),
        "fills": fills,
        "tiled": tiles_exactly(canvas.root, [leaf.region for leaf in leaves]),
    }
