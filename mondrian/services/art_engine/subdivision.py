"""
Recursive region subdivision.

A region either becomes a leaf (one styled shape) or is cut by randomly
placed vertical and horizontal lines into child regions that exactly tile
it.  A split region emits a white divider shape first, then the output of
each child in reading order (top row left to right, then bottom row).

Two variants share the split decision and differ in geometry and styling:

  * ``basic``: 4-way splits, lines in the middle third, 3-color palette,
    leaves colored one time in four, otherwise left white.
  * ``custom``: 4-way splits or, one time in four, 6-way splits; lines in
    the middle half, 8-color palette, leaves colored three times in four,
    otherwise patterned.

Randomness comes from an injected source with the ``random.Random``
interface (``random``, ``randrange``, ``choice``); the process-wide
``random`` module is used when none is given.
"""

import logging
import random
from typing import List, Optional, Tuple

from mondrian.config import MAX_DEPTH, SPLIT_PROBABILITY, SPLIT_THRESHOLD, ConfigError

from .shape_model import (
    BACKGROUND,
    FILL_BACKGROUND,
    FILL_COLOR,
    FILL_PATTERN,
    Canvas,
    Region,
    Shape,
)
from .styles import BASIC_COLORS, CUSTOM_COLORS, PATTERNS, random_color, random_pattern


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Child geometry
# ---------------------------------------------------------------------------

def quadrants(region: Region, v: int, h: int) -> List[Region]:
    """Four children of *region* cut at vertical line *v* and horizontal line *h*."""
    x, y = region.x, region.y
    right, bottom = x + region.width, y + region.height
    return [
        Region(x, y, v - x, h - y),                # top-left
        Region(v, y, right - v, h - y),            # top-right
        Region(x, h, v - x, bottom - h),           # bottom-left
        Region(v, h, right - v, bottom - h),       # bottom-right
    ]


def sextants(region: Region, v1: int, v2: int, h1: int, h2: int) -> List[Region]:
    """
    Six children of *region* for a three-column split.

    Columns are cut at ``v1 <= v2``.  The two left columns break at ``h1``,
    the right column breaks at ``h2``, so the row boundary steps at ``v2``.
    Returned in order: top-left, top-right, top-center, bottom-left,
    bottom-right, bottom-center.
    """
    x, y = region.x, region.y
    right, bottom = x + region.width, y + region.height
    return [
        Region(x, y, v1 - x, h1 - y),
        Region(v1, y, v2 - v1, h1 - y),
        Region(v2, y, right - v2, h2 - y),
        Region(x, h1, v1 - x, bottom - h1),
        Region(v1, h1, v2 - v1, bottom - h1),
        Region(v2, h2, right - v2, bottom - h2),
    ]


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------

class ArtGenerator:
    """Shared split decision and recursion; subclasses supply geometry and fills."""

    variant = "base"
    line_divisor = 3            # lines fall in [1/n, (n-1)/n) of the span
    colors: Tuple[str, ...] = ()
    patterns: Tuple[str, ...] = ()

    def __init__(self, canvas_width: int, canvas_height: int,
                 rng=None, max_depth: int = MAX_DEPTH):
        self.canvas_width = canvas_width
        self.canvas_height = canvas_height
        self.rng = rng if rng is not None else random
        self.max_depth = max_depth

    # ---- entry point -----------------------------------------------------

    def generate(self) -> Canvas:
        """Subdivide the whole canvas and return it with its shapes."""
        shapes = self.subdivide(0, 0, self.canvas_width, self.canvas_height)
        canvas = Canvas(self.canvas_width, self.canvas_height,
                        variant=self.variant, shapes=tuple(shapes))
        logger.debug(
            "%s: %d shapes (%d leaves) on %dx%d canvas",
            self.variant, len(canvas.shapes), len(canvas.leaves),
            self.canvas_width, self.canvas_height,
        )
        return canvas

    def subdivide(self, x: int, y: int, width: int, height: int,
                  depth: int = 0) -> List[Shape]:
        """Shapes for the region, divider first when it splits."""
        region = Region(x, y, width, height)

        if not (self.should_split(width, height) and self.has_room(region)):
            return [self.leaf(region, depth)]

        if depth >= self.max_depth:
            logger.warning("Depth cap %d reached at %s; emitting leaf", self.max_depth, region)
            return [self.leaf(region, depth)]

        shapes = [Shape.divider(region, depth)]
        for child in self.split_region(region):
            shapes.extend(self.subdivide(child.x, child.y, child.width, child.height, depth + 1))
        return shapes

    # ---- split decision --------------------------------------------------

    def should_split(self, width: int, height: int) -> bool:
        """
        Oversized regions (over half the canvas both ways) always split,
        regions at or under the threshold never do, the rest split when two
        independent draws both come in under SPLIT_PROBABILITY.
        """
        if width > self.canvas_width // 2 and height > self.canvas_height // 2:
            return True
        if width > SPLIT_THRESHOLD and height > SPLIT_THRESHOLD:
            return (self.rng.random() < SPLIT_PROBABILITY
                    and self.rng.random() < SPLIT_PROBABILITY)
        return False

    def line_range(self, start: int, span: int) -> Tuple[int, int]:
        """Half-open range a split line across *span* is drawn from."""
        n = self.line_divisor
        return start + span // n, start + (n - 1) * span // n

    def has_room(self, region: Region) -> bool:
        """True if a line strictly inside *region* can be drawn on both axes."""
        lo_x, hi_x = self.line_range(region.x, region.width)
        lo_y, hi_y = self.line_range(region.y, region.height)
        return region.x < lo_x < hi_x and region.y < lo_y < hi_y

    def draw_line(self, start: int, span: int) -> int:
        lo, hi = self.line_range(start, span)
        return self.rng.randrange(lo, hi)

    # ---- variant hooks ---------------------------------------------------

    def split_region(self, region: Region) -> List[Region]:
        raise NotImplementedError

    def pick_fill(self) -> Tuple[str, str]:
        """Return ``(fill, fill_type)`` for a new leaf."""
        raise NotImplementedError

    def leaf(self, region: Region, depth: int = 0) -> Shape:
        fill, fill_type = self.pick_fill()
        return Shape(
            x=region.x,
            y=region.y,
            width=region.width,
            height=region.height,
            fill=fill,
            fill_type=fill_type,
            depth=depth,
        )


class BasicGenerator(ArtGenerator):
    """Four-way splits with lines in the middle third; sparse primary colors."""

    variant = "basic"
    line_divisor = 3
    colors = BASIC_COLORS
    color_probability = 1.0 / 4

    def split_region(self, region: Region) -> List[Region]:
        v = self.draw_line(region.x, region.width)
        h = self.draw_line(region.y, region.height)
        return quadrants(region, v, h)

    def pick_fill(self) -> Tuple[str, str]:
        if self.rng.random() < self.color_probability:
            return random_color(self.rng, self.colors), FILL_COLOR
        return BACKGROUND, FILL_BACKGROUND


class CustomGenerator(ArtGenerator):
    """Four- or six-way splits with lines in the middle half; every leaf is styled."""

    variant = "custom"
    line_divisor = 4
    colors = CUSTOM_COLORS
    patterns = PATTERNS
    color_probability = 0.75

    def wants_three_way(self) -> bool:
        # two fair coin flips, both heads
        return self.rng.random() < 0.5 and self.rng.random() < 0.5

    def split_region(self, region: Region) -> List[Region]:
        three_way = self.wants_three_way()

        v1 = self.draw_line(region.x, region.width)
        v2 = self.draw_line(region.x, region.width) if three_way else None
        h1 = self.draw_line(region.y, region.height)
        h2 = self.draw_line(region.y, region.height) if three_way else None

        if not three_way:
            return quadrants(region, v1, h1)

        # lines are drawn independently; order them so every child has
        # non-negative size
        v1, v2 = sorted((v1, v2))
        h1, h2 = sorted((h1, h2))
        return sextants(region, v1, v2, h1, h2)

    def pick_fill(self) -> Tuple[str, str]:
        if self.rng.random() < self.color_probability:
            return random_color(self.rng, self.colors), FILL_COLOR
        return random_pattern(self.rng, self.patterns), FILL_PATTERN


VARIANTS = {
    BasicGenerator.variant: BasicGenerator,
    CustomGenerator.variant: CustomGenerator,
}


def create_generator(variant: str, canvas_width: int, canvas_height: int,
                     rng=None, max_depth: Optional[int] = None) -> ArtGenerator:
    """Instantiate the generator registered under *variant*."""
    try:
        cls = VARIANTS[variant]
    except KeyError:
        raise ConfigError(
            f"Unknown variant {variant!r}; expected one of {', '.join(VARIANTS)}"
        ) from None
    return cls(canvas_width, canvas_height, rng=rng,
               max_depth=max_depth if max_depth is not None else MAX_DEPTH)
