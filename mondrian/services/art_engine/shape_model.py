"""
Shape model using Shapely boxes.

Regions are the rectangles considered during subdivision; shapes are the
styled rectangles emitted to output.  Regions expose a Shapely polygon so
coverage and tiling can be checked geometrically.
"""

from dataclasses import dataclass
from typing import List, Tuple

from shapely.geometry import Polygon, box


STROKE_COLOR = "black"
BACKGROUND = "white"

FILL_COLOR = "color"
FILL_PATTERN = "pattern"
FILL_BACKGROUND = "background"

ROLE_LEAF = "leaf"
ROLE_DIVIDER = "divider"


@dataclass(frozen=True)
class Region:
    """Axis-aligned rectangle under consideration for subdivision."""

    x: int
    y: int
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def polygon(self) -> Polygon:
        return box(self.x, self.y, self.x + self.width, self.y + self.height)


@dataclass(frozen=True)
class Shape:
    """A styled rectangle in draw order."""

    x: int
    y: int
    width: int
    height: int
    fill: str
    fill_type: str = FILL_BACKGROUND
    role: str = ROLE_LEAF
    depth: int = 0

    @property
    def stroke(self) -> str:
        return STROKE_COLOR

    @property
    def region(self) -> Region:
        return Region(self.x, self.y, self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def is_leaf(self) -> bool:
        return self.role == ROLE_LEAF

    @staticmethod
    def divider(region: Region, depth: int = 0) -> "Shape":
        """White outline drawn beneath the children of a split region."""
        return Shape(
            x=region.x,
            y=region.y,
            width=region.width,
            height=region.height,
            fill=BACKGROUND,
            fill_type=FILL_BACKGROUND,
            role=ROLE_DIVIDER,
            depth=depth,
        )

    def __repr__(self) -> str:
        return (
            f"Shape({self.role}, x={self.x}, y={self.y}, "
            f"w={self.width}, h={self.height}, fill='{self.fill}')"
        )


@dataclass(frozen=True)
class Canvas:
    """Fixed-size drawing surface holding the shapes of one run."""

    width: int
    height: int
    variant: str = "basic"
    shapes: Tuple[Shape, ...] = ()

    @property
    def root(self) -> Region:
        return Region(0, 0, self.width, self.height)

    @property
    def leaves(self) -> List[Shape]:
        return [s for s in self.shapes if s.is_leaf]

    @property
    def dividers(self) -> List[Shape]:
        return [s for s in self.shapes if not s.is_leaf]
