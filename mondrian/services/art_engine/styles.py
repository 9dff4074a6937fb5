"""
Fill selection for leaf regions.

Palettes are tuples; picks are uniform and stateless, driven by
whatever random source the caller passes in.
"""

from typing import Dict, Sequence, Tuple


BASIC_COLORS: Tuple[str, ...] = ("red", "blue", "yellow")

CUSTOM_COLORS: Tuple[str, ...] = (
    "red", "blue", "yellow", "green",
    "orange", "purple", "pink", "gold",
)

PATTERNS: Tuple[str, ...] = ("stripes", "dots", "crosshatch")

# CSS named-color values, for formats that need numeric colors
COLOR_RGB: Dict[str, Tuple[int, int, int]] = {
    "white":  (255, 255, 255),
    "black":  (0, 0, 0),
    "red":    (255, 0, 0),
    "blue":   (0, 0, 255),
    "yellow": (255, 255, 0),
    "green":  (0, 128, 0),
    "orange": (255, 165, 0),
    "purple": (128, 0, 128),
    "pink":   (255, 192, 203),
    "gold":   (255, 215, 0),
}


def random_color(rng, palette: Sequence[str] = BASIC_COLORS) -> str:
    """Uniform pick from *palette*."""
    return rng.choice(palette)


def random_pattern(rng, patterns: Sequence[str] = PATTERNS) -> str:
    """Uniform pick from *patterns*."""
    return rng.choice(patterns)


def color_to_rgb(name: str) -> Tuple[int, int, int]:
    """RGB triple for a named color; unknown names map to white."""
    return COLOR_RGB.get(name, COLOR_RGB["white"])
