"""
Configuration for Mondrian art generation.

Module-level constants hold the algorithm parameters and defaults; an
``ArtConfig`` instance carries the settings of a single run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# Subdivision parameters
SPLIT_THRESHOLD = 60          # regions at or below this in either dimension are leaves
SPLIT_PROBABILITY = 2.0 / 3   # each of the two draws must fall below this
MAX_DEPTH = 32                # recursion cap for pathological inputs

# Canvas defaults
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 600

VARIANT_NAMES = ("basic", "custom")
OUTPUT_FORMATS = ("svg", "dxf")

OUTPUT_DIR = Path(".")
OUTPUT_PATHS = {
    ("basic", "svg"): OUTPUT_DIR / "mondrian_svg.html",
    ("custom", "svg"): OUTPUT_DIR / "mondrian_custom_svg.html",
    ("basic", "dxf"): OUTPUT_DIR / "mondrian.dxf",
    ("custom", "dxf"): OUTPUT_DIR / "mondrian_custom.dxf",
}


class ConfigError(ValueError):
    """Raised when a run is configured with unusable settings."""


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class ArtConfig:
    """
    Settings for one generation run.

    Attributes:
        width: Canvas width in user units
        height: Canvas height in user units
        variant: "basic" (4-way splits, 3 colors) or "custom" (3-way splits, patterns)
        output_path: Target file; defaults to the variant/format path in OUTPUT_PATHS
        output_format: "svg" markup or "dxf" drawing
        pattern_defs: Emit SVG <pattern> definitions and reference them by url()
        max_depth: Recursion cap for the subdivider
    """
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    variant: str = "basic"
    output_path: Optional[Path] = None
    output_format: str = "svg"
    pattern_defs: bool = False
    max_depth: int = MAX_DEPTH

    @property
    def resolved_output_path(self) -> Path:
        if self.output_path is not None:
            return Path(self.output_path)
        return OUTPUT_PATHS[(self.variant, self.output_format)]

    def validate(self) -> list[str]:
        """
        Validate configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = []

        if not _is_int(self.width) or self.width <= 0:
            errors.append(f"width must be a positive integer, got {self.width!r}")

        if not _is_int(self.height) or self.height <= 0:
            errors.append(f"height must be a positive integer, got {self.height!r}")

        if self.variant not in VARIANT_NAMES:
            errors.append(
                f"variant must be one of {', '.join(VARIANT_NAMES)}, got {self.variant!r}"
            )

        if self.output_format not in OUTPUT_FORMATS:
            errors.append(
                f"output_format must be one of {', '.join(OUTPUT_FORMATS)}, "
                f"got {self.output_format!r}"
            )

        if not _is_int(self.max_depth) or self.max_depth <= 0:
            errors.append(f"max_depth must be a positive integer, got {self.max_depth!r}")

        return errors

    def check(self) -> "ArtConfig":
        """Raise ConfigError if the configuration is invalid."""
        errors = self.validate()
        if errors:
            raise ConfigError("; ".join(errors))
        return self
