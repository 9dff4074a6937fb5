"""Generate a Mondrian-style composition and write it to disk.

With no arguments this produces the basic variant on an 800x600 canvas and
writes it to mondrian_svg.html in the working directory.

  python -m mondrian.generate_art --variant custom --pattern-defs
  python -m mondrian.generate_art --format dxf --width 1200 --height 900
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from mondrian.config import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    MAX_DEPTH,
    OUTPUT_FORMATS,
    VARIANT_NAMES,
    ArtConfig,
    ConfigError,
)
from mondrian.services.art_engine import create_generator
from mondrian.services.art_engine.composition import composition_report
from mondrian.services.art_engine.shape_model import Canvas
from mondrian.services.dxf_export import generate_dxf
from mondrian.services.svg_export import write_svg


logger = logging.getLogger(__name__)


def generate_art(config: ArtConfig, rng=None) -> Canvas:
    """Run the configured variant and return the generated canvas."""
    config.check()
    generator = create_generator(
        config.variant, config.width, config.height,
        rng=rng, max_depth=config.max_depth,
    )
    return generator.generate()


def write_canvas(canvas: Canvas, config: ArtConfig) -> str:
    """Serialize *canvas* in the configured format; returns the written path."""
    path = config.resolved_output_path
    if config.output_format == "dxf":
        return generate_dxf(canvas, path)
    return write_svg(canvas, path, pattern_defs=config.pattern_defs)


def run(config: ArtConfig, rng=None) -> str:
    """Generate, report and write one composition."""
    canvas = generate_art(config, rng=rng)
    report = composition_report(canvas)
    logger.info(
        "%s %dx%d: %d leaves, %d dividers, depth %d, colored %.0f%%, patterned %.0f%%",
        config.variant, canvas.width, canvas.height,
        report["leaves"], report["dividers"], report["max_depth"],
        report["fill_shares"]["color"] * 100, report["fill_shares"]["pattern"] * 100,
    )
    if not report["tiled"]:
        logger.warning("Leaves do not tile the canvas exactly")
    return write_canvas(canvas, config)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Generate Mondrian-style art")
    ap.add_argument("--variant", choices=VARIANT_NAMES, default="basic",
                    help="basic: 4-way splits, 3 colors; custom: 3-way splits, 8 colors, patterns")
    ap.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    ap.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    ap.add_argument("--output", type=Path, default=None,
                    help="output file (default depends on variant and format)")
    ap.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS, default="svg")
    ap.add_argument("--pattern-defs", action="store_true",
                    help="emit SVG pattern definitions so patterned leaves render")
    ap.add_argument("--max-depth", type=int, default=MAX_DEPTH)
    ap.add_argument("--log-level", default="INFO",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def main(argv: Optional[list] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = ArtConfig(
        width=args.width,
        height=args.height,
        variant=args.variant,
        output_path=args.output,
        output_format=args.output_format,
        pattern_defs=args.pattern_defs,
        max_depth=args.max_depth,
    )

    try:
        path = run(config)
    except ConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    except OSError as exc:
        logger.error("Generation failed: %s", exc)
        return 1

    print(f"  Created: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
