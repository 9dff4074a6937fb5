"""
Art engine for Mondrian-style generation.

Provides recursive rectangle subdivision with basic and custom variants.
All geometry is exposed as Shapely boxes.
"""

from .subdivision import BasicGenerator, CustomGenerator, VARIANTS, create_generator

__all__ = ["BasicGenerator", "CustomGenerator", "VARIANTS", "create_generator"]
