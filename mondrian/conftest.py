"""Pytest fixtures for the Mondrian generator tests."""

import random

import pytest

from mondrian.services.art_engine.shape_model import Canvas, Shape


class ScriptedRandom:
    """
    Deterministic stand-in for ``random.Random``.

    ``random()`` and ``randrange()`` pop queued values first and fall back
    to ``default_float`` / the midpoint of the range; ``choice()`` always
    returns the first element.
    """

    def __init__(self, floats=(), ints=(), default_float=0.99):
        self.floats = list(floats)
        self.ints = list(ints)
        self.default_float = default_float
        self.calls = []

    def random(self):
        self.calls.append("random")
        if self.floats:
            return self.floats.pop(0)
        return self.default_float

    def randrange(self, start, stop):
        self.calls.append("randrange")
        if self.ints:
            value = self.ints.pop(0)
            assert start <= value < stop, f"{value} outside [{start}, {stop})"
            return value
        return start + (stop - start) // 2

    def choice(self, seq):
        self.calls.append("choice")
        return seq[0]


@pytest.fixture
def scripted_rng():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def seeded_rngs():
    """A spread of independently seeded generators."""
    return [random.Random(seed) for seed in range(25)]


@pytest.fixture
def small_canvas() -> Canvas:
    """Hand-built 100x100 canvas: one divider over four styled leaves."""
    return Canvas(100, 100, variant="custom", shapes=(
        Shape(0, 0, 100, 100, "white", fill_type="background", role="divider"),
        Shape(0, 0, 40, 30, "red", fill_type="color", depth=1),
        Shape(40, 0, 60, 30, "dots", fill_type="pattern", depth=1),
        Shape(0, 30, 40, 70, "white", fill_type="background", depth=1),
        Shape(40, 30, 60, 70, "crosshatch", fill_type="pattern", depth=1),
    ))
