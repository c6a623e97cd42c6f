"""Preset scenes, sized relative to the image they are rendered into.

Usage::

    from light2d.examples import make_scene

    scene = make_scene("crescent", 512, 384, sample_count=64)
    scene.render_to_file("crescent.png", rng=7)
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from light2d.geometry import (
    Capsule,
    Circle,
    Plane,
    Rectangle,
    Shape2D,
    Triangle,
    intersect,
    subtract,
    union,
)
from light2d.scene import Scene

PresetBuilder = Callable[[int, int], Shape2D]


def one_circle(width: int, height: int) -> Shape2D:
    """A single light disc in the middle of the image."""
    return Circle((width / 2.0, height / 2.0), min(width, height) / 6.0, emissive=1.0)


def three_circles(width: int, height: int) -> Shape2D:
    """Three discs of different brightness."""
    r = min(width, height) / 10.0
    return union(
        union(
            Circle((width * 0.3, height * 0.3), r, emissive=2.0),
            Circle((width * 0.3, height * 0.7), r, emissive=0.8),
        ),
        Circle((width * 0.7, height * 0.5), r, emissive=0.0),
    )


def crescent(width: int, height: int) -> Shape2D:
    """A disc with an offset disc carved out of it."""
    cx, cy = width / 2.0, height / 2.0
    r = min(width, height) / 4.0
    return subtract(
        Circle((cx, cy), r, emissive=1.0),
        Circle((cx + 0.45 * r, cy), 0.85 * r, emissive=0.0),
    )


def lens(width: int, height: int) -> Shape2D:
    """The overlap of two discs."""
    cx, cy = width / 2.0, height / 2.0
    r = min(width, height) / 4.0
    return intersect(
        Circle((cx - 0.5 * r, cy), r, emissive=1.0),
        Circle((cx + 0.5 * r, cy), r, emissive=1.0),
    )


def capsule(width: int, height: int) -> Shape2D:
    """A diagonal light tube."""
    return Capsule(
        (width * 0.3, height * 0.35),
        (width * 0.7, height * 0.65),
        min(width, height) / 20.0,
        emissive=1.0,
    )


def boxes(width: int, height: int) -> Shape2D:
    """Two rotated rectangles, one bright and one dark."""
    s = min(width, height) / 10.0
    return union(
        Rectangle((width * 0.35, height / 2.0), math.pi / 6.0, 1.5 * s, 0.5 * s, emissive=1.5),
        Rectangle((width * 0.65, height / 2.0), -math.pi / 8.0, 0.6 * s, 0.6 * s, emissive=0.0),
    )


def triangle(width: int, height: int) -> Shape2D:
    """An upright light triangle."""
    s = min(width, height) / 4.0
    cx, cy = width / 2.0, height / 2.0
    return Triangle((cx - s, cy + s), (cx + s, cy + s), (cx, cy - s), emissive=1.0)


def half_plane(width: int, height: int) -> Shape2D:
    """A glowing floor with a dark disc casting a shadow onto the image."""
    return union(
        Plane((0.0, height * 0.8), (0.0, -1.0), emissive=0.8),
        Circle((width / 2.0, height * 0.5), min(width, height) / 8.0, emissive=0.0),
    )


PRESETS: Dict[str, PresetBuilder] = {
    "one_circle": one_circle,
    "three_circles": three_circles,
    "crescent": crescent,
    "lens": lens,
    "capsule": capsule,
    "boxes": boxes,
    "triangle": triangle,
    "half_plane": half_plane,
}


def make_scene(name: str, width: int, height: int, **config) -> Scene:
    """Build the preset *name* for a ``width`` x ``height`` image.

    Extra keyword arguments (``sample_count``, ``max_step``, ``workers``,
    ...) are passed to :class:`~light2d.scene.Scene`.

    Raises:
        KeyError: If *name* is not a known preset.
    """
    try:
        builder = PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown preset {name!r}; choose from {sorted(PRESETS)}") from None
    return Scene(width, height, builder(width, height), **config)
