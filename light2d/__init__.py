"""
light2d — 2D Emissive Signed Distance Field Renderer
====================================================

Renders scenes built from emissive 2-D signed distance fields into greyscale
images by Monte-Carlo sphere tracing: every pixel gathers light along
stratified, jittered directions and averages the emission of the surfaces
its rays reach.

Implemented features
--------------------
- Primitive shapes: Circle, Plane, Capsule, Rectangle, Triangle
- Boolean operations: Union, Intersect, Subtract (emission follows geometry)
- Transforms and modifiers: translate, rotate, scale, round, onion
- Rendering: :class:`Scene` with seeded, optionally multi-threaded rendering
- Output: 8-bit RGB PNG via :func:`save_png`
- Scene files: YAML + pydantic validation (:func:`load_config`)

Quick start
-----------

::

    from light2d import Circle, Scene, subtract

    shape = subtract(
        Circle((256, 192), 96, emissive=1.0),
        Circle((300, 192), 80, emissive=0.0),
    )
    scene = Scene(512, 384, shape, sample_count=64, max_step=10)
    scene.render_to_file("crescent.png", rng=7)
"""

from .geometry import (
    # Base classes
    Sample,
    Shape2D,
    Primitive2D,

    # Primitive shapes
    Circle,
    Plane,
    Capsule,
    Rectangle,
    Triangle,

    # Boolean operations
    Union,
    Intersect,
    Subtract,
    union,
    intersect,
    subtract,
)

from .scene import EPSILON, Scene, render
from .config import RenderConfig, SceneConfig, load_config
from .builders import build_scene, build_shape
from .export import save_png, load_png
from .grid import sample_field, save_npy
from .errors import Light2DError, InvalidConfigError, ShapeError, EncodeError

__version__ = "0.1.0"

__all__ = [
    # Base
    "Sample",
    "Shape2D",
    "Primitive2D",

    # Primitive shapes
    "Circle",
    "Plane",
    "Capsule",
    "Rectangle",
    "Triangle",

    # Boolean operations
    "Union",
    "Intersect",
    "Subtract",
    "union",
    "intersect",
    "subtract",

    # Rendering
    "EPSILON",
    "Scene",
    "render",

    # Configuration
    "RenderConfig",
    "SceneConfig",
    "load_config",
    "build_scene",
    "build_shape",

    # Output
    "save_png",
    "load_png",
    "sample_field",
    "save_npy",

    # Errors
    "Light2DError",
    "InvalidConfigError",
    "ShapeError",
    "EncodeError",
]
