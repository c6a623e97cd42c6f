from __future__ import annotations

import math

from .config import (
    CapsuleConfig,
    CircleConfig,
    IntersectConfig,
    PlaneConfig,
    RectangleConfig,
    SceneConfig,
    ShapeConfig,
    SubtractConfig,
    TriangleConfig,
    UnionConfig,
)
from .geometry import (
    Capsule,
    Circle,
    Intersect,
    Plane,
    Rectangle,
    Shape2D,
    Subtract,
    Triangle,
    Union,
)
from .scene import Scene


def build_shape(cfg: ShapeConfig) -> Shape2D:
    """Turn a validated shape model (and its subtree) into shapes."""
    if isinstance(cfg, CircleConfig):
        return Circle(cfg.center, cfg.radius, cfg.emissive)
    if isinstance(cfg, PlaneConfig):
        nx, ny = cfg.normal
        if cfg.normalize:
            norm = math.hypot(nx, ny)
            nx, ny = nx / norm, ny / norm
        return Plane(cfg.point, (nx, ny), cfg.emissive)
    if isinstance(cfg, CapsuleConfig):
        return Capsule(cfg.a, cfg.b, cfg.radius, cfg.emissive)
    if isinstance(cfg, RectangleConfig):
        sx, sy = cfg.half_size
        return Rectangle(cfg.center, cfg.theta, sx, sy, cfg.emissive)
    if isinstance(cfg, TriangleConfig):
        p0, p1, p2 = cfg.vertices
        return Triangle(p0, p1, p2, cfg.emissive)
    if isinstance(cfg, UnionConfig):
        return Union(build_shape(cfg.a), build_shape(cfg.b))
    if isinstance(cfg, IntersectConfig):
        return Intersect(build_shape(cfg.a), build_shape(cfg.b))
    if isinstance(cfg, SubtractConfig):
        return Subtract(build_shape(cfg.a), build_shape(cfg.b))
    raise ValueError(f"Unsupported shape kind: {getattr(cfg, 'kind', cfg)!r}")


def build_scene(cfg: SceneConfig) -> Scene:
    return Scene.from_config(cfg.render, build_shape(cfg.shape))
