"""Configuration models for light2d scenes.

A scene file is YAML with a ``render`` block, a recursive ``shape`` tree
discriminated on ``kind`` and an optional ``output`` block::

    render:
      width: 512
      height: 384
      sample_count: 64
      max_step: 10
      seed: 7
    shape:
      kind: subtract
      a: {kind: circle, center: [256, 192], radius: 96, emissive: 1.0}
      b: {kind: circle, center: [300, 192], radius: 80, emissive: 0.0}
    output:
      path: crescent.png
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from .errors import InvalidConfigError

_Point = tuple[float, float]


class RenderConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    sample_count: int = Field(default=64, ge=1, le=255)
    max_step: int = Field(default=10, ge=1)
    workers: int = Field(default=1, ge=1)
    tile_rows: int = Field(default=16, ge=1)
    seed: Optional[int] = Field(default=None, ge=0)


class _ShapeBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


class _PrimitiveBase(_ShapeBase):
    emissive: float = Field(default=1.0, ge=0.0, allow_inf_nan=False)


class CircleConfig(_PrimitiveBase):
    kind: Literal["circle"]
    center: _Point
    radius: float


class PlaneConfig(_PrimitiveBase):
    kind: Literal["plane"]
    point: _Point
    normal: _Point
    normalize: bool = True

    @model_validator(mode="after")
    def _check_normal(self) -> "PlaneConfig":
        nx, ny = self.normal
        if nx == 0.0 and ny == 0.0:
            raise ValueError("plane normal must be non-zero")
        return self


class CapsuleConfig(_PrimitiveBase):
    kind: Literal["capsule"]
    a: _Point
    b: _Point
    radius: float


class RectangleConfig(_PrimitiveBase):
    kind: Literal["rectangle"]
    center: _Point
    theta: float = 0.0
    half_size: _Point


class TriangleConfig(_PrimitiveBase):
    kind: Literal["triangle"]
    vertices: tuple[_Point, _Point, _Point]


class UnionConfig(_ShapeBase):
    kind: Literal["union"]
    a: ShapeConfig
    b: ShapeConfig


class IntersectConfig(_ShapeBase):
    kind: Literal["intersect"]
    a: ShapeConfig
    b: ShapeConfig


class SubtractConfig(_ShapeBase):
    kind: Literal["subtract"]
    a: ShapeConfig
    b: ShapeConfig


ShapeConfig = Annotated[
    Union[
        CircleConfig,
        PlaneConfig,
        CapsuleConfig,
        RectangleConfig,
        TriangleConfig,
        UnionConfig,
        IntersectConfig,
        SubtractConfig,
    ],
    Field(discriminator="kind"),
]

for _model in (UnionConfig, IntersectConfig, SubtractConfig):
    _model.model_rebuild()


class OutputConfig(BaseModel):
    path: Path


class SceneConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    render: RenderConfig
    shape: ShapeConfig
    output: Optional[OutputConfig] = None


def load_config(path: str | Path) -> SceneConfig:
    """Read and validate a YAML scene file.

    Relative output paths are resolved against the file's directory.

    Raises:
        InvalidConfigError: If the file is not a mapping or fails validation.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise InvalidConfigError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidConfigError(f"{path}: configuration root must be a mapping.")
    try:
        cfg = SceneConfig.model_validate(data)
    except ValidationError as exc:
        raise InvalidConfigError(f"{path}: {exc}") from exc
    if cfg.output is not None and not cfg.output.path.is_absolute():
        cfg.output.path = (path.parent / cfg.output.path).resolve()
    return cfg
