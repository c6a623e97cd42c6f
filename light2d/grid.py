"""Grid sampling utilities for 2D emissive distance fields."""

from __future__ import annotations

import os

import numpy as np
import numpy.typing as npt

from .geometry import Sample, Shape2D

_Array = npt.NDArray[np.floating]


def pixel_grid(width: int, height: int) -> _Array:
    """Integer pixel coordinates as a ``(height, width, 2)`` point array."""
    ys = np.arange(height, dtype=float)
    xs = np.arange(width, dtype=float)
    Y, X = np.meshgrid(ys, xs, indexing="ij")
    return np.stack([X, Y], axis=-1)


def sample_field(shape: Shape2D, width: int, height: int) -> Sample:
    """Evaluate *shape* at every pixel of a ``width`` x ``height`` image.

    Parameters
    ----------
    shape:
        Any shape; its ``sdf()`` accepts ``(..., 2)`` arrays.
    width, height:
        Image size in pixels.  Pixel ``(x, y)`` is queried at the point
        ``(x, y)``, the same points the renderer marches from.

    Returns
    -------
    Sample
        ``distance`` and ``emissive`` arrays of shape ``(height, width)``,
        row-major (y first).
    """
    s = shape.sdf(pixel_grid(width, height))
    return Sample(np.asarray(s.distance), np.asarray(s.emissive))


def save_npy(path: str, phi: _Array) -> None:
    """Save *phi* array to *path* (creates parent directories if needed)."""
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    np.save(path, phi)
