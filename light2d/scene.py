"""Monte-Carlo sphere-tracing integrator for emissive 2-D scenes.

Every pixel gathers light from ``sample_count`` directions.  Direction ``i``
is jittered inside the ``i``-th of ``sample_count`` equal angular buckets
(stratified sampling).  Each ray is sphere-traced through the scene's signed
distance field: it advances by the current distance until it comes within
:data:`EPSILON` of a surface (a hit, contributing that surface's emission),
leaves the image diagonal, or runs out of ``max_step`` iterations (both
misses, contributing nothing).  The pixel value is the mean contribution
scaled to ``[0, 255]`` and written to all three RGB channels.

Rays are marched as flat numpy batches, one horizontal band of rows at a
time.  Each band draws its jitter from its own generator spawned from the
caller's, so the image depends only on the random stream and ``tile_rows``,
not on how many worker threads render the bands.

Example:
    >>> from light2d import Circle, Scene
    >>> scene = Scene(512, 384, Circle((256, 192), 64, emissive=1.0))
    >>> buffer = scene.render(rng=42)
    >>> len(buffer) == 512 * 384 * 3
    True
"""

from __future__ import annotations

import math
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

import numpy as np
import numpy.typing as npt
from pydantic import ValidationError

from ._math import vec2
from .config import RenderConfig
from .errors import InvalidConfigError
from .export import save_png
from .geometry import Shape2D
from .utils import RandomSource, as_generator, get_logger

_log = get_logger()

# Distance below which a marching ray counts as having reached a surface
EPSILON = 1e-6

TWO_PI = 2.0 * math.pi

_Array = npt.NDArray[np.floating]


class Scene:
    """A shape tree plus the settings needed to render it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        root: Root of the shape tree.  The scene treats it as read-only.
        sample_count: Directions sampled per pixel (1-255).
        max_step: Sphere-tracing iteration cap per direction.
        workers: Threads used to render bands of rows.
        tile_rows: Rows per band; also fixes how the random stream is split.
        seed: Default seed used when ``render`` is called without ``rng``.

    Raises:
        InvalidConfigError: If any setting is out of range or *root* is not a
            shape.  Nothing is rendered in that case.
    """

    def __init__(
        self,
        width: int,
        height: int,
        root: Shape2D,
        sample_count: int = 64,
        max_step: int = 10,
        *,
        workers: int = 1,
        tile_rows: int = 16,
        seed: Optional[int] = None,
    ) -> None:
        try:
            config = RenderConfig(
                width=width,
                height=height,
                sample_count=sample_count,
                max_step=max_step,
                workers=workers,
                tile_rows=tile_rows,
                seed=seed,
            )
        except ValidationError as exc:
            raise InvalidConfigError(str(exc)) from exc
        if not isinstance(root, Shape2D):
            raise InvalidConfigError(f"scene root must be a Shape2D, got {type(root).__name__}")
        self.config = config
        self.root = root

    @classmethod
    def from_config(cls, config: RenderConfig, root: Shape2D) -> Scene:
        """Build a scene from an already validated :class:`RenderConfig`."""
        return cls(root=root, **config.model_dump())

    # ------------------------------------------------------------------
    # Configuration accessors
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def sample_count(self) -> int:
        return self.config.sample_count

    @property
    def max_step(self) -> int:
        return self.config.max_step

    @property
    def max_distance(self) -> float:
        """Length of the image diagonal; rays marching past it are misses."""
        return math.sqrt(self.width ** 2 + self.height ** 2)

    # ------------------------------------------------------------------
    # Ray marching
    # ------------------------------------------------------------------

    def trace(self, x: float, y: float, dx: float, dy: float) -> float:
        """Light reaching ``(x, y)`` from unit direction ``(dx, dy)``.

        Marches one ray at a time.  :meth:`trace_rays` is the batched
        equivalent used for rendering.
        """
        max_distance = self.max_distance
        distance = 0.0
        for _ in range(self.max_step):
            s = self.root.sdf((x + dx * distance, y + dy * distance))
            sd = float(s.distance)
            if sd < EPSILON:
                return float(s.emissive)
            distance += sd
            if distance >= max_distance:
                break
        return 0.0

    def trace_rays(self, x: _Array, y: _Array, dx: _Array, dy: _Array) -> _Array:
        """Batched :meth:`trace` over broadcastable arrays of rays.

        Returns the per-ray contribution with the broadcast shape of the
        inputs.  Rays that hit are retired from the batch, so each iteration
        only queries the shape tree for rays that are still marching.
        """
        rays = np.broadcast_arrays(
            np.asarray(x, dtype=float),
            np.asarray(y, dtype=float),
            np.asarray(dx, dtype=float),
            np.asarray(dy, dtype=float),
        )
        shape = rays[0].shape
        x, y, dx, dy = (a.ravel() for a in rays)
        n = x.size
        max_distance = self.max_distance

        radiance = np.zeros(n)
        distance = np.zeros(n)
        live = np.arange(n)
        steps = 0
        for _ in range(self.max_step):
            if live.size == 0:
                break
            steps += 1
            t = distance[live]
            s = self.root.sdf(vec2(x[live] + dx[live] * t, y[live] + dy[live] * t))
            sd = np.asarray(s.distance)
            hit = sd < EPSILON
            radiance[live[hit]] = np.broadcast_to(s.emissive, sd.shape)[hit]
            advanced = t + sd
            distance[live] = advanced
            escaped = ~hit & (advanced >= max_distance)
            live = live[~(hit | escaped)]
        _log.debug("traced %d rays in %d steps, %d unresolved", n, steps, live.size)
        return radiance.reshape(shape)

    def _jittered_angles(self, u: _Array) -> _Array:
        """Map uniform draws *u* (last axis = sample index) to bucketed angles."""
        i = np.arange(self.sample_count)
        return TWO_PI * (i + u) / self.sample_count

    def _to_intensity(self, radiance: _Array) -> npt.NDArray[np.uint8]:
        mean = radiance.mean(axis=-1)
        return np.clip(mean * 255.0, 0.0, 255.0).astype(np.uint8)

    def sample(self, x: float, y: float, rng: RandomSource = None) -> int:
        """Estimate the 8-bit intensity of the pixel at ``(x, y)``."""
        gen = as_generator(rng, self.config.seed)
        theta = self._jittered_angles(gen.random(self.sample_count))
        radiance = self.trace_rays(x, y, np.cos(theta), np.sin(theta))
        return int(self._to_intensity(radiance))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _bands(self) -> list[tuple[int, int]]:
        rows = self.config.tile_rows
        return [(y0, min(y0 + rows, self.height)) for y0 in range(0, self.height, rows)]

    def _render_band(self, y0: int, y1: int, rng: np.random.Generator) -> npt.NDArray[np.uint8]:
        """Render rows ``[y0, y1)`` and return their intensities, shape ``(rows, width)``."""
        ys = np.arange(y0, y1, dtype=float)[:, None, None]
        xs = np.arange(self.width, dtype=float)[None, :, None]
        u = rng.random((y1 - y0, self.width, self.sample_count))
        theta = self._jittered_angles(u)
        radiance = self.trace_rays(xs, ys, np.cos(theta), np.sin(theta))
        _log.debug("rendered rows %d-%d", y0, y1 - 1)
        return self._to_intensity(radiance)

    def render_array(self, rng: RandomSource = None) -> npt.NDArray[np.uint8]:
        """Render the scene to a ``(height, width, 3)`` uint8 array.

        Args:
            rng: ``None`` (use the scene seed, or OS entropy without one), an
                ``int`` seed, or a ``numpy.random.Generator``.
        """
        gen = as_generator(rng, self.config.seed)
        bands = self._bands()
        streams = gen.spawn(len(bands))
        workers = min(self.config.workers, len(bands))

        _log.info(
            "Rendering %dx%d, %d samples/pixel, max_step=%d, %d band(s) on %d worker(s)",
            self.width, self.height, self.sample_count, self.max_step, len(bands), workers,
        )
        start = time.perf_counter()

        image = np.zeros((self.height, self.width), dtype=np.uint8)
        if workers <= 1:
            for (y0, y1), stream in zip(bands, streams):
                image[y0:y1] = self._render_band(y0, y1, stream)
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [
                    (executor.submit(self._render_band, y0, y1, stream), y0, y1)
                    for (y0, y1), stream in zip(bands, streams)
                ]
                for future, y0, y1 in futures:
                    image[y0:y1] = future.result()

        _log.info("Render finished in %.2fs", time.perf_counter() - start)
        return np.repeat(image[:, :, None], 3, axis=2)

    def render(self, rng: RandomSource = None) -> bytes:
        """Render to a row-major RGB byte buffer of ``width * height * 3`` bytes."""
        return self.render_array(rng).tobytes()

    def render_to_file(self, path: Union[str, Path], rng: RandomSource = None) -> Path:
        """Render and write the result as an 8-bit RGB PNG at *path*."""
        buffer = self.render(rng)
        return save_png(path, buffer, self.width, self.height)


def render(scene: Scene, rng: RandomSource = None) -> bytes:
    """Render *scene* to a row-major RGB byte buffer."""
    return scene.render(rng)
