"""PNG export for rendered pixel buffers.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Example:
    >>> from light2d.export import save_png
    >>> buffer = scene.render(rng=1)
    >>> save_png("output.png", buffer, scene.width, scene.height)
"""

from __future__ import annotations

import contextlib
import os
from pathlib import Path
from typing import Union

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from .errors import EncodeError
from .utils import get_logger

_log = get_logger()


def buffer_to_array(buffer: bytes, width: int, height: int) -> npt.NDArray[np.uint8]:
    """View a row-major RGB byte buffer as a ``(height, width, 3)`` array.

    Raises:
        EncodeError: If the dimensions are not positive or the buffer length
            is not ``width * height * 3``.
    """
    if width <= 0 or height <= 0:
        raise EncodeError(f"Image dimensions must be positive, got {width}x{height}")
    expected = width * height * 3
    if len(buffer) != expected:
        raise EncodeError(
            f"Buffer holds {len(buffer)} bytes, expected {expected} for {width}x{height} RGB"
        )
    return np.frombuffer(buffer, dtype=np.uint8).reshape(height, width, 3)


def save_png(path: Union[str, Path], buffer: bytes, width: int, height: int) -> Path:
    """Write *buffer* as an 8-bit RGB PNG at *path*, replacing any existing file.

    Parent directories are created as needed.  Removing a previous file is
    best-effort: a missing file is not an error.  File-system and encoder
    errors propagate unchanged.

    Returns:
        The path written.
    """
    image = buffer_to_array(buffer, width, height)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with contextlib.suppress(FileNotFoundError):
        os.remove(path)

    pil_image = PILImage.fromarray(image)
    pil_image.save(path, format="PNG")
    _log.info("Wrote %dx%d image to %s", width, height, path)
    return path


def load_png(path: Union[str, Path]) -> npt.NDArray[np.uint8]:
    """Read a PNG back as a ``(height, width, 3)`` uint8 array."""
    with PILImage.open(path) as img:
        return np.asarray(img.convert("RGB"), dtype=np.uint8)
