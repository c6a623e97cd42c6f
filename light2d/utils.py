from __future__ import annotations

import logging
from typing import Optional, Union

import numpy as np

from .errors import InvalidConfigError

RandomSource = Union[None, int, np.random.Generator]


def get_logger(name: str = "light2d") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("[%(levelname)s] %(message)s")
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


def as_generator(rng: RandomSource = None, seed: Optional[int] = None) -> np.random.Generator:
    """Return a ``numpy.random.Generator`` for *rng*.

    An existing generator is used as-is; an ``int`` seeds a fresh one; ``None``
    falls back to *seed*, and to OS entropy when that is ``None`` too.

    Raises:
        InvalidConfigError: If the seed is negative.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None:
        rng = seed
    if rng is not None and rng < 0:
        raise InvalidConfigError(f"seed must be a non-negative integer, got {rng}")
    return np.random.default_rng(rng)
