"""light2d.examples — ready-made scenes.

Implemented presets
-------------------
``one_circle``, ``three_circles``, ``crescent`` (subtract), ``lens``
(intersect), ``capsule``, ``boxes`` (rotated rectangles), ``triangle`` and
``half_plane``.  :data:`PRESETS` maps each name to its builder and
:func:`make_scene` wraps a preset in a :class:`~light2d.scene.Scene`.
"""

from .presets import PRESETS, make_scene

__all__ = ["PRESETS", "make_scene"]
