"""Tests for the preset scenes in light2d/examples."""

import numpy as np
import pytest

from light2d import Scene, Shape2D
from light2d.examples import PRESETS, make_scene


@pytest.mark.parametrize("name", sorted(PRESETS))
class TestPresets:
    def test_builder_returns_shape(self, name):
        assert isinstance(PRESETS[name](64, 48), Shape2D)

    def test_renders_small_image(self, name):
        scene = make_scene(name, 32, 24, sample_count=4, max_step=4)
        image = scene.render_array(rng=0)
        assert image.shape == (24, 32, 3)
        assert image.dtype == np.uint8

    def test_has_visible_emission(self, name):
        scene = make_scene(name, 64, 48, sample_count=8)
        assert scene.render_array(rng=1).any()


class TestMakeScene:
    def test_passes_config(self):
        scene = make_scene("crescent", 40, 30, sample_count=12, max_step=5, workers=2)
        assert isinstance(scene, Scene)
        assert scene.sample_count == 12
        assert scene.max_step == 5
        assert scene.config.workers == 2

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            make_scene("no_such_scene", 10, 10)

    def test_every_builder_makes_fresh_tree(self):
        for builder in PRESETS.values():
            assert builder(20, 20) is not builder(20, 20)
