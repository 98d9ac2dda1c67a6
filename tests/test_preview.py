"""Tests for 2D preview geometry."""

from __future__ import annotations

import math

import pytest

from lightsmith.core.types import LightRole
from lightsmith.preview.layout import compute_layout


class TestMarkers:
    """Tests for marker placement."""

    def test_default_rig_has_three_markers(self, default_config):
        layout = compute_layout(default_config)
        assert [m.role for m in layout.markers] == [LightRole.KEY, LightRole.FILL, LightRole.RIM]

    def test_key_marker(self, default_config):
        key = compute_layout(default_config).markers[0]
        assert key.top_pct == pytest.approx(100 - 200 / 3)
        assert key.left_pct == pytest.approx(50 + math.cos(math.radians(45)) * 150 / 5)
        assert key.opacity == pytest.approx(0.75)
        assert key.blur_px == 4
        assert key.size_px == 48

    def test_fill_mirrors_left(self, default_config):
        fill = compute_layout(default_config).markers[1]
        assert fill.top_pct == pytest.approx(50.0)
        assert fill.left_pct == pytest.approx(50 - math.cos(math.radians(30)) * 180 / 5)
        assert fill.left_pct < 50
        assert fill.blur_px == 2  # umbrella
        assert fill.size_px == 40

    def test_rim_marker(self, default_config):
        rim = compute_layout(default_config).markers[2]
        assert rim.top_pct == pytest.approx(40.0)
        assert rim.left_pct == pytest.approx(50 + math.cos(math.radians(135)) * 120 / 5)
        assert rim.opacity == pytest.approx(0.6)
        assert rim.blur_px == 2
        assert rim.size_px == 32

    def test_softbox_fill_is_blurred(self, default_config):
        default_config.update("fill", "fixture_type", "softbox")
        assert compute_layout(default_config).markers[1].blur_px == 4

    def test_disabled_lights_omitted(self, key_only_config):
        layout = compute_layout(key_only_config)
        assert [m.role for m in layout.markers] == [LightRole.KEY]

    def test_vertical_angle_centers_light(self, default_config):
        default_config.update("key", "angle", 90)
        assert compute_layout(default_config).markers[0].left_pct == pytest.approx(50.0)


class TestScene:
    """Tests for indicator and backdrop values."""

    def test_indicator_follows_key_angle(self, default_config):
        default_config.update("key", "angle", 120)
        assert compute_layout(default_config).indicator_rotation_deg == 120.0

    def test_backdrop(self, default_config):
        default_config.update("background", "color", "#123456")
        default_config.update("background", "distance", 150)
        layout = compute_layout(default_config)
        assert layout.backdrop_color == "#123456"
        assert layout.backdrop_depth == 150.0
