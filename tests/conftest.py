"""Shared fixtures for LightSmith tests."""

from __future__ import annotations

import pytest

from lightsmith.core.rig import LightingConfig


DEFAULT_PROMPT = (
    "Professional product photography setup with a strong softbox as the key light "
    "positioned at 200cm height, 45° angle, with 5600K color temperature, "
    "150cm from subject. "
    "Fill light using umbrella at 150cm height, 30° angle, at 40% intensity, "
    "180cm from subject. "
    "Rim light positioned at 180cm height, 135° angle, at 60% intensity, "
    "6000K color temperature, 120cm from subject. "
    "medium green backdrop positioned 80cm behind subject."
)


@pytest.fixture
def default_config():
    """Freshly constructed default rig."""
    return LightingConfig()


@pytest.fixture
def default_prompt():
    """Prompt text for the default rig."""
    return DEFAULT_PROMPT


@pytest.fixture
def key_only_config():
    """Default rig with fill and rim switched off."""
    config = LightingConfig()
    config.toggle("fill")
    config.toggle("rim")
    return config
