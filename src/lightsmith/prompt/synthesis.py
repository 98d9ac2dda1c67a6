"""Turn a lighting rig into a text-to-image prompt.

The prompt is a fixed preamble followed by up to four clauses, always in
this order:
    key light   (always)
    fill light  (only when enabled)
    rim light   (only when enabled)
    background  (always)

Synthesis is a pure function of the rig. It is cheap enough to recompute on
every render, so nothing is cached.
"""

from __future__ import annotations

import logging

from lightsmith.color.convert import hex_to_rgb, shade_of
from lightsmith.config import PROMPT_PREAMBLE, STRONG_KEY_INTENSITY
from lightsmith.core.rig import LightingConfig
from lightsmith.core.types import (
    BackgroundParameters,
    FillLightParameters,
    KeyLightParameters,
    Number,
    RimLightParameters,
)

logger = logging.getLogger(__name__)


def format_number(value: Number) -> str:
    """Plain base-10 rendering; integral floats drop the fractional part."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def key_light_clause(key: KeyLightParameters) -> str:
    strength = "strong" if key.intensity > STRONG_KEY_INTENSITY else "soft"
    return (
        f"a {strength} {key.fixture_type.value} as the key light positioned at "
        f"{format_number(key.height)}cm height, "
        f"{format_number(key.angle)}° angle, "
        f"with {format_number(key.color_temperature)}K color temperature, "
        f"{format_number(key.distance)}cm from subject. "
    )


def fill_light_clause(fill: FillLightParameters) -> str:
    return (
        f"Fill light using {fill.fixture_type.value} at "
        f"{format_number(fill.height)}cm height, "
        f"{format_number(fill.angle)}° angle, "
        f"at {format_number(fill.intensity)}% intensity, "
        f"{format_number(fill.distance)}cm from subject. "
    )


def rim_light_clause(rim: RimLightParameters) -> str:
    return (
        f"Rim light positioned at {format_number(rim.height)}cm height, "
        f"{format_number(rim.angle)}° angle, "
        f"at {format_number(rim.intensity)}% intensity, "
        f"{format_number(rim.color_temperature)}K color temperature, "
        f"{format_number(rim.distance)}cm from subject. "
    )


def background_clause(background: BackgroundParameters) -> str:
    """Backdrop clause; raises InvalidColorFormat for a malformed color."""
    shade = shade_of(hex_to_rgb(background.color).g)
    return (
        f"{shade.value} green backdrop positioned "
        f"{format_number(background.distance)}cm behind subject."
    )


def synthesize(config: LightingConfig) -> str:
    """Describe the rig as a single prompt string.

    Args:
        config: Rig to describe. It is only read.

    Returns:
        The prompt, starting with the fixed preamble.

    Raises:
        InvalidColorFormat: If the background color is malformed. Not caught
            here; a valid rig never produces it.
    """
    prompt = PROMPT_PREAMBLE
    prompt += key_light_clause(config.key)
    if config.fill.enabled:
        prompt += fill_light_clause(config.fill)
    if config.rim.enabled:
        prompt += rim_light_clause(config.rim)
    prompt += background_clause(config.background)

    logger.debug("Synthesized prompt (%d chars)", len(prompt))
    return prompt
