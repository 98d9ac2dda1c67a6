"""Geometry for the 2D studio preview.

Positions are percentages of the preview box, with the subject at the
center. Heights map to the vertical axis, and the horizontal offset is the
cosine of the light's angle scaled by its distance. The key and rim lights
sit right of center and the fill light mirrors to the left.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from lightsmith.config import (
    PREVIEW_DISTANCE_SCALE,
    PREVIEW_HARD_BLUR_PX,
    PREVIEW_HEIGHT_SCALE,
    PREVIEW_MARKER_SIZE_PX,
    PREVIEW_SOFT_BLUR_PX,
)
from lightsmith.core.rig import LightingConfig
from lightsmith.core.types import LightRole

_SIDE = {LightRole.KEY: 1.0, LightRole.FILL: -1.0, LightRole.RIM: 1.0}


@dataclass(frozen=True)
class LightMarker:
    """Where and how to draw one light."""
    role: LightRole
    top_pct: float
    left_pct: float
    opacity: float
    blur_px: int
    size_px: int


@dataclass(frozen=True)
class PreviewLayout:
    markers: list[LightMarker]
    indicator_rotation_deg: float
    backdrop_color: str
    backdrop_depth: float


def _blur_for(config: LightingConfig, role: LightRole) -> int:
    if role is LightRole.RIM:
        return PREVIEW_HARD_BLUR_PX
    fixture = config.parameters(role).fixture_type.value
    return PREVIEW_SOFT_BLUR_PX if fixture == "softbox" else PREVIEW_HARD_BLUR_PX


def compute_layout(config: LightingConfig) -> PreviewLayout:
    """Marker placement for every enabled light, in key/fill/rim order."""
    roles = [r for r in (LightRole.KEY, LightRole.FILL, LightRole.RIM) if config.is_enabled(r)]
    params = [config.parameters(r) for r in roles]

    height = np.array([p.height for p in params], dtype=np.float64)
    angle = np.deg2rad(np.array([p.angle for p in params], dtype=np.float64))
    distance = np.array([p.distance for p in params], dtype=np.float64)
    intensity = np.array([p.intensity for p in params], dtype=np.float64)
    side = np.array([_SIDE[r] for r in roles], dtype=np.float64)

    top = 100.0 - height / PREVIEW_HEIGHT_SCALE
    left = 50.0 + side * np.cos(angle) * distance / PREVIEW_DISTANCE_SCALE
    opacity = intensity / 100.0

    markers = [
        LightMarker(
            role=role,
            top_pct=float(top[i]),
            left_pct=float(left[i]),
            opacity=float(opacity[i]),
            blur_px=_blur_for(config, role),
            size_px=PREVIEW_MARKER_SIZE_PX[role.value],
        )
        for i, role in enumerate(roles)
    ]

    return PreviewLayout(
        markers=markers,
        indicator_rotation_deg=float(config.key.angle),
        backdrop_color=config.background.color,
        backdrop_depth=float(config.background.distance),
    )
