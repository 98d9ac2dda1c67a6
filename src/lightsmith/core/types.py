"""Core data types and enums for LightSmith.

Each light role has its own parameter set:
    key   : fixture type + geometry, always on.
    fill  : fixture type + geometry, can be switched off.
    rim   : geometry only, can be switched off.
The background is not a light; it carries a hex color and a distance.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

Number = Union[int, float]


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class LightRole(str, Enum):
    """Slot in the lighting rig."""
    KEY = "key"
    FILL = "fill"
    RIM = "rim"
    BACKGROUND = "background"

    @classmethod
    def parse(cls, value: Union[str, "LightRole"]) -> "LightRole":
        """Resolve a role from its value or one of the UI aliases.

        Raises ValueError for unknown names.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        role = _ROLE_ALIASES.get(key) or _ROLE_ALIASES.get(key.lower())
        if role is None:
            raise ValueError(f"Unknown light '{value}'")
        return role


_ROLE_ALIASES = {
    "key": LightRole.KEY,
    "main": LightRole.KEY,
    "mainLight": LightRole.KEY,
    "keyLight": LightRole.KEY,
    "fill": LightRole.FILL,
    "fillLight": LightRole.FILL,
    "rim": LightRole.RIM,
    "rimLight": LightRole.RIM,
    "background": LightRole.BACKGROUND,
    "backdrop": LightRole.BACKGROUND,
}


class KeyFixture(str, Enum):
    """Modifiers available on the key light."""
    SOFTBOX = "softbox"
    UMBRELLA = "umbrella"
    BEAUTY_DISH = "beauty dish"
    BARE_BULB = "bare bulb"


class FillFixture(str, Enum):
    """Modifiers available on the fill light."""
    SOFTBOX = "softbox"
    UMBRELLA = "umbrella"
    REFLECTOR = "reflector"
    PANEL = "panel"


class Shade(str, Enum):
    """Coarse brightness bucket of a backdrop's green channel."""
    BRIGHT = "bright"
    MEDIUM = "medium"
    DARK = "dark"


class RGB(NamedTuple):
    """8-bit color triple."""
    r: int
    g: int
    b: int


# ---------------------------------------------------------------------------
# Data classes
# ---------------------------------------------------------------------------

@dataclass
class LightParameters:
    """Geometry and output shared by every light."""
    height: Number             # cm
    angle: Number              # degrees
    intensity: Number          # percent
    color_temperature: Number  # Kelvin
    distance: Number           # cm from subject


@dataclass
class KeyLightParameters(LightParameters):
    fixture_type: KeyFixture = KeyFixture.SOFTBOX


@dataclass
class FillLightParameters(LightParameters):
    fixture_type: FillFixture = FillFixture.UMBRELLA
    enabled: bool = True


@dataclass
class RimLightParameters(LightParameters):
    enabled: bool = True


@dataclass
class BackgroundParameters:
    """Backdrop color (``#rrggbb``) and its distance behind the subject."""
    color: str
    distance: Number  # cm
