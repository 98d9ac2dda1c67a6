"""Mutable lighting rig: one key, fill, rim light and a background.

Validation policy for ``update``:
    - Numeric values outside a field's domain are clamped to the nearest
      bound. Color temperature is also snapped to its 100 K step.
    - Wrong types (bool, strings, NaN, infinities), unknown lights, unknown
      fields and fixture types outside the role's set raise InvalidParameter.
    - Malformed background colors raise InvalidColorFormat.
A rejected update leaves the rig untouched.
"""

from __future__ import annotations

import copy
import logging
import math
import numbers
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Union

from lightsmith.color.convert import normalize_hex
from lightsmith.config import (
    ANGLE_RANGE,
    BACKGROUND_DISTANCE_RANGE,
    COLOR_TEMPERATURE_RANGE,
    COLOR_TEMPERATURE_STEP,
    DEFAULT_BACKGROUND,
    DEFAULT_FILL_LIGHT,
    DEFAULT_KEY_LIGHT,
    DEFAULT_RIM_LIGHT,
    HEIGHT_RANGE,
    INTENSITY_RANGE,
    LIGHT_DISTANCE_RANGE,
)
from lightsmith.core.types import (
    BackgroundParameters,
    FillFixture,
    FillLightParameters,
    KeyFixture,
    KeyLightParameters,
    LightRole,
    Number,
    RimLightParameters,
)
from lightsmith.errors import InvalidParameter, UnsupportedOperation

logger = logging.getLogger(__name__)

_LIGHT_DOMAINS = {
    "height": HEIGHT_RANGE,
    "angle": ANGLE_RANGE,
    "intensity": INTENSITY_RANGE,
    "color_temperature": COLOR_TEMPERATURE_RANGE,
    "distance": LIGHT_DISTANCE_RANGE,
}

_PARAMETER_TYPES = {
    LightRole.KEY: KeyLightParameters,
    LightRole.FILL: FillLightParameters,
    LightRole.RIM: RimLightParameters,
    LightRole.BACKGROUND: BackgroundParameters,
}

_FIXTURE_TYPES = {
    LightRole.KEY: KeyFixture,
    LightRole.FILL: FillFixture,
}

# Keys used by the original web UI.
_LIGHT_FIELD_ALIASES = {
    "type": "fixture_type",
    "fixtureType": "fixture_type",
    "color": "color_temperature",
    "colorTemperature": "color_temperature",
}

_TOGGLEABLE = frozenset({LightRole.FILL, LightRole.RIM})


def _parse_role(light: Union[str, LightRole]) -> LightRole:
    try:
        return LightRole.parse(light)
    except ValueError as exc:
        raise InvalidParameter(str(exc)) from exc


def _resolve_field(role: LightRole, name: str) -> str:
    """Map a field name (or UI alias) onto the role's dataclass field."""
    if not isinstance(name, str):
        raise InvalidParameter(
            f"Field name must be a string, got {type(name).__name__}"
        )
    allowed = {f.name for f in fields(_PARAMETER_TYPES[role])}
    if role is not LightRole.BACKGROUND:
        name = _LIGHT_FIELD_ALIASES.get(name, name)
    if name not in allowed:
        raise InvalidParameter(
            f"Unknown field '{name}' for {role.value} light. "
            f"Use one of: {', '.join(sorted(allowed))}"
        )
    return name


def _snap_color_temperature(value: Number) -> int:
    lo, _ = COLOR_TEMPERATURE_RANGE
    steps = math.floor((value - lo) / COLOR_TEMPERATURE_STEP + 0.5)
    return lo + steps * COLOR_TEMPERATURE_STEP


def _coerce_number(role: LightRole, name: str, value: Any) -> Number:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(
            f"{role.value}.{name} must be a number, got {type(value).__name__}"
        )
    value = int(value) if isinstance(value, numbers.Integral) else float(value)
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidParameter(f"{role.value}.{name} must be finite, got {value}")

    if role is LightRole.BACKGROUND:
        lo, hi = BACKGROUND_DISTANCE_RANGE
    else:
        lo, hi = _LIGHT_DOMAINS[name]
    clamped = min(max(value, lo), hi)
    if name == "color_temperature":
        clamped = _snap_color_temperature(clamped)
    if clamped != value:
        logger.info("Clamped %s.%s from %s to %s", role.value, name, value, clamped)
    return clamped


def _coerce_fixture(role: LightRole, value: Any) -> Enum:
    fixture_enum = _FIXTURE_TYPES[role]
    raw = value.value if isinstance(value, Enum) else value
    if not isinstance(raw, str):
        raise InvalidParameter(
            f"{role.value}.fixture_type must be a string, got {type(value).__name__}"
        )
    try:
        return fixture_enum(raw.strip().lower())
    except ValueError as exc:
        choices = ", ".join(m.value for m in fixture_enum)
        raise InvalidParameter(
            f"Invalid fixture type '{raw}' for {role.value} light. Use one of: {choices}"
        ) from exc


def _coerce(role: LightRole, name: str, value: Any) -> Any:
    """Validate one field value, returning what should be stored."""
    if name == "enabled":
        if not isinstance(value, bool):
            raise InvalidParameter(
                f"{role.value}.enabled must be a bool, got {type(value).__name__}"
            )
        return value
    if name == "fixture_type":
        return _coerce_fixture(role, value)
    if name == "color":
        return normalize_hex(value)
    return _coerce_number(role, name, value)


def _validate(role: LightRole, params):
    """Coerce every field of a parameter dataclass in place and return it."""
    expected = _PARAMETER_TYPES[role]
    if not isinstance(params, expected):
        raise InvalidParameter(
            f"{role.value} must be {expected.__name__}, got {type(params).__name__}"
        )
    for f in fields(params):
        setattr(params, f.name, _coerce(role, f.name, getattr(params, f.name)))
    return params


def default_key_light() -> KeyLightParameters:
    return _validate(LightRole.KEY, KeyLightParameters(**DEFAULT_KEY_LIGHT))


def default_fill_light() -> FillLightParameters:
    return _validate(LightRole.FILL, FillLightParameters(**DEFAULT_FILL_LIGHT))


def default_rim_light() -> RimLightParameters:
    return _validate(LightRole.RIM, RimLightParameters(**DEFAULT_RIM_LIGHT))


def default_background() -> BackgroundParameters:
    return _validate(LightRole.BACKGROUND, BackgroundParameters(**DEFAULT_BACKGROUND))


@dataclass
class LightingConfig:
    """The full rig, mutated in place by a front end.

    Not internally synchronized; concurrent hosts need their own lock.
    """
    key: KeyLightParameters = field(default_factory=default_key_light)
    fill: FillLightParameters = field(default_factory=default_fill_light)
    rim: RimLightParameters = field(default_factory=default_rim_light)
    background: BackgroundParameters = field(default_factory=default_background)

    def __post_init__(self):
        validated = {
            role: _validate(role, copy.copy(getattr(self, role.value)))
            for role in LightRole
        }
        for role, params in validated.items():
            setattr(self, role.value, params)

    def parameters(self, light: Union[str, LightRole]):
        """Parameter dataclass for a light (live object, not a copy)."""
        return getattr(self, _parse_role(light).value)

    def update(self, light: Union[str, LightRole], field_name: str, value: Any) -> None:
        """Set one field of one light, clamping numeric values into range.

        Raises:
            InvalidParameter: Unknown light/field or a value of the wrong kind.
            InvalidColorFormat: Background color is not ``#rrggbb``.
        """
        role = _parse_role(light)
        name = _resolve_field(role, field_name)
        coerced = _coerce(role, name, value)
        setattr(getattr(self, role.value), name, coerced)
        logger.debug("Set %s.%s = %r", role.value, name, coerced)

    def toggle(self, light: Union[str, LightRole]) -> None:
        """Flip the enabled flag of the fill or rim light.

        Raises:
            UnsupportedOperation: For the key light and the background.
        """
        role = _parse_role(light)
        if role not in _TOGGLEABLE:
            raise UnsupportedOperation(f"The {role.value} light cannot be toggled")
        params = getattr(self, role.value)
        params.enabled = not params.enabled
        logger.debug("Toggled %s light %s", role.value, "on" if params.enabled else "off")

    def is_enabled(self, light: Union[str, LightRole]) -> bool:
        """Key light and background are always on."""
        role = _parse_role(light)
        if role in _TOGGLEABLE:
            return getattr(self, role.value).enabled
        return True

    def snapshot(self) -> "LightingConfig":
        """Independent deep copy for synthesis or display."""
        return copy.deepcopy(self)

    def reset(self) -> None:
        """Restore the default rig."""
        self.key = default_key_light()
        self.fill = default_fill_light()
        self.rim = default_rim_light()
        self.background = default_background()
        logger.debug("Rig reset to defaults")
