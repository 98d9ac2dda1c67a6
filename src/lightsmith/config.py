"""Default configuration, constants, and limits for LightSmith."""

# --- Parameter domains (inclusive) ---
HEIGHT_RANGE = (50, 300)  # cm
ANGLE_RANGE = (0, 180)  # degrees
INTENSITY_RANGE = (10, 100)  # percent
COLOR_TEMPERATURE_RANGE = (2700, 7500)  # Kelvin
COLOR_TEMPERATURE_STEP = 100
LIGHT_DISTANCE_RANGE = (50, 250)  # cm
BACKGROUND_DISTANCE_RANGE = (20, 200)  # cm

# --- Default rig ---
DEFAULT_KEY_LIGHT = {
    "fixture_type": "softbox",
    "height": 200,
    "angle": 45,
    "intensity": 75,
    "color_temperature": 5600,
    "distance": 150,
}
DEFAULT_FILL_LIGHT = {
    "enabled": True,
    "fixture_type": "umbrella",
    "height": 150,
    "angle": 30,
    "intensity": 40,
    "color_temperature": 5600,
    "distance": 180,
}
DEFAULT_RIM_LIGHT = {
    "enabled": True,
    "height": 180,
    "angle": 135,
    "intensity": 60,
    "color_temperature": 6000,
    "distance": 120,
}
DEFAULT_BACKGROUND = {
    "color": "#00b300",
    "distance": 80,
}

# --- Prompt wording ---
PROMPT_PREAMBLE = "Professional product photography setup with "
STRONG_KEY_INTENSITY = 65  # strictly above reads as "strong"

# --- Backdrop shade thresholds (green channel, 0-255) ---
SHADE_BRIGHT_ABOVE = 200
SHADE_MEDIUM_ABOVE = 150

# --- Preview geometry ---
PREVIEW_HEIGHT_SCALE = 3.0  # cm per percent of preview height
PREVIEW_DISTANCE_SCALE = 5.0  # cm per percent of preview width
PREVIEW_SOFT_BLUR_PX = 4
PREVIEW_HARD_BLUR_PX = 2
PREVIEW_MARKER_SIZE_PX = {"key": 48, "fill": 40, "rim": 32}
