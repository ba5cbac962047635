"""Constants for the Lighting Scenes package."""

# Wire keys
KEY_R = "r"
KEY_G = "g"
KEY_B = "b"
KEY_X = "x"
KEY_Y = "y"
KEY_XY = "xy"
KEY_RGB = "rgb"
KEY_BRIGHTNESS = "brightness"
KEY_NAME = "name"
KEY_DESCRIPTION = "description"
KEY_COLOURS = "colours"

# Top-level key of a multi-scene document
KEY_SCENES = "scenes"

# Default values
DEFAULT_NAME = ""
DEFAULT_DESCRIPTION = ""
DEFAULT_COMPONENT = 0.0
DEFAULT_BRIGHTNESS = 0.0
