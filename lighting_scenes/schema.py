"""Voluptuous schemas describing the JSON shape of colours and scenes.

The schemas only check structure: value types and the defaults of absent
keys. Numeric ranges are left to the consumer.
"""
from __future__ import annotations

from typing import Any

import voluptuous as vol

from .const import (
    DEFAULT_BRIGHTNESS,
    DEFAULT_COMPONENT,
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    KEY_B,
    KEY_BRIGHTNESS,
    KEY_COLOURS,
    KEY_DESCRIPTION,
    KEY_G,
    KEY_NAME,
    KEY_R,
    KEY_RGB,
    KEY_X,
    KEY_XY,
    KEY_Y,
)


def number(value: Any) -> float:
    """Validate a JSON number and convert it to float."""
    # bool is an int subclass but not a JSON number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise vol.Invalid("expected a number")
    return float(value)


def text(value: Any) -> str:
    """Validate JSON text, reading null as empty text."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise vol.Invalid("expected str")
    return value


RGB_COLOUR_SCHEMA = vol.Schema(
    {
        vol.Optional(KEY_R, default=DEFAULT_COMPONENT): number,
        vol.Optional(KEY_G, default=DEFAULT_COMPONENT): number,
        vol.Optional(KEY_B, default=DEFAULT_COMPONENT): number,
    },
    extra=vol.REMOVE_EXTRA,
)

XY_COLOUR_SCHEMA = vol.Schema(
    {
        vol.Optional(KEY_X, default=DEFAULT_COMPONENT): number,
        vol.Optional(KEY_Y, default=DEFAULT_COMPONENT): number,
    },
    extra=vol.REMOVE_EXTRA,
)

# Absent nested colours are filled in by their own schema defaults
COLOUR_INFO_SCHEMA = vol.Schema(
    {
        vol.Optional(KEY_XY, default=dict): XY_COLOUR_SCHEMA,
        vol.Optional(KEY_RGB, default=dict): RGB_COLOUR_SCHEMA,
        vol.Optional(KEY_BRIGHTNESS, default=DEFAULT_BRIGHTNESS): number,
        vol.Optional(KEY_NAME, default=DEFAULT_NAME): text,
    },
    extra=vol.REMOVE_EXTRA,
)

SCENE_INFO_SCHEMA = vol.Schema(
    {
        vol.Optional(KEY_NAME, default=DEFAULT_NAME): text,
        vol.Optional(KEY_DESCRIPTION, default=DEFAULT_DESCRIPTION): text,
        vol.Optional(KEY_COLOURS, default=list): [COLOUR_INFO_SCHEMA],
    },
    extra=vol.REMOVE_EXTRA,
)
