"""Colour and lighting scene data types with JSON field mappings."""
from __future__ import annotations

from .exceptions import SceneFormatError
from .models import ColourInfo, RgbColour, SceneInfo, XyColour
from .serialization import dumps, load_scenes, loads

__all__ = [
    "ColourInfo",
    "RgbColour",
    "SceneFormatError",
    "SceneInfo",
    "XyColour",
    "dumps",
    "load_scenes",
    "loads",
]
