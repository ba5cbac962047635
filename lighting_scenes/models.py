"""Data models for colours and lighting scenes."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
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
from .exceptions import SceneFormatError
from .schema import (
    COLOUR_INFO_SCHEMA,
    RGB_COLOUR_SCHEMA,
    SCENE_INFO_SCHEMA,
    XY_COLOUR_SCHEMA,
)


def _validate(schema: vol.Schema, data: Any, kind: str) -> dict[str, Any]:
    """Run data through a schema, raising SceneFormatError on failure."""
    try:
        return schema(data)
    except vol.Invalid as err:
        raise SceneFormatError(f"Invalid {kind}: {err}") from err


class _JsonMixin:
    """JSON text helpers shared by every model."""
    
    def to_json(self, **kwargs: Any) -> str:
        """Serialize to compact JSON text, refusing NaN and infinity."""
        kwargs.setdefault("separators", (",", ":"))
        kwargs.setdefault("allow_nan", False)
        return json.dumps(self.to_dict(), **kwargs)
    
    @classmethod
    def from_json(cls, text: str | bytes):
        """Create from JSON text."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as err:
            raise SceneFormatError(f"Malformed JSON: {err}") from err
        return cls.from_dict(data)


@dataclass
class RgbColour(_JsonMixin):
    """A colour in RGB colour space."""
    
    r: float = DEFAULT_COMPONENT
    g: float = DEFAULT_COMPONENT
    b: float = DEFAULT_COMPONENT
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            KEY_R: self.r,
            KEY_G: self.g,
            KEY_B: self.b,
        }
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RgbColour:
        """Create from dictionary."""
        data = _validate(RGB_COLOUR_SCHEMA, data, "RGB colour")
        return cls(r=data[KEY_R], g=data[KEY_G], b=data[KEY_B])


@dataclass
class XyColour(_JsonMixin):
    """A colour in CIE 1931 XY chromaticity space."""
    
    x: float = DEFAULT_COMPONENT
    y: float = DEFAULT_COMPONENT
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            KEY_X: self.x,
            KEY_Y: self.y,
        }
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> XyColour:
        """Create from dictionary."""
        data = _validate(XY_COLOUR_SCHEMA, data, "XY colour")
        return cls(x=data[KEY_X], y=data[KEY_Y])


@dataclass
class ColourInfo(_JsonMixin):
    """Information about a colour."""
    
    xy: XyColour = field(default_factory=XyColour)
    rgb: RgbColour = field(default_factory=RgbColour)
    brightness: float = DEFAULT_BRIGHTNESS  # Percentage, 0-100
    name: str = DEFAULT_NAME
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            KEY_XY: self.xy.to_dict(),
            KEY_RGB: self.rgb.to_dict(),
            KEY_BRIGHTNESS: self.brightness,
            KEY_NAME: self.name,
        }
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ColourInfo:
        """Create from dictionary."""
        data = _validate(COLOUR_INFO_SCHEMA, data, "colour info")
        return cls(
            xy=XyColour.from_dict(data[KEY_XY]),
            rgb=RgbColour.from_dict(data[KEY_RGB]),
            brightness=data[KEY_BRIGHTNESS],
            name=data[KEY_NAME],
        )


@dataclass
class SceneInfo(_JsonMixin):
    """Information about a scene."""
    
    name: str = DEFAULT_NAME
    description: str = DEFAULT_DESCRIPTION
    colours: list[ColourInfo] = field(default_factory=list)  # Apply order
    
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            KEY_NAME: self.name,
            KEY_DESCRIPTION: self.description,
            KEY_COLOURS: [colour.to_dict() for colour in self.colours],
        }
    
    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneInfo:
        """Create from dictionary."""
        data = _validate(SCENE_INFO_SCHEMA, data, "scene info")
        return cls(
            name=data[KEY_NAME],
            description=data[KEY_DESCRIPTION],
            colours=[ColourInfo.from_dict(colour) for colour in data[KEY_COLOURS]],
        )
