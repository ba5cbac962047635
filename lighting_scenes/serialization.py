"""JSON helpers for reading colour and scene documents."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from .const import KEY_SCENES
from .exceptions import SceneFormatError
from .models import ColourInfo, RgbColour, SceneInfo, XyColour

_LOGGER = logging.getLogger(__name__)

Model = TypeVar("Model", RgbColour, XyColour, ColourInfo, SceneInfo)


def dumps(model: RgbColour | XyColour | ColourInfo | SceneInfo, **kwargs: Any) -> str:
    """Serialize any model to JSON text."""
    return model.to_json(**kwargs)


def loads(text: str | bytes, model_cls: type[Model]) -> Model:
    """Deserialize JSON text into an instance of model_cls."""
    return model_cls.from_json(text)


def load_scenes(path: str | Path) -> list[SceneInfo]:
    """
    Load scenes from a JSON file.
    
    The document may hold a single scene object, an array of scenes, or an
    object with a "scenes" array.
    
    Args:
        path: Path to the JSON document
        
    Returns:
        Scenes in document order
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as err:
            _LOGGER.warning("Rejected scene document %s: %s", path, err)
            raise SceneFormatError(f"Malformed JSON in {path}: {err}") from err
    
    try:
        scenes = [SceneInfo.from_dict(item) for item in _scene_items(raw)]
    except SceneFormatError as err:
        _LOGGER.warning("Rejected scene document %s: %s", path, err)
        raise
    
    _LOGGER.debug("Loaded %d scenes from %s", len(scenes), path)
    return scenes


def _scene_items(raw: Any) -> list[Any]:
    """Return the list of scene objects held by a parsed document."""
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        if KEY_SCENES in raw:
            items = raw[KEY_SCENES]
            if not isinstance(items, list):
                raise SceneFormatError(f'"{KEY_SCENES}" must be an array')
            return items
        return [raw]
    raise SceneFormatError(
        f"Scene document must be an object or an array, got {type(raw).__name__}"
    )
