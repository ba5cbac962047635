"""Exceptions for the Lighting Scenes package."""


class SceneFormatError(ValueError):
    """Error to indicate a colour or scene document has the wrong shape."""
