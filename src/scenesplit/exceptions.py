"""Exceptions raised by the scene splitter."""


class SceneSplitError(Exception):
    """Base class for scene splitting errors."""


class AISplitError(SceneSplitError):
    """The AI backend could not produce a scene list."""
