"""AI agents backing the scene splitter."""

from .base import BaseAgent
from .scene_split import SceneSplitAgent

__all__ = ["BaseAgent", "SceneSplitAgent"]
