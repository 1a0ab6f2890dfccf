"""Data models for the scene splitter."""

from .scene import Scene, SceneType
from .options import SceneSplitOptions, SplitMethod, SplitStrategy
from .result import SceneSplitResult, SplitMetadata, TextAnalysis
from .scenario import Scenario, ScenarioMetadata

__all__ = [
    "Scene",
    "SceneType",
    "SceneSplitOptions",
    "SplitMethod",
    "SplitStrategy",
    "SceneSplitResult",
    "SplitMetadata",
    "TextAnalysis",
    "Scenario",
    "ScenarioMetadata",
]
