"""Split result models."""

from typing import List, Optional
from pydantic import BaseModel, Field

from .options import SplitMethod, SplitStrategy
from .scene import Scene


class TextAnalysis(BaseModel):
    """Coarse statistics over a story text."""

    sentence_count: int
    word_count: int
    paragraph_count: int
    average_words_per_sentence: float
    complexity_score: float
    recommended_scene_count: int


class SplitMetadata(BaseModel):
    """Provenance of a split result."""

    original_text: str = Field(default="", description="Text that was split")
    target_scene_count: int = Field(..., description="Requested scene count")
    actual_scene_count: int = Field(default=0, description="Number of scenes produced")
    average_scene_duration: float = Field(default=0.0, description="Mean scene duration in seconds")
    split_method: SplitMethod = Field(default=SplitMethod.RULE_BASED, description="Path that produced the scenes")
    analysis: Optional[TextAnalysis] = Field(None, description="Text statistics")


class SceneSplitResult(BaseModel):
    """Envelope returned by every split call."""

    success: bool
    scenes: List[Scene] = Field(default_factory=list)
    split_strategy: SplitStrategy
    metadata: SplitMetadata
    warnings: List[str] = Field(default_factory=list)
    error: Optional[str] = None
