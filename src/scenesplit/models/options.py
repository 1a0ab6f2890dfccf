"""Split options model."""

from enum import Enum
from pydantic import BaseModel, Field, model_validator


class SplitStrategy(str, Enum):
    """Breakpoint selection policy."""
    NATURAL_BREAKS = "natural_breaks"
    DURATION_BASED = "duration_based"
    CONTENT_BASED = "content_based"
    HYBRID = "hybrid"
    AI_GUIDED = "ai_guided"


class SplitMethod(str, Enum):
    """Which path actually produced a result."""
    AI = "ai"
    RULE_BASED = "rule_based"
    HYBRID = "hybrid"


class SceneSplitOptions(BaseModel):
    """Caller-supplied constraints for a split."""
    
    strategy: SplitStrategy = Field(default=SplitStrategy.HYBRID, description="Breakpoint strategy")
    use_ai: bool = Field(default=True, description="Try the AI backend first")
    fallback_to_rule_based: bool = Field(default=True, description="Fall back to rules if AI fails")
    preserve_dialogue: bool = Field(default=False, description="Extract dialogue lines and speakers")
    min_scene_duration: float = Field(default=10, description="Minimum scene duration in seconds", gt=0)
    max_scene_duration: float = Field(default=120, description="Maximum scene duration in seconds", gt=0)
    target_scene_count: int = Field(default=5, description="Approximate number of scenes", gt=0)
    
    class Config:
        """Pydantic config."""
        frozen = False

    @model_validator(mode="after")
    def check_duration_bounds(self) -> "SceneSplitOptions":
        """Reject a minimum duration above the maximum."""
        if self.min_scene_duration > self.max_scene_duration:
            raise ValueError(
                f"min_scene_duration ({self.min_scene_duration}) must not exceed "
                f"max_scene_duration ({self.max_scene_duration})"
            )
        return self
