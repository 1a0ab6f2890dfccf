"""Scene data model."""

from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


class SceneType(str, Enum):
    """Kind of scene, inferred from its text."""
    DIALOGUE = "dialogue"
    ACTION = "action"
    TRANSITION = "transition"
    MONTAGE = "montage"
    VOICEOVER = "voiceover"


class Scene(BaseModel):
    """Represents a single scene in a scenario."""
    
    id: Optional[str] = Field(None, description="Unique scene identifier, assigned by the splitter")
    order: int = Field(default=0, description="1-based position in the scenario", ge=0)
    type: SceneType = Field(default=SceneType.DIALOGUE, description="Inferred scene type")
    title: str = Field(default="", description="Short label")
    description: str = Field(default="", description="Scene text")
    duration: float = Field(default=0.0, description="Estimated duration in seconds", ge=0)
    location: Optional[str] = Field(None, description="Where the scene takes place")
    characters: List[str] = Field(default_factory=list, description="Characters in the scene")
    dialogue: Optional[str] = Field(None, description="Dialogue lines")
    action_description: Optional[str] = Field(None, description="Action summary")
    notes: Optional[str] = Field(None, description="How the scene was produced")
    visual_elements: List[str] = Field(default_factory=list, description="Visual hints")
    
    class Config:
        """Pydantic config."""
        frozen = False
