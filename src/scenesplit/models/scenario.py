"""Scenario model."""

from datetime import datetime
from pathlib import Path
from typing import List
from pydantic import BaseModel, Field
import yaml

from .scene import Scene


class ScenarioMetadata(BaseModel):
    """Identifying data for a scenario."""

    id: str = Field(..., description="Scenario identifier")
    title: str = Field(default="", description="Scenario title")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation time")


class Scenario(BaseModel):
    """A titled, ordered list of scenes."""
    
    metadata: ScenarioMetadata = Field(..., description="Scenario metadata")
    scenes: List[Scene] = Field(default_factory=list, description="List of scenes")
    
    class Config:
        """Pydantic config."""
        frozen = False

    @property
    def total_duration(self) -> float:
        """Sum of scene durations in seconds."""
        return sum(scene.duration for scene in self.scenes)
    
    @classmethod
    def from_yaml(cls, path: Path) -> "Scenario":
        """Load scenario from YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls(**data)
    
    def to_yaml(self, path: Path) -> None:
        """Save scenario to YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                self.model_dump(mode="json"),
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )
