"""Configuration management."""

import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

from .models import SceneSplitOptions
from .splitter.keywords import KeywordSet

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def _env_path(name: str) -> Optional[Path]:
    value = os.getenv(name, "")
    return Path(value) if value else None


class Config(BaseModel):
    """Application configuration."""

    # API Keys
    anthropic_api_key: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_API_KEY", ""),
        description="Anthropic API key"
    )

    # Model settings
    default_model: str = Field(
        default_factory=lambda: os.getenv("SCENESPLIT_MODEL", "claude-sonnet-4-20250514"),
        description="Claude model used for AI splitting"
    )

    # Split defaults
    min_scene_duration: float = Field(
        default_factory=lambda: float(os.getenv("SCENESPLIT_MIN_SCENE_DURATION", "10")),
        description="Default minimum scene duration in seconds"
    )
    max_scene_duration: float = Field(
        default_factory=lambda: float(os.getenv("SCENESPLIT_MAX_SCENE_DURATION", "120")),
        description="Default maximum scene duration in seconds"
    )
    target_scene_count: int = Field(
        default_factory=lambda: int(os.getenv("SCENESPLIT_TARGET_SCENE_COUNT", "5")),
        description="Default target scene count"
    )
    use_ai: bool = Field(
        default_factory=lambda: _env_bool("SCENESPLIT_USE_AI", True),
        description="Try AI splitting before the rule-based path"
    )

    # Paths
    keywords_file: Optional[Path] = Field(
        default_factory=lambda: _env_path("SCENESPLIT_KEYWORDS_FILE"),
        description="YAML file replacing the built-in keyword lists"
    )

    class Config:
        """Pydantic config."""
        frozen = False

    def validate_required(self) -> None:
        """Validate that required credentials are set."""
        if not self.anthropic_api_key:
            raise ValueError("ANTHROPIC_API_KEY not set")

    def split_options(self, **overrides) -> SceneSplitOptions:
        """Build split options from the configured defaults.

        Raises:
            pydantic.ValidationError: If the resulting options are inconsistent.
        """
        values = {
            "use_ai": self.use_ai,
            "min_scene_duration": self.min_scene_duration,
            "max_scene_duration": self.max_scene_duration,
            "target_scene_count": self.target_scene_count,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return SceneSplitOptions(**values)

    def load_keywords(self) -> Optional[KeywordSet]:
        """Return the configured keyword set, or None for the built-in lists.

        Raises:
            FileNotFoundError: If SCENESPLIT_KEYWORDS_FILE points nowhere.
        """
        if self.keywords_file is None:
            return None
        if not self.keywords_file.exists():
            raise FileNotFoundError(f"Keywords file not found: {self.keywords_file}")
        return KeywordSet.from_yaml(self.keywords_file)


# Global config instance
config = Config()
