"""Scene split agent: asks Claude to break a story into scenes."""

import logging
from pathlib import Path
from typing import Any

from ..models import Scene, SceneType
from ..splitter.adapter import SceneSplitRequest
from .base import BaseAgent

logger = logging.getLogger(__name__)

# Load prompt template
PROMPT_TEMPLATE_PATH = Path(__file__).parent.parent.parent.parent / "templates" / "prompts" / "scene_split.txt"

SCENE_TYPES = {scene_type.value for scene_type in SceneType}


def _load_system_prompt() -> str:
    """Load the system prompt from template file."""
    if PROMPT_TEMPLATE_PATH.exists():
        return PROMPT_TEMPLATE_PATH.read_text(encoding="utf-8")
    # Fallback inline prompt if template not found
    return """You are a script supervisor who breaks stories into production scenes.

Output valid JSON only, with no additional text or markdown formatting.
The JSON should be an object with a "scenes" array. Each scene has
"type" (dialogue, action, transition, montage or voiceover), "title",
"description", "duration" in seconds, "location", "characters",
and optionally "dialogue" and "action_description"."""


class SceneSplitAgent(BaseAgent[SceneSplitRequest, list[Scene]]):
    """Agent that splits a story text into scenes.

    Scenes come back without ids or order; the splitter assigns both and
    rebalances durations afterwards.
    """

    @property
    def name(self) -> str:
        """Return the agent's name."""
        return "SceneSplitAgent"

    @property
    def system_prompt(self) -> str:
        """Return the system prompt for scene splitting."""
        return _load_system_prompt()

    def run(self, input_data: SceneSplitRequest) -> list[Scene]:
        """Split the story in `input_data`.

        Raises:
            ValueError: If the response cannot be parsed into scenes.
        """
        self._logger.info(
            f"Splitting story of {len(input_data.story_text)} chars "
            f"into ~{input_data.target_scene_count} scenes"
        )

        response = self._create_message(
            prompt=self._build_prompt(input_data),
            max_tokens=8192,
        )
        scenes = self._parse_response(response)

        self._logger.info(f"Received {len(scenes)} scenes")
        return scenes

    def _build_prompt(self, input_data: SceneSplitRequest) -> str:
        prompt_parts = [
            "Split the following story into scenes for a video.",
            "",
            f"TARGET SCENE COUNT: {input_data.target_scene_count}",
            f"MAX SCENE DURATION: {input_data.max_scene_duration:g} seconds",
            "",
            "Keep the story's order. Every sentence must belong to exactly one scene.",
            "",
            "STORY:",
            input_data.story_text,
        ]
        return "\n".join(prompt_parts)

    def _parse_response(self, response: str) -> list[Scene]:
        data = self._parse_json(response)

        # Accept {"scenes": [...]} or a bare array
        scenes_data = data.get("scenes", data) if isinstance(data, dict) else data
        if not isinstance(scenes_data, list):
            raise ValueError("Response does not contain a scenes array")

        scenes = []
        for i, scene_data in enumerate(scenes_data):
            if not isinstance(scene_data, dict):
                raise ValueError(f"Scene {i + 1} is not an object")
            scenes.append(self._to_scene(scene_data, i))
        return scenes

    def _to_scene(self, scene_data: dict[str, Any], index: int) -> Scene:
        description = scene_data.get("description") or scene_data.get("content") or ""
        if not description.strip():
            raise ValueError(f"Scene {index + 1} has no description")

        scene_type = str(scene_data.get("type", "")).lower()
        if scene_type not in SCENE_TYPES:
            scene_type = SceneType.DIALOGUE.value

        characters = scene_data.get("characters") or []
        if isinstance(characters, str):
            characters = [characters]

        return Scene(
            type=SceneType(scene_type),
            title=scene_data.get("title") or "",
            description=description,
            duration=max(0.0, float(scene_data.get("duration") or 0)),
            location=scene_data.get("location"),
            characters=[str(c) for c in characters],
            dialogue=scene_data.get("dialogue"),
            action_description=scene_data.get("action_description") or scene_data.get("actionDescription"),
            notes="AI 분할된 씬",
            visual_elements=[str(v) for v in scene_data.get("visual_elements") or []],
        )
