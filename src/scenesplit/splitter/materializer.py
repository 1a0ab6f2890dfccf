"""Turn paragraph segments into Scene records."""

import itertools
import logging
import re
import uuid
from typing import Callable, List, Optional, Tuple

from ..models import Scene, SceneType
from .keywords import DEFAULT_KEYWORDS, KeywordSet

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]

SECONDS_PER_WORD = 2
MAX_TITLE_LENGTH = 50
DEFAULT_LOCATION = "스튜디오"
DEFAULT_SCENE_DURATION = 60.0
DEFAULT_SCENE_TITLE = "전체 스토리"
NARRATOR = "나레이터"

SENTENCE_END = re.compile(r"[.!?]\s+")
SPEAKER_LINE = re.compile(r"^\s*([^\s:\[\]][^:\n\[\]]{0,29}?)\s*:\s*(\S.*)$", re.MULTILINE)
# Field labels written by Scenario text export, not speakers
LABEL_SPEAKERS = {"대사", "액션"}


def uuid_ids(prefix: str = "scene") -> IdFactory:
    """Id factory backed by uuid4."""
    return lambda: f"{prefix}_{uuid.uuid4().hex[:12]}"


def sequential_ids(prefix: str = "scene") -> IdFactory:
    """Deterministic id factory: scene_1, scene_2, ..."""
    counter = itertools.count(1)
    return lambda: f"{prefix}_{next(counter)}"


def extract_dialogue(text: str) -> Tuple[Optional[str], List[str]]:
    """Pull `Speaker: line` lines out of a text.

    Returns:
        The dialogue lines joined by newlines (None if there are none) and
        the speakers in order of first appearance.
    """
    lines = []
    speakers: List[str] = []
    for match in SPEAKER_LINE.finditer(text):
        speaker, line = match.group(1).strip(), match.group(2).strip()
        lines.append(f"{speaker}: {line}")
        if speaker not in LABEL_SPEAKERS and speaker not in speakers:
            speakers.append(speaker)
    return ("\n".join(lines) if lines else None), speakers


class SceneMaterializer:
    """Builds scenes from text with inferred duration, title and type."""

    def __init__(
        self,
        min_duration: float,
        max_duration: float,
        keywords: Optional[KeywordSet] = None,
        id_factory: Optional[IdFactory] = None,
        preserve_dialogue: bool = False,
    ) -> None:
        self._min_duration = min_duration
        self._max_duration = max_duration
        self._patterns = (keywords or DEFAULT_KEYWORDS).compile()
        self._next_id = id_factory or uuid_ids()
        self._preserve_dialogue = preserve_dialogue

    def estimate_duration(self, word_count: int) -> float:
        """Two seconds per word, clamped to the duration bounds."""
        return float(max(self._min_duration, min(self._max_duration, word_count * SECONDS_PER_WORD)))

    def infer_type(self, text: str) -> SceneType:
        """Dialogue markers win over action verbs, which win over transitions."""
        if self._patterns.dialogue.search(text):
            return SceneType.DIALOGUE
        if self._patterns.action.search(text):
            return SceneType.ACTION
        if self._patterns.transition_type.search(text):
            return SceneType.TRANSITION
        return SceneType.DIALOGUE

    @staticmethod
    def derive_title(text: str, order: int) -> str:
        first_line = text.strip().split("\n", 1)[0]
        first_sentence = SENTENCE_END.split(first_line, maxsplit=1)[0].strip()
        if first_sentence and len(first_sentence) < MAX_TITLE_LENGTH:
            return first_sentence
        return f"씬 {order}"

    def create_scene(self, text: str, order: int) -> Scene:
        """Create a scene covering `text`."""
        word_count = len(text.split())
        scene_type = self.infer_type(text)

        dialogue, characters = None, []
        if self._preserve_dialogue:
            dialogue, characters = extract_dialogue(text)

        return Scene(
            id=self._next_id(),
            order=order,
            type=scene_type,
            title=self.derive_title(text, order),
            description=text,
            duration=self.estimate_duration(word_count),
            location=DEFAULT_LOCATION,
            characters=characters,
            dialogue=dialogue,
            action_description=text if scene_type == SceneType.ACTION else None,
            notes=f"자동 분할된 씬 ({word_count}단어)",
        )

    def create_default_scene(self, text: str) -> Scene:
        """Single scene covering the whole text, used when nothing could be segmented."""
        return Scene(
            id=self._next_id(),
            order=1,
            type=SceneType.DIALOGUE,
            title=DEFAULT_SCENE_TITLE,
            description=text,
            duration=DEFAULT_SCENE_DURATION,
            location=DEFAULT_LOCATION,
            characters=[NARRATOR],
            notes="분할되지 않은 전체 스토리",
        )

    def materialize(self, paragraphs: List[str], breakpoints: List[int]) -> List[Scene]:
        """Create one scene per non-blank segment between breakpoints."""
        scenes: List[Scene] = []
        start = 0
        for end in list(breakpoints) + [len(paragraphs)]:
            if end <= start:
                continue
            text = "\n\n".join(paragraphs[start:end])
            if text.strip():
                scenes.append(self.create_scene(text, len(scenes) + 1))
            start = end

        if not scenes:
            logger.debug("No segments found, using a single default scene")
            return [self.create_default_scene("\n\n".join(paragraphs))]
        return scenes
