"""Keyword sets used by the breakpoint finders and type inference.

The heuristics are plain data so they can be swapped per language or per
test without touching the algorithms. ASCII keywords match whole words,
case-insensitively; other keywords (Hangul) match as substrings because
Korean attaches particles directly to the word.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Pattern

import yaml
from pydantic import BaseModel, Field


def _compile(keywords: List[str]) -> Pattern[str]:
    """Compile a keyword list into one alternation pattern."""
    parts = []
    for keyword in keywords:
        escaped = re.escape(keyword)
        if keyword.isascii() and keyword[:1].isalnum() and keyword[-1:].isalnum():
            parts.append(rf"\b{escaped}\b")
        else:
            parts.append(escaped)
    if not parts:
        # Never matches
        return re.compile(r"(?!x)x")
    return re.compile("|".join(parts), re.IGNORECASE)


@dataclass(frozen=True)
class CompiledKeywords:
    """Compiled patterns for one KeywordSet."""

    transition: Pattern[str]
    scene_marker: Pattern[str]
    dialogue: Pattern[str]
    action: Pattern[str]
    transition_type: Pattern[str]


class KeywordSet(BaseModel):
    """Heuristic keyword lists."""

    transition_words: List[str] = Field(
        default_factory=lambda: ["그뒤", "Meanwhile", "한편", "이어서", "다음날", "나중에"],
        description="Words that signal a time or place jump",
    )
    scene_markers: List[str] = Field(
        default_factory=lambda: ["FADE IN", "FADE OUT", "CUT TO", "장면 전환", "컷", "페이드"],
        description="Explicit screenplay scene-change markers",
    )
    dialogue_markers: List[str] = Field(
        default_factory=lambda: [":", "대사"],
        description="Markers of spoken lines",
    )
    action_words: List[str] = Field(
        default_factory=lambda: [
            "달리기", "뛰기", "움직이기", "잡기", "둘러보기",
            "run", "runs", "running", "jump", "jumps", "jumping", "move", "moves", "moving",
        ],
        description="Action verbs",
    )
    transition_type_words: List[str] = Field(
        default_factory=lambda: ["전환", "컷", "페이드"],
        description="Words that mark a scene as a transition",
    )

    @classmethod
    def from_yaml(cls, path: Path) -> "KeywordSet":
        """Load a keyword set from a YAML file. Missing lists keep their defaults."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def compile(self) -> CompiledKeywords:
        """Compile every list into a regex."""
        return CompiledKeywords(
            transition=_compile(self.transition_words),
            scene_marker=_compile(self.scene_markers),
            dialogue=_compile(self.dialogue_markers),
            action=_compile(self.action_words),
            transition_type=_compile(self.transition_type_words),
        )


DEFAULT_KEYWORDS = KeywordSet()
