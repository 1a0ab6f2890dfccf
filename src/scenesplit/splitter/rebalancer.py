"""Rebalancing pass that forces scenes into duration and count bounds.

Stages run in a fixed order:

1. merge-short: fold scenes shorter than the minimum into their neighbour.
2. split-long: cut scenes longer than the maximum into equal parts.
3. merge-excess: bucket scenes down to the target count when there are
   more than 1.5x the target.

A final clamp forces every duration into [min, max]. Order is renumbered
after each stage. Input scenes are never mutated and the output depends
only on the input.
"""

import logging
import math
import re
from typing import List, Optional

from ..models import Scene
from .breakpoints import split_paragraphs

logger = logging.getLogger(__name__)

EXCESS_RATIO = 1.5
SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")


def _renumber(scenes: List[Scene]) -> List[Scene]:
    for index, scene in enumerate(scenes):
        scene.order = index + 1
    return scenes


def _append_note(notes: Optional[str], note: str) -> str:
    return f"{notes or ''} {note}".strip()


def _unique(values: List[str]) -> List[str]:
    seen: List[str] = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def merge_scenes(scenes: List[Scene]) -> Scene:
    """Merge consecutive scenes into one.

    The first scene supplies id, type and location. Descriptions are joined
    by blank lines, titles by " & ", dialogue by newlines; durations are
    summed; character and visual element lists are unioned in order.
    """
    if len(scenes) == 1:
        return scenes[0].model_copy(deep=True)

    dialogues = [s.dialogue for s in scenes if s.dialogue]
    actions = [s.action_description for s in scenes if s.action_description]

    merged = scenes[0].model_copy(deep=True)
    merged.title = " & ".join(s.title for s in scenes)
    merged.description = "\n\n".join(s.description for s in scenes)
    merged.duration = sum(s.duration for s in scenes)
    merged.dialogue = "\n".join(dialogues) if dialogues else None
    merged.action_description = "\n\n".join(actions) if actions else None
    merged.characters = _unique([c for s in scenes for c in s.characters])
    merged.visual_elements = _unique([v for s in scenes for v in s.visual_elements])
    merged.notes = f"병합된 씬 ({len(scenes)}개 씬)"
    return merged


def merge_short_scenes(scenes: List[Scene], min_duration: float) -> List[Scene]:
    """Fold each short scene into the running accumulator.

    A scene joins the previous group when it is shorter than `min_duration`
    or when the group so far is. The first scene always opens a group, so
    only a lone scene whose whole input is too short can stay below the
    minimum.
    """
    groups: List[List[Scene]] = []
    group_duration = 0.0

    for scene in scenes:
        if groups and (scene.duration < min_duration or group_duration < min_duration):
            groups[-1].append(scene)
            group_duration += scene.duration
        else:
            groups.append([scene])
            group_duration = scene.duration

    merged = [merge_scenes(group) for group in groups]
    if len(merged) < len(scenes):
        logger.debug(f"Merged {len(scenes)} scenes into {len(merged)} (min {min_duration}s)")
    return _renumber(merged)


def _split_units(text: str, count: int) -> tuple[List[str], str]:
    """Break text into at least `count` units if possible.

    Tries paragraphs, then sentences, then words; words are the last resort
    even when there are fewer than `count`. Returns the units and the
    separator used to join them back.
    """
    paragraphs = [p for p in split_paragraphs(text) if p.strip()]
    if len(paragraphs) >= count:
        return paragraphs, "\n\n"

    sentences = [s for s in SENTENCE_SPLIT.split(text.strip()) if s.strip()]
    if len(sentences) >= count:
        return sentences, " "

    return text.split() or [text], " "


def split_long_scenes(scenes: List[Scene], max_duration: float) -> List[Scene]:
    """Cut every scene longer than `max_duration` into ceil(duration/max) parts.

    Each part gets an equal share of the duration, an id suffixed
    `_split_{i}` and a title suffixed ` (파트 {i+1})`. A scene whose text has
    fewer units than parts is cut into as many parts as it has units; a
    scene with a single unit is kept whole.
    """
    result: List[Scene] = []

    for scene in scenes:
        if scene.duration <= max_duration:
            result.append(scene.model_copy(deep=True))
            continue

        wanted = math.ceil(scene.duration / max_duration)
        units, separator = _split_units(scene.description, wanted)
        split_count = min(wanted, len(units))

        if split_count <= 1:
            logger.warning(
                f"Scene {scene.id} ({scene.duration:.1f}s) cannot be split further, keeping it whole"
            )
            result.append(scene.model_copy(deep=True))
            continue

        split_duration = scene.duration / split_count
        for i in range(split_count):
            start = i * len(units) // split_count
            end = (i + 1) * len(units) // split_count
            part = scene.model_copy(deep=True)
            part.id = f"{scene.id}_split_{i}"
            part.title = f"{scene.title} (파트 {i + 1})"
            part.description = separator.join(units[start:end])
            part.duration = split_duration
            part.notes = _append_note(scene.notes, f"(긴 씬 분할 {i + 1}/{split_count})")
            result.append(part)

        logger.debug(f"Split scene {scene.id} into {split_count} parts of {split_duration:.1f}s")

    return _renumber(result)


def merge_excess_scenes(scenes: List[Scene], target_count: int) -> List[Scene]:
    """Bucket scenes down to `target_count` consecutive groups."""
    if len(scenes) <= target_count:
        return _renumber([s.model_copy(deep=True) for s in scenes])

    result = []
    for i in range(target_count):
        start = i * len(scenes) // target_count
        end = (i + 1) * len(scenes) // target_count
        bucket = scenes[start:end]
        if bucket:
            result.append(merge_scenes(bucket))

    logger.debug(f"Merged {len(scenes)} scenes down to {len(result)}")
    return _renumber(result)


def clamp_durations(scenes: List[Scene], min_duration: float, max_duration: float) -> List[Scene]:
    """Force every duration into [min_duration, max_duration]."""
    result = []
    for scene in scenes:
        scene = scene.model_copy(deep=True)
        clamped = max(min_duration, min(max_duration, scene.duration))
        if clamped != scene.duration:
            scene.notes = _append_note(
                scene.notes, f"(지속시간 조정 {scene.duration:.1f}초 → {clamped:.1f}초)"
            )
            scene.duration = clamped
        result.append(scene)
    return _renumber(result)


def rebalance(
    scenes: List[Scene],
    min_duration: float,
    max_duration: float,
    target_count: int,
) -> List[Scene]:
    """Run merge-short, split-long and merge-excess, then clamp durations."""
    adjusted = merge_short_scenes(scenes, min_duration)
    adjusted = split_long_scenes(adjusted, max_duration)

    if len(adjusted) > target_count * EXCESS_RATIO:
        adjusted = merge_excess_scenes(adjusted, target_count)

    return clamp_durations(adjusted, min_duration, max_duration)
