"""Breakpoint finders.

Every finder works on a paragraph list and returns the sorted, de-duplicated
indices where a new scene starts. Index 0 is never a breakpoint and neither
is any index at or past the end of the list.
"""

import math
import re
from typing import Iterable, List, Optional

from ..models import SplitStrategy
from .keywords import DEFAULT_KEYWORDS, CompiledKeywords, KeywordSet

PARAGRAPH_SEPARATOR = re.compile(r"\n\s*\n")


def split_paragraphs(text: str) -> List[str]:
    """Split text on blank lines."""
    return PARAGRAPH_SEPARATOR.split(text)


def _normalize(indices: Iterable[int], paragraph_count: int) -> List[int]:
    return sorted({i for i in indices if 0 < i < paragraph_count})


def _patterns(keywords: Optional[KeywordSet]) -> CompiledKeywords:
    return (keywords or DEFAULT_KEYWORDS).compile()


def find_natural_breaks(
    paragraphs: List[str], keywords: Optional[KeywordSet] = None
) -> List[int]:
    """Break after paragraphs containing transition words or scene markers."""
    patterns = _patterns(keywords)
    breaks = []
    for index, paragraph in enumerate(paragraphs):
        if patterns.transition.search(paragraph) or patterns.scene_marker.search(paragraph):
            breaks.append(index + 1)
    return _normalize(breaks, len(paragraphs))


def find_duration_based_splits(paragraphs: List[str], target_count: int) -> List[int]:
    """Evenly spaced breaks that yield `target_count` segments."""
    if target_count <= 0:
        raise ValueError(f"target_count must be positive, got {target_count}")
    segment_size = math.ceil(len(paragraphs) / target_count)
    return _normalize(range(segment_size, len(paragraphs), segment_size), len(paragraphs))


def find_content_based_splits(
    paragraphs: List[str], keywords: Optional[KeywordSet] = None
) -> List[int]:
    """Break before dialogue paragraphs and after action paragraphs."""
    patterns = _patterns(keywords)
    breaks = []
    for index, paragraph in enumerate(paragraphs):
        if patterns.dialogue.search(paragraph):
            breaks.append(index)
        if patterns.action.search(paragraph):
            breaks.append(index + 1)
    return _normalize(breaks, len(paragraphs))


def find_hybrid_breaks(
    paragraphs: List[str], keywords: Optional[KeywordSet] = None
) -> List[int]:
    """Union of natural and content-based breaks."""
    natural = find_natural_breaks(paragraphs, keywords)
    content = find_content_based_splits(paragraphs, keywords)
    return _normalize(natural + content, len(paragraphs))


def find_breakpoints(
    paragraphs: List[str],
    strategy: SplitStrategy,
    target_count: int,
    keywords: Optional[KeywordSet] = None,
) -> List[int]:
    """Dispatch to the finder for `strategy`.

    `ai_guided` has no rule of its own and uses the hybrid union.
    """
    if strategy == SplitStrategy.NATURAL_BREAKS:
        return find_natural_breaks(paragraphs, keywords)
    if strategy == SplitStrategy.DURATION_BASED:
        return find_duration_based_splits(paragraphs, target_count)
    if strategy == SplitStrategy.CONTENT_BASED:
        return find_content_based_splits(paragraphs, keywords)
    return find_hybrid_breaks(paragraphs, keywords)
