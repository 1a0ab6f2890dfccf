"""Coarse text statistics used to pick a split strategy."""

import math
import re

from ..models import SplitStrategy, TextAnalysis
from .breakpoints import split_paragraphs


def analyze_text(text: str) -> TextAnalysis:
    """Compute sentence, word and paragraph statistics for a text."""
    sentences = [s for s in re.split(r"[.!?]+", text) if s.strip()]
    word_count = len(text.split())
    paragraph_count = len(split_paragraphs(text))

    average = word_count / len(sentences) if sentences else 0.0
    complexity = min(100.0, (len(sentences) * 2 + word_count * 0.1) / 10)
    recommended = max(3, min(12, math.ceil(paragraph_count / 3)))

    return TextAnalysis(
        sentence_count=len(sentences),
        word_count=word_count,
        paragraph_count=paragraph_count,
        average_words_per_sentence=average,
        complexity_score=complexity,
        recommended_scene_count=recommended,
    )


def suggest_split_strategy(text: str, target_duration: float) -> SplitStrategy:
    """Suggest a strategy for a text and a target video length in seconds."""
    analysis = analyze_text(text)

    if analysis.complexity_score > 70:
        return SplitStrategy.AI_GUIDED
    if target_duration > 300:
        return SplitStrategy.DURATION_BASED
    if analysis.paragraph_count > 10:
        return SplitStrategy.CONTENT_BASED
    return SplitStrategy.NATURAL_BREAKS
