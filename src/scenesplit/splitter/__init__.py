"""Scene splitting and rebalancing engine."""

from .adapter import AgentSplitAdapter, SceneSplitRequest, SplitAdapter
from .analyzer import analyze_text, suggest_split_strategy
from .breakpoints import (
    find_breakpoints,
    find_content_based_splits,
    find_duration_based_splits,
    find_hybrid_breaks,
    find_natural_breaks,
    split_paragraphs,
)
from .engine import SceneSplitter, scenario_to_text
from .keywords import DEFAULT_KEYWORDS, KeywordSet
from .materializer import SceneMaterializer, sequential_ids, uuid_ids
from .rebalancer import (
    clamp_durations,
    merge_excess_scenes,
    merge_scenes,
    merge_short_scenes,
    rebalance,
    split_long_scenes,
)

__all__ = [
    "AgentSplitAdapter",
    "SceneSplitRequest",
    "SplitAdapter",
    "analyze_text",
    "suggest_split_strategy",
    "find_breakpoints",
    "find_content_based_splits",
    "find_duration_based_splits",
    "find_hybrid_breaks",
    "find_natural_breaks",
    "split_paragraphs",
    "SceneSplitter",
    "scenario_to_text",
    "DEFAULT_KEYWORDS",
    "KeywordSet",
    "SceneMaterializer",
    "sequential_ids",
    "uuid_ids",
    "clamp_durations",
    "merge_excess_scenes",
    "merge_scenes",
    "merge_short_scenes",
    "rebalance",
    "split_long_scenes",
]
