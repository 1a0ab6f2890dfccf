"""Tests for data models and keyword sets."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from scenesplit.models import (
    Scenario,
    ScenarioMetadata,
    Scene,
    SceneSplitOptions,
    SceneType,
    SplitStrategy,
)
from scenesplit.splitter import KeywordSet


class TestSceneSplitOptions:
    """Tests for option defaults and validation."""

    def test_defaults(self):
        options = SceneSplitOptions()

        assert options.strategy == SplitStrategy.HYBRID
        assert options.use_ai is True
        assert options.fallback_to_rule_based is True
        assert options.preserve_dialogue is False
        assert options.min_scene_duration == 10
        assert options.max_scene_duration == 120
        assert options.target_scene_count == 5

    def test_min_above_max_is_rejected(self):
        with pytest.raises(ValidationError, match="must not exceed"):
            SceneSplitOptions(min_scene_duration=60, max_scene_duration=30)

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_target_is_rejected(self, count):
        with pytest.raises(ValidationError):
            SceneSplitOptions(target_scene_count=count)

    def test_strategy_from_string(self):
        assert SceneSplitOptions(strategy="content_based").strategy == SplitStrategy.CONTENT_BASED


class TestScene:
    """Tests for the Scene model."""

    def test_defaults(self):
        scene = Scene(description="Text")

        assert scene.id is None
        assert scene.type == SceneType.DIALOGUE
        assert scene.characters == []

    def test_unknown_type_is_rejected(self):
        with pytest.raises(ValidationError):
            Scene(type="flashback")

    def test_negative_duration_is_rejected(self):
        with pytest.raises(ValidationError):
            Scene(duration=-1)


class TestScenario:
    """Tests for Scenario YAML persistence."""

    def test_yaml_round_trip_keeps_korean_text(self, tmp_path: Path, sample_scenario):
        sample_scenario.scenes[0].notes = "자동 분할된 씬"
        path = tmp_path / "scenario.yaml"
        sample_scenario.to_yaml(path)

        assert "자동 분할된 씬" in path.read_text(encoding="utf-8")
        loaded = Scenario.from_yaml(path)
        assert loaded.scenes == sample_scenario.scenes
        assert loaded.metadata.id == "scenario-1"

    def test_total_duration(self, sample_scenario):
        assert sample_scenario.total_duration == 90

    def test_metadata_requires_id(self):
        with pytest.raises(ValidationError):
            ScenarioMetadata()


class TestKeywordSet:
    """Tests for keyword configuration."""

    def test_from_yaml_overrides_some_lists(self, tmp_path: Path):
        path = tmp_path / "keywords.yaml"
        path.write_text("transition_words:\n  - Later\n", encoding="utf-8")

        keywords = KeywordSet.from_yaml(path)

        assert keywords.transition_words == ["Later"]
        assert "CUT TO" in keywords.scene_markers

    def test_empty_yaml_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "keywords.yaml"
        path.write_text("", encoding="utf-8")

        assert KeywordSet.from_yaml(path) == KeywordSet()

    def test_ascii_keywords_match_whole_words(self):
        patterns = KeywordSet(action_words=["run"]).compile()

        assert patterns.action.search("They RUN away")
        assert not patterns.action.search("A rerun of the show")

    def test_hangul_keywords_match_substrings(self):
        patterns = KeywordSet().compile()
        assert patterns.transition.search("한편으로는 조용했다")

    def test_empty_list_never_matches(self):
        patterns = KeywordSet(dialogue_markers=[]).compile()
        assert not patterns.dialogue.search("Mina: hi")
