"""Tests for scene materialization."""

import pytest

from scenesplit.models import SceneType
from scenesplit.splitter import SceneMaterializer, sequential_ids, uuid_ids
from scenesplit.splitter.materializer import extract_dialogue


@pytest.fixture
def materializer() -> SceneMaterializer:
    return SceneMaterializer(min_duration=10, max_duration=120, id_factory=sequential_ids())


class TestCreateScene:
    """Tests for SceneMaterializer.create_scene."""

    def test_dialogue_scene(self, materializer):
        scene = materializer.create_scene("Joon: hello there", 1)

        assert scene.id == "scene_1"
        assert scene.order == 1
        assert scene.type == SceneType.DIALOGUE
        assert scene.title == "Joon: hello there"
        assert scene.location == "스튜디오"
        assert scene.notes == "자동 분할된 씬 (3단어)"
        assert scene.action_description is None

    def test_duration_is_two_seconds_per_word(self, materializer):
        scene = materializer.create_scene(" ".join(["word"] * 20), 1)
        assert scene.duration == 40

    def test_duration_is_clamped(self, materializer):
        assert materializer.create_scene("Short.", 1).duration == 10
        assert materializer.create_scene(" ".join(["word"] * 100), 1).duration == 120

    def test_action_scene(self, materializer):
        text = "He starts running to the door"
        scene = materializer.create_scene(text, 2)

        assert scene.type == SceneType.ACTION
        assert scene.action_description == text

    def test_dialogue_wins_over_action(self, materializer):
        scene = materializer.create_scene("Joon: keep running!", 1)
        assert scene.type == SceneType.DIALOGUE

    def test_transition_scene(self, materializer):
        scene = materializer.create_scene("화면이 페이드 아웃되며 장면이 끝난다", 1)
        assert scene.type == SceneType.TRANSITION

    def test_default_type_is_dialogue(self, materializer):
        scene = materializer.create_scene("The room is quiet.", 1)
        assert scene.type == SceneType.DIALOGUE

    def test_title_uses_leading_sentence(self, materializer):
        scene = materializer.create_scene("The rain stops. Everyone leaves the square.", 1)
        assert scene.title == "The rain stops"

    def test_long_leading_sentence_falls_back_to_numbered_title(self, materializer):
        text = "This opening sentence is definitely far too long to be used as a title. Next."
        assert materializer.create_scene(text, 3).title == "씬 3"

    def test_preserve_dialogue_extracts_lines_and_speakers(self):
        materializer = SceneMaterializer(10, 120, preserve_dialogue=True)
        scene = materializer.create_scene("민수: 안녕\n지수: 반가워\n민수: 가자", 1)

        assert scene.dialogue == "민수: 안녕\n지수: 반가워\n민수: 가자"
        assert scene.characters == ["민수", "지수"]

    def test_dialogue_is_not_extracted_by_default(self, materializer):
        scene = materializer.create_scene("민수: 안녕", 1)

        assert scene.dialogue is None
        assert scene.characters == []


class TestMaterialize:
    """Tests for SceneMaterializer.materialize."""

    def test_one_scene_per_segment(self, materializer):
        scenes = materializer.materialize(["a", "b", "c", "d"], [1, 3])

        assert [s.description for s in scenes] == ["a", "b\n\nc", "d"]
        assert [s.order for s in scenes] == [1, 2, 3]
        assert [s.id for s in scenes] == ["scene_1", "scene_2", "scene_3"]

    def test_blank_segments_are_skipped(self, materializer):
        scenes = materializer.materialize(["a", "  ", "b"], [1, 2])

        assert [s.description for s in scenes] == ["a", "b"]
        assert [s.order for s in scenes] == [1, 2]

    def test_no_breakpoints_gives_whole_text(self, materializer):
        scenes = materializer.materialize(["a", "b"], [])
        assert [s.description for s in scenes] == ["a\n\nb"]

    def test_empty_text_gives_default_scene(self, materializer):
        scenes = materializer.materialize([""], [])

        assert len(scenes) == 1
        scene = scenes[0]
        assert scene.title == "전체 스토리"
        assert scene.duration == 60
        assert scene.characters == ["나레이터"]
        assert scene.notes == "분할되지 않은 전체 스토리"
        assert scene.order == 1


class TestHelpers:
    """Tests for id factories and dialogue extraction."""

    def test_sequential_ids_are_independent(self):
        first, second = sequential_ids("a"), sequential_ids("b")
        assert [first(), first(), second()] == ["a_1", "a_2", "b_1"]

    def test_uuid_ids_are_unique(self):
        next_id = uuid_ids()
        ids = {next_id() for _ in range(50)}
        assert len(ids) == 50
        assert all(i.startswith("scene_") for i in ids)

    def test_extract_dialogue_skips_field_labels(self):
        dialogue, speakers = extract_dialogue("[제목: Cafe] 대사: Hello\nMina: Hi")

        assert speakers == ["Mina"]
        assert "Mina: Hi" in dialogue

    def test_extract_dialogue_without_lines(self):
        assert extract_dialogue("No one speaks.") == (None, [])
