"""Shared test fixtures."""

from typing import List

import pytest

from scenesplit.models import Scenario, ScenarioMetadata, Scene, SceneType
from scenesplit.splitter import SceneSplitter, SplitAdapter, sequential_ids
from scenesplit.splitter.adapter import SceneSplitRequest


SAMPLE_STORY = """The city wakes up slowly under a grey sky.

Mina opens the cafe and starts the coffee machine.

Meanwhile, across town, Joon is late for the interview.

Joon: I can't miss this train!

He starts running toward the station as the doors close.

CUT TO the interview room, where the panel waits in silence."""


def make_scene(
    scene_id: str,
    duration: float,
    description: str = "Some text.",
    title: str = "",
    **kwargs,
) -> Scene:
    """Build a scene with sensible defaults."""
    return Scene(
        id=scene_id,
        title=title or scene_id or "",
        description=description,
        duration=duration,
        **kwargs,
    )


class StaticAdapter(SplitAdapter):
    """Adapter returning a fixed scene list."""

    def __init__(self, scenes: List[Scene]) -> None:
        self.scenes = scenes
        self.requests: List[SceneSplitRequest] = []

    async def split(self, request: SceneSplitRequest) -> List[Scene]:
        self.requests.append(request)
        return [scene.model_copy(deep=True) for scene in self.scenes]


class FailingAdapter(SplitAdapter):
    """Adapter that always raises."""

    def __init__(self) -> None:
        self.calls = 0

    async def split(self, request: SceneSplitRequest) -> List[Scene]:
        self.calls += 1
        raise RuntimeError("backend unavailable")


@pytest.fixture
def sample_story() -> str:
    """A six-paragraph story with transitions, dialogue and action."""
    return SAMPLE_STORY


@pytest.fixture
def splitter() -> SceneSplitter:
    """Rule-only splitter with deterministic ids."""
    return SceneSplitter(id_factory=sequential_ids())


@pytest.fixture
def ai_scenes() -> List[Scene]:
    """Scenes as an AI backend would return them: no ids, no order."""
    return [
        Scene(type=SceneType.DIALOGUE, title="Opening", description="Mina opens the cafe.", duration=30),
        Scene(type=SceneType.ACTION, title="The run", description="Joon runs for the train.", duration=40),
        Scene(type=SceneType.TRANSITION, title="Interview", description="The panel waits.", duration=20),
    ]


@pytest.fixture
def sample_scenario() -> Scenario:
    """A three-scene scenario."""
    return Scenario(
        metadata=ScenarioMetadata(id="scenario-1", title="Morning"),
        scenes=[
            make_scene("s1", 30, "Mina opens the cafe.", title="Cafe", order=1),
            make_scene("s2", 40, "Joon runs for the train.", title="Train", order=2,
                       dialogue="Wait for me!"),
            make_scene("s3", 20, "The panel waits.", title="Interview", order=3,
                       action_description="Joon bursts in."),
        ],
    )
