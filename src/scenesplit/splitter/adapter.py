"""Boundary to an external AI backend that can split a story on its own."""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List

from ..exceptions import AISplitError
from ..models import Scene

if TYPE_CHECKING:
    from ..agents.scene_split import SceneSplitAgent

logger = logging.getLogger(__name__)


@dataclass
class SceneSplitRequest:
    """What the AI backend is asked for."""

    story_text: str
    target_scene_count: int
    max_scene_duration: float


class SplitAdapter(ABC):
    """An AI backend returning a ready-made scene list.

    Returned scenes carry no id or order; the splitter assigns both. The
    splitter calls `split` at most once per request and never retries.
    """

    @abstractmethod
    async def split(self, request: SceneSplitRequest) -> List[Scene]:
        """Split the story, raising on any failure."""
        ...


class AgentSplitAdapter(SplitAdapter):
    """Runs the Claude-backed SceneSplitAgent in a worker thread."""

    def __init__(self, agent: "SceneSplitAgent") -> None:
        self._agent = agent

    async def split(self, request: SceneSplitRequest) -> List[Scene]:
        try:
            return await asyncio.to_thread(self._agent.run, request)
        except Exception as e:
            logger.debug(f"{self._agent.name} failed: {e}")
            raise AISplitError(str(e)) from e
