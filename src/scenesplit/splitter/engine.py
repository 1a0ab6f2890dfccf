"""Scene splitting orchestrator."""

import logging
from typing import List, Optional

from ..models import (
    Scenario,
    Scene,
    SceneSplitOptions,
    SceneSplitResult,
    SplitMetadata,
    SplitMethod,
    SplitStrategy,
)
from .adapter import SceneSplitRequest, SplitAdapter
from .analyzer import analyze_text
from .breakpoints import find_breakpoints, split_paragraphs
from .keywords import KeywordSet
from .materializer import IdFactory, SceneMaterializer, uuid_ids
from .rebalancer import rebalance

logger = logging.getLogger(__name__)

AI_FALLBACK_WARNING = "AI 분할에 실패하여 규칙 기반 분할을 사용하였습니다."
AI_EMPTY_WARNING = "AI 분할 결과가 비어 있어 규칙 기반 분할을 사용하였습니다."
SPLIT_FAILED_MESSAGE = "씬 분할 중 알 수 없는 오류가 발생했습니다."
RESPLIT_FAILED_MESSAGE = "시나리오 재분할 중 오류가 발생했습니다."


def scenario_to_text(scenario: Scenario) -> str:
    """Flatten a scenario's scenes into one text, one paragraph per scene."""
    blocks = []
    for scene in scenario.scenes:
        parts = []
        if scene.title:
            parts.append(f"[제목: {scene.title}]")
        if scene.description:
            parts.append(scene.description)
        if scene.dialogue:
            parts.append(f"대사: {scene.dialogue}")
        if scene.action_description:
            parts.append(f"액션: {scene.action_description}")
        blocks.append(" ".join(parts))
    return "\n\n".join(blocks)


class SceneSplitter:
    """Splits story text into ordered, bounded scenes.

    Optionally asks an AI backend first, falls back to rule-based
    breakpoints, then rebalances the scenes to respect the duration bounds
    and target count. `split_story` never raises: failures come back as a
    result with `success=False`.
    """

    def __init__(
        self,
        adapter: Optional[SplitAdapter] = None,
        keywords: Optional[KeywordSet] = None,
        id_factory: Optional[IdFactory] = None,
    ) -> None:
        """Initialize the splitter.

        Args:
            adapter: AI backend. Without one, AI splitting is never attempted.
            keywords: Heuristic keyword sets. Defaults to the built-in lists.
            id_factory: Source of scene ids. Defaults to uuid-based ids.
        """
        self._adapter = adapter
        self._keywords = keywords
        self._id_factory = id_factory or uuid_ids()

    async def split_story(
        self,
        story_text: str,
        options: Optional[SceneSplitOptions] = None,
    ) -> SceneSplitResult:
        """Split a story into scenes."""
        options = options or SceneSplitOptions()

        try:
            logger.info(
                f"Splitting story ({len(story_text)} chars, strategy={options.strategy.value}, "
                f"target={options.target_scene_count})"
            )
            analysis = analyze_text(story_text)
            logger.debug(
                f"Text analysis: {analysis.paragraph_count} paragraphs, "
                f"{analysis.word_count} words, complexity {analysis.complexity_score:.1f}"
            )

            scenes: List[Scene] = []
            split_method = SplitMethod.RULE_BASED
            warnings: List[str] = []

            if self._should_try_ai(options):
                request = SceneSplitRequest(
                    story_text=story_text,
                    target_scene_count=options.target_scene_count,
                    max_scene_duration=options.max_scene_duration,
                )
                try:
                    scenes = await self._adapter.split(request)
                    split_method = SplitMethod.AI
                    logger.info(f"AI split returned {len(scenes)} scenes")
                except Exception as e:
                    logger.warning(f"AI split failed, falling back to rules: {e}")
                    if not options.fallback_to_rule_based:
                        raise
                    split_method = SplitMethod.HYBRID
                    warnings.append(AI_FALLBACK_WARNING)
                else:
                    if not scenes:
                        split_method = SplitMethod.HYBRID
                        warnings.append(AI_EMPTY_WARNING)

            if scenes:
                scenes = [self._prepare_ai_scene(scene, i) for i, scene in enumerate(scenes)]
            else:
                scenes = self.rule_based_split(story_text, options)

            scenes = rebalance(
                scenes,
                min_duration=options.min_scene_duration,
                max_duration=options.max_scene_duration,
                target_count=options.target_scene_count,
            )

            logger.info(
                f"Split complete: {len(scenes)} scenes via {split_method.value}, "
                f"{len(warnings)} warning(s)"
            )
            return SceneSplitResult(
                success=True,
                scenes=scenes,
                split_strategy=options.strategy,
                metadata=SplitMetadata(
                    original_text=story_text,
                    target_scene_count=options.target_scene_count,
                    actual_scene_count=len(scenes),
                    average_scene_duration=sum(s.duration for s in scenes) / len(scenes),
                    split_method=split_method,
                    analysis=analysis,
                ),
                warnings=warnings,
            )

        except Exception as e:
            message = str(e) or SPLIT_FAILED_MESSAGE
            logger.error(f"Scene split failed: {message}")
            return SceneSplitResult(
                success=False,
                scenes=[],
                split_strategy=options.strategy,
                metadata=SplitMetadata(
                    original_text=story_text,
                    target_scene_count=options.target_scene_count,
                    split_method=SplitMethod.RULE_BASED,
                ),
                error=message,
            )

    async def resplit_scenario(
        self,
        scenario: Scenario,
        new_target_count: int,
        options: Optional[SceneSplitOptions] = None,
    ) -> SceneSplitResult:
        """Re-split an existing scenario into `new_target_count` scenes.

        On failure the scenario's original scenes are returned unchanged.
        """
        options = options or SceneSplitOptions()

        try:
            resplit_options = SceneSplitOptions.model_validate(
                {**options.model_dump(), "target_scene_count": new_target_count}
            )
            result = await self.split_story(scenario_to_text(scenario), resplit_options)
            if not result.success:
                raise RuntimeError(result.error or RESPLIT_FAILED_MESSAGE)
            return result

        except Exception as e:
            message = str(e) or RESPLIT_FAILED_MESSAGE
            logger.error(f"Resplit of scenario {scenario.metadata.id} failed: {message}")
            return SceneSplitResult(
                success=False,
                scenes=scenario.scenes,
                split_strategy=SplitStrategy.HYBRID,
                metadata=SplitMetadata(
                    original_text="",
                    target_scene_count=new_target_count,
                    actual_scene_count=len(scenario.scenes),
                    split_method=SplitMethod.RULE_BASED,
                ),
                error=message,
            )

    def rule_based_split(self, text: str, options: SceneSplitOptions) -> List[Scene]:
        """Split with the breakpoint finder for `options.strategy`."""
        paragraphs = split_paragraphs(text)
        breakpoints = find_breakpoints(
            paragraphs,
            options.strategy,
            options.target_scene_count,
            self._keywords,
        )
        logger.debug(f"{len(breakpoints)} breakpoints over {len(paragraphs)} paragraphs")

        materializer = SceneMaterializer(
            min_duration=options.min_scene_duration,
            max_duration=options.max_scene_duration,
            keywords=self._keywords,
            id_factory=self._id_factory,
            preserve_dialogue=options.preserve_dialogue,
        )
        return materializer.materialize(paragraphs, breakpoints)

    def _should_try_ai(self, options: SceneSplitOptions) -> bool:
        if not options.use_ai:
            return False
        if options.strategy not in (SplitStrategy.AI_GUIDED, SplitStrategy.HYBRID):
            return False
        if self._adapter is None:
            logger.debug("No AI adapter configured, using rule-based split")
            return False
        return True

    def _prepare_ai_scene(self, scene: Scene, index: int) -> Scene:
        scene = scene.model_copy(deep=True)
        scene.id = self._id_factory()
        scene.order = index + 1
        if not scene.title:
            scene.title = f"씬 {index + 1}"
        return scene
