"""CLI entry point for the scene splitter."""

import asyncio
import logging
import uuid
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .config import config
from .models import Scenario, ScenarioMetadata, SceneSplitResult, SplitStrategy

app = typer.Typer(
    name="scene-splitter",
    help="Split stories into bounded, classified video scenes",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"scene-splitter version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Scene Splitter - turn stories into scenes that fit duration limits."""
    pass


def _build_splitter(use_ai: bool):
    """Create a SceneSplitter, wiring in Claude when AI is wanted and configured."""
    from .splitter import AgentSplitAdapter, SceneSplitter

    try:
        keywords = config.load_keywords()
    except Exception as e:
        typer.echo(f"❌ Error loading keywords: {e}")
        raise typer.Exit(1)

    adapter = None
    if use_ai:
        if not config.anthropic_api_key:
            typer.echo("⚠️  ANTHROPIC_API_KEY not set, using rule-based splitting only")
        else:
            from .agents import SceneSplitAgent

            agent = SceneSplitAgent()
            typer.echo(f"   Using model: {agent.model}")
            adapter = AgentSplitAdapter(agent)

    return SceneSplitter(adapter=adapter, keywords=keywords)


def _print_result(result: SceneSplitResult) -> None:
    for warning in result.warnings:
        typer.echo(f"⚠️  {warning}")

    typer.echo(f"\n📋 Summary:")
    typer.echo(f"   Method: {result.metadata.split_method.value}")
    typer.echo(f"   Scenes: {result.metadata.actual_scene_count} (target {result.metadata.target_scene_count})")
    typer.echo(f"   Average duration: {result.metadata.average_scene_duration:.1f}s")

    typer.echo(f"\n📽️  Scene breakdown:")
    for scene in result.scenes:
        typer.echo(f"   {scene.order}. [{scene.type.value}] {scene.title} - {scene.duration:.1f}s")


def _save_scenario(scenario: Scenario, output: Path) -> None:
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        scenario.to_yaml(output)
        typer.echo(f"\n✅ Scenario saved: {output}")
    except Exception as e:
        typer.echo(f"❌ Error saving scenario: {e}")
        raise typer.Exit(1)


@app.command()
def split(
    story: Path = typer.Argument(
        ...,
        help="Path to the story text file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    strategy: SplitStrategy = typer.Option(
        SplitStrategy.HYBRID,
        "--strategy",
        help="Breakpoint strategy"
    ),
    target: Optional[int] = typer.Option(
        None,
        "--target",
        "-t",
        help="Target number of scenes",
        min=1
    ),
    min_duration: Optional[float] = typer.Option(
        None,
        "--min-duration",
        help="Minimum scene duration in seconds"
    ),
    max_duration: Optional[float] = typer.Option(
        None,
        "--max-duration",
        help="Maximum scene duration in seconds"
    ),
    no_ai: bool = typer.Option(
        False,
        "--no-ai",
        help="Skip AI splitting"
    ),
    no_fallback: bool = typer.Option(
        False,
        "--no-fallback",
        help="Fail instead of falling back to rules when AI splitting fails"
    ),
    preserve_dialogue: bool = typer.Option(
        False,
        "--preserve-dialogue",
        help="Extract 'Speaker: line' dialogue and characters"
    ),
    title: Optional[str] = typer.Option(
        None,
        "--title",
        help="Scenario title (defaults to the file name)"
    ),
    output: Path = typer.Option(
        Path("scenario.yaml"),
        "--output",
        "-o",
        help="Output scenario file path"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Split a story text file into scenes."""
    setup_logging(verbose)
    typer.echo(f"🎬 Splitting: {story}")

    try:
        options = config.split_options(
            strategy=strategy,
            use_ai=False if no_ai else None,
            fallback_to_rule_based=not no_fallback,
            preserve_dialogue=preserve_dialogue,
            min_scene_duration=min_duration,
            max_scene_duration=max_duration,
            target_scene_count=target,
        )
    except ValueError as e:
        typer.echo(f"❌ Invalid options: {e}")
        raise typer.Exit(1)

    typer.echo(f"   Strategy: {options.strategy.value}")
    typer.echo(f"   Duration bounds: {options.min_scene_duration:g}-{options.max_scene_duration:g}s")

    splitter = _build_splitter(options.use_ai)
    result = asyncio.run(splitter.split_story(story.read_text(encoding="utf-8"), options))

    if not result.success:
        typer.echo(f"❌ Error splitting story: {result.error}")
        raise typer.Exit(1)

    _print_result(result)

    scenario = Scenario(
        metadata=ScenarioMetadata(id=uuid.uuid4().hex, title=title or story.stem),
        scenes=result.scenes,
    )
    _save_scenario(scenario, output)


@app.command()
def resplit(
    scenario_file: Path = typer.Option(
        Path("scenario.yaml"),
        "--scenario",
        "-s",
        help="Path to scenario YAML file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    target: int = typer.Option(
        ...,
        "--target",
        "-t",
        help="New target number of scenes"
    ),
    no_ai: bool = typer.Option(
        False,
        "--no-ai",
        help="Skip AI splitting"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path (defaults to overwriting the scenario)"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Re-split an existing scenario into a new number of scenes."""
    setup_logging(verbose)
    typer.echo(f"🔁 Re-splitting {scenario_file} into {target} scenes")

    try:
        scenario = Scenario.from_yaml(scenario_file)
        options = config.split_options(use_ai=False if no_ai else None)
    except Exception as e:
        typer.echo(f"❌ Error loading scenario: {e}")
        raise typer.Exit(1)

    splitter = _build_splitter(options.use_ai)
    result = asyncio.run(splitter.resplit_scenario(scenario, target, options))

    if not result.success:
        typer.echo(f"❌ Re-split failed, scenario left unchanged: {result.error}")
        raise typer.Exit(1)

    _print_result(result)

    resplit_scenario = scenario.model_copy(update={"scenes": result.scenes})
    _save_scenario(resplit_scenario, output or scenario_file)


@app.command()
def analyze(
    story: Path = typer.Argument(
        ...,
        help="Path to the story text file",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    duration: float = typer.Option(
        60,
        "--duration",
        "-d",
        help="Target video duration in seconds",
        min=1
    ),
) -> None:
    """Show text statistics and the suggested split strategy."""
    from .splitter import analyze_text, suggest_split_strategy

    text = story.read_text(encoding="utf-8")
    analysis = analyze_text(text)

    typer.echo(f"📊 Analysis of {story}")
    typer.echo(f"   Paragraphs: {analysis.paragraph_count}")
    typer.echo(f"   Sentences: {analysis.sentence_count}")
    typer.echo(f"   Words: {analysis.word_count}")
    typer.echo(f"   Words per sentence: {analysis.average_words_per_sentence:.1f}")
    typer.echo(f"   Complexity: {analysis.complexity_score:.1f}/100")
    typer.echo(f"   Recommended scenes: {analysis.recommended_scene_count}")
    typer.echo(f"   Suggested strategy: {suggest_split_strategy(text, duration).value}")


@app.command()
def status(
    scenario_file: Path = typer.Option(
        Path("scenario.yaml"),
        "--scenario",
        "-s",
        help="Path to scenario YAML file",
        exists=False,
        file_okay=True,
        dir_okay=False
    )
) -> None:
    """Show scenario status."""
    if not scenario_file.exists():
        typer.echo(f"❌ No scenario found at {scenario_file}")
        typer.echo("   Run 'scene-splitter split' to create one")
        raise typer.Exit(1)

    try:
        scenario = Scenario.from_yaml(scenario_file)
    except Exception as e:
        typer.echo(f"❌ Error loading scenario: {e}")
        raise typer.Exit(1)

    typer.echo(f"📁 Scenario: {scenario.metadata.title or scenario.metadata.id}")
    typer.echo(f"   Scenes: {len(scenario.scenes)}")
    typer.echo(f"   Total duration: {scenario.total_duration:.1f}s")

    typer.echo("\n📽️  Scenes:")
    for scene in scenario.scenes:
        typer.echo(f"   {scene.order}. [{scene.type.value}] {scene.title}: {scene.duration:.1f}s")
        if scene.notes:
            typer.echo(f"      → {scene.notes}")


if __name__ == "__main__":
    app()
