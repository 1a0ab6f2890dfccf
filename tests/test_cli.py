"""Tests for the command line interface."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from scenesplit import __version__
from scenesplit.cli import app
from scenesplit.models import Scenario

runner = CliRunner()


@pytest.fixture
def story_file(tmp_path: Path, sample_story: str) -> Path:
    path = tmp_path / "story.txt"
    path.write_text(sample_story, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_keywords_file(monkeypatch):
    from scenesplit.config import config

    monkeypatch.setattr(config, "keywords_file", None)


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_split_writes_scenario(tmp_path: Path, story_file: Path):
    output = tmp_path / "out" / "scenario.yaml"
    result = runner.invoke(app, ["split", str(story_file), "--no-ai", "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Scenario saved" in result.output

    scenario = Scenario.from_yaml(output)
    assert scenario.metadata.title == "story"
    assert [s.order for s in scenario.scenes] == [1, 2, 3]


def test_split_rejects_inconsistent_durations(tmp_path: Path, story_file: Path):
    result = runner.invoke(
        app,
        ["split", str(story_file), "--no-ai", "--min-duration", "100", "--max-duration", "50",
         "-o", str(tmp_path / "scenario.yaml")],
    )

    assert result.exit_code == 1
    assert "Invalid options" in result.output


def test_split_without_api_key_uses_rules(tmp_path: Path, story_file: Path, monkeypatch):
    from scenesplit.config import config

    monkeypatch.setattr(config, "anthropic_api_key", "")
    monkeypatch.setattr(config, "use_ai", True)
    result = runner.invoke(app, ["split", str(story_file), "-o", str(tmp_path / "scenario.yaml")])

    assert result.exit_code == 0, result.output
    assert "ANTHROPIC_API_KEY not set" in result.output
    assert "Method: rule_based" in result.output


def test_resplit_overwrites_scenario(tmp_path: Path, story_file: Path):
    path = tmp_path / "scenario.yaml"
    runner.invoke(app, ["split", str(story_file), "--no-ai", "-o", str(path)])
    original = Scenario.from_yaml(path)

    result = runner.invoke(app, ["resplit", "-s", str(path), "-t", "2", "--no-ai"])

    assert result.exit_code == 0, result.output
    resplit = Scenario.from_yaml(path)
    assert resplit.metadata.id == original.metadata.id
    assert [s.order for s in resplit.scenes] == list(range(1, len(resplit.scenes) + 1))


def test_resplit_failure_leaves_file(tmp_path: Path, story_file: Path):
    path = tmp_path / "scenario.yaml"
    runner.invoke(app, ["split", str(story_file), "--no-ai", "-o", str(path)])
    before = path.read_text(encoding="utf-8")

    result = runner.invoke(app, ["resplit", "-s", str(path), "-t", "0", "--no-ai"])

    assert result.exit_code == 1
    assert "scenario left unchanged" in result.output
    assert path.read_text(encoding="utf-8") == before


def test_analyze(story_file: Path):
    result = runner.invoke(app, ["analyze", str(story_file), "--duration", "400"])

    assert result.exit_code == 0
    assert "Paragraphs: 6" in result.output
    assert "Suggested strategy: duration_based" in result.output


def test_status(tmp_path: Path, story_file: Path):
    path = tmp_path / "scenario.yaml"
    runner.invoke(app, ["split", str(story_file), "--no-ai", "-o", str(path)])

    result = runner.invoke(app, ["status", "-s", str(path)])

    assert result.exit_code == 0
    assert "Scenes: 3" in result.output
    assert "Total duration: 108.0s" in result.output


def test_status_missing_file(tmp_path: Path):
    result = runner.invoke(app, ["status", "-s", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "No scenario found" in result.output
