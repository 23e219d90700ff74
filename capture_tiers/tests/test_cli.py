from pathlib import Path

import pytest
from typer.testing import CliRunner

from ..src.app_cli import app
from ..src.utils import config


runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_logs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)


def invoke(*args: str):  # type: ignore[no-untyped-def]
    return runner.invoke(app, ["--log-level", "WARNING", *args])


def last_line(output: str) -> str:
    return output.strip().splitlines()[-1].strip()


def test_picture_size_medium() -> None:
    result = invoke("picture-size", "4000x3000", "2560x1920", "2048x1536", "1280x960", "--tier", "medium")
    assert result.exit_code == 0, result.output
    assert last_line(result.output) == "2560x1920"


def test_picture_size_uses_configured_default_tier(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config.settings, "default_tier", "small")
    result = invoke("picture-size", "4000x3000", "2560x1920", "2048x1536", "1280x960")
    assert result.exit_code == 0, result.output
    assert last_line(result.output) == "2048x1536"


def test_picture_size_all_tiers() -> None:
    result = invoke("picture-size", "4000x3000", "2560x1920", "2048x1536", "1280x960", "--all")
    assert result.exit_code == 0, result.output
    for expected in ("4000x3000", "2560x1920", "2048x1536"):
        assert expected in result.output


def test_picture_size_rejects_bad_size() -> None:
    result = invoke("picture-size", "4000x3000", "big")
    assert result.exit_code != 0


def test_video_quality_small_with_two_levels() -> None:
    result = invoke("video-quality", "--available", "1080p,720p", "--tier", "small")
    assert result.exit_code == 0, result.output
    assert last_line(result.output) == "720p"


def test_video_quality_none_available() -> None:
    result = invoke("video-quality", "--available", "", "--tier", "large")
    assert result.exit_code == 1
    assert "Could not find supported video qualities." in result.output


def test_video_quality_rejects_unknown_label() -> None:
    result = invoke("video-quality", "--available", "1080p,8k")
    assert result.exit_code != 0


def test_exposure() -> None:
    result = invoke("exposure", "--max", "6", "--min=-6", "--step", "0.5")
    assert result.exit_code == 0, result.output
    assert last_line(result.output) == "-6 -4 -2 0 2 4 6"


def test_exposure_rejects_zero_step() -> None:
    result = invoke("exposure", "--max", "6", "--min=-6", "--step", "0")
    assert result.exit_code != 0
    assert "--step must be greater than 0" in result.output


def test_version() -> None:
    result = invoke("version")
    assert result.exit_code == 0
    assert "capture-tiers" in result.output
