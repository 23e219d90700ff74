from __future__ import annotations

from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .core.capabilities import exposure_values
from .core.models import NoSupportedLevelError, QualityLevel, Size, Tier, VIDEO_QUALITIES
from .core.selector import select_picture_size, select_video_quality
from .utils.config import get_default_tier
from .utils.log import log_selection, setup_logging
from .utils.text_utils import format_size, parse_quality, parse_size


app = typer.Typer(add_completion=False, help="""
Capture tier selection tool.

Examples:
  capture-tiers picture-size 4000x3000 2000x1500 1600x1200 640x480 --tier medium
  capture-tiers video-quality --tier small --available 1080p,720p
  capture-tiers exposure --max 6 --min -6 --step 0.5
""")
console = Console()


@app.callback()
def main(log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG|INFO|WARNING|ERROR")) -> None:
    setup_logging(log_level)


def _parse_sizes(values: List[str]) -> List[Size]:
    sizes: List[Size] = []
    for value in values:
        size = parse_size(value)
        if size is None:
            raise typer.BadParameter(f"Invalid size: {value!r}, expected WxH")
        sizes.append(size)
    return sizes


def _parse_available(value: str) -> List[QualityLevel]:
    levels: List[QualityLevel] = []
    for label in (part for part in value.split(",") if part.strip()):
        level = parse_quality(label)
        if level is None:
            choices = "|".join(q.value for q in VIDEO_QUALITIES)
            raise typer.BadParameter(f"Unknown quality: {label!r}, expected {choices}")
        levels.append(level)
    return levels


@app.command("picture-size", help="""
Select the picture size for a tier from the sizes a device supports.

With --all, print the large, medium and small choice side by side.
""")
def picture_size(
    sizes: List[str] = typer.Argument(..., help="Supported sizes as WxH", metavar="SIZE ..."),
    tier: Optional[str] = typer.Option(None, "--tier", help="large|medium|small"),
    show_all: bool = typer.Option(False, "--all", help="Show all three tiers"),
) -> None:
    candidates = _parse_sizes(sizes)
    if show_all:
        table = Table(title="Picture sizes")
        table.add_column("tier")
        table.add_column("size")
        table.add_column("megapixels", justify="right")
        for t in Tier:
            size = select_picture_size(t, candidates)
            table.add_row(t.value, format_size(size), f"{size.area / 1_000_000:.1f}")
        console.print(table)
        return

    chosen = Tier.normalize(tier) if tier is not None else get_default_tier()
    size = select_picture_size(chosen, candidates)
    log_selection("picture size", chosen.value, format_size(size))
    console.print(format_size(size))


@app.command("video-quality", help="""
Select the video quality for a tier given the qualities a device can record.
""")
def video_quality(
    available: str = typer.Option(..., "--available", help="Comma separated list, e.g. 1080p,480p,qvga"),
    tier: Optional[str] = typer.Option(None, "--tier", help="large|medium|small"),
) -> None:
    supported = set(_parse_available(available))
    chosen = Tier.normalize(tier) if tier is not None else get_default_tier()
    try:
        level = select_video_quality(chosen, lambda q: q in supported)
    except NoSupportedLevelError as exc:
        console.print(f"[red]{exc.message}[/red]")
        raise typer.Exit(code=1)
    log_selection("video quality", chosen.value, level.value)
    console.print(level.value)


@app.command(help="Print the exposure compensation values a device offers.")
def exposure(
    max_compensation: int = typer.Option(..., "--max", help="Maximum exposure compensation index"),
    min_compensation: int = typer.Option(..., "--min", help="Minimum exposure compensation index"),
    step: float = typer.Option(..., "--step", help="EV per compensation index"),
) -> None:
    if step <= 0:
        raise typer.BadParameter("--step must be greater than 0")
    console.print(" ".join(exposure_values(max_compensation, min_compensation, step)))


@app.command()
def version() -> None:
    """Show version."""
    console.print("capture-tiers v0.1.0")


if __name__ == "__main__":
    app()
