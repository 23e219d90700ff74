import importlib

import pytest
from pydantic import ValidationError

from ..src.core.models import QualityLevel, Size, Tier
from ..src.utils.text_utils import format_size, parse_quality, parse_size


def test_imports() -> None:
    modules = [
        "capture_tiers.src.app_cli",
        "capture_tiers.src.core.models",
        "capture_tiers.src.core.selector",
        "capture_tiers.src.core.filters",
        "capture_tiers.src.core.capabilities",
        "capture_tiers.src.utils.log",
        "capture_tiers.src.utils.config",
        "capture_tiers.src.utils.text_utils",
    ]

    for m in modules:
        importlib.import_module(m)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("large", Tier.LARGE),
        ("medium", Tier.MEDIUM),
        ("small", Tier.SMALL),
        (Tier.SMALL, Tier.SMALL),
        ("Medium", Tier.LARGE),
        ("small ", Tier.LARGE),
        ("xl", Tier.LARGE),
        ("", Tier.LARGE),
        (None, Tier.LARGE),
        (3, Tier.LARGE),
    ],
)
def test_tier_normalize(raw, expected: Tier) -> None:  # type: ignore[no-untyped-def]
    assert Tier.normalize(raw) is expected


def test_size_derived_values() -> None:
    size = Size(width=1920, height=1080)
    assert size.area == 2_073_600
    assert size.aspect_ratio == pytest.approx(16 / 9)
    assert str(size) == "1920x1080"
    assert size == Size(width=1920, height=1080)
    assert len({size, Size(width=1920, height=1080)}) == 1


@pytest.mark.parametrize("width,height", [(0, 480), (640, 0), (-1, 10)])
def test_size_rejects_non_positive_dimensions(width: int, height: int) -> None:
    with pytest.raises(ValidationError):
        Size(width=width, height=height)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1920x1080", Size(width=1920, height=1080)),
        ("1920X1080", Size(width=1920, height=1080)),
        (" 640 × 480 ", Size(width=640, height=480)),
        ("4000*3000", Size(width=4000, height=3000)),
    ],
)
def test_parse_size_valid(raw: str, expected: Size) -> None:
    parsed = parse_size(raw)
    assert parsed == expected
    assert format_size(parsed) == f"{expected.width}x{expected.height}"


@pytest.mark.parametrize("raw", ["", "1920", "1920x", "x1080", "0x480", "1920x1080x3", "abc", None])
def test_parse_size_invalid(raw) -> None:  # type: ignore[no-untyped-def]
    assert parse_size(raw) is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("1080p", QualityLevel.QUALITY_1080P),
        (" 720P ", QualityLevel.QUALITY_720P),
        ("CIF", QualityLevel.QUALITY_CIF),
        ("qcif", QualityLevel.QUALITY_QCIF),
        ("4k", None),
        ("", None),
    ],
)
def test_parse_quality(raw: str, expected: QualityLevel) -> None:
    assert parse_quality(raw) is expected
