from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from loguru import logger

from .filters import apply_filters, same_aspect_ratio
from .models import (
    NoSupportedLevelError,
    PreconditionViolation,
    QualityLevel,
    Size,
    Tier,
    VIDEO_QUALITIES,
)

# Ideal "medium" is 50% and "small" 25% of the "large" pixel count.
MEDIUM_RELATIVE_PICTURE_SIZE = 0.5
SMALL_RELATIVE_PICTURE_SIZE = 0.25


def _find_closest_size(sorted_sizes: Sequence[Size], target_pixel_count: int) -> int:
    closest_index = 0
    closest_diff = None
    for i, size in enumerate(sorted_sizes):
        diff = abs(size.area - target_pixel_count)
        # Strictly smaller: the first of equally close sizes wins.
        if closest_diff is None or diff < closest_diff:
            closest_index = i
            closest_diff = diff
    return closest_index


def select_picture_size(tier: Any, candidates: Iterable[Size]) -> Size:
    """Pick the concrete picture size for a large/medium/small preference.

    Large is always the size with the most pixels. Medium and small aim at
    50% and 25% of that pixel count, searching sizes with the same aspect
    ratio as large first. With too few sizes the tiers collapse onto each
    other instead of failing.

    Raises PreconditionViolation if ``candidates`` is empty.
    """
    tier = Tier.normalize(tier)

    # sorted() is stable and leaves the caller's list untouched.
    by_area = sorted(candidates, key=lambda s: s.area, reverse=True)
    if not by_area:
        raise PreconditionViolation(hint="The device reported no supported picture sizes.")

    large = by_area[0]
    if tier is Tier.LARGE:
        return large

    remaining = by_area[1:]
    aspect_matches = apply_filters(remaining, same_aspect_ratio(large.aspect_ratio))
    search_list = aspect_matches if len(aspect_matches) >= 2 else remaining

    if not search_list:
        logger.warning("Only one supported resolution.")
        return large
    if len(search_list) == 1:
        logger.warning("Only two supported resolutions.")
        return search_list[0]
    if len(search_list) == 2:
        return search_list[0 if tier is Tier.MEDIUM else 1]

    medium_target = int(large.area * MEDIUM_RELATIVE_PICTURE_SIZE)
    small_target = int(large.area * SMALL_RELATIVE_PICTURE_SIZE)
    medium_index = _find_closest_size(search_list, medium_target)
    small_index = _find_closest_size(search_list, small_target)

    # Same size for both: move small one down, or medium one up.
    if search_list[medium_index] == search_list[small_index]:
        if small_index < len(search_list) - 1:
            small_index += 1
        else:
            medium_index -= 1

    return search_list[medium_index if tier is Tier.MEDIUM else small_index]


def apply_picture_size(tier: Any, supported: Iterable[Size], parameters: Any) -> Size:
    """Select a picture size and hand it to the capture parameters collaborator."""
    size = select_picture_size(tier, supported)
    logger.debug(f"Selected {Tier.normalize(tier).value} resolution: {size.width}x{size.height}")
    parameters.set_picture_size(size.width, size.height)
    return size


def _next_supported_index(
    qualities: Sequence[QualityLevel],
    is_available: Callable[[QualityLevel], bool],
    start: int,
) -> int:
    for i in range(start, len(qualities)):
        if is_available(qualities[i]):
            return i
    if start == 0:
        raise NoSupportedLevelError(hint="The device reports no recording profile at all.")
    # A larger tier already matched; repeat its level.
    logger.warning(f"No video quality after {qualities[start - 1].value}, reusing it")
    return start - 1


def select_video_quality(
    tier: Any,
    is_available: Callable[[QualityLevel], bool],
    qualities: Sequence[QualityLevel] = VIDEO_QUALITIES,
) -> QualityLevel:
    """Pick the video quality for a large/medium/small preference.

    ``qualities`` is ordered from highest to lowest fidelity. Each tier starts
    searching right after the level the previous tier resolved to, so with
    fewer than three supported levels several tiers share one level.

    Raises NoSupportedLevelError if no level is available at all.
    """
    tier = Tier.normalize(tier)

    large_index = _next_supported_index(qualities, is_available, 0)
    if tier is Tier.LARGE:
        return qualities[large_index]
    medium_index = _next_supported_index(qualities, is_available, large_index + 1)
    if tier is Tier.MEDIUM:
        return qualities[medium_index]
    small_index = _next_supported_index(qualities, is_available, medium_index + 1)
    return qualities[small_index]
