#!/usr/bin/env python3
"""Text helpers for reading and printing sizes and quality labels"""

import re
from typing import Optional

from ..core.models import QualityLevel, Size

_SIZE_RE = re.compile(r"^\s*(\d+)\s*[x×*]\s*(\d+)\s*$", re.IGNORECASE)


def format_size(size: Size) -> str:
    """Display string for a size, e.g. '1920x1080'."""
    return f"{size.width}x{size.height}"


def parse_size(text: str) -> Optional[Size]:
    """
    Parse 'WxH', 'W×H' or 'W*H' into a Size.

    Args:
        text: Size string as typed by a user

    Returns:
        Size, or None when the text is not a size with positive dimensions
    """
    m = _SIZE_RE.match(text or "")
    if not m:
        return None
    width, height = int(m.group(1)), int(m.group(2))
    if width <= 0 or height <= 0:
        return None
    return Size(width=width, height=height)


def parse_quality(text: str) -> Optional[QualityLevel]:
    q = (text or "").strip().lower()
    for level in QualityLevel:
        if level.value == q:
            return level
    return None
