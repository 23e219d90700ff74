from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Size(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0)
    height: int = Field(gt=0)

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class Tier(str, Enum):
    LARGE = "large"
    MEDIUM = "medium"
    SMALL = "small"

    @classmethod
    def normalize(cls, value: Any) -> "Tier":
        """Map a stored preference onto a tier. Only exact "medium"/"small" are kept, anything else is LARGE."""
        if value == cls.MEDIUM.value:
            return cls.MEDIUM
        if value == cls.SMALL.value:
            return cls.SMALL
        return cls.LARGE


class QualityLevel(str, Enum):
    QUALITY_1080P = "1080p"
    QUALITY_720P = "720p"
    QUALITY_480P = "480p"
    QUALITY_CIF = "cif"
    QUALITY_QVGA = "qvga"
    QUALITY_QCIF = "qcif"


# Highest fidelity first.
VIDEO_QUALITIES: Tuple[QualityLevel, ...] = (
    QualityLevel.QUALITY_1080P,
    QualityLevel.QUALITY_720P,
    QualityLevel.QUALITY_480P,
    QualityLevel.QUALITY_CIF,
    QualityLevel.QUALITY_QVGA,
    QualityLevel.QUALITY_QCIF,
)


class ExposureBounds(BaseModel):
    max_compensation: int
    min_compensation: int
    step: float = Field(gt=0)


class ErrorCode(str, Enum):
    EMPTY_CANDIDATES = "EMPTY_CANDIDATES"
    NO_SUPPORTED_LEVEL = "NO_SUPPORTED_LEVEL"


class SelectionError(Exception):
    def __init__(self, code: ErrorCode, message: str, hint: Optional[str] = None):
        self.code = code
        self.message = message
        self.hint = hint
        super().__init__(message)


class PreconditionViolation(SelectionError):
    def __init__(self, message: str = "No supported sizes to select from", hint: Optional[str] = None):
        super().__init__(ErrorCode.EMPTY_CANDIDATES, message, hint)


class NoSupportedLevelError(SelectionError):
    def __init__(self, message: str = "Could not find supported video qualities.", hint: Optional[str] = None):
        super().__init__(ErrorCode.NO_SUPPORTED_LEVEL, message, hint)
