from __future__ import annotations

import math
from typing import Any, List, Protocol

from .models import ExposureBounds

# Exposure compensation offered to users, in EV.
MAX_EXPOSURE_EV = 3
MIN_EXPOSURE_EV = -3


class SettingsCapabilities(Protocol):
    def supported_exposure_values(self) -> List[str]: ...

    def supported_camera_ids(self) -> List[str]: ...


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def exposure_values(max_compensation: int, min_compensation: int, step: float) -> List[str]:
    """Legal exposure-compensation entries for the device, ascending.

    The range is clamped to [-3, 3] EV and each whole EV is converted back
    into the device's compensation index, e.g. step 0.5 gives -6, -4, ... 6.
    """
    bounds = ExposureBounds(max_compensation=max_compensation, min_compensation=min_compensation, step=step)
    max_value = min(MAX_EXPOSURE_EV, math.floor(bounds.max_compensation * bounds.step))
    min_value = max(MIN_EXPOSURE_EV, math.ceil(bounds.min_compensation * bounds.step))
    return [str(_round_half_up(i / bounds.step)) for i in range(min_value, max_value + 1)]


def camera_ids(number_of_cameras: int) -> List[str]:
    return [str(i) for i in range(number_of_cameras)]


class CameraCapabilities:
    """SettingsCapabilities backed by a device's parameters object.

    ``parameters`` needs ``max_exposure_compensation``,
    ``min_exposure_compensation`` and ``exposure_compensation_step``.
    """

    def __init__(self, parameters: Any, number_of_cameras: int) -> None:
        self.parameters = parameters
        self.number_of_cameras = number_of_cameras

    def supported_exposure_values(self) -> List[str]:
        return exposure_values(
            self.parameters.max_exposure_compensation,
            self.parameters.min_exposure_compensation,
            self.parameters.exposure_compensation_step,
        )

    def supported_camera_ids(self) -> List[str]:
        return camera_ids(self.number_of_cameras)


def get_settings_capabilities(parameters: Any, number_of_cameras: int) -> SettingsCapabilities:
    return CameraCapabilities(parameters, number_of_cameras)
