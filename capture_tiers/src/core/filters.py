from typing import Iterable, Callable, TypeVar, List

from .models import Size

T = TypeVar("T")

# Absolute tolerance for rounding errors in reported sizes.
ASPECT_RATIO_TOLERANCE = 0.01


def apply_filters(items: Iterable[T], *filters: Callable[[T], bool]) -> List[T]:
    result: List[T] = list(items)
    for filter_fn in filters:
        result = [item for item in result if filter_fn(item)]
    return result


def same_aspect_ratio(target: float, tolerance: float = ASPECT_RATIO_TOLERANCE) -> Callable[[Size], bool]:
    def matches(size: Size) -> bool:
        return abs(size.aspect_ratio - target) < tolerance

    return matches
