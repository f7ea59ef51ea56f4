"""
Randomization Utilities

Bounded random selection helpers shared by the content generators. Every helper
takes an explicit random.Random handle so that a single seed reproduces a whole
resume, and date_range takes a clock so tests can pin "now".
"""

from dataclasses import dataclass
from datetime import datetime
from random import Random
from typing import List, Optional, Sequence, TypeVar

from faker import Faker

from fauxcv.utils.timestamp import Clock, month_year, shift_months

T = TypeVar("T")

PRESENT = "Present"


@dataclass(frozen=True)
class DateRange:
    """Formatted start/end pair for one experience entry."""

    start_date: str
    end_date: str


def random_int(rng: Random, min_value: int, max_value: int) -> int:
    """
    Return an integer in [min_value, max_value], inclusive on both ends.

    Raises:
        ValueError: If min_value > max_value
    """
    if min_value > max_value:
        raise ValueError(f"Empty range: min {min_value} is greater than max {max_value}")
    return rng.randint(min_value, max_value)


def coin(rng: Random, threshold: float = 0.5) -> bool:
    """Return True when a uniform draw in [0, 1) exceeds threshold."""
    return rng.random() > threshold


def pick_one(rng: Random, items: Sequence[T]) -> Optional[T]:
    """Return a uniformly chosen element, or None for an empty sequence."""
    if not items:
        return None
    return items[rng.randrange(len(items))]


def pick_many(rng: Random, items: Sequence[T], min_count: int, max_count: int) -> List[T]:
    """
    Pick between min_count and max_count distinct elements from items.

    The count is drawn first, then clamped to the number of available
    elements, so asking for more than exist returns all of them (shuffled).

    Args:
        rng: Random source
        items: Sequence to sample from
        min_count: Minimum number of elements
        max_count: Maximum number of elements

    Returns:
        List of distinct elements drawn without replacement

    Example:
        >>> pick_many(Random(1), ["a", "b", "c"], 5, 8)  # all three, in random order
    """
    count = min(random_int(rng, min_count, max_count), len(items))
    return rng.sample(list(items), count)


def date_range(
    years_span: int,
    months_ago: int,
    is_current: bool = False,
    clock: Optional[Clock] = None,
) -> DateRange:
    """
    Compute a formatted date range ending months_ago months before now.

    Args:
        years_span: Length of the range in years
        months_ago: How many months before now the range ends (ignored when current)
        is_current: Whether the range is open-ended (end date "Present")
        clock: Callable returning the current datetime (default: datetime.now)

    Returns:
        DateRange with "<Month name> <Year>" strings
    """
    end = (clock or datetime.now)()
    if not is_current:
        end = shift_months(end, months_ago)

    start = shift_months(end, years_span * 12)

    return DateRange(
        start_date=month_year(start),
        end_date=PRESENT if is_current else month_year(end),
    )


def bound_faker(rng: Random, locale: str = "en_US") -> Faker:
    """
    Create a Faker instance that draws from rng instead of its own global source.

    Args:
        rng: Random source shared with the other generators
        locale: Faker locale (single locale only)

    Returns:
        Faker instance
    """
    fake = Faker(locale)
    fake.random = rng
    return fake
