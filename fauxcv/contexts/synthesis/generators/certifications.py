"""Certifications generator."""

from random import Random
from typing import Tuple

from fauxcv.contexts.synthesis.industries import IndustryProfile
from fauxcv.utils.randomization import coin, pick_many

JUNIOR_SKIP_THRESHOLD = 0.5


def certification_bounds(experience_years: int) -> Tuple[int, int]:
    """Min and max certification count for an experience tier."""
    if experience_years < 3:
        return 0, 1
    if experience_years < 7:
        return 1, 2
    return 2, 4


def generate_certifications(
    profile: IndustryProfile, experience_years: int, rng: Random
) -> Tuple[str, ...]:
    """
    Pick certifications without replacement.

    Under two years of experience, half of all draws return nothing.
    Requests beyond the industry's certification list return all of it.
    """
    if experience_years < 2 and coin(rng, JUNIOR_SKIP_THRESHOLD):
        return ()

    min_count, max_count = certification_bounds(experience_years)
    return tuple(pick_many(rng, profile.certifications, min_count, max_count))
