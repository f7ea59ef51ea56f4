"""Education generator: primary degree plus an occasional second degree."""

from datetime import datetime
from random import Random
from typing import List, Optional, Tuple

from faker import Faker

from fauxcv.contexts.synthesis import vocabulary as vocab
from fauxcv.contexts.synthesis.industries import IndustryProfile
from fauxcv.contexts.synthesis.resume_data_structure import EducationEntry
from fauxcv.utils.randomization import coin, pick_many, pick_one, random_int
from fauxcv.utils.timestamp import Clock

# Probability thresholds: the event happens when a uniform draw exceeds the value
ADVANCED_DEGREE_THRESHOLD = 0.7
GPA_THRESHOLD = 0.5
FOCUS_THRESHOLD = 0.6
ACTIVITY_THRESHOLD = 0.7
SECOND_DEGREE_THRESHOLD = 0.7


def _institution(rng: Random, fake: Faker) -> str:
    form = random_int(rng, 0, 3)
    if form == 0:
        return f"{fake.state()} University"
    if form == 1:
        return f"University of {fake.state()}"
    if form == 2:
        adjective = pick_one(rng, vocab.ADJECTIVES).capitalize()
        return f"{adjective} {pick_one(rng, vocab.INSTITUTION_KINDS)}"
    return f"{fake.city()} College"


def _details(profile: IndustryProfile, rng: Random) -> Tuple[str, ...]:
    """Up to three optional lines, each included by its own draw."""
    details: List[str] = []

    if coin(rng, GPA_THRESHOLD):
        details.append(f"GPA: {random_int(rng, 30, 40) / 10:.1f}")

    if coin(rng, FOCUS_THRESHOLD):
        label = pick_one(rng, vocab.FOCUS_LABELS)
        details.append(f"{label}: {', '.join(pick_many(rng, profile.skills, 2, 3))}")

    if coin(rng, ACTIVITY_THRESHOLD):
        details.append(
            f"{pick_one(rng, vocab.ACTIVITY_VERBS)} {pick_one(rng, vocab.ACTIVITY_GROUPS)}"
        )

    return tuple(details)


def _second_degree(
    primary: EducationEntry, profile: IndustryProfile, rng: Random, fake: Faker
) -> EducationEntry:
    """
    Complementary degree for the primary one.

    An advanced primary gets an earlier bachelor's; an undergraduate primary
    gets a later degree one level up.
    """
    if primary.degree in vocab.ADVANCED_DEGREES:
        degree = vocab.BACHELORS
        year = primary.graduation_year - random_int(rng, 2, 5)
    else:
        if primary.degree == vocab.BACHELORS:
            degree = pick_one(rng, vocab.ADVANCED_DEGREES)
        else:
            degree = vocab.BACHELORS
        year = primary.graduation_year + random_int(rng, 2, 4)

    return EducationEntry(
        degree=degree,
        field=pick_one(rng, profile.degree_fields),
        institution=_institution(rng, fake),
        graduation_year=year,
    )


def generate_education(
    profile: IndustryProfile,
    experience_years: int,
    rng: Random,
    fake: Faker,
    clock: Optional[Clock] = None,
) -> Tuple[EducationEntry, ...]:
    """
    Generate education history.

    Seven or more years of experience makes an advanced primary degree
    possible. The primary graduation year is the current year minus the
    experience years minus a 0-2 year offset. More than five years of
    experience makes a second degree possible.

    Args:
        profile: Industry vocabulary
        experience_years: Total years of experience
        rng: Random source
        fake: Faker instance bound to rng
        clock: Callable returning the current datetime

    Returns:
        Tuple of one or two EducationEntry
    """
    if experience_years >= 7 and coin(rng, ADVANCED_DEGREE_THRESHOLD):
        degree = pick_one(rng, vocab.ADVANCED_DEGREES)
    else:
        degree = pick_one(rng, vocab.UNDERGRADUATE_DEGREES)

    field = pick_one(rng, profile.degree_fields)
    institution = _institution(rng, fake)

    current_year = (clock or datetime.now)().year
    graduation_year = current_year - (experience_years + random_int(rng, 0, 2))

    primary = EducationEntry(
        degree=degree,
        field=field,
        institution=institution,
        graduation_year=graduation_year,
        details=_details(profile, rng),
    )

    if experience_years > 5 and coin(rng, SECOND_DEGREE_THRESHOLD):
        return (primary, _second_degree(primary, profile, rng, fake))

    return (primary,)
