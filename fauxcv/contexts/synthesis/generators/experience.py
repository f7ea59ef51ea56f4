"""Experience generator: reverse-chronological work history with bullet points."""

from random import Random
from typing import List, Optional, Sequence, Tuple

from fauxcv.contexts.synthesis import vocabulary as vocab
from fauxcv.contexts.synthesis.industries import IndustryProfile
from fauxcv.contexts.synthesis.resume_data_structure import ExperienceEntry
from fauxcv.utils.randomization import coin, date_range, pick_many, pick_one, random_int
from fauxcv.utils.timestamp import Clock

MAX_JOBS = 5


def job_count_for(experience_years: int, rng: Random) -> int:
    """Draw the number of jobs for an experience tier (never more than MAX_JOBS)."""
    if experience_years < 3:
        count = random_int(rng, 1, 2)
    elif experience_years < 8:
        count = random_int(rng, 2, 3)
    else:
        count = random_int(rng, 3, 5)
    return min(count, MAX_JOBS)


def _bullet_point(index: int, skills: Sequence[str], rng: Random) -> str:
    """Build one bullet; the sentence template cycles with the bullet index."""
    verb = pick_one(rng, vocab.ACTION_VERBS)
    skill = pick_one(rng, skills)
    plural = "s" if coin(rng) else ""

    template = index % 3
    if template == 0:
        return (
            f"{verb} {pick_one(rng, vocab.ADJECTIVES)} {skill} solution{plural}, resulting in "
            f"{random_int(rng, 10, 40)}% improvement in {pick_one(rng, vocab.IMPROVEMENT_AREAS)}"
        )
    if template == 1:
        return (
            f"{verb} cross-functional team{plural} to {pick_one(rng, vocab.DELIVERY_VERBS)} "
            f"{skill} {pick_one(rng, vocab.DELIVERABLES)}"
        )
    return (
        f"{pick_one(rng, vocab.COLLABORATION_PHRASES)} {pick_one(rng, vocab.STAKEHOLDERS)} to "
        f"{pick_one(rng, vocab.OUTCOME_VERBS)} {skill} capabilities"
    )


def generate_experience(
    profile: IndustryProfile,
    experience_years: int,
    rng: Random,
    clock: Optional[Clock] = None,
) -> Tuple[ExperienceEntry, ...]:
    """
    Generate work history, most recent job first.

    Under 3 years yields 1-2 jobs, 3 to 7 years 2-3 jobs, and 8 or more 3-5 jobs.
    Each job but the last takes 1-3 years from the remaining total and the last
    job absorbs whatever remains, so the spans add up to experience_years. Only
    the first job is current. Consecutive jobs are separated by a 0-3 month gap.

    Args:
        profile: Industry vocabulary
        experience_years: Total years of experience
        rng: Random source
        clock: Callable returning the current datetime

    Returns:
        Tuple of ExperienceEntry
    """
    job_count = job_count_for(experience_years, rng)

    entries: List[ExperienceEntry] = []
    remaining_years = experience_years
    months_ago = 0

    for i in range(job_count):
        is_current = i == 0
        if i == job_count - 1:
            job_years = remaining_years
        else:
            job_years = min(random_int(rng, 1, 3), remaining_years)
        remaining_years -= job_years

        dates = date_range(job_years, months_ago, is_current=is_current, clock=clock)
        months_ago += job_years * 12 + random_int(rng, 0, 3)

        position = pick_one(rng, profile.job_titles)
        company = pick_one(rng, profile.employers)
        job_skills = pick_many(rng, profile.skills, 3, 6)

        bullet_points = tuple(
            _bullet_point(j, job_skills, rng) for j in range(random_int(rng, 3, 5))
        )

        entries.append(
            ExperienceEntry(
                position=position,
                company=company,
                start_date=dates.start_date,
                end_date=dates.end_date,
                bullet_points=bullet_points,
            )
        )

    return tuple(entries)
