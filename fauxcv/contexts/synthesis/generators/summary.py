"""Summary generator: one paragraph whose register follows the experience tier."""

from random import Random

from fauxcv.contexts.synthesis.industries import IndustryProfile
from fauxcv.utils.randomization import pick_many


def generate_summary(profile: IndustryProfile, experience_years: int, rng: Random) -> str:
    """
    Generate a professional summary.

    Under 3 years reads "Enthusiastic", 3 to 7 reads "Experienced", and 8 or
    more reads "Seasoned". Every register names the experience years literally.
    """
    job_titles = pick_many(rng, profile.job_titles, 1, 2)
    skills = pick_many(rng, profile.skills, 3, 5)
    title = job_titles[0]

    if experience_years < 3:
        return (
            f"Enthusiastic {title} with {experience_years} years of experience and a passion "
            f"for {' and '.join(skills[:2])}. Seeking to leverage strong {skills[2]} skills "
            "to drive innovative solutions and grow professionally."
        )
    if experience_years < 8:
        return (
            f"Experienced {title} with {experience_years} years of proven expertise in "
            f"{', '.join(skills[:3])}. Demonstrated success in delivering high-quality "
            "solutions and collaborating effectively with cross-functional teams."
        )
    return (
        f"Seasoned {title} with over {experience_years} years of experience specializing in "
        f"{', '.join(skills[:3])}. Proven track record of leadership and delivering strategic "
        "initiatives that drive business growth and technological advancement."
    )
