"""Skills generator: technical skills from the industry plus generic soft skills."""

from random import Random
from typing import Tuple

from fauxcv.contexts.synthesis import vocabulary as vocab
from fauxcv.contexts.synthesis.industries import IndustryProfile
from fauxcv.contexts.synthesis.resume_data_structure import SkillCategory
from fauxcv.utils.randomization import pick_many


def generate_skills(profile: IndustryProfile, rng: Random) -> Tuple[SkillCategory, ...]:
    """Return exactly two categories: technical (6-10 skills) then soft (3-6 skills)."""
    technical = pick_many(rng, profile.skills, 6, 10)
    soft = pick_many(rng, vocab.SOFT_SKILLS, 3, 6)

    return (
        SkillCategory(category=vocab.TECHNICAL_SKILLS_LABEL, skills=", ".join(technical)),
        SkillCategory(category=vocab.SOFT_SKILLS_LABEL, skills=", ".join(soft)),
    )
