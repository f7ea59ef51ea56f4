"""
Content generators.

Each generator produces one fragment of a resume record from an industry
profile, the experience years, and an explicit random source. They assume a
valid profile; industry validation is the orchestrator's job.
"""

from fauxcv.contexts.synthesis.generators.basic_info import generate_basic_info
from fauxcv.contexts.synthesis.generators.certifications import generate_certifications
from fauxcv.contexts.synthesis.generators.education import generate_education
from fauxcv.contexts.synthesis.generators.experience import generate_experience
from fauxcv.contexts.synthesis.generators.skills import generate_skills
from fauxcv.contexts.synthesis.generators.summary import generate_summary

__all__ = [
    "generate_basic_info",
    "generate_summary",
    "generate_experience",
    "generate_education",
    "generate_skills",
    "generate_certifications",
]
