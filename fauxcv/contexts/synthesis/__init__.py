"""
Synthesis Context

Responsibilities:
- Holds the industry knowledge base (job titles, employers, skills, degrees, certifications)
- Generates resume sections from experience-tier rules and a seedable random source
- Assembles the resume record and hands it to templating when text output is requested

Owns: Resume content, generation options and defaults, industry validation
Never: Touches the filesystem or renders PDFs
"""

from fauxcv.contexts.synthesis.exceptions import InvalidIndustryError
from fauxcv.contexts.synthesis.industries import (
    IndustryProfile,
    available_industries,
    get_profile,
)
from fauxcv.contexts.synthesis.orchestrator import generate_resume, normalize_format
from fauxcv.contexts.synthesis.resume_data_structure import (
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    GenerationOptions,
    RenderedOutput,
    ResumeRecord,
    SkillCategory,
)

__all__ = [
    "generate_resume",
    "normalize_format",
    "available_industries",
    "get_profile",
    "IndustryProfile",
    "InvalidIndustryError",
    "GenerationOptions",
    "RenderedOutput",
    "ResumeRecord",
    "ContactInfo",
    "ExperienceEntry",
    "EducationEntry",
    "SkillCategory",
]
