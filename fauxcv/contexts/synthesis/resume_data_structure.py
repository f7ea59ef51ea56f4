"""
Resume Data Structures

Dataclasses for generation options and the generated resume record. Records are
created fresh per generation call and never mutated afterwards.

to_dict() produces the camelCase mapping used by markdown templates and by the
persisted JSON record.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class GenerationOptions:
    """
    Caller options for one generation call. None means "use the default".

    Attributes:
        industry: Industry key (default "tech")
        experience_years: Years of experience, non-negative (default 5)
        gender: "male" or "female" (default: random)
        include_linkedin: Add a LinkedIn URL (default True)
        include_website: Add a personal website (default: random)
        phone_format: Faker numerify pattern, '#' is a digit (default "###-###-####")
        template: Custom Jinja2 markdown template source (default: built-in template)
        style: PDF style name (default "default")
        color: PDF accent color as hex (default "#0066cc")
        format: "record", "text", "visual" or "record+text" (default "record+text")
        seed: Seed for the random source, for reproducible output
    """

    industry: Optional[str] = None
    experience_years: Optional[int] = None
    gender: Optional[str] = None
    include_linkedin: Optional[bool] = None
    include_website: Optional[bool] = None
    phone_format: Optional[str] = None
    template: Optional[str] = None
    style: Optional[str] = None
    color: Optional[str] = None
    format: Optional[str] = None
    seed: Optional[int] = None

    def merged(self, **defaults) -> "GenerationOptions":
        """Return a copy with every None field replaced by its value in defaults."""
        updates = {
            name: value
            for name, value in defaults.items()
            if getattr(self, name) is None and value is not None
        }
        return replace(self, **updates)


@dataclass(frozen=True)
class ContactInfo:
    """
    Contact details. linkedin and website are None when not requested,
    never an empty string.
    """

    email: str
    phone: str
    location: str
    linkedin: Optional[str] = None
    website: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "linkedin": self.linkedin,
            "website": self.website,
        }


@dataclass(frozen=True)
class BasicInfo:
    """Name plus contact details, as produced by the basic-info generator."""

    name: str
    contact_info: ContactInfo


@dataclass(frozen=True)
class ExperienceEntry:
    """
    One job. end_date is "Present" for the current job.

    Attributes:
        position: Job title
        company: Employer name
        start_date: "<Month> <Year>"
        end_date: "<Month> <Year>" or "Present"
        bullet_points: Achievement sentences (never empty)
    """

    position: str
    company: str
    start_date: str
    end_date: str
    bullet_points: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": self.position,
            "company": self.company,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "bulletPoints": list(self.bullet_points),
        }


@dataclass(frozen=True)
class EducationEntry:
    """One degree; details may be empty."""

    degree: str
    field: str
    institution: str
    graduation_year: int
    details: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "degree": self.degree,
            "field": self.field,
            "institution": self.institution,
            "graduationYear": self.graduation_year,
            "details": list(self.details),
        }


@dataclass(frozen=True)
class SkillCategory:
    """Category label with a comma-joined skill string."""

    category: str
    skills: str

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "skills": self.skills}


@dataclass(frozen=True)
class ResumeRecord:
    """
    Complete generated resume.

    Experience is most-recent first; skill_categories always holds
    technical then soft skills.
    """

    name: str
    contact_info: ContactInfo
    summary: str
    experience: Tuple[ExperienceEntry, ...]
    education: Tuple[EducationEntry, ...]
    skill_categories: Tuple[SkillCategory, ...]
    certifications: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "contactInfo": self.contact_info.to_dict(),
            "summary": self.summary,
            "experience": [entry.to_dict() for entry in self.experience],
            "education": [entry.to_dict() for entry in self.education],
            "skillCategories": [category.to_dict() for category in self.skill_categories],
            "certifications": list(self.certifications),
        }


@dataclass(frozen=True)
class RenderedOutput:
    """
    Result of a generation call.

    Attributes:
        record: Structured resume (when the format includes a record)
        markdown: Rendered text document (when the format includes text)
        options: Effective options after defaults were applied
    """

    record: Optional[ResumeRecord] = None
    markdown: Optional[str] = None
    options: Optional[GenerationOptions] = None
