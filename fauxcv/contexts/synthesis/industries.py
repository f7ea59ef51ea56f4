"""
Industry Knowledge Base

Read-only catalog mapping an industry key to the job titles, employers, skills,
degree fields, and certifications used by the content generators.

The catalog is stored in data/industries.yaml and can be replaced wholesale by
pointing FAUXCV_INDUSTRIES_PATH at another file with the same structure.
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Tuple

from dotenv import load_dotenv
from omegaconf import OmegaConf

from fauxcv.contexts.synthesis.exceptions import InvalidIndustryError

load_dotenv()
INDUSTRIES_PATH = Path(
    os.getenv("FAUXCV_INDUSTRIES_PATH", Path(__file__).parent / "data" / "industries.yaml")
)

PROFILE_FIELDS = ("job_titles", "employers", "skills", "degree_fields", "certifications")

# The summary names three distinct skills
MIN_ENTRIES = {"skills": 3}


@dataclass(frozen=True)
class IndustryProfile:
    """
    Vocabulary for one industry.

    Attributes:
        key: Industry key (e.g., "tech")
        job_titles: Position names
        employers: Company names
        skills: Technical skills
        degree_fields: Fields of study
        certifications: Professional certifications
    """

    key: str
    job_titles: Tuple[str, ...]
    employers: Tuple[str, ...]
    skills: Tuple[str, ...]
    degree_fields: Tuple[str, ...]
    certifications: Tuple[str, ...]


def load_industries(config_path: Path = None) -> Dict[str, IndustryProfile]:
    """
    Load and validate the industry catalog.

    Args:
        config_path: Path to catalog YAML (defaults to FAUXCV_INDUSTRIES_PATH)

    Returns:
        Dict mapping industry key to IndustryProfile, in file order

    Raises:
        ValueError: If an industry is missing a field, has an empty list, or has
                    fewer entries than MIN_ENTRIES requires
    """
    if config_path is None:
        config_path = INDUSTRIES_PATH

    raw = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    profiles = {}
    for key, entry in raw.items():
        for field_name in PROFILE_FIELDS:
            if not entry.get(field_name):
                raise ValueError(f"Industry '{key}' has no {field_name} in {config_path}")

            minimum = MIN_ENTRIES.get(field_name, 1)
            if len(entry[field_name]) < minimum:
                raise ValueError(
                    f"Industry '{key}' needs at least {minimum} {field_name} in {config_path}"
                )

        profiles[key] = IndustryProfile(
            key=key, **{name: tuple(str(v) for v in entry[name]) for name in PROFILE_FIELDS}
        )

    return profiles


@lru_cache(maxsize=None)
def _catalog() -> Dict[str, IndustryProfile]:
    return load_industries()


def available_industries() -> List[str]:
    """Return all valid industry keys."""
    return list(_catalog())


def get_profile(industry: str) -> IndustryProfile:
    """
    Look up an industry profile.

    Raises:
        InvalidIndustryError: If the key is unknown
    """
    catalog = _catalog()
    if industry not in catalog:
        raise InvalidIndustryError(industry, catalog.keys())
    return catalog[industry]
