"""
Resume generation orchestrator.

Merges caller options with defaults, validates the industry, runs the content
generators in a fixed order, and renders the markdown text document when the
requested format needs one.
"""

import time
from random import Random
from typing import Optional

from fauxcv.contexts.synthesis import defaults
from fauxcv.contexts.synthesis.exceptions import InvalidIndustryError
from fauxcv.contexts.synthesis.generators import (
    generate_basic_info,
    generate_certifications,
    generate_education,
    generate_experience,
    generate_skills,
    generate_summary,
)
from fauxcv.contexts.synthesis.industries import get_profile
from fauxcv.contexts.synthesis.logger import (
    log_generation_result,
    log_generation_start,
    log_invalid_industry,
)
from fauxcv.contexts.synthesis.resume_data_structure import (
    GenerationOptions,
    RenderedOutput,
    ResumeRecord,
)
from fauxcv.contexts.templating import TemplateRegistry, render_resume
from fauxcv.utils.randomization import bound_faker, coin, pick_one
from fauxcv.utils.timestamp import Clock


def normalize_format(output_format: Optional[str]) -> str:
    """
    Resolve a format selector, accepting the legacy names (json, markdown, pdf, both).

    Raises:
        ValueError: If the selector is unknown
    """
    if output_format is None:
        return defaults.DEFAULT_FORMAT

    resolved = defaults.FORMAT_ALIASES.get(output_format, output_format)
    if resolved not in defaults.FORMATS:
        valid = list(defaults.FORMATS) + list(defaults.FORMAT_ALIASES)
        raise ValueError(f"Invalid format: {output_format}. Valid formats: {', '.join(valid)}")
    return resolved


def generate_resume(
    options: Optional[GenerationOptions] = None,
    rng: Optional[Random] = None,
    clock: Optional[Clock] = None,
    template_registry: Optional[TemplateRegistry] = None,
) -> RenderedOutput:
    """
    Generate one resume.

    All validation happens before the random source is touched, so a rejected
    call consumes no randomness and has no side effects.

    Args:
        options: Caller options; unset fields take their defaults
        rng: Random source (default: random.Random(options.seed))
        clock: Callable returning the current datetime (default: datetime.now)
        template_registry: Registry used to load the default template

    Returns:
        RenderedOutput with the record and/or markdown, per options.format

    Raises:
        InvalidIndustryError: If the industry key is unknown
        ValueError: If the format or gender is unknown, or experience_years is negative
        TemplateRenderError: If the markdown template fails to render

    Example:
        >>> output = generate_resume(GenerationOptions(industry="finance", seed=7))
        >>> output.record.name, output.markdown.splitlines()[0]
    """
    options = options or GenerationOptions()

    industry = options.industry or defaults.DEFAULT_INDUSTRY
    try:
        profile = get_profile(industry)
    except InvalidIndustryError as e:
        log_invalid_industry(e)
        raise

    experience_years = options.experience_years
    if experience_years is None:
        experience_years = defaults.DEFAULT_EXPERIENCE_YEARS
    if experience_years < 0:
        raise ValueError(f"experience_years must be non-negative, got: {experience_years}")

    if options.gender is not None and options.gender not in defaults.GENDERS:
        raise ValueError(
            f"Invalid gender: {options.gender}. Valid genders: {', '.join(defaults.GENDERS)}"
        )

    output_format = normalize_format(options.format)

    if rng is None:
        rng = Random(options.seed)

    effective = options.merged(
        industry=industry,
        experience_years=experience_years,
        format=output_format,
        gender=pick_one(rng, defaults.GENDERS),
        include_linkedin=defaults.DEFAULT_INCLUDE_LINKEDIN,
        include_website=coin(rng),
        phone_format=defaults.DEFAULT_PHONE_FORMAT,
        style=defaults.DEFAULT_STYLE,
        color=defaults.DEFAULT_COLOR,
    )
    log_generation_start(effective)
    start_time = time.time()

    fake = bound_faker(rng)

    basic_info = generate_basic_info(effective, rng, fake)
    summary = generate_summary(profile, experience_years, rng)
    experience = generate_experience(profile, experience_years, rng, clock=clock)
    education = generate_education(profile, experience_years, rng, fake, clock=clock)
    skill_categories = generate_skills(profile, rng)
    certifications = generate_certifications(profile, experience_years, rng)

    record = ResumeRecord(
        name=basic_info.name,
        contact_info=basic_info.contact_info,
        summary=summary,
        experience=experience,
        education=education,
        skill_categories=skill_categories,
        certifications=certifications,
    )
    log_generation_result(record, time.time() - start_time)

    markdown = None
    if output_format in defaults.TEXT_FORMATS:
        markdown = render_resume(record, template=effective.template, registry=template_registry)

    return RenderedOutput(
        record=record if output_format in defaults.RECORD_FORMATS else None,
        markdown=markdown,
        options=effective,
    )
