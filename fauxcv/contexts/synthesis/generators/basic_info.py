"""Basic info generator: name and contact details."""

import re
from random import Random

from faker import Faker

from fauxcv.contexts.synthesis.defaults import DEFAULT_PHONE_FORMAT, GENDERS
from fauxcv.contexts.synthesis.resume_data_structure import (
    BasicInfo,
    ContactInfo,
    GenerationOptions,
)
from fauxcv.utils.randomization import pick_one


def _slug(text: str) -> str:
    """Lowercase and drop anything that is not a letter or digit."""
    return re.sub(r"[^a-z0-9]", "", text.lower())


def generate_basic_info(options: GenerationOptions, rng: Random, fake: Faker) -> BasicInfo:
    """
    Generate a name and contact block.

    The gender comes from options or a fair coin, and selects the first-name
    pool. LinkedIn and website are only populated when their flags are true.

    Args:
        options: Effective generation options
        rng: Random source
        fake: Faker instance bound to rng

    Returns:
        BasicInfo with name and ContactInfo
    """
    gender = options.gender or pick_one(rng, GENDERS)
    first_name = fake.first_name_male() if gender == "male" else fake.first_name_female()
    last_name = fake.last_name()

    first, last = _slug(first_name), _slug(last_name)
    separator = pick_one(rng, (".", "_", ""))
    email = f"{first}{separator}{last}@{fake.free_email_domain()}"

    phone = fake.numerify(options.phone_format or DEFAULT_PHONE_FORMAT)
    location = f"{fake.city()}, {fake.state_abbr(include_territories=False)}"

    linkedin = None
    if options.include_linkedin:
        linkedin = f"linkedin.com/in/{first}-{last}-{fake.numerify('######')}"

    website = f"{first}{last}.com" if options.include_website else None

    return BasicInfo(
        name=f"{first_name} {last_name}",
        contact_info=ContactInfo(
            email=email,
            phone=phone,
            location=location,
            linkedin=linkedin,
            website=website,
        ),
    )
