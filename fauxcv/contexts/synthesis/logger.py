"""
Synthesis context logger.

Provides logging interface for synthesis context with automatic [synth] prefix.
All synthesis modules should import from this module, not from loguru directly.
Sinks are configured by the caller (see fauxcv.utils.logger.setup_logger).
"""

from loguru import logger

CONTEXT_PREFIX = "[synth]"


def _log_error(message: str) -> None:
    """Log error message with [synth] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [synth] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_invalid_industry(error) -> None:
    """Log a rejected industry key with the valid alternatives."""
    _log_error(f"Invalid industry: {error.industry}")
    _log_debug(f"  Available: {', '.join(error.available)}")


def log_generation_start(options) -> None:
    """Log effective options for one generation call."""
    _log_debug(
        f"Generating resume: industry={options.industry}, "
        f"experience={options.experience_years}y, format={options.format}"
    )
    _log_debug(
        f"  gender={options.gender}, linkedin={options.include_linkedin}, "
        f"website={options.include_website}, seed={options.seed}"
    )


def log_generation_result(record, elapsed_time: float) -> None:
    """Log a summary of the generated record."""
    _log_debug(
        f"Generated {record.name}: {len(record.experience)} jobs, "
        f"{len(record.education)} degrees, {len(record.certifications)} certifications "
        f"({elapsed_time:.3f}s)"
    )
