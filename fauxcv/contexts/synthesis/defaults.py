"""
Default values for resume generation options.

Fields left unset (None) on GenerationOptions are filled from here by the
orchestrator. Gender and website inclusion have no fixed default: they are
drawn from the generation's random source.
"""

DEFAULT_INDUSTRY = "tech"
DEFAULT_EXPERIENCE_YEARS = 5
DEFAULT_FORMAT = "record+text"
DEFAULT_PHONE_FORMAT = "###-###-####"
DEFAULT_STYLE = "default"
DEFAULT_COLOR = "#0066cc"
DEFAULT_INCLUDE_LINKEDIN = True

GENDERS = ("male", "female")

# Output format selectors and the names the original CLI used for them
FORMATS = ("record", "text", "visual", "record+text")
FORMAT_ALIASES = {
    "json": "record",
    "markdown": "text",
    "pdf": "visual",
    "both": "record+text",
}
RECORD_FORMATS = {"record", "record+text"}
TEXT_FORMATS = {"text", "record+text", "visual"}
