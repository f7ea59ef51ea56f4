"""Custom exceptions for the synthesis context."""

from typing import Sequence


class InvalidIndustryError(ValueError):
    """
    Exception raised when an industry key is not in the knowledge base.

    Attributes:
        industry: The offending industry key
        available: All valid industry keys
    """

    def __init__(self, industry: str, available: Sequence[str]):
        self.industry = industry
        self.available = list(available)
        super().__init__(
            f"Invalid industry: {industry}. Available industries: {', '.join(self.available)}"
        )
