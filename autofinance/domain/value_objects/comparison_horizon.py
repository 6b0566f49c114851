"""Comparison horizon value object."""

from dataclasses import dataclass

from autofinance.domain.errors import InputValidationError

MIN_YEARS = 1
MAX_YEARS = 10


@dataclass(frozen=True)
class ComparisonHorizon:
    """Number of years over which the financing options are compared."""

    years: int

    def __post_init__(self) -> None:
        """Validate horizon length."""
        if not MIN_YEARS <= self.years <= MAX_YEARS:
            raise InputValidationError(
                f"Duration must be between {MIN_YEARS} and {MAX_YEARS} years"
            )

    @property
    def months(self) -> int:
        """Get horizon length in months (number of monthly payments)."""
        return self.years * 12
