"""Annual Percentage Rate value object."""

from dataclasses import dataclass

from autofinance.domain.errors import InputValidationError

# Highest rate the input form accepts (20%)
MAX_APR = 0.20


@dataclass(frozen=True)
class APR:
    """Annual Percentage Rate value object."""

    rate: float  # As decimal (e.g., 0.058 for 5.8%)

    def __post_init__(self) -> None:
        """Validate APR rate."""
        if not 0 <= self.rate <= MAX_APR:
            raise InputValidationError("APR rate must be between 0 and 0.20 (0% to 20%)")

    @classmethod
    def from_percentage(cls, percentage: float) -> "APR":
        """Build an APR from a percentage (e.g., 5.8 for 5.8%)."""
        return cls(rate=percentage / 100)

    @property
    def monthly_rate(self) -> float:
        """Get monthly interest rate."""
        return self.rate / 12

    @property
    def as_percentage(self) -> float:
        """Get APR as percentage (e.g., 5.8 for 5.8%)."""
        return self.rate * 100
