"""Domain errors."""


class DomainError(Exception):
    """Base class for domain errors."""

    pass


class InputValidationError(DomainError, ValueError):
    """Financing input is out of range or inconsistent.

    Raised by the input layer before any cost is computed. The calculator's value
    objects (APR, ComparisonHorizon) raise it only when called with unvalidated
    parameters.
    """

    pass


class RecommendationServiceError(DomainError):
    """The recommendation service failed or returned a malformed answer."""

    pass
