"""Exception classes for root finding module."""


class RootFindingError(Exception):
    """Base exception for root finding errors."""

    pass


class ConvergenceWarning(UserWarning):
    """Warning for root estimates that did not converge within the budget."""

    pass


class ParameterError(RootFindingError, ValueError):
    """Invalid root finder configuration.

    Raised when the tolerance is below the precision floor, the iteration
    budget is not a positive integer, or the initial-guess mode is unknown.
    """

    pass
