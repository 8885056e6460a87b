class PolynomialError(Exception):
    """Base exception for polynomial operations."""

    pass
