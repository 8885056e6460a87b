from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Notes
    -----
    This returns the formal degree (len(coeffs) - 1), not the actual degree
    which would require checking for trailing zeros.
    """
    return p.coeffs.shape[-1] - 1
