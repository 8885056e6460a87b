import torch

from ._polynomial import Polynomial


def polynomial_reverse(p: Polynomial) -> Polynomial:
    """Reverse the coefficient order of a polynomial.

    The reversed polynomial reads the coefficients in descending-power
    order as if they were ascending. For a polynomial of degree n,

        p(z) = z^n * p_rev(1/z)

    which lets large-magnitude points be evaluated near the origin instead.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Reversed polynomial, same number of coefficients.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_reverse(p).coeffs  # 3 + 2x + x^2
    tensor([3., 2., 1.])
    """
    return Polynomial(coeffs=torch.flip(p.coeffs, dims=[-1]))
