import torch
from torch import Tensor

DEGREE = 7


def kam1(c: float) -> Tensor:
    r"""
    Coefficients of the "kam1" test polynomial.

    A sparse degree-7 polynomial with clusters of very small and very large
    roots, controlled by a small parameter ``c``.

    Mathematical Definition
    -----------------------

    .. math::

        p(x) = 9c^4 + 6c^2 x + x^2 + i c x^7

    Parameters
    ----------
    c : float
        Scale parameter, ``1e-20 < c < 1e-6``.

    Returns
    -------
    Tensor
        Eight coefficients in ascending order, complex128.

    Raises
    ------
    ValueError
        If ``c`` is outside ``(1e-20, 1e-6)``.

    References
    ----------
    - D.A. Bini and G. Fiorentino, "MPSolve 2.2 user's manual", test
      polynomial suite.
    """
    if not 1e-20 < c < 1e-6:
        raise ValueError(f"c must be in (1e-20, 1e-6), got {c}")

    coeffs = torch.zeros(DEGREE + 1, dtype=torch.complex128)
    coeffs[0] = 9 * c**4
    coeffs[1] = 6 * c**2
    coeffs[2] = 1.0
    coeffs[DEGREE] = c * 1j
    return coeffs
