import torch
from torch import Tensor

MAX_DEGREE = 100


def easy(degree: int) -> Tensor:
    r"""
    Coefficients of the "easy" test polynomial.

    Mathematical Definition
    -----------------------

    .. math::

        p(x) = \sum_{i=0}^{n} (i + 1) x^i

    Parameters
    ----------
    degree : int
        Polynomial degree ``n``, at most 100.

    Returns
    -------
    Tensor
        Coefficients ``[1, 2, ..., n + 1]`` in ascending order, complex128.

    Raises
    ------
    ValueError
        If ``degree`` is negative or greater than 100.

    Examples
    --------
    >>> easy(3)
    tensor([1.+0.j, 2.+0.j, 3.+0.j, 4.+0.j], dtype=torch.complex128)

    References
    ----------
    - D.A. Bini and G. Fiorentino, "MPSolve 2.2 user's manual", test
      polynomial suite.
    """
    if not 0 <= degree <= MAX_DEGREE:
        raise ValueError(
            f"Degree of easy polynomial must be in [0, {MAX_DEGREE}], got {degree}"
        )

    coeffs = torch.arange(1, degree + 2, dtype=torch.float64)
    return coeffs.to(torch.complex128)
