import torch
from torch import Tensor


def roots_of_unity(degree: int) -> Tensor:
    r"""
    Coefficients of the polynomial whose roots are the n-th roots of unity.

    Mathematical Definition
    -----------------------

    .. math::

        p(x) = x^n - 1

    Parameters
    ----------
    degree : int
        Polynomial degree ``n``, at least 1.

    Returns
    -------
    Tensor
        Coefficients ``[-1, 0, ..., 0, 1]`` in ascending order, complex128.

    Raises
    ------
    ValueError
        If ``degree`` is less than 1.

    Examples
    --------
    >>> roots_of_unity(3)
    tensor([-1.+0.j, 0.+0.j, 0.+0.j, 1.+0.j], dtype=torch.complex128)
    """
    if degree < 1:
        raise ValueError(f"Degree of roots of unity must be >= 1, got {degree}")

    coeffs = torch.zeros(degree + 1, dtype=torch.complex128)
    coeffs[0] = -1.0
    coeffs[-1] = 1.0
    return coeffs
