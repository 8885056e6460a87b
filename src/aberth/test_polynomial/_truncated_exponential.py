import torch
from torch import Tensor

MAX_DEGREE = 10


def truncated_exponential(degree: int) -> Tensor:
    r"""
    Coefficients of the truncated exponential series.

    Mathematical Definition
    -----------------------

    .. math::

        p(x) = \sum_{i=0}^{n} \frac{x^i}{i!}

    Parameters
    ----------
    degree : int
        Polynomial degree ``n``, at most 10.

    Returns
    -------
    Tensor
        Coefficients ``1 / i!`` in ascending order, complex128.

    Raises
    ------
    ValueError
        If ``degree`` is negative or greater than 10.

    Examples
    --------
    >>> truncated_exponential(2)
    tensor([1.0000+0.j, 1.0000+0.j, 0.5000+0.j], dtype=torch.complex128)
    """
    if not 0 <= degree <= MAX_DEGREE:
        raise ValueError(
            f"Degree of truncated exponential must be in [0, {MAX_DEGREE}], got {degree}"
        )

    # 0!, 1!, 2!, ..., n!
    factorials = torch.cat(
        [
            torch.ones(1, dtype=torch.float64),
            torch.cumprod(
                torch.arange(1, degree + 1, dtype=torch.float64), dim=0
            ),
        ]
    )
    return (1.0 / factorials).to(torch.complex128)
