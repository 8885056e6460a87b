from typing import Union

import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_evaluate(p: Polynomial, x: Union[Tensor, complex]) -> Tensor:
    """Evaluate polynomial at points using Horner's method.

    Starts from the leading coefficient and repeatedly multiplies by ``x``
    and adds the next lower-order coefficient.

    Parameters
    ----------
    p : Polynomial
        Polynomial with coefficients shape (N,).
    x : Tensor or complex
        Evaluation points, any shape. Python scalars give a 0-d result.

    Returns
    -------
    Tensor
        Values p(x), same shape as ``x``, in the promoted dtype of the
        coefficients and ``x``.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> polynomial_evaluate(p, torch.tensor([0.0, 1.0, 2.0]))
    tensor([ 1.,  6., 17.])
    """
    coeffs = p.coeffs

    if not isinstance(x, Tensor):
        # Python scalars are taken at double precision
        dtype = torch.complex128 if isinstance(x, complex) else torch.float64
        x = torch.as_tensor(x, dtype=dtype, device=coeffs.device)

    common_dtype = torch.promote_types(coeffs.dtype, x.dtype)
    coeffs = coeffs.to(common_dtype)
    x = x.to(common_dtype)

    # Start with leading coefficient
    result = torch.zeros_like(x) + coeffs[-1]

    for i in range(coeffs.shape[-1] - 2, -1, -1):
        result = result * x + coeffs[i]

    return result
