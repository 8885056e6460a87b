from typing import Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from aberth.polynomial._polynomial_error import PolynomialError


@tensorclass
class Polynomial:
    """Polynomial in power basis with ascending complex coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i.

    Notes
    -----
    Polynomials are treated as values: no operation in this package
    modifies ``coeffs`` in place, and every operation returns a new
    ``Polynomial``. Use ``p.clone()`` for an independent copy.

    The leading coefficient is not required to be non-zero here. Callers
    that depend on the formal degree (root finding) check it themselves.

    Examples
    --------
    Polynomial 1 + 2x + 3x^2:
        polynomial([1.0, 2.0, 3.0])

    Evaluation:
        p(x)     # polynomial_evaluate(p, x)
    """

    coeffs: Tensor

    def __call__(self, x: Union[Tensor, complex]) -> Tensor:
        from ._polynomial_evaluate import polynomial_evaluate

        return polynomial_evaluate(self, x)


def polynomial(coeffs: Union[Tensor, Sequence[complex]]) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of complex
        Coefficients in ascending order, shape (N,). Must have at least one
        coefficient. Tensors keep their dtype and device; Python sequences
        are converted to ``complex128``.

    Returns
    -------
    Polynomial
        Polynomial instance owning a copy of ``coeffs``.

    Raises
    ------
    PolynomialError
        If coeffs is empty or not one-dimensional.

    Examples
    --------
    >>> p = polynomial(torch.tensor([1.0, 2.0, 3.0]))  # 1 + 2x + 3x^2
    >>> p.coeffs
    tensor([1., 2., 3.])
    """
    if isinstance(coeffs, Tensor):
        coeffs = coeffs.detach().clone()
    else:
        coeffs = torch.as_tensor(list(coeffs), dtype=torch.complex128)

    if coeffs.dim() != 1:
        raise PolynomialError(
            f"Polynomial coefficients must be one-dimensional, got shape {tuple(coeffs.shape)}"
        )

    if coeffs.numel() == 0:
        raise PolynomialError("Polynomial must have at least one coefficient")

    return Polynomial(coeffs=coeffs)
