"""Convergence utilities for root finding."""

import torch
from torch import Tensor


def minimum_tolerance(dtype: torch.dtype) -> float:
    """Return the smallest tolerance accepted for a dtype.

    This is the smallest positive normal value of the matching real dtype
    (``DBL_MIN`` for double precision).

    Parameters
    ----------
    dtype : torch.dtype
        Real or complex tensor dtype.

    Returns
    -------
    float
        Tolerance floor.
    """
    if dtype.is_complex:
        dtype = torch.float64 if dtype == torch.complex128 else torch.float32
    return torch.finfo(dtype).tiny


def check_convergence(
    converged: Tensor, residual: Tensor, tol: float
) -> Tensor:
    """Update per-root convergence flags.

    A root is converged once its residual ``|p(z)|`` drops below ``tol``.
    Flags are monotone: a converged root stays converged even if a later
    residual is larger.

    Parameters
    ----------
    converged : Tensor
        Current boolean flags.
    residual : Tensor
        Residual magnitudes at the current estimates.
    tol : float
        Residual tolerance.

    Returns
    -------
    Tensor
        Updated boolean flags.
    """
    return converged | (residual < tol)
