"""Initial root guesses for simultaneous root finding."""

import torch
from torch import Generator, Tensor

from aberth.polynomial import Polynomial

from ._exceptions import ParameterError

INIT_MODES = ("random", "symmetric")


def cauchy_bound(p: Polynomial) -> Tensor:
    """Cauchy upper bound on the magnitude of the roots of ``p``.

    Computed as max_i(|c_i| / |c_n|) + 1 over all coefficients. The leading
    coefficient must be non-zero.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Tensor
        Real scalar bound.

    References
    ----------
    .. [1] https://en.wikipedia.org/wiki/Geometrical_properties_of_polynomial_roots
    """
    magnitudes = p.coeffs.abs()
    return (magnitudes / magnitudes[-1]).max() + 1.0


def _quarter_disk_sample(bound: Tensor, u: Tensor) -> Tensor:
    # a in [0, R), b in [0, sqrt(R^2 - a^2)): first quadrant of the disk
    a = bound * u[..., 0]
    b = torch.sqrt(bound * bound - a * a) * u[..., 1]
    return torch.complex(a, b)


def initial_roots(
    bound: Tensor,
    degree: int,
    *,
    init: str = "random",
    generator: Generator | None = None,
    dtype: torch.dtype = torch.complex128,
) -> Tensor:
    """Generate initial guesses for ``degree`` roots inside radius ``bound``.

    Parameters
    ----------
    bound : Tensor
        Upper bound on root magnitude (see :func:`cauchy_bound`).
    degree : int
        Number of guesses.
    init : {"random", "symmetric"}
        ``"random"`` draws every guess independently as ``a + b*i`` with
        ``a = R*u1`` and ``b = sqrt(R^2 - a^2)*u2``, where ``u1`` and ``u2``
        are successive uniform draws from ``generator``. ``"symmetric"``
        draws the first guess the same way and derives each following guess
        from the previous one by ``z_k = z_{k-1}^2 / |z_{k-1}|``.
    generator : torch.Generator, optional
        Pseudorandom number generator for sampling. If None, uses the
        default generator.
    dtype : torch.dtype
        Complex dtype of the guesses.

    Returns
    -------
    Tensor
        Initial guesses, shape (degree,).

    Raises
    ------
    ParameterError
        If ``init`` is not one of ``"random"`` or ``"symmetric"``.

    Notes
    -----
    Random guesses all lie in the first quadrant. The repulsion term of the
    Aberth-Ehrlich correction spreads them out during iteration.

    In symmetric mode a first draw with ``u2 == 0`` gives a positive real
    guess, which ``z^2 / |z|`` maps to itself. All guesses then coincide and
    the repulsion sum is not finite.

    Examples
    --------
    >>> g = torch.Generator().manual_seed(42)
    >>> z = initial_roots(torch.tensor(2.0, dtype=torch.float64), 3, generator=g)
    >>> z.shape
    torch.Size([3])
    """
    real_dtype = torch.float64 if dtype == torch.complex128 else torch.float32
    bound = bound.to(real_dtype)

    if init == "random":
        u = torch.rand(
            degree,
            2,
            generator=generator,
            dtype=real_dtype,
            device=bound.device,
        )
        return _quarter_disk_sample(bound, u)

    if init == "symmetric":
        u = torch.rand(
            2, generator=generator, dtype=real_dtype, device=bound.device
        )
        z = _quarter_disk_sample(bound, u)

        # Squaring doubles the angle, dividing by |z| keeps the magnitude
        roots = torch.empty(degree, dtype=dtype, device=bound.device)
        for k in range(degree):
            if k > 0:
                z = z * z / z.abs()
            roots[k] = z
        return roots

    raise ParameterError(
        f"Unknown init: {init}. Use 'random' or 'symmetric'."
    )
