"""Aberth-Ehrlich polynomial root finding algorithm."""

import warnings
from typing import Sequence, Union

import torch
from torch import Generator, Tensor

from aberth.polynomial import (
    DegreeError,
    Polynomial,
    polynomial,
    polynomial_degree,
    polynomial_derivative,
    polynomial_evaluate,
    polynomial_reverse,
)

from ._convergence import check_convergence, minimum_tolerance
from ._exceptions import ConvergenceWarning, ParameterError
from ._initial_roots import INIT_MODES, cauchy_bound, initial_roots
from ._result import RootFindingResult


def _complex_dtype(dtype: torch.dtype) -> torch.dtype:
    if dtype.is_complex:
        return dtype
    if dtype in (torch.float32, torch.float16, torch.bfloat16):
        return torch.complex64
    return torch.complex128


class RootFinder:
    """Simultaneous approximation of all roots of a polynomial.

    The finder owns the target polynomial together with its derivative,
    its coefficient reversal and the derivative of the reversal. They are
    built once at construction and used to apply Aberth-Ehrlich corrections
    to every root estimate until each residual ``|p(z)|`` falls below
    ``tol`` or ``maxiter`` iterations have run.

    Parameters
    ----------
    coeffs : Polynomial, Tensor or sequence of complex
        Polynomial coefficients in ascending order of powers, shape (N,).
        Real input is promoted to the matching complex dtype.
    tol : float, default=1e-9
        Residual tolerance. Must be at least the smallest positive normal
        value of the coefficient precision.
    maxiter : int, default=200
        Maximum number of iterations.
    init : {"random", "symmetric"}, default="random"
        How initial guesses are generated, see
        :func:`~aberth.root_finding.initial_roots`.
    generator : torch.Generator, optional
        Pseudorandom number generator for the initial guesses. If None, uses
        the default generator.

    Raises
    ------
    ParameterError
        If ``tol`` is below the floor, ``maxiter`` is not a positive integer,
        or ``init`` is not recognized.
    DegreeError
        If the polynomial is constant or its leading coefficient is zero.

    Examples
    --------
    >>> g = torch.Generator().manual_seed(8008335)
    >>> finder = RootFinder([-1.0, 0.0, 0.0, 1.0], generator=g)  # x^3 - 1
    >>> finder.compute()
    True
    >>> finder.zeros.abs()
    tensor([1.0000, 1.0000, 1.0000], dtype=torch.float64)
    """

    def __init__(
        self,
        coeffs: Union[Polynomial, Tensor, Sequence[complex]],
        *,
        tol: float = 1e-9,
        maxiter: int = 200,
        init: str = "random",
        generator: Generator | None = None,
    ):
        if isinstance(coeffs, Polynomial):
            coeffs = coeffs.coeffs
        p = polynomial(coeffs)
        cdtype = _complex_dtype(p.coeffs.dtype)

        floor = minimum_tolerance(cdtype)
        if not tol >= floor:
            raise ParameterError(f"tol must be at least {floor}, got {tol}")

        if init not in INIT_MODES:
            raise ParameterError(
                f"Unknown init: {init}. Use 'random' or 'symmetric'."
            )

        if (
            isinstance(maxiter, bool)
            or not isinstance(maxiter, int)
            or maxiter < 1
        ):
            raise ParameterError(
                f"maxiter must be a positive integer, got {maxiter}"
            )

        degree = polynomial_degree(p)
        if degree < 1:
            raise DegreeError("Polynomial must have degree >= 1")

        if p.coeffs[-1] == 0:
            raise DegreeError(
                "Leading coefficient must be non-zero for root finding."
            )

        self._polynomial = Polynomial(coeffs=p.coeffs.to(cdtype))
        self._derivative = polynomial_derivative(self._polynomial)
        self._reversed = polynomial_reverse(self._polynomial)
        self._reversed_derivative = polynomial_derivative(self._reversed)

        self._degree = degree
        self._tol = tol
        self._maxiter = maxiter
        self._init = init

        device = self._polynomial.coeffs.device
        self._converged_roots = torch.zeros(
            degree, dtype=torch.bool, device=device
        )
        self._inv_diff_sum = torch.zeros(degree, dtype=cdtype, device=device)
        self._num_iterations = 0
        self._converged = False

        self._zeros = initial_roots(
            cauchy_bound(self._polynomial),
            degree,
            init=init,
            generator=generator,
            dtype=cdtype,
        )

    @property
    def degree(self) -> int:
        return self._degree

    @property
    def tol(self) -> float:
        return self._tol

    @property
    def maxiter(self) -> int:
        return self._maxiter

    @property
    def init(self) -> str:
        return self._init

    @property
    def polynomial(self) -> Polynomial:
        """Copy of the target polynomial."""
        return self._polynomial.clone()

    @property
    def zeros(self) -> Tensor:
        """Copy of the current root estimates.

        Sorted by ascending magnitude once :meth:`compute` has returned.
        """
        return self._zeros.clone()

    @property
    def converged(self) -> bool:
        """Whether every root estimate has converged."""
        return self._converged

    @property
    def converged_roots(self) -> Tensor:
        """Per-root convergence flags, aligned with :attr:`zeros`."""
        return self._converged_roots.clone()

    @property
    def num_iterations(self) -> int:
        return self._num_iterations

    def residuals(self) -> Tensor:
        """Residual magnitudes ``|p(z)|`` at the current estimates."""
        return polynomial_evaluate(self._polynomial, self._zeros).abs()

    def max_residual(self) -> tuple[int, float]:
        """Index and value of the largest residual."""
        residuals = self.residuals()
        index = int(torch.argmax(residuals))
        return index, float(residuals[index])

    def compute(self, verbose: bool = False) -> bool:
        """Run Aberth-Ehrlich iterations until convergence.

        Iterates while fewer than ``maxiter`` iterations have run and some
        root has not converged. Each iteration recomputes the repulsion sums
        and then corrects every estimate. Afterwards the estimates are
        sorted by ascending magnitude.

        Parameters
        ----------
        verbose : bool
            If True, report the iteration count and the largest residual
            through ``warnings.warn``.

        Returns
        -------
        bool
            True iff all roots converged to within ``tol``.

        Warns
        -----
        ConvergenceWarning
            If the iteration budget was exhausted without convergence.
        """
        while self._num_iterations < self._maxiter and not self._converged:
            self._compute_inv_diff_sum()
            self._newton_step()
            self._converged = bool(self._converged_roots.all())
            self._num_iterations += 1

        # Sort zeros by magnitude, keep per-root state aligned
        order = torch.argsort(self._zeros.abs(), stable=True)
        self._zeros = self._zeros[order]
        self._converged_roots = self._converged_roots[order]
        self._inv_diff_sum = self._inv_diff_sum[order]

        if not self._converged:
            warnings.warn(
                f"Failed to converge all zeros after maximum ({self._maxiter}) iterations",
                ConvergenceWarning,
                stacklevel=2,
            )

        if verbose:
            index, value = self.max_residual()
            warnings.warn(
                f"Iterations performed = {self._num_iterations}, "
                f"index of max error = {index}, "
                f"max error = {value:.15e}",
                RuntimeWarning,
                stacklevel=2,
            )

        return self._converged

    def _compute_inv_diff_sum(self):
        # Sum of 1/(z_i - z_j) for j != i
        z = self._zeros
        z_diff = z.unsqueeze(-1) - z.unsqueeze(-2)  # (degree, degree)
        mask = torch.eye(self._degree, dtype=torch.bool, device=z.device)
        inv_diff = (1.0 / z_diff).masked_fill(mask, 0.0)
        self._inv_diff_sum = inv_diff.sum(dim=-1)

    def _newton_step(self):
        # Bini, Numerical Algorithms 13 (1996) 179-200
        z = self._zeros
        ratio = torch.empty_like(z)

        # Inside the unit disk p(z)/p'(z) will not overflow
        inner = z.abs() < 1
        z_inner = z[inner]
        ratio[inner] = polynomial_evaluate(
            self._polynomial, z_inner
        ) / polynomial_evaluate(self._derivative, z_inner)

        # Outside it, use p(z) = z^n p_rev(1/z).
        # An exact root, p_rev(gamma) == 0, gives a zero step
        gamma = 1.0 / z[~inner]
        p_rev = polynomial_evaluate(self._reversed, gamma)
        ratio[~inner] = p_rev / (
            self._degree * gamma * p_rev
            - gamma
            * gamma
            * polynomial_evaluate(self._reversed_derivative, gamma)
        )

        # Aberth correction
        correction = ratio / (1.0 - ratio * self._inv_diff_sum)
        self._zeros = z - correction

        residual = polynomial_evaluate(self._polynomial, self._zeros).abs()
        self._converged_roots = check_convergence(
            self._converged_roots, residual, self._tol
        )

    def clone(self) -> "RootFinder":
        """Return an independent copy including the iteration state."""
        other = RootFinder.__new__(RootFinder)
        other.__dict__.update(self.__dict__)
        other._polynomial = self._polynomial.clone()
        other._derivative = self._derivative.clone()
        other._reversed = self._reversed.clone()
        other._reversed_derivative = self._reversed_derivative.clone()
        other._zeros = self._zeros.clone()
        other._converged_roots = self._converged_roots.clone()
        other._inv_diff_sum = self._inv_diff_sum.clone()
        return other

    def __copy__(self) -> "RootFinder":
        return self.clone()

    def __deepcopy__(self, memo) -> "RootFinder":
        return self.clone()

    def __repr__(self) -> str:
        return (
            f"RootFinder(degree={self._degree}, tol={self._tol}, "
            f"maxiter={self._maxiter}, init={self._init!r}, "
            f"num_iterations={self._num_iterations}, "
            f"converged={self._converged})"
        )


def aberth_ehrlich(
    coeffs: Union[Polynomial, Tensor, Sequence[complex]],
    *,
    tol: float = 1e-9,
    maxiter: int = 200,
    init: str = "random",
    generator: Generator | None = None,
    verbose: bool = False,
) -> RootFindingResult:
    """Find all roots of a polynomial using Aberth-Ehrlich iteration.

    The Aberth-Ehrlich method is an iterative algorithm that simultaneously
    refines all roots of a polynomial. It is O(n^2) per iteration.

    The algorithm combines Newton's method with an Aberth correction term
    that repels roots from each other, preventing multiple estimates from
    converging to the same location.

    Parameters
    ----------
    coeffs : Polynomial, Tensor or sequence of complex
        Polynomial coefficients in ascending order of powers, shape (N,).
        Represents c_0 + c_1*x + c_2*x^2 + ... + c_{N-1}*x^{N-1}.
        The polynomial degree is N-1.
    tol : float, default=1e-9
        Convergence tolerance on the residual ``|p(z)|`` of every root.
    maxiter : int, default=200
        Maximum number of iterations.
    init : {"random", "symmetric"}, default="random"
        Initial guess generation mode.
    generator : torch.Generator, optional
        Pseudorandom number generator for the initial guesses.
    verbose : bool, default=False
        Report iteration diagnostics through ``warnings.warn``.

    Returns
    -------
    RootFindingResult
        Roots sorted by ascending magnitude, convergence flag, iteration
        count and final residuals. Roots are complex even if all roots are
        real: complex128 for float64 or Python input, complex64 for float32.

    Raises
    ------
    ParameterError
        If ``tol``, ``maxiter`` or ``init`` are invalid.
    DegreeError
        If the polynomial has degree < 1 or a zero leading coefficient.

    Warns
    -----
    ConvergenceWarning
        If not every root converged within ``maxiter`` iterations. The
        estimates are still returned, with ``converged=False``.

    Examples
    --------
    Find roots of x^2 - 5x + 6 = (x-2)(x-3):

    >>> import torch
    >>> from aberth.root_finding import aberth_ehrlich
    >>> coeffs = torch.tensor([6.0, -5.0, 1.0], dtype=torch.float64)
    >>> result = aberth_ehrlich(coeffs)
    >>> result.roots.real  # doctest: +ELLIPSIS
    tensor([2.0..., 3.0...], dtype=torch.float64)

    Notes
    -----
    **Algorithm**: At each iteration, for each root estimate z_k, compute:

    1. Newton ratio: w_k = p(z_k) / p'(z_k), evaluated through the
       reversed polynomial when |z_k| >= 1 to avoid overflow
    2. Aberth correction: sum_j (1 / (z_k - z_j)) for j != k
    3. Update: z_k <- z_k - w_k / (1 - w_k * correction)

    A root is converged once |p(z_k)| < tol and stays converged.

    **Initial guesses**: drawn inside the Cauchy bound
    max_i(|c_i| / |c_n|) + 1.

    References
    ----------
    .. [1] O. Aberth, "Iteration methods for finding all zeros of a polynomial
           simultaneously", Mathematics of Computation, 27(122):339-344, 1973.
    .. [2] L.W. Ehrlich, "A modified Newton method for polynomials",
           Communications of the ACM, 10(2):107-108, 1967.
    .. [3] D.A. Bini, "Numerical computation of polynomial zeros by means of
           Aberth's method", Numerical Algorithms, 13:179-200, 1996.
    """
    finder = RootFinder(
        coeffs, tol=tol, maxiter=maxiter, init=init, generator=generator
    )
    converged = finder.compute(verbose=verbose)
    return RootFindingResult(
        roots=finder.zeros,
        converged=converged,
        num_iterations=finder.num_iterations,
        residuals=finder.residuals(),
    )
