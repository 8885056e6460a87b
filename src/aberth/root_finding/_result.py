from typing import NamedTuple

from torch import Tensor


class RootFindingResult(NamedTuple):
    """Result of a simultaneous root finding routine.

    Parameters
    ----------
    roots : Tensor
        Root estimates, shape ``(degree,)``, sorted by ascending magnitude.
    converged : bool
        Whether every root reached the residual tolerance.
    num_iterations : int
        Number of iterations performed.
    residuals : Tensor
        Residual magnitudes ``|p(z)|`` at ``roots``.
    """

    roots: Tensor
    converged: bool
    num_iterations: int
    residuals: Tensor
