from ._aberth_ehrlich import RootFinder, aberth_ehrlich
from ._convergence import check_convergence, minimum_tolerance
from ._exceptions import ConvergenceWarning, ParameterError, RootFindingError
from ._initial_roots import INIT_MODES, cauchy_bound, initial_roots
from ._result import RootFindingResult

__all__ = [
    "INIT_MODES",
    "RootFinder",
    "RootFindingResult",
    "aberth_ehrlich",
    "cauchy_bound",
    "check_convergence",
    "initial_roots",
    "minimum_tolerance",
    "ConvergenceWarning",
    "ParameterError",
    "RootFindingError",
]
