from ._polynomial import Polynomial, polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_evaluate import polynomial_evaluate
from ._polynomial_reverse import polynomial_reverse

__all__ = [
    "Polynomial",
    "polynomial",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_evaluate",
    "polynomial_reverse",
]
