from ._degree_error import DegreeError
from ._polynomial import (
    Polynomial,
    polynomial,
    polynomial_degree,
    polynomial_derivative,
    polynomial_evaluate,
    polynomial_reverse,
)
from ._polynomial_error import PolynomialError

__all__ = [
    "DegreeError",
    "Polynomial",
    "PolynomialError",
    "polynomial",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_evaluate",
    "polynomial_reverse",
]
