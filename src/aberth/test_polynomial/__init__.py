from ._easy import easy
from ._kam1 import kam1
from ._roots_of_unity import roots_of_unity
from ._truncated_exponential import truncated_exponential

__all__ = [
    "easy",
    "kam1",
    "roots_of_unity",
    "truncated_exponential",
]
