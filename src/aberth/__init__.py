"""aberth: simultaneous polynomial root finding with the Aberth-Ehrlich method."""

from . import (
    polynomial,
    root_finding,
    test_polynomial,
)

__all__ = [
    "polynomial",
    "root_finding",
    "test_polynomial",
]

__version__ = "0.1.0"
