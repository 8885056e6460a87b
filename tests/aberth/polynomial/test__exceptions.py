"""Tests for polynomial exception hierarchy."""

import pytest

from aberth.polynomial import DegreeError, PolynomialError


class TestExceptionHierarchy:
    """Test that all exceptions inherit from PolynomialError."""

    def test_polynomial_error_is_exception(self):
        assert issubclass(PolynomialError, Exception)

    def test_degree_error_is_polynomial_error(self):
        with pytest.raises(PolynomialError):
            raise DegreeError("test")


class TestExceptionMessages:
    """Test that exceptions preserve their messages."""

    def test_degree_error_message(self):
        with pytest.raises(DegreeError, match="degree >= 1"):
            raise DegreeError("Polynomial must have degree >= 1")
