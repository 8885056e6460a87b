import math

import pytest
import torch

from aberth.polynomial import polynomial, polynomial_degree
from aberth.test_polynomial import (
    easy,
    kam1,
    roots_of_unity,
    truncated_exponential,
)


class TestEasy:
    def test_coefficients(self):
        torch.testing.assert_close(
            easy(3),
            torch.tensor([1.0, 2.0, 3.0, 4.0], dtype=torch.complex128),
        )

    def test_degree(self):
        assert polynomial_degree(polynomial(easy(100))) == 100

    @pytest.mark.parametrize("degree", [-1, 101])
    def test_out_of_range_raises(self, degree):
        with pytest.raises(ValueError, match="easy"):
            easy(degree)


class TestTruncatedExponential:
    def test_coefficients(self):
        coeffs = truncated_exponential(10)
        assert coeffs.dtype == torch.complex128
        expected = torch.tensor(
            [1.0 / math.factorial(i) for i in range(11)], dtype=torch.float64
        ).to(torch.complex128)
        torch.testing.assert_close(coeffs, expected)

    def test_degree_zero(self):
        torch.testing.assert_close(
            truncated_exponential(0), torch.tensor([1.0 + 0j], dtype=torch.complex128)
        )

    @pytest.mark.parametrize("degree", [-1, 11])
    def test_out_of_range_raises(self, degree):
        with pytest.raises(ValueError, match="truncated exponential"):
            truncated_exponential(degree)


class TestKam1:
    def test_coefficients(self):
        c = 1e-7
        coeffs = kam1(c)
        assert coeffs.shape == (8,)
        expected = torch.zeros(8, dtype=torch.complex128)
        expected[0] = 9 * c**4
        expected[1] = 6 * c**2
        expected[2] = 1.0
        expected[7] = c * 1j
        torch.testing.assert_close(coeffs, expected, rtol=0, atol=0)

    @pytest.mark.parametrize("c", [1e-6, 1e-20, 1.0, 0.0])
    def test_out_of_range_raises(self, c):
        with pytest.raises(ValueError, match="c must be"):
            kam1(c)


class TestRootsOfUnity:
    def test_coefficients(self):
        torch.testing.assert_close(
            roots_of_unity(3),
            torch.tensor([-1.0, 0.0, 0.0, 1.0], dtype=torch.complex128),
        )

    def test_degree_one(self):
        torch.testing.assert_close(
            roots_of_unity(1),
            torch.tensor([-1.0, 1.0], dtype=torch.complex128),
        )

    def test_degree_zero_raises(self):
        with pytest.raises(ValueError, match=">= 1"):
            roots_of_unity(0)
