import pytest
import torch

from aberth.polynomial import polynomial
from aberth.root_finding import ParameterError, cauchy_bound, initial_roots


class TestCauchyBound:
    def test_monic(self):
        """x^2 - 5x + 6: max(6, 5, 1) + 1."""
        p = polynomial([6.0, -5.0, 1.0])
        torch.testing.assert_close(
            cauchy_bound(p), torch.tensor(7.0, dtype=torch.float64)
        )

    def test_scaled_by_leading_coefficient(self):
        p = polynomial([4.0, 0.0, 2.0])
        torch.testing.assert_close(
            cauchy_bound(p), torch.tensor(3.0, dtype=torch.float64)
        )

    def test_uses_complex_magnitude(self):
        p = polynomial([3.0 + 4.0j, 1.0j])
        torch.testing.assert_close(
            cauchy_bound(p), torch.tensor(6.0, dtype=torch.float64)
        )

    def test_bounds_roots(self):
        p = polynomial([-6.0, 11.0, -6.0, 1.0])  # roots 1, 2, 3
        assert cauchy_bound(p) > 3.0


class TestInitialRoots:
    bound = torch.tensor(3.0, dtype=torch.float64)

    def test_random_shape_and_dtype(self):
        g = torch.Generator().manual_seed(0)
        z = initial_roots(self.bound, 7, generator=g)
        assert z.shape == (7,)
        assert z.dtype == torch.complex128

    def test_random_in_quarter_disk(self):
        """Random guesses lie in the first-quadrant part of the disk."""
        g = torch.Generator().manual_seed(1)
        z = initial_roots(self.bound, 200, generator=g)
        assert torch.all(z.real >= 0)
        assert torch.all(z.imag >= 0)
        assert torch.all(z.abs() <= self.bound)

    def test_random_reproducible(self):
        g1 = torch.Generator().manual_seed(42)
        g2 = torch.Generator().manual_seed(42)
        torch.testing.assert_close(
            initial_roots(self.bound, 5, generator=g1),
            initial_roots(self.bound, 5, generator=g2),
        )

    def test_random_consumes_generator(self):
        g = torch.Generator().manual_seed(42)
        first = initial_roots(self.bound, 5, generator=g)
        second = initial_roots(self.bound, 5, generator=g)
        assert not torch.equal(first, second)

    def test_random_components(self):
        """a = R*u1, b = sqrt(R^2 - a^2)*u2 from successive draws."""
        g = torch.Generator().manual_seed(3)
        z = initial_roots(self.bound, 2, generator=g)

        g = torch.Generator().manual_seed(3)
        u = torch.rand(2, 2, generator=g, dtype=torch.float64)
        a = 3.0 * u[:, 0]
        b = torch.sqrt(9.0 - a * a) * u[:, 1]
        torch.testing.assert_close(z, torch.complex(a, b))

    def test_symmetric_recurrence(self):
        """z_k = z_{k-1}^2 / |z_{k-1}|."""
        g = torch.Generator().manual_seed(5)
        z = initial_roots(self.bound, 6, init="symmetric", generator=g)
        for k in range(1, 6):
            torch.testing.assert_close(z[k], z[k - 1] ** 2 / z[k - 1].abs())

    def test_symmetric_preserves_magnitude(self):
        g = torch.Generator().manual_seed(5)
        z = initial_roots(self.bound, 6, init="symmetric", generator=g)
        torch.testing.assert_close(z.abs(), z[0].abs().expand(6))

    def test_symmetric_first_matches_random(self):
        g = torch.Generator().manual_seed(9)
        z_sym = initial_roots(self.bound, 4, init="symmetric", generator=g)
        g = torch.Generator().manual_seed(9)
        z_rand = initial_roots(self.bound, 1, generator=g)
        torch.testing.assert_close(z_sym[0], z_rand[0])

    def test_complex64(self):
        g = torch.Generator().manual_seed(0)
        z = initial_roots(self.bound, 3, generator=g, dtype=torch.complex64)
        assert z.dtype == torch.complex64

    def test_unknown_init_raises(self):
        with pytest.raises(ParameterError, match="Unknown init"):
            initial_roots(self.bound, 3, init="rand")
