import numpy as np
import pytest

from sdopt.objectives import QUADRATIC


def test_quadratic_value_is_sum_of_squares():
    assert QUADRATIC.compute(np.array([1.0, -2.0, 3.0])) == pytest.approx(14.0)


@pytest.mark.parametrize("dim", [1, 2, 7, 100])
def test_quadratic_gradient_is_twice_x(rng, dim):
    x = rng.uniform(-1e4, 1e4, size=dim)
    assert np.array_equal(QUADRATIC.gradient(x), 2 * x)


def test_quadratic_gradient_does_not_mutate_input():
    x = np.array([1.5, -0.5])
    QUADRATIC.gradient(x)
    assert np.array_equal(x, np.array([1.5, -0.5]))


def test_quadratic_metadata():
    assert QUADRATIC.name == "Quadratic"
    assert QUADRATIC.bounds == (-5.0, 5.0)
    assert QUADRATIC.min_dim == 1


def test_gradient_magnitude_is_euclidean_norm():
    assert QUADRATIC.gradient_magnitude(np.array([3.0, -4.0])) == 5.0
    assert QUADRATIC.gradient_magnitude(np.array([0.0, 0.0])) == 0.0
