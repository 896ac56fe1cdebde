import numpy as np
import pytest

from ivo.coefficients import Data, Equation, Initial


def test_equation_coefficients():
    equation = Equation(lambda x, y, t: (x + t, y - t), 0.5, lambda x, y, t: x * y * t)
    assert equation.convection(1.0, 2.0, 3.0) == (4.0, -1.0)
    assert equation.diffusion == 0.5
    assert equation.reaction(1.0, 2.0, 3.0) == 6.0


def test_equation_convection_returns_floats():
    equation = Equation(lambda x, y, t: (1, 2), 1, lambda x, y, t: 0)
    bx, by = equation.convection(0, 0, 0)
    assert (bx, by) == (1.0, 2.0)
    assert isinstance(bx, float) and isinstance(by, float)


def test_data_evaluations():
    data = Data(lambda x, y, t: x + y + t, lambda x, y, t: x * y, lambda x, y, t: t)
    assert data.source(1.0, 2.0, 3.0) == 6.0
    assert data.dirichlet(2.0, 3.0, 0.0) == 6.0
    assert data.neumann(0.0, 0.0, 4.0) == 4.0


def test_initial_scalar():
    initial = Initial(lambda x, y: x - y)
    assert initial(3.0, 1.0) == 2.0


def test_initial_vector_matches_scalar():
    initial = Initial(lambda x, y: x * x + y)
    xs = np.array([0.0, 1.0, 2.0])
    ys = np.array([1.0, 1.0, 1.0])
    values = initial(xs, ys)
    assert values.shape == (3,)
    assert list(values) == [initial(a, b) for a, b in zip(xs, ys)]


def test_initial_vector_shape_mismatch():
    initial = Initial(lambda x, y: x + y)
    with pytest.raises(ValueError):
        initial(np.zeros(3), np.zeros(2))