import numpy as np
import pytest
from scipy.special import roots_legendre

from skquad.numerics.gauss import LegendreQuadrature, KronrodQuadrature, \
     ChebyshevQuadrature, gauss_quadrature, LEGENDRE_MAX_ORDER, KRONROD_MAX_ORDER
from skquad.numerics.integration import UnsupportedRuleError, InvalidOrderError
from skquad.numerics.function import PolynomialFunction


def monomial_integral(k):
    # integral of x**k on [-1,1]
    return 0.0 if k % 2 == 1 else 2.0 / (k + 1)


@pytest.mark.parametrize("n", range(1, LEGENDRE_MAX_ORDER + 1))
def test_legendre_matches_reference_roots(n):
    quad = LegendreQuadrature(n)
    x, w = roots_legendre(n)
    assert len(quad) == n
    np.testing.assert_allclose(quad.points(), x, rtol=0, atol=1e-13)
    np.testing.assert_allclose(quad.weights(), w, rtol=0, atol=1e-13)


@pytest.mark.parametrize("n", range(1, LEGENDRE_MAX_ORDER + 1))
def test_legendre_weight_sum(n):
    assert abs(np.sum(LegendreQuadrature(n).weights()) - 2.0) < 1e-10


@pytest.mark.parametrize("n", range(1, KRONROD_MAX_ORDER + 1))
def test_kronrod_size_and_weight_sum(n):
    quad = KronrodQuadrature(n)
    assert len(quad) == 2*n + 1
    assert len(quad.weights()) == 2*n + 1
    assert abs(np.sum(quad.weights()) - 2.0) < 1e-10


@pytest.mark.parametrize("kind,n", [(kind, n) for kind in ('legendre', 'kronrod', 'chebyshev')
                                    for n in range(1, 12)])
def test_symmetric_nodes_and_weights(kind, n):
    quad = gauss_quadrature(kind, n)
    x, w = quad.points(), quad.weights()
    np.testing.assert_allclose(x, -x[::-1], rtol=0, atol=1e-15)
    np.testing.assert_allclose(w, w[::-1], rtol=0, atol=1e-15)
    assert np.all(np.diff(x) > 0)


@pytest.mark.parametrize("n", range(1, LEGENDRE_MAX_ORDER + 1))
def test_legendre_polynomial_exactness(n):
    quad = LegendreQuadrature(n)
    assert quad.degree() == 2*n - 1
    for k in range(2*n):
        value = quad.integrate(lambda x: x**k, -1.0, 1.0)
        assert abs(value - monomial_integral(k)) < 1e-12


@pytest.mark.parametrize("n", range(1, KRONROD_MAX_ORDER + 1))
def test_kronrod_polynomial_exactness(n):
    quad = KronrodQuadrature(n)
    for k in range(quad.degree() + 1):
        value = quad.integrate(lambda x: x**k, -1.0, 1.0)
        assert abs(value - monomial_integral(k)) < 1e-10


def test_order_two_examples():
    quad = LegendreQuadrature(2)
    assert abs(quad.integrate(lambda x: x**3, -1.0, 1.0)) < 1e-15
    assert np.isclose(quad.integrate(lambda x: x**2, -1.0, 1.0), 2.0/3.0, rtol=0, atol=1e-15)


@pytest.mark.parametrize("n", range(1, KRONROD_MAX_ORDER + 1))
def test_kronrod_extends_legendre(n):
    kronrod = KronrodQuadrature(n)
    legendre = LegendreQuadrature(n)
    np.testing.assert_allclose(kronrod.gauss_points(), legendre.points(), rtol=0, atol=1e-15)


def test_kronrod_is_more_accurate_than_legendre():
    f = lambda x: np.exp(x)
    exact = np.exp(1.0) - 1.0
    for n in (1, 2):
        gauss = LegendreQuadrature(n).integrate(f, 0.0, 1.0)
        kronrod = KronrodQuadrature(n).integrate(f, 0.0, 1.0)
        assert abs(kronrod - exact) < 1e-3 * abs(gauss - exact)


def test_chebyshev_nodes_and_weights():
    n = 7
    quad = ChebyshevQuadrature(n)
    i = np.arange(1, n+1)
    expected_nodes = np.cos((2*i - 1) / (2.0*n) * np.pi)
    np.testing.assert_allclose(np.sort(quad.points()), np.sort(expected_nodes), rtol=0, atol=1e-15)
    np.testing.assert_allclose(quad.weights(), np.pi/n * np.sqrt(1.0 - quad.points()**2),
                               rtol=0, atol=1e-15)
    assert quad.points()[n//2] == 0.0


@pytest.mark.parametrize("n", [1, 2, 3, 10, 25])
def test_chebyshev_weight_sum(n):
    total = np.sum(ChebyshevQuadrature(n).weights())
    assert np.isclose(total, (np.pi/n) / np.sin(0.5*np.pi/n), rtol=1e-13)


def test_chebyshev_weight_sum_converges_to_two():
    assert abs(np.sum(ChebyshevQuadrature(1000).weights()) - 2.0) < 1e-5


def test_chebyshev_integrates_weighted_polynomials():
    # Exact for sqrt(1-x^2) p(x) with deg p <= 2n-1.
    quad = ChebyshevQuadrature(5)
    p = PolynomialFunction([1.0, 0.0, 3.0])
    value = quad.integrate(lambda x: np.sqrt(1.0 - x*x) * p(x), -1.0, 1.0)
    # int sqrt(1-x^2) (1 + 3x^2) dx = pi/2 + 3 pi/8
    assert np.isclose(value, np.pi/2 + 3*np.pi/8, rtol=1e-13)


def test_chebyshev_any_order():
    quad = gauss_quadrature('chebyshev', 200)
    assert len(quad) == 200
    assert quad.degree() is None
    assert quad.max_order() is None


@pytest.mark.parametrize("kind", ['legendre', 'kronrod'])
def test_orders_outside_table_are_rejected(kind):
    with pytest.raises(UnsupportedRuleError):
        gauss_quadrature(kind, 12)
    with pytest.raises(ValueError):
        gauss_quadrature(kind, 100)


def test_legendre_order_twelve_is_rejected():
    with pytest.raises(UnsupportedRuleError):
        LegendreQuadrature(12)


@pytest.mark.parametrize("kind", ['hermite', '', None, 3])
def test_unknown_kind_is_rejected(kind):
    with pytest.raises(UnsupportedRuleError):
        gauss_quadrature(kind, 3)


@pytest.mark.parametrize("order", [0, -1, 2.5, '3', True])
@pytest.mark.parametrize("kind", ['legendre', 'kronrod', 'chebyshev'])
def test_invalid_orders_are_rejected(kind, order):
    with pytest.raises(InvalidOrderError):
        gauss_quadrature(kind, order)


def test_kind_names_and_aliases():
    assert isinstance(gauss_quadrature('LEG', 3), LegendreQuadrature)
    assert isinstance(gauss_quadrature('Kronrod', 3), KronrodQuadrature)
    assert isinstance(gauss_quadrature('che', 3), ChebyshevQuadrature)
    assert gauss_quadrature('kro', 2).kind == 'kronrod'
    assert np.int64(4) == gauss_quadrature('legendre', np.int64(4)).order()


@pytest.mark.parametrize("kind", ['legendre', 'kronrod', 'chebyshev'])
def test_construction_is_deterministic(kind):
    q1 = gauss_quadrature(kind, 9)
    q2 = gauss_quadrature(kind, 9)
    assert q1.points().tobytes() == q2.points().tobytes()
    assert q1.weights().tobytes() == q2.weights().tobytes()


def test_rules_are_read_only():
    quad = LegendreQuadrature(4)
    with pytest.raises(ValueError):
        quad.points()[0] = 0.0
    with pytest.raises(ValueError):
        quad.weights()[0] = 0.0


def test_iterpoints_pairs_nodes_with_weights():
    quad = KronrodQuadrature(2)
    pairs = list(quad.iterpoints())
    assert len(pairs) == 5
    assert pairs[2] == (0.0, 0.6222222222222222)
