"""Fixed-order quadrature rules for definite integrals on an interval."""

from .numerics.gauss import LegendreQuadrature, KronrodQuadrature, \
     ChebyshevQuadrature, gauss_quadrature
from .numerics.fejer import FejerFirstQuadrature, FejerSecondQuadrature, \
     fejer_quadrature
from .numerics.integration import composite_integrate, integrate_rule, \
     QuadratureError, UnsupportedRuleError, InvalidOrderError, \
     UninitializedRuleError
from .numerics.function import Integrand, TanFunction, PolynomialFunction


__version__ = '0.1.0'

__all__ = ['LegendreQuadrature', 'KronrodQuadrature', 'ChebyshevQuadrature',
           'FejerFirstQuadrature', 'FejerSecondQuadrature',
           'gauss_quadrature', 'fejer_quadrature',
           'composite_integrate', 'integrate_rule',
           'QuadratureError', 'UnsupportedRuleError', 'InvalidOrderError',
           'UninitializedRuleError',
           'Integrand', 'TanFunction', 'PolynomialFunction' ]
