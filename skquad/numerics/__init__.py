from .integration import Quadrature, integrate_rule, composite_integrate, \
     default_integration_parameters, QuadratureError, UnsupportedRuleError, \
     InvalidOrderError, UninitializedRuleError
from .gauss import LegendreQuadrature, KronrodQuadrature, ChebyshevQuadrature, \
     gauss_quadrature, LEGENDRE_MAX_ORDER, KRONROD_MAX_ORDER
from .fejer import FejerFirstQuadrature, FejerSecondQuadrature, fejer_quadrature
from .function import Integrand, TanFunction, PolynomialFunction, as_integrand


__all__ = ['Quadrature', 'LegendreQuadrature', 'KronrodQuadrature',
           'ChebyshevQuadrature', 'FejerFirstQuadrature',
           'FejerSecondQuadrature',
           'gauss_quadrature', 'fejer_quadrature',
           'integrate_rule', 'composite_integrate',
           'default_integration_parameters',
           'LEGENDRE_MAX_ORDER', 'KRONROD_MAX_ORDER',
           'QuadratureError', 'UnsupportedRuleError', 'InvalidOrderError',
           'UninitializedRuleError',
           'Integrand', 'TanFunction', 'PolynomialFunction', 'as_integrand' ]
