"""Numerical integration with fixed quadrature rules on an interval.

This module includes the base class of the one-dimensional quadrature
rules and the evaluation procedure that they all share: the nodes and
weights of a rule are given on the reference interval [-1,1], and the
integral of a function on an arbitrary interval [a,b] is computed by
mapping the nodes affinely into [a,b], taking the weighted sum of the
function values and rescaling with the half-length of the interval.
Composite integration, i.e. the sum of the rule estimates on equal
subintervals of a larger interval, is also provided.

"""

from copy import deepcopy
import numpy as np
from .function import as_integrand


default_integration_parameters = {
    'rule': 'legendre',
    'order': 2,
    'panels': 100,
    'verbose': False
    }


class QuadratureError(ValueError):
    pass

class UnsupportedRuleError(QuadratureError):
    """Raised for an unknown rule kind or an order outside a rule's table."""
    pass

class InvalidOrderError(QuadratureError):
    """Raised when the order of a rule is not a positive integer."""
    pass

class UninitializedRuleError(QuadratureError):
    """Raised when a rule without nodes and weights is used to integrate."""
    pass


def check_order(order):
    """Returns the order as an int, raises InvalidOrderError if the order
    is not a positive integer.
    """
    if isinstance( order, (bool, np.bool_) ) or \
       not isinstance( order, (int, np.integer) ):
        raise InvalidOrderError("Order should be a positive integer, given %r." % (order,))
    if order < 1:
        raise InvalidOrderError("Minimum order is 1, given %d." % order)
    return int(order)


def _frozen(values):
    array = np.array( values, dtype=float )
    array.setflags( write=False )
    return array


def integrate_rule(points, weights, f, a, b):
    """Integrate a function on [a,b] using the given nodes and weights.

    The nodes are mapped from the reference interval [-1,1] to [a,b] by
    x = (b-a)/2 * s + (a+b)/2, and the integral is approximated by
    (b-a)/2 * sum_i w_i f(x_i).

    Parameters
    ----------
    points : NumPy array
        The nodes of the quadrature rule on [-1,1].
    weights : NumPy array
        The weights paired with the nodes.
    f : Integrand or function_like
        If f is an instance of Integrand, it is called once on the
        array of all mapped nodes. An object with an evaluate method,
        or any other callable, is evaluated separately at each mapped
        node (a float).
    a, b : float
        The end points of the interval. If a > b, the result is the
        negative of the integral on [b,a].

    Returns
    -------
    integral : float
        The quadrature estimate of the integral of f on [a,b].
    """
    if len(points) == 0:
        raise UninitializedRuleError("The quadrature rule has no points and weights.")
    if len(points) != len(weights):
        raise QuadratureError("Numbers of quadrature points and weights do not match.")
    if not (np.isfinite(a) and np.isfinite(b)):
        raise ValueError("The end points of the interval should be finite numbers.")

    half_length = 0.5 * (b - a)
    center = 0.5 * (a + b)
    x = half_length * np.asarray(points) + center

    f = as_integrand( f )
    try:
        values = f( x )
    except TypeError:
        # __call__ overridden with code that only accepts a single float
        values = [ f( float(xi) ) for xi in x ]
    values = np.broadcast_to( np.asarray( values, dtype=float ), x.shape )
    return half_length * float( np.dot( weights, values ) )


class Quadrature(object):

    def __init__(self):
        self._degree = None
        self._order = 0
        self._points = _frozen([])
        self._weights = _frozen([])

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return '%s(order=%d)' % (self.__class__.__name__, self._order)

    @property
    def kind(self):
        return None

    def order(self):
        return self._order

    def max_order(self):
        return None

    def degree(self):
        return self._degree

    def points(self):
        return self._points

    def weights(self):
        return self._weights

    def iterpoints(self):
        return zip( self._points, self._weights )

    def integrate(self, f, a=-1.0, b=1.0):
        return integrate_rule( self._points, self._weights, f, a, b )


def _build_quadrature(rule, order):
    from .fejer import fejer_quadrature
    from .gauss import gauss_quadrature

    if isinstance( rule, str ) and rule.lower() == 'fejer':
        return fejer_quadrature( order )
    return gauss_quadrature( rule, order )


def composite_integrate(f, a, b, quadrature=None, parameters=None):
    """Integrate a function on [a,b] by summing quadrature estimates on
    equal subintervals of [a,b].

    Parameters
    ----------
    f : Integrand or function_like
        The function to be integrated.
    a, b : float
        The end points of the interval.
    quadrature : Quadrature, optional
        The rule applied on each subinterval. If it is not given, it is
        created from the 'rule' and 'order' entries of parameters.
    parameters : dict, optional
        A dictionary with the keys 'rule' ('legendre', 'kronrod',
        'chebyshev' or 'fejer'), 'order', 'panels' (the number of
        subintervals) and 'verbose'. Missing keys take their values
        from default_integration_parameters.

    Returns
    -------
    integral : float
        The composite estimate of the integral of f on [a,b].
    """
    params = deepcopy( default_integration_parameters )
    if parameters is not None:
        params.update( parameters )

    n_panels = params['panels']
    if isinstance( n_panels, bool ) or \
       not isinstance( n_panels, (int, np.integer) ) or n_panels < 1:
        raise ValueError("'panels' in parameters must be a positive integer!")

    if quadrature is None:
        quadrature = _build_quadrature( params['rule'], params['order'] )

    f = as_integrand( f )

    breakpoints = np.linspace( a, b, n_panels+1 )
    integral = 0.0
    for i in range(n_panels):
        integral += quadrature.integrate( f, breakpoints[i], breakpoints[i+1] )

    if params['verbose']:
        print("Composite %r on [%g,%g] with %d panels: %.16e" %
              (quadrature, a, b, n_panels, integral))

    return integral
