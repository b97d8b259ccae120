"""Fejer quadrature rules on the reference interval [-1,1].

The n-point Fejer rules integrate the polynomial interpolating f at the
Chebyshev points. Their weights are computed from trigonometric sums,
so there is no limit on the number of points.

The first Fejer formula uses the nodes x_k = cos(theta_k) with
theta_k = (2k-1) pi / (2n), k = 1,...,n, and the weights

    w_k = 2/n (1 - 2 sum_{m=1}^{n/2} cos(2 m theta_k) / (4m^2 - 1)).

The second Fejer formula uses the nodes x_k = cos(theta_k) with
theta_k = k pi / (n+1), k = 1,...,n, and the weights

    w_k = 4 sin(theta_k) / (n+1) sum_{m=1}^{(n+1)/2} sin((2m-1) theta_k) / (2m-1).

fejer_quadrature(n) chooses the first formula for even n and the second
formula for odd n.

"""

import numpy as np
from numba import jit
from numpy import pi
from .integration import Quadrature, InvalidOrderError, check_order, _frozen


@jit( nopython = True )
def _fejer1_weights(theta, n):
    w = np.empty( len(theta) )
    for k in range(len(theta)):
        s = 0.0
        for m in range(1, n//2 + 1):
            s += np.cos( 2.0*m*theta[k] ) / (4.0*m*m - 1.0)
        w[k] = (2.0/n) * (1.0 - 2.0*s)
    return w


@jit( nopython = True )
def _fejer2_weights(theta, n):
    w = np.empty( len(theta) )
    for k in range(len(theta)):
        s = 0.0
        for m in range(1, (n+1)//2 + 1):
            s += np.sin( (2.0*m - 1.0)*theta[k] ) / (2.0*m - 1.0)
        w[k] = 4.0 * np.sin( theta[k] ) / (n + 1.0) * s
    return w


class FejerFirstQuadrature(Quadrature):

    def __init__(self, order):
        super( FejerFirstQuadrature, self ).__init__()
        n = check_order( order )
        if n % 2 != 0:
            raise InvalidOrderError("The first Fejer formula is used with even orders, given %d." % n)

        # k = n,...,1 gives the nodes in increasing order.
        theta = (2.0*np.arange(n, 0, -1) - 1.0) * pi / (2.0*n)

        self._order = n
        self._degree = n - 1
        self._points = _frozen( np.cos(theta) )
        self._weights = _frozen( _fejer1_weights( theta, n ) )

    @property
    def kind(self):
        return 'fejer1'


class FejerSecondQuadrature(Quadrature):

    def __init__(self, order):
        super( FejerSecondQuadrature, self ).__init__()
        n = check_order( order )
        if n % 2 != 1:
            raise InvalidOrderError("The second Fejer formula is used with odd orders, given %d." % n)

        theta = np.arange(n, 0, -1) * pi / (n + 1.0)

        self._order = n
        self._degree = n  # n odd, symmetric rule
        self._points = _frozen( np.cos(theta) )
        self._weights = _frozen( _fejer2_weights( theta, n ) )

    @property
    def kind(self):
        return 'fejer2'


def fejer_quadrature(order):
    """Creates the Fejer rule with the given number of points: the first
    Fejer formula if order is even, the second one if order is odd.
    """
    order = check_order( order )
    if order % 2 == 0:
        return FejerFirstQuadrature( order )
    else:
        return FejerSecondQuadrature( order )
