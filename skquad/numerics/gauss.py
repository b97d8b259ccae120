"""Gaussian quadrature rules on the reference interval [-1,1].

Three families of rules are provided:

* Gauss-Legendre rules with n = 1,...,11 points, exact for polynomials
  of degree 2n-1,
* Gauss-Kronrod rules with 2n+1 points for n = 1,...,11, which extend
  the n-point Gauss-Legendre rule by n+1 additional points,
* Gauss-Chebyshev rules with any number n of points, with the nodes
  x_i = cos((2i-1)pi/(2n)) and the weights (pi/n) sqrt(1-x_i^2), i.e.
  the Chebyshev weight function 1/sqrt(1-x^2) is folded into the weights
  so that the rule applies directly to f(x).

The Legendre and Kronrod nodes and weights are taken from tables. Since
the rules are symmetric, only the nonnegative nodes (in increasing order)
and their weights are stored, and the negative half is obtained by
reflection.

"""

import numpy as np
from numpy import array, pi
from .integration import Quadrature, UnsupportedRuleError, check_order, _frozen


LEGENDRE_MAX_ORDER = 11
KRONROD_MAX_ORDER = 11


def _reflect(half_points, half_weights):
    half_points = np.asarray( half_points, dtype=float )
    half_weights = np.asarray( half_weights, dtype=float )
    if half_points[0] == 0.0:
        points = np.hstack(( -half_points[:0:-1], half_points ))
        weights = np.hstack(( half_weights[:0:-1], half_weights ))
    else:
        points = np.hstack(( -half_points[::-1], half_points ))
        weights = np.hstack(( half_weights[::-1], half_weights ))
    return points, weights


# Nonnegative Gauss-Legendre nodes, _legendre_points[n-1] for n points.
_legendre_points = [
    array([                 0.0 ]),

    array([  0.5773502691896257 ]),

    array([                 0.0,  0.7745966692414834 ]),

    array([  0.3399810435848563,  0.8611363115940526 ]),

    array([                 0.0,  0.5384693101056831,  0.9061798459386640 ]),

    array([  0.2386191860831969,  0.6612093864662645,  0.9324695142031521 ]),

    array([                 0.0,  0.4058451513773972,  0.7415311855993945,
             0.9491079123427585 ]),

    array([  0.1834346424956498,  0.5255324099163290,  0.7966664774136267,
             0.9602898564975363 ]),

    array([                 0.0,  0.3242534234038089,  0.6133714327005904,
             0.8360311073266358,  0.9681602395076261 ]),

    array([  0.1488743389816312,  0.4333953941292472,  0.6794095682990244,
             0.8650633666889845,  0.9739065285171717 ]),

    array([                 0.0,  0.2695431559523450,  0.5190961292068118,
             0.7301520055740494,  0.8870625997680953,  0.9782286581460570 ])
    ]

_legendre_weights = [
    array([                 2.0 ]),

    array([                 1.0 ]),

    array([  0.8888888888888889,  0.5555555555555556 ]),

    array([  0.6521451548625461,  0.3478548451374538 ]),

    array([  0.5688888888888889,  0.4786286704993665,  0.2369268850561891 ]),

    array([  0.4679139345726910,  0.3607615730481386,  0.1713244923791704 ]),

    array([  0.4179591836734694,  0.3818300505051189,  0.2797053914892766,
             0.1294849661688697 ]),

    array([  0.3626837833783620,  0.3137066458778873,  0.2223810344533745,
             0.1012285362903763 ]),

    array([  0.3302393550012598,  0.3123470770400029,  0.2606106964029354,
             0.1806481606948574,  0.0812743883615744 ]),

    array([  0.2955242247147529,  0.2692667193099963,  0.2190863625159820,
             0.1494513491505806,  0.0666713443086881 ]),

    array([  0.2729250867779006,  0.2628045445102467,  0.2331937645919905,
             0.1862902109277343,  0.1255803694649046,  0.0556685671161737 ])
    ]

# Nonnegative Gauss-Kronrod nodes, _kronrod_points[n-1] for 2n+1 points.
# Every other node of the reflected rule, starting from the second one, is
# a node of the n-point Legendre rule.
_kronrod_points = [
    array([                 0.0,  0.7745966692414834 ]),

    array([                 0.0,  0.5773502691896257,  0.9258200997725515 ]),

    array([                 0.0,  0.4342437493468026,  0.7745966692414834,
             0.9604912687080203 ]),

    array([                 0.0,  0.3399810435848563,  0.6402862174963000,
             0.8611363115940526,  0.9765602507375731 ]),

    array([                 0.0,  0.2796304131617832,  0.5384693101056831,
             0.7541667265708492,  0.9061798459386640,  0.9840853600948425 ]),

    array([                 0.0,  0.2386191860831969,  0.4631182124753046,
             0.6612093864662645,  0.8213733408650279,  0.9324695142031521,
             0.9887032026126789 ]),

    array([                 0.0,  0.2077849550078985,  0.4058451513773972,
             0.5860872354676911,  0.7415311855993945,  0.8648644233597691,
             0.9491079123427585,  0.9914553711208126 ]),

    array([                 0.0,  0.1834346424956498,  0.3607010979281320,
             0.5255324099163290,  0.6723540709451587,  0.7966664774136267,
             0.8941209068474564,  0.9602898564975363,  0.9933798758817162 ]),

    array([                 0.0,  0.1642235636149868,  0.3242534234038089,
             0.4754624791124599,  0.6133714327005904,  0.7344867651839338,
             0.8360311073266358,  0.9149635072496779,  0.9681602395076261,
             0.9946781606773402 ]),

    array([                 0.0,  0.1488743389816312,  0.2943928627014602,
             0.4333953941292472,  0.5627571346686047,  0.6794095682990244,
             0.7808177265864169,  0.8650633666889845,  0.9301574913557082,
             0.9739065285171717,  0.9956571630258081 ]),

    array([                 0.0,  0.1361130007993618,  0.2695431559523450,
             0.3979441409523776,  0.5190961292068118,  0.6305995201619651,
             0.7301520055740494,  0.8160574566562209,  0.8870625997680953,
             0.9416771085780680,  0.9782286581460570,  0.9963696138895426 ])
    ]

_kronrod_weights = [
    array([  0.8888888888888889,  0.5555555555555556 ]),

    array([  0.6222222222222222,  0.4909090909090909,  0.1979797979797979 ]),

    array([  0.4509165386584741,  0.4013974147759622,  0.2684880898683334,
             0.1046562260264673 ]),

    array([  0.3464429818901364,  0.3269491896014516,  0.2667983404522844,
             0.1700536053357227,  0.0629773736654730 ]),

    array([  0.2829874178574912,  0.2728498019125589,  0.2410403392286476,
             0.1868007965564926,  0.1152333166224734,  0.0425820367510818 ]),

    array([  0.2410725801734648,  0.2337708641169944,  0.2132096522719622,
             0.1810719943231376,  0.1373206046344469,  0.0836944404469066,
             0.0303961541198198 ]),

    array([  0.2094821410847278,  0.2044329400752989,  0.1903505780647854,
             0.1690047266392679,  0.1406532597155259,  0.1047900103222502,
             0.0630920926299786,  0.0229353220105292 ]),

    array([  0.1844464057446916,  0.1814000250680346,  0.1720706085552113,
             0.1566526061681884,  0.1362631092551722,  0.1116463708268396,
             0.0824822989313583,  0.0494393950021393,  0.0178223833207104 ]),

    array([  0.1648960128283494,  0.1628628274401151,  0.1564135277884839,
             0.1452395883843662,  0.1300014068553412,  0.1117891346844183,
             0.0907906816887264,  0.0665181559402741,  0.0396318951602613,
             0.0143047756438389 ]),

    array([  0.1494455540029169,  0.1477391049013385,  0.1427759385770601,
             0.1347092173114733,  0.1234919762620658,  0.1093871588022976,
             0.0931254545836976,  0.0750396748109199,  0.0547558965743520,
             0.0325581623079647,  0.0116946388673719 ]),

    array([  0.1365777947111183,  0.1351935727998845,  0.1312806842298056,
             0.1251587991003195,  0.1167395024610473,  0.1058720744813894,
             0.0929530985969008,  0.0786645719322273,  0.0630974247503749,
             0.0458293785644264,  0.0271565546821043,  0.0097654410459608 ])
    ]


class LegendreQuadrature(Quadrature):

    def __init__(self, order):
        super( LegendreQuadrature, self ).__init__()
        order = check_order( order )
        if order > LEGENDRE_MAX_ORDER:
            raise UnsupportedRuleError("Gauss-Legendre order cannot be larger than %d." % LEGENDRE_MAX_ORDER)

        points, weights = _reflect( _legendre_points[order-1],
                                    _legendre_weights[order-1] )
        self._order = order
        self._degree = 2*order - 1
        self._points = _frozen( points )
        self._weights = _frozen( weights )

    @property
    def kind(self):
        return 'legendre'

    def max_order(self):
        return LEGENDRE_MAX_ORDER


class KronrodQuadrature(Quadrature):
    """The (2n+1)-point Gauss-Kronrod extension of the n-point
    Gauss-Legendre rule, for the base order n = 1,...,11.

    The difference of the integrals computed by a KronrodQuadrature and
    the LegendreQuadrature of the same order is commonly used as an
    error estimate; forming it is left to the caller.
    """

    def __init__(self, order):
        super( KronrodQuadrature, self ).__init__()
        order = check_order( order )
        if order > KRONROD_MAX_ORDER:
            raise UnsupportedRuleError("Gauss-Kronrod order cannot be larger than %d." % KRONROD_MAX_ORDER)

        points, weights = _reflect( _kronrod_points[order-1],
                                    _kronrod_weights[order-1] )
        self._order = order
        self._degree = 3*order + 1  if order % 2 == 0 else  3*order + 2
        self._points = _frozen( points )
        self._weights = _frozen( weights )

    @property
    def kind(self):
        return 'kronrod'

    def max_order(self):
        return KRONROD_MAX_ORDER

    def gauss_points(self):
        """Returns the nodes shared with the Legendre rule of the same order."""
        return self._points[1::2]


class ChebyshevQuadrature(Quadrature):

    def __init__(self, order):
        super( ChebyshevQuadrature, self ).__init__()
        n = check_order( order )

        # cos((2i-1)pi/(2n)) = sin(k pi/(2n)) with k = n+1-2i, and sin is odd
        # in k, so the nodes are exactly symmetric. k runs in increasing order.
        k = np.arange( 1-n, n, 2, dtype=float )
        points = np.sin( 0.5 * pi * k / n )
        weights = (pi / n) * np.sqrt( 1.0 - points**2 )

        self._order = n
        self._degree = None
        self._points = _frozen( points )
        self._weights = _frozen( weights )

    @property
    def kind(self):
        return 'chebyshev'


_gauss_rules = {
    'legendre':  LegendreQuadrature,
    'kronrod':   KronrodQuadrature,
    'chebyshev': ChebyshevQuadrature,
    'leg': LegendreQuadrature,
    'kro': KronrodQuadrature,
    'che': ChebyshevQuadrature,
    }


def gauss_quadrature(kind, order):
    """Creates the Gaussian quadrature rule of the given kind and order.

    Parameters
    ----------
    kind : str
        One of 'legendre', 'kronrod', 'chebyshev' (or their abbreviations
        'LEG', 'KRO', 'CHE'), case insensitive.
    order : int
        The number of points for Legendre and Chebyshev rules, the base
        order n for Kronrod rules (giving 2n+1 points).

    Returns
    -------
    quad : LegendreQuadrature, KronrodQuadrature or ChebyshevQuadrature
    """
    try:
        rule = _gauss_rules[ kind.lower() ]
    except (AttributeError, KeyError):
        raise UnsupportedRuleError("Gaussian quadrature kind should be one of 'legendre', 'kronrod', 'chebyshev', given %r." % (kind,))
    return rule( order )
