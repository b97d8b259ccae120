import numpy as np


class Integrand(object):
    """Base class of functions that can be handed to a quadrature rule.

    Subclasses implement ``evaluate(x)``, the value of the function at a
    single point x (a float). The default ``__call__`` applies evaluate at
    each entry of an array of points. Subclasses that can compute all the
    values at once may override ``__call__`` with a vectorized version;
    quadrature rules call an Integrand once on the full array of mapped
    nodes.
    """

    def evaluate(self, x):
        raise NotImplementedError("This function has not been implemented.")

    def __call__(self, x):
        x = np.asarray( x, dtype=float )
        if x.ndim == 0:
            return float( self.evaluate( float(x) ) )
        return np.array([ self.evaluate( float(xi) ) for xi in x ], dtype=float)


class TanFunction(Integrand):

    def __init__(self, w=1.0):
        super( TanFunction, self ).__init__()
        self.w = w

    def evaluate(self, x):
        return float( np.tan( self.w * x ) )

    def __call__(self, x):
        return np.tan( self.w * np.asarray(x, dtype=float) )

    def integral(self, a, b):
        # Antiderivative -log|cos(w*x)|/w, valid if cos(w*x) != 0 on [a,b].
        w = self.w
        if w == 0.0:
            return 0.0
        return (np.log( np.abs(np.cos(w*a)) ) - np.log( np.abs(np.cos(w*b)) )) / w


class PolynomialFunction(Integrand):
    """The polynomial p(x) = c[0] + c[1]*x + ... + c[n]*x**n.

    Parameters
    ----------
    coefs : array_like
        The coefficients c[k] in increasing order of the power of x.
    """

    def __init__(self, coefs):
        super( PolynomialFunction, self ).__init__()
        self._coefs = np.array( coefs, dtype=float )
        if self._coefs.ndim != 1 or len(self._coefs) == 0:
            raise ValueError("Coefficients should be given as a nonempty 1d array.")

    def degree(self):
        return len(self._coefs) - 1

    def evaluate(self, x):
        return float( self( x ) )

    def __call__(self, x):
        x = np.asarray( x, dtype=float )
        y = np.zeros_like( x )
        for c in self._coefs[::-1]:  # Horner
            y = y*x + c
        return y

    def integral(self, a, b):
        c = self._coefs
        powers = np.arange( 1, len(c)+1 )
        antideriv = lambda x: np.sum( c * x**powers / powers )
        return antideriv(b) - antideriv(a)


class ScalarFunction(Integrand):

    def __init__(self, fct):
        super( ScalarFunction, self ).__init__()
        self._fct = fct

    def evaluate(self, x):
        return self._fct( x )


def as_integrand(f):
    """Returns f itself if it is an Integrand. Otherwise f is wrapped in
    a ScalarFunction: an object with an ``evaluate`` method is evaluated
    through that method, and any other callable is called with a single
    float.
    """
    if isinstance( f, Integrand ):
        return f
    evaluate = getattr( f, 'evaluate', None )
    if callable(evaluate):
        return ScalarFunction( evaluate )
    if not callable(f):
        raise ValueError("The integrand should be a callable object or have an evaluate method.")
    return ScalarFunction( f )
