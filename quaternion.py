import math

class Quaternion(object):
    """
    Immutable quaternion i*x + j*y + k*z + real. All arithmetic produces
    new values; the components are plain Python floats so that overflow
    during escape-time iteration yields inf/nan instead of raising.
    """

    __slots__ = ('i', 'j', 'k', 'real')

    def __init__(self, i=0.0, j=0.0, k=0.0, real=0.0):
        object.__setattr__(self, 'i', float(i))
        object.__setattr__(self, 'j', float(j))
        object.__setattr__(self, 'k', float(k))
        object.__setattr__(self, 'real', float(real))

    def __setattr__(self, name, value):
        raise AttributeError("Quaternion is immutable")

    @staticmethod
    def identity():
        return Quaternion(0, 0, 0, 1)

    @staticmethod
    def from_point(p):
        """
        Embed a 3D point: x -> real, y -> i, z -> j, k = 0. Every
        estimator (and the normal) uses this same embedding.
        """
        return Quaternion(i=p[1], j=p[2], k=0.0, real=p[0])

    def components(self):
        return (self.i, self.j, self.k, self.real)

    def __add__(self, other):
        return Quaternion(self.i + other.i, self.j + other.j,
                          self.k + other.k, self.real + other.real)

    def __sub__(self, other):
        return Quaternion(self.i - other.i, self.j - other.j,
                          self.k - other.k, self.real - other.real)

    def __neg__(self):
        return Quaternion(-self.i, -self.j, -self.k, -self.real)

    def __mul__(self, other):
        if not isinstance(other, Quaternion):
            s = float(other)
            return Quaternion(self.i*s, self.j*s, self.k*s, self.real*s)

        # Hamilton product
        a1, b1, c1, d1 = self.real, self.i, self.j, self.k
        a2, b2, c2, d2 = other.real, other.i, other.j, other.k
        return Quaternion(
            i = a1*b2 + b1*a2 + c1*d2 - d1*c2,
            j = a1*c2 - b1*d2 + c1*a2 + d1*b2,
            k = a1*d2 + b1*c2 - c1*b2 + d1*a2,
            real = a1*a2 - b1*b2 - c1*c2 - d1*d2)

    def __rmul__(self, scalar):
        return self * scalar

    def square(self):
        # q^2 = (a^2 - |v|^2) + 2a*v for q = a + v
        a = self.real
        return Quaternion(2*a*self.i, 2*a*self.j, 2*a*self.k,
            a*a - self.i*self.i - self.j*self.j - self.k*self.k)

    def norm_squared(self):
        return self.i*self.i + self.j*self.j + self.k*self.k + \
            self.real*self.real

    def norm(self):
        return math.sqrt(self.norm_squared())

    def is_finite(self):
        return all(math.isfinite(x) for x in self.components())

    def __eq__(self, other):
        if not isinstance(other, Quaternion):
            return NotImplemented
        return self.components() == other.components()

    def __hash__(self):
        return hash(self.components())

    def __reduce__(self):
        return (Quaternion, self.components())

    def __repr__(self):
        return "Quaternion(i=%g, j=%g, k=%g, real=%g)" % self.components()
