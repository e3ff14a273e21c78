# Tracer objects: quaternion Julia sets

import functools
import logging
import math
import numbers
import numpy as np

from tracer import Tracer
from quaternion import Quaternion
from bounding_sphere import BoundingSphere
from sphere_tracing import sphere_trace
from utils import normalize_vector
import escape_time

logger = logging.getLogger(__name__)

# Gradients shorter than this are considered degenerate
MIN_NORMAL_LENGTH = 1e-300

class JuliaSetParameters(object):
    """
    Validated, immutable parameters of a quaternion Julia set solid.
    Use replace() to derive a modified copy: invalid values raise
    ValueError and leave the current instance untouched.
    """

    DEFAULTS = {
        # The quaternion which gives the 3D slice
        'c': Quaternion(0, 0, 0, 0),
        # Radius of the bounding sphere (also sets the bounding box)
        'bounding_sphere_radius': 3.0,
        # Iterated points growing past this radius are not in the set
        'escape_radius': 3.5,
        'max_iterations': 20,
        # Points closer than epsilon to the set count as inside
        'epsilon': 1e-4,
        # Scale epsilon by the distance from the ray origin
        'epsilon_relative_to_distance': True,
        # Finite difference step for normals
        'delta': 1e-7,
        # Maximum number of crossings of one ray
        'max_intersections': 128,
        # Maximum number of marching steps of one ray
        'max_steps': 100000
    }

    POSITIVE_REALS = ('bounding_sphere_radius', 'escape_radius', 'epsilon', 'delta')
    POSITIVE_INTEGERS = ('max_iterations', 'max_intersections', 'max_steps')

    __slots__ = tuple(DEFAULTS.keys()) + \
        ('bounding_sphere_radius_squared', 'escape_radius_squared')

    def __init__(self, **kwargs):
        unknown = set(kwargs.keys()) - set(self.DEFAULTS.keys())
        if unknown:
            raise ValueError("unknown Julia set parameter(s): %s" % \
                ', '.join(sorted(unknown)))

        values = dict(self.DEFAULTS)
        values.update(kwargs)

        c = values['c']
        if not isinstance(c, Quaternion):
            c = Quaternion(*c)
        if not c.is_finite():
            raise ValueError("c must be finite, got %r" % (c,))
        values['c'] = c

        for name in self.POSITIVE_REALS:
            values[name] = _positive_real(name, values[name])
        for name in self.POSITIVE_INTEGERS:
            values[name] = _positive_integer(name, values[name])
        values['epsilon_relative_to_distance'] = \
            bool(values['epsilon_relative_to_distance'])

        for name, value in values.items():
            object.__setattr__(self, name, value)

        r = self.bounding_sphere_radius
        e = self.escape_radius
        object.__setattr__(self, 'bounding_sphere_radius_squared', r*r)
        object.__setattr__(self, 'escape_radius_squared', e*e)

    def __setattr__(self, name, value):
        raise AttributeError("JuliaSetParameters is immutable, use replace()")

    def as_dict(self):
        return { name : getattr(self, name) for name in self.DEFAULTS }

    def replace(self, **changes):
        values = self.as_dict()
        values.update(changes)
        return JuliaSetParameters(**values)

    def __eq__(self, other):
        if not isinstance(other, JuliaSetParameters):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __hash__(self):
        return hash(tuple(sorted(self.as_dict().items())))

    def __repr__(self):
        return "JuliaSetParameters(%s)" % ', '.join(
            "%s=%r" % kv for kv in sorted(self.as_dict().items()))

def _positive_real(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValueError("%s must be a real number, got %r" % (name, value))
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise ValueError("%s must be positive and finite, got %r" % (name, value))
    return value

def _positive_integer(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValueError("%s must be an integer, got %r" % (name, value))
    value = int(value)
    if value <= 0:
        raise ValueError("%s must be positive, got %r" % (name, value))
    return value

class QuaternionJuliaSet(Tracer):
    """
    Solid bounded by a 3D slice of the quaternion Julia set of z^2 + C,
    traced with distance estimation. Points (x, y, z) are embedded as the
    quaternions x + y*i + z*j.
    """

    def __init__(self, c=(0, 0, 0, 0), **kwargs):
        """
        c is a Quaternion or a tuple (i, j, k, real); the other keyword
        arguments are JuliaSetParameters fields
        """
        self._parameters = JuliaSetParameters(c=c, **kwargs)

    @property
    def parameters(self):
        return self._parameters

    @parameters.setter
    def parameters(self, value):
        if not isinstance(value, JuliaSetParameters):
            raise ValueError("expected JuliaSetParameters, got %r" % (value,))
        self._parameters = value

    def configure(self, **changes):
        """
        Change some parameters. Must not run concurrently with intersect.
        Raises ValueError on invalid values, keeping the previous ones.
        """
        self._parameters = self._parameters.replace(**changes)
        return self

    @property
    def c(self):
        return self._parameters.c

    def bounding_box(self):
        return BoundingSphere(self._parameters.bounding_sphere_radius).bounding_box()

    @staticmethod
    def _estimators(p):
        args = dict(c=p.c, max_iterations=p.max_iterations,
            escape_radius_squared=p.escape_radius_squared)
        return (functools.partial(escape_time.exterior_distance, **args),
                functools.partial(escape_time.interior_distance, **args))

    def intersect(self, origin, direction):
        # bind once so that a concurrent configure() cannot mix parameter sets
        p = self._parameters
        exterior, interior = self._estimators(p)
        return sphere_trace(origin, direction, exterior, interior, p, solid=self)

    def complete_intersection(self, intersection):
        self._check_own_intersection(intersection)
        p = self._parameters

        gradient = escape_time.derivative_gradient(intersection.point,
            p.c, p.max_iterations, p.delta)

        normal = normalize_vector(gradient, MIN_NORMAL_LENGTH)
        if normal is None:
            logger.debug("degenerate normal gradient %s at t=%g",
                gradient, intersection.t)
            normal = normalize_vector(-np.ravel(intersection.direction))
            if normal is None:
                normal = np.array((0.0, 0.0, 1.0))

        intersection.normal = normal
        return normal
