import math
import numpy as np
from utils import as_vector

class BoundingSphere(object):
    "Sphere centered at the origin of the local coordinates of a solid"

    def __init__(self, radius):
        if not radius > 0:
            raise ValueError("bounding sphere radius must be positive")
        self.radius = float(radius)
        self.radius_squared = self.radius * self.radius

    def entry(self, origin, direction):
        """
        Smallest t >= 0 such that origin + t*direction is inside or on the
        sphere, 0 if the origin is already inside and None if the ray
        misses the sphere or the sphere is behind the origin
        """
        origin = as_vector(origin)
        direction = as_vector(direction)

        a = float(np.dot(direction, direction))
        b = float(np.dot(origin, direction))
        c = float(np.dot(origin, origin)) - self.radius_squared

        if c <= 0.0: return 0.0
        if a == 0.0: return None

        disc = b*b - a*c
        if disc < 0.0 or not math.isfinite(disc): return None

        t = (-b - math.sqrt(disc)) / a
        if t < 0.0: return None
        return t

    def contains(self, point):
        r2 = float(np.dot(point, point))
        # false also for nan
        return r2 <= self.radius_squared

    def bounding_box(self):
        R = self.radius
        return (np.array((-R, -R, -R)), np.array((R, R, R)))
