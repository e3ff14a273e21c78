"""
Escape-time iteration of the quaternion map z -> z^2 + C together with its
derivative dz -> 2*z*dz, and the distance estimates derived from it.

Non-finite magnitudes never raise: they are treated as an escape and end
the iteration early.
"""

import math
from collections import namedtuple
from quaternion import Quaternion

DistanceEstimate = namedtuple('DistanceEstimate', ['distance', 'outside'])

def _escaped(z_norm_squared, escape_radius_squared):
    return z_norm_squared > escape_radius_squared or \
        not math.isfinite(z_norm_squared)

def _escape_distance(z, dz):
    # 0.5 * |z| * ln|z| / |dz|
    zl = z.norm()
    dzl = dz.norm()
    if zl == 0.0 or dzl == 0.0:
        return math.nan
    return 0.5 * zl * math.log(zl) / dzl

def exterior_distance(point, c, max_iterations, escape_radius_squared):
    """
    Lower bound of the distance from point to the Julia set. Never exact:
    use it as a safe step, not as an answer.
    """
    z = Quaternion.from_point(point)
    dz = Quaternion.identity()
    for _ in range(max_iterations):
        dz = 2 * (z * dz)
        z = z.square() + c
        if _escaped(z.norm_squared(), escape_radius_squared):
            break
    return _escape_distance(z, dz)

def interior_distance(point, c, max_iterations, escape_radius_squared):
    """
    Distance estimate for a point assumed to be inside the set. If the
    orbit escapes, the point is outside after all: returns the exterior
    estimate with outside=True.
    """
    z0 = Quaternion.from_point(point)
    z = z0
    dz = Quaternion.identity()
    for _ in range(max_iterations):
        dz = 2 * (z * dz)
        z = z.square() + c
        if _escaped(z.norm_squared(), escape_radius_squared):
            return DistanceEstimate(_escape_distance(z, dz), True)

    dzl = dz.norm()
    if dzl == 0.0:
        return DistanceEstimate(math.nan, False)
    return DistanceEstimate((z - z0).norm() / dzl, False)

def derivative_gradient(point, c, max_iterations, delta):
    """
    Central difference of the derivative magnitude |dz| along the x, y and
    z axes, iterating all six perturbed orbits in lockstep. Iteration stops
    as soon as any difference becomes non-finite and the last finite
    gradient is returned ((0, 0, 0) if there is none).
    """
    q = Quaternion.from_point(point)
    axes = [Quaternion(real=delta), Quaternion(i=delta), Quaternion(j=delta)]

    orbits = []
    for step in axes:
        orbits.append([q - step, q + step])
    derivatives = [[Quaternion.identity(), Quaternion.identity()] for _ in axes]

    gradient = (0.0, 0.0, 0.0)
    for _ in range(max_iterations):
        for a in range(len(axes)):
            for s in (0, 1):
                z = orbits[a][s]
                derivatives[a][s] = 2 * (z * derivatives[a][s])
                orbits[a][s] = z.square() + c

        diffs = tuple(d[1].norm() - d[0].norm() for d in derivatives)
        if not all(math.isfinite(x) for x in diffs):
            break
        gradient = diffs

    return gradient
