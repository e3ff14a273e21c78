"""
Sphere tracing through a solid given by a pair of distance estimators.

The marcher alternates between two regimes. Outside the solid it steps by
the exterior estimate until that estimate falls below epsilon (entering).
Inside it steps by max(interior estimate, epsilon) until the interior
estimator reports that the sample has left the solid (exiting). Marching
ends when the sample leaves the bounding sphere, or when one of the
crossing or step caps is reached.
"""

import logging
import math
import numpy as np

from bounding_sphere import BoundingSphere
from tracer import Intersection
from utils import as_vector, vec_norm, dominant_axis

logger = logging.getLogger(__name__)

OUTSIDE, INSIDE = 'outside', 'inside'

class MarchingState(object):
    "Per-ray state of the marching loop"

    def __init__(self, origin, direction, t):
        self.origin = origin
        self.direction = direction
        self.axis = dominant_axis(direction)
        self.sample = origin + t * direction
        self.regime = OUTSIDE
        self.front = True
        self.steps = 0
        self.crossings = []

    def advance(self, distance):
        self.sample = self.sample + distance * self.direction
        self.steps += 1

    def ray_parameter(self):
        a = self.axis
        return float((self.sample[a] - self.origin[a]) / self.direction[a])

def effective_epsilon(parameters, sample, origin):
    if parameters.epsilon_relative_to_distance:
        return parameters.epsilon * vec_norm(sample - origin)
    return parameters.epsilon

def minimal_step(parameters, sample, origin):
    "Step taken in place of a non-finite estimate, never zero"
    return max(effective_epsilon(parameters, sample, origin), parameters.epsilon)

def sphere_trace(origin, direction, exterior, interior, parameters, solid=None):
    """
    March the ray origin + t*direction through the solid.

    exterior(point) -> float and interior(point) -> DistanceEstimate are the
    distance estimators. parameters provides bounding_sphere_radius,
    epsilon, epsilon_relative_to_distance, max_intersections and max_steps.
    Returns the list of Intersections in the order found.
    """
    origin = as_vector(origin)
    direction = as_vector(direction)
    if not np.any(direction) or not np.all(np.isfinite(direction)):
        return []

    bounds = BoundingSphere(parameters.bounding_sphere_radius)
    t = bounds.entry(origin, direction)
    if t is None:
        return []

    state = MarchingState(origin, direction, t)

    def emit(enter):
        t = state.ray_parameter()
        state.crossings.append(Intersection(solid, t,
            origin + t * direction, direction, enter, state.front))
        state.front = False
        return len(state.crossings) > parameters.max_intersections

    while True:
        if state.regime == OUTSIDE:
            distance = exterior(state.sample)
            if not math.isfinite(distance):
                state.advance(minimal_step(parameters, state.sample, origin))
                hit = False
            else:
                state.advance(max(distance, 0.0))
                eps = effective_epsilon(parameters, state.sample, origin)
                hit = distance < eps

            if hit:
                state.regime = INSIDE
                if emit(True):
                    logger.debug("intersection cap %d reached",
                        parameters.max_intersections)
                    break
        else:
            distance, outside = interior(state.sample)
            eps = effective_epsilon(parameters, state.sample, origin)
            if not math.isfinite(distance):
                distance = minimal_step(parameters, state.sample, origin)

            if outside and distance >= eps:
                state.regime = OUTSIDE
                if emit(False):
                    logger.debug("intersection cap %d reached",
                        parameters.max_intersections)
                    break

            state.advance(max(distance, eps))

        if not bounds.contains(state.sample):
            break

        if state.steps >= parameters.max_steps:
            logger.debug("step cap %d reached at t=%g",
                parameters.max_steps, state.ray_parameter())
            break

    return state.crossings
