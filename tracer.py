
class Intersection(object):
    """
    A point where a ray crosses the boundary of a solid.

    Produced by Tracer.intersect in increasing order of the ray parameter t.
    The normal is left empty until Tracer.complete_intersection is called,
    since most crossings (e.g., occluded ones) are never shaded.
    """

    def __init__(self, solid, t, point, direction, enter, front):
        self.solid = solid
        self.t = t
        self.point = point
        self.direction = direction
        self.enter = enter
        self.front = front
        self.normal = None

    @property
    def completed(self):
        return self.normal is not None

    def __repr__(self):
        return "Intersection(t=%g, enter=%s, front=%s)" % \
            (self.t, self.enter, self.front)

class Tracer(object):
    """
    A Tracer instance represents the shape of a three-dimensional body.

    It computes the ordered crossings of a ray and this object, and an
    exterior normal at any of those crossings on demand.
    """

    def intersect(self, origin, direction):
        """
        Returns the list of Intersections of the ray origin + t*direction
        with this object, ordered by t. An empty list if the ray misses.
        """
        raise NotImplementedError

    def complete_intersection(self, intersection):
        """
        Computes intersection.normal and returns it
        """
        raise NotImplementedError

    def bounding_box(self):
        raise NotImplementedError

    def _check_own_intersection(self, intersection):
        if intersection.solid is not self:
            raise ValueError("intersection was not produced by this object")
