import numpy as np

class NormalTexture(object):
    """
    Colors a surface point by its normal vector. Also returns a key that
    identifies the color, usable for caching shaded results.
    """

    KEY_SCALE = 524288 # 2^19, normal components map to 21-bit integers

    def apply(self, intersection):
        if not intersection.completed:
            intersection.solid.complete_intersection(intersection)
        n = np.ravel(intersection.normal)

        color = 1.0 - (n + 1.0) / 2.0

        x, y, z = [int((c + 1.0) * self.KEY_SCALE) for c in n]
        key = (x << 42) | (y << 21) | z
        return (color, key)
