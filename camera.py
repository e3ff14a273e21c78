import numpy as np
from utils import normalize, normalize_vector

def camera_rotmat(direction, up):
    """
    Rotation matrix whose columns are the right, up and forward unit
    vectors of a camera looking in the given direction
    """
    forward = normalize_vector(direction)
    if forward is None:
        raise ValueError("camera direction must be non-zero")

    right = normalize_vector(np.cross(forward, np.ravel(up)))
    if right is None:
        raise ValueError("camera up vector must not be parallel to direction")

    true_up = np.cross(right, forward)
    return np.vstack((right, true_up, forward)).T

def camera_rays(image_size, fov, direction, up):
    """
    Unit ray directions through the pixel centers of an image of
    image_size = (width, height) pixels, shape (height, width, 3).
    fov is the horizontal field-of-view angle in degrees.
    """
    w, h = image_size
    half_width = np.tan(fov / 180.0 * np.pi * 0.5)
    half_height = half_width * h / float(w)

    xs = ((np.arange(w) + 0.5) / w * 2.0 - 1.0) * half_width
    ys = (1.0 - (np.arange(h) + 0.5) / h * 2.0) * half_height
    xx, yy = np.meshgrid(xs, ys)

    local = np.dstack((xx, yy, np.ones_like(xx)))
    rays = np.dot(local, camera_rotmat(direction, up).T)
    return normalize(rays)

class StaticCamera(object):
    """Pinhole camera at a fixed position"""

    def __init__(self, center, direction, fov=50.0, up=(0, 1, 0)):
        if not 0 < fov < 180:
            raise ValueError("field of view must be in (0, 180) degrees")
        self.center = np.array(np.ravel(center), dtype=np.float64)
        self.direction = normalize_vector(direction)
        if self.direction is None:
            raise ValueError("camera direction must be non-zero")
        self.fov = float(fov)
        self.up = np.array(np.ravel(up), dtype=np.float64)
        # validates up
        camera_rotmat(self.direction, self.up)

    def rays(self, width, height):
        return camera_rays((width, height), self.fov, self.direction, self.up)

    def ray(self, x, y, width, height):
        "(origin, direction) of the ray through the center of pixel (x, y)"
        return (self.center, self.rays(width, height)[y, x, :])
