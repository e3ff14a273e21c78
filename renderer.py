import logging
import numpy as np

logger = logging.getLogger(__name__)

class Renderer:
    """
    Renders a Scene with one ray per pixel: each pixel gets the texture
    color of the nearest surface the ray enters, or the background color.
    Every pixel is computed independently of the others, so the result
    does not depend on the order in which rows are rendered.
    """

    def __init__(self, scene):
        self.scene = scene
        self.img_shape = scene.image_size[::-1]

    def rays_per_sample(self):
        return self.img_shape[0]*self.img_shape[1]

    def first_hit(self, origin, direction):
        "Returns (object, intersection) of the nearest front hit, or None"
        best = None
        for obj in self.scene.objects:
            for inter in obj.tracer.intersect(origin, direction):
                # the ray starts at the camera, earlier crossings are not visible
                if inter.enter and inter.t >= 0:
                    if best is None or inter.t < best[1].t:
                        best = (obj, inter)
                    break
        return best

    def shade_ray(self, origin, direction):
        hit = self.first_hit(origin, direction)
        if hit is None:
            return np.array(self.scene.background_color, dtype=np.float64)

        obj, inter = hit
        obj.tracer.complete_intersection(inter)
        color, _ = obj.texture.apply(inter)
        return color

    def render_row(self, rays, y):
        origin = self.scene.camera.center
        return np.array([self.shade_ray(origin, rays[y, x, :])
            for x in range(rays.shape[1])])

    def render(self, progress=None):
        """
        Renders the full image, shape (height, width, 3). progress, if
        given, is called with (rows_done, rows_total) after each row.
        """
        rays = self.scene.get_camera_rays()
        h, w = self.img_shape
        img = np.zeros((h, w, 3))

        logger.info("rendering %dx%d image, %d objects",
            w, h, len(self.scene.objects))

        for y in range(h):
            img[y, :, :] = self.render_row(rays, y)
            if progress is not None:
                progress(y+1, h)

        return img
