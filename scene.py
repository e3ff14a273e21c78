import numpy as np
from camera import StaticCamera
from textures import NormalTexture

class Scene:
    """
    Defines a 3D scene consisting of a camera, solid objects with textures
    and some rendering settings such as image size
    """

    class Object:
        """
        An object consists of a Tracer that represents its shape and a
        texture that colors its surface
        """
        def __init__(self, tracer, texture, name=None):
            self.tracer = tracer
            self.texture = texture
            self.name = name

    def __init__(self):
        default_settings(self)
        self.objects = []

    def get_objects(self, name):
        return [obj for obj in self.objects if obj.name == name]

    def get_object(self, name):
        objs = self.get_objects(name)
        if len(objs) == 1: return objs[0]
        elif len(objs) == 0:
            raise KeyError("No object named '%s'" % name)
        else:
            raise KeyError("Multiple objects in the scene are called '%s'" % name)

    def add_object(self, tracer, texture=None, name=None):
        if texture is None: texture = NormalTexture()
        obj = Scene.Object(tracer, texture, name)
        self.objects.append(obj)
        return obj

    def get_camera_rays(self):
        return self.camera.rays(*self.image_size)

def default_settings(scene):

    # --- Image settings
    scene.image_size = (320, 240)
    scene.background_color = np.zeros(3)

    # --- Default camera
    scene.camera = StaticCamera((0, 0, -5), (0, 0, 1), fov=50.0)
