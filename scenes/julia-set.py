"""
Quaternion Julia set C = -0.8 + 0.2i colored by its surface normals
"""

from scene import Scene
from camera import StaticCamera
from julia_set import QuaternionJuliaSet
from quaternion import Quaternion
from textures import NormalTexture

scene = Scene()
scene.background_color = (0.0, 0.0, 0.0)

scene.camera = StaticCamera((3, 0.1, -3), (-1.0, 0.0, 1.0), fov=50.0)

julia = QuaternionJuliaSet(Quaternion(i=0.2, real=-0.8),
    epsilon=0.001, max_iterations=20)

scene.add_object(julia, NormalTexture(), name='julia')
