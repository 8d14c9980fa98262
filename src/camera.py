
import logging
import numpy as np
from transform import vec3, view_matrix
from projection import projection_matrix

logger = logging.getLogger("softrender.camera")

class Camera:
    def __init__(self, position=(0.0, 0.0, 10.0), look_dir=(0.0, 0.0, -1.0), up=(0.0, 1.0, 0.0),
                 orthographic=False, orthographic_size=5.0, fov=60.0, near=0.3, far=1000.0):
        self.position = vec3(position)
        self.look_dir = vec3(look_dir)
        self.up = vec3(up)

        # projecao
        self.orthographic = orthographic
        self.orthographic_size = orthographic_size  # meia altura
        self.fov = fov  # vertical, graus
        self.near = near
        self.far = far

    def look_at(self, target):
        direction = vec3(target) - self.position
        if not np.any(direction):
            logger.warning("look_at: alvo coincide com a posicao da camara")
        self.look_dir = direction

    def toggle_projection(self):
        self.orthographic = not self.orthographic

    def get_view_matrix(self):
        return view_matrix(self.position, self.look_dir, self.up)

    def get_projection_matrix(self, aspect):
        return projection_matrix(self, aspect)
