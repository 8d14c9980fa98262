
import math
import logging
import numpy as np

logger = logging.getLogger("softrender.transform")

DTYPE = np.float32
# igual ao Vector3.normalized do motor: abaixo disto o vetor normaliza para zero
EPSILON = 1e-5

AXIS_X = (1.0, 0.0, 0.0)
AXIS_Y = (0.0, 1.0, 0.0)
AXIS_Z = (0.0, 0.0, 1.0)

def vec3(v):
    return np.array(v, dtype=DTYPE).reshape(3)

def normalized(v):
    v = vec3(v)
    n = float(np.linalg.norm(v))
    if n <= EPSILON: return np.zeros(3, dtype=DTYPE)
    return (v / n).astype(DTYPE)

def rotate_vector(axis, v, angle_rad):
    """Rodrigues: roda v em torno de axis (unitario) por angle_rad radianos.

    A componente paralela ao eixo fica intacta; a perpendicular roda no plano
    {b, axis x b}. Se v for paralelo ao eixo, b normaliza para zero e o
    resultado e o proprio v.
    """
    a = vec3(axis)
    v = vec3(v)
    v_par = np.dot(a, v) * a
    v_perp = v - v_par
    perp_len = np.linalg.norm(v_perp)

    b = normalized(v_perp)
    c = np.cross(a, b)

    v_perp_rot = perp_len * (math.cos(angle_rad) * b + math.sin(angle_rad) * c)
    return (v_par + v_perp_rot).astype(DTYPE)

def scale(s):
    sx, sy, sz = vec3(s)
    M = np.eye(4, dtype=DTYPE)
    M[0,0] = sx; M[1,1] = sy; M[2,2] = sz
    return M

def translate(x, y, z):
    M = np.eye(4, dtype=DTYPE)
    M[0,3] = x; M[1,3] = y; M[2,3] = z
    return M

def model_translation(t):
    # ATENCAO: as linhas 0-2 sao reescritas a partir de zero, a diagonal perde os 1s.
    # Nao e uma translacao convencional (ver translate). Mantido como no original
    # ate o dono confirmar a intencao; model_matrix depende deste resultado.
    tx, ty, tz = vec3(t)
    M = np.zeros((4,4), dtype=DTYPE)
    M[0] = (0, 0, 0, tx)
    M[1] = (0, 0, 0, ty)
    M[2] = (0, 0, 0, tz)
    M[3] = (0, 0, 0, 1)
    return M

def rotate(angle_deg, axis):
    a = normalized(axis)
    if not a.any():
        logger.warning("rotate: eixo de comprimento zero %s", tuple(vec3(axis)))
    rad = math.radians(angle_deg)

    M = np.eye(4, dtype=DTYPE)
    for col, basis in enumerate((AXIS_X, AXIS_Y, AXIS_Z)):
        M[:3, col] = rotate_vector(a, basis, rad)
    return M

def model_matrix(scale_xyz, rotation_deg, position):
    rx, ry, rz = vec3(rotation_deg)
    S = scale(scale_xyz)

    # ordem fixa: Ry * Rx * Rz, X e Y com sinal trocado
    Rx = rotate(-rx, AXIS_X)
    Ry = rotate(-ry, AXIS_Y)
    Rz = rotate(rz, AXIS_Z)
    R = Ry @ Rx @ Rz

    T = model_translation(position)
    return T @ R @ S

def view_matrix(eye, look_dir, up):
    # mundo com z trocado: a camara olha para -Z
    eye = vec3(eye); eye[2] *= -1
    cam_z = normalized(look_dir); cam_z[2] *= -1
    cam_y = normalized(up); cam_y[2] *= -1
    cam_x = np.cross(cam_y, cam_z)
    cam_y = np.cross(cam_z, cam_x)
    if not cam_x.any():
        logger.warning("view_matrix: look_dir e up sao paralelos")

    M = np.eye(4, dtype=DTYPE)
    M[0,0:3] = cam_x; M[1,0:3] = cam_y; M[2,0:3] = cam_z

    T = translate(-eye[0], -eye[1], -eye[2])
    return M @ T

def transform_point(M, p):
    x, y, z = vec3(p)
    out = np.asarray(M, dtype=DTYPE) @ np.array([x, y, z, 1.0], dtype=DTYPE)
    w = out[3]
    if w != 0.0: return (out[:3] / w).astype(DTYPE)
    return out[:3]

class Transform:
    def __init__(self, scale=(1.0, 1.0, 1.0), rotation=(0.0, 0.0, 0.0), position=(0.0, 0.0, 0.0)):
        self.scale = vec3(scale)
        self.rotation = vec3(rotation)  # graus
        self.position = vec3(position)

    def matrix(self):
        return model_matrix(self.scale, self.rotation, self.position)
