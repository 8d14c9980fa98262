
import math
import logging
import numpy as np

from transform import DTYPE, scale, translate

logger = logging.getLogger("softrender.projection")

def orthographic(l, r, b, t, f, n):
    # caixa degenerada da inf/nan, nunca excecao
    l, r, b, t, f, n = (DTYPE(v) for v in (l, r, b, t, f, n))
    if r == l or t == b or n == f:
        logger.warning("orthographic: caixa degenerada l=%s r=%s b=%s t=%s f=%s n=%s", l, r, b, t, f, n)

    with np.errstate(divide="ignore", invalid="ignore"):
        T = translate(-(r + l) * DTYPE(0.5), -(t + b) * DTYPE(0.5), -(n + f) * DTYPE(0.5))
        S = scale((DTYPE(2) / (r - l), DTYPE(2) / (t - b), DTYPE(2) / (n - f)))
        return S @ T

def perspective(fovy_deg, aspect, znear, zfar):
    """Frustum -> caixa ortografica -> cubo [-1,1]^3.

    znear/zfar sao distancias positivas; em espaco de vista passam a
    n = -znear, f = -zfar. A matriz P esmaga o frustum numa caixa e deixa a
    divisao por w para o clip. Os meios-lados derivam de tan(fov/2) a
    distancia unitaria.
    """
    t = math.tan(math.radians(fovy_deg) * 0.5)
    b = -t
    r = aspect * t
    l = -r
    n = -znear
    f = -zfar

    P = np.zeros((4,4), dtype=DTYPE)
    P[0,0] = n; P[1,1] = n
    P[2,2] = n + f
    P[2,3] = -n * f
    P[3,2] = 1.0

    ortho = orthographic(l, r, b, t, f, n)
    with np.errstate(invalid="ignore"):
        return ortho @ P

def projection_matrix(camera, aspect):
    if camera.orthographic:
        height = camera.orthographic_size
        width = height * aspect
        f = -camera.far
        n = -camera.near
        return orthographic(-width, width, -height, height, f, n)
    return perspective(camera.fov, aspect, camera.near, camera.far)
