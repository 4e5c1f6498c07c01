# rubik_algebra/render/geometry.py
from __future__ import annotations

from typing import Dict, List, Tuple

from rubik_algebra.core.arrow import Arrow
from rubik_algebra.core.cube_state import Color
from rubik_algebra.core.cubie_face import CubieFace
from rubik_algebra.core.sign import Sign

Vec3f = Tuple[float, float, float]

# El cubo se dibuja en [-1, 1]^3: cada cubie mide 2/3
CUBIE_SIZE = 2.0 / 3.0
HALF = CUBIE_SIZE / 2.0

CORNER = Arrow(Sign.NEGATIVE, Sign.NEGATIVE, Sign.NEGATIVE)

PALETTE: Dict[Color, Vec3f] = {
    Color.WHITE: (1.0, 1.0, 1.0),
    Color.YELLOW: (1.0, 1.0, 0.0),
    Color.ORANGE: (1.0, 0.5, 0.0),
    Color.RED: (1.0, 0.0, 0.0),
    Color.GREEN: (0.0, 0.85, 0.0),
    Color.BLUE: (0.0, 0.35, 1.0),
}


def square_corners(direction: Arrow) -> List[Arrow]:
    """Las 4 esquinas de un cuadrado perpendicular a `direction`.

    Se proyecta la esquina (-,-,-) sobre el plano de la cara y se rota tres
    veces con el producto cruz, lo que da el orden antihorario visto desde
    afuera (desde la punta de `direction`).

    Args:
        direction: Normal unitaria de la cara.

    Returns:
        Lista de 4 Arrow con componente cero sobre el eje de `direction`.
    """
    direction.check_unit()

    projection = direction.scale(Sign.of(direction.dot(CORNER)))
    vertex = CORNER.add(projection.negate())

    corners = [vertex]
    for _ in range(3):
        vertex = direction.cross(vertex)
        corners.append(vertex)
    return corners


def sticker_center(sticker: CubieFace, offset: float = 0.0) -> Vec3f:
    """Centro del sticker en coordenadas de mundo, `offset` hacia afuera."""
    c = sticker.cubie.to_tuple()
    n = sticker.face.to_tuple()
    return tuple(c[i] * CUBIE_SIZE + n[i] * (HALF + offset) for i in range(3))  # type: ignore[return-value]


def sticker_quad(sticker: CubieFace, margin: float, offset: float = 0.0) -> List[Vec3f]:
    """Los 4 vértices (GL_QUADS) de un sticker.

    Args:
        sticker: Sticker a dibujar.
        margin: Margen interno (reduce el cuadrado).
        offset: Separación hacia afuera respecto a la superficie del cubie.

    Returns:
        Lista de 4 vértices (x, y, z).
    """
    center = sticker_center(sticker, offset)
    half = HALF - margin

    quad: List[Vec3f] = []
    for corner in square_corners(sticker.face):
        k = corner.to_tuple()
        quad.append((
            center[0] + k[0] * half,
            center[1] + k[1] * half,
            center[2] + k[2] * half,
        ))
    return quad


def color_rgb(color: Color) -> Vec3f:
    """Color del modelo a RGB en [0, 1]."""
    return PALETTE[color]
