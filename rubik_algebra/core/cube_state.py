# rubik_algebra/core/cube_state.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Tuple

from rubik_algebra.core.arrow import Arrow, arrows, basis
from rubik_algebra.core.auto import Automorphism
from rubik_algebra.core.cubie_face import CubieFace
from rubik_algebra.core.errors import ContractViolation
from rubik_algebra.core.rotation import rotate
from rubik_algebra.core.sign import Axis, Sign


class Color(Enum):
    GREEN = "G"
    BLUE = "B"
    ORANGE = "O"
    RED = "R"
    YELLOW = "Y"
    WHITE = "W"


# Orden de evaluación: Z, luego X, luego Y
_FACE_COLORS: List[Tuple[Axis, Sign, Color]] = [
    (Axis.Z, Sign.NEGATIVE, Color.GREEN),
    (Axis.Z, Sign.POSITIVE, Color.BLUE),
    (Axis.X, Sign.NEGATIVE, Color.ORANGE),
    (Axis.X, Sign.POSITIVE, Color.RED),
    (Axis.Y, Sign.NEGATIVE, Color.YELLOW),
    (Axis.Y, Sign.POSITIVE, Color.WHITE),
]


def initial_color(face: Arrow) -> Color:
    """Color de una cara en el cubo resuelto.

    -Z verde, +Z azul, -X naranja, +X rojo, -Y amarillo, +Y blanco.

    Raises:
        ContractViolation: Si `face` es el vector nulo.
    """
    for axis, sign, color in _FACE_COLORS:
        if face[axis] == sign:
            return color
    raise ContractViolation(f"Cara del cubo incorrecta: {face}")


def stickers() -> List[CubieFace]:
    """Los 54 stickers exteriores: (cubie, cara) con `dot(cubie, cara) == 1`."""
    return [
        CubieFace(cubie, face)
        for cubie in arrows()
        for face in basis()
        if cubie.dot(face) == 1
    ]


def valid_stickers() -> List[CubieFace]:
    """Todos los pares (cubie, cara) válidos, incluidos los interiores.

    Son los 108 pares con cubie no nulo y componente no nula sobre el eje
    de la cara; los 54 de `stickers()` son los que miran hacia afuera.
    """
    return [
        CubieFace(cubie, face)
        for cubie in arrows()
        for face in basis()
        if cubie.is_non_zero() and cubie.is_parallel_to(face)
    ]


class RubikCube:
    """Estado del cubo: función total sticker -> color.

    Es un valor inmutable. Un giro no modifica el estado, produce uno nuevo
    que consulta al anterior (ver `FaceTurn.on_cube`).

    Igualdad:
        Dos estados son iguales si dan el mismo color en los 54 stickers.
    """

    def __init__(self, get: Callable[[CubieFace], Color]) -> None:
        self._get = get

    def __getitem__(self, sticker: CubieFace) -> Color:
        return self._get(sticker)

    def to_hashable(self) -> Tuple[Color, ...]:
        """Colores de los 54 stickers en el orden de `stickers()`."""
        return tuple(self[s] for s in stickers())

    def frozen(self) -> "RubikCube":
        """Copia respaldada por una tabla.

        Evalúa una sola vez la cadena de consultas acumulada por los giros
        sobre todos los stickers válidos (`valid_stickers()`). La copia no
        guarda referencia al estado original, así un historial largo no
        genera una pila de llamadas profunda.
        """
        table: Dict[CubieFace, Color] = {s: self[s] for s in valid_stickers()}
        return RubikCube(table.__getitem__)

    def is_solved(self) -> bool:
        """Cada cara muestra un solo color."""
        by_face: Dict[Arrow, set] = {}
        for s in stickers():
            by_face.setdefault(s.face, set()).add(self[s])
        return all(len(colors) == 1 for colors in by_face.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RubikCube):
            return NotImplemented
        return self.to_hashable() == other.to_hashable()

    def __hash__(self) -> int:
        return hash(self.to_hashable())


@dataclass(frozen=True)
class FaceTurn:
    """Giro de 90° de la capa de cubies con componente positiva sobre `axis`.

    Sentido: mano derecha alrededor de `axis` (ver `rotate`). Por ejemplo,
    `FaceTurn(+Z)` lleva el sticker ((+,+,+), +Z) a ((-,+,+), +Z).

    Raises:
        ContractViolation: Si `axis` no es unitario.
    """

    axis: Arrow

    def __post_init__(self) -> None:
        self.axis.check_unit()

    def on_stickers(self) -> Automorphism[CubieFace]:
        """Permutación de stickers: rota solo los de la capa girada."""
        rotation = rotate(self.axis)
        axis = self.axis

        def morph(sticker: CubieFace) -> CubieFace:
            if sticker.cubie.dot(axis) > 0:
                return CubieFace(
                    cubie=rotation.apply(sticker.cubie),
                    face=rotation.apply(sticker.face),
                )
            return sticker

        return Automorphism(morph)

    def on_cube(self) -> Automorphism[RubikCube]:
        """Transformación del estado completo por pull-back.

        El nuevo estado en el sticker `s` toma el color que el estado anterior
        tenía en `on_stickers()(s)`: `c'(s) = c(turn(s))`. Consultar a través
        del mapa directo evita construir un automorfismo inverso. Ojo: por eso
        los colores se desplazan en el sentido contrario al de `on_stickers`.
        """
        turn = self.on_stickers()

        def morph(cube: RubikCube) -> RubikCube:
            return RubikCube(lambda sticker: cube[turn.apply(sticker)])

        return Automorphism(morph)

    def inverse(self) -> Automorphism[RubikCube]:
        """El giro contrario: tres giros iguales."""
        return self.on_cube().power(3)


# --------------------------
# Interfaz pública
# --------------------------
def initial_state() -> RubikCube:
    """Cubo resuelto con la asignación fija cara -> color."""
    return RubikCube(lambda sticker: initial_color(sticker.face))


def color_at(state: RubikCube, cubie: Arrow, face: Arrow) -> Color:
    """Color del sticker (cubie, face).

    Raises:
        ContractViolation: Si (cubie, face) no es un sticker válido.
    """
    return state[CubieFace(cubie, face)]


def apply_turn(state: RubikCube, axis: Arrow) -> RubikCube:
    """Nuevo estado después de girar la capa del eje `axis`.

    Raises:
        ContractViolation: Si `axis` no es unitario.
    """
    return FaceTurn(axis).on_cube().apply(state)
