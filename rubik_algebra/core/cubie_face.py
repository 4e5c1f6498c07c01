# rubik_algebra/core/cubie_face.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

from rubik_algebra.core.arrow import Arrow
from rubik_algebra.core.rotation import rotate

LOOP_STEPS = 12


@dataclass(frozen=True)
class CubieFace:
    """Un sticker visible: la cara `face` del cubie en la posición `cubie`.

    Invariantes (se validan al construir):
        - `cubie` es no nulo (el centro del cubo no tiene stickers).
        - `face` es unitario.
        - `cubie` tiene componente no nula sobre el eje de `face`.

    Raises:
        ContractViolation: Si el par (cubie, face) no es un sticker válido.
    """

    cubie: Arrow
    face: Arrow

    def __post_init__(self) -> None:
        self.cubie.check_non_zero()
        self.face.check_unit()
        self.cubie.check_parallel(self.face)

    def __str__(self) -> str:
        return f"{self.cubie}:{self.face}"

    def check_direction(self, direction: Arrow) -> None:
        """Una dirección de recorrido debe ser unitaria y tangente a la cara."""
        direction.check_unit()
        self.face.check_perpendicular(direction)

    # --------------------------
    # Adyacencia
    # --------------------------
    def neighbour(self, direction: Arrow) -> "CubieFace":
        """Sticker vecino en la dirección `direction`.

        Si el cubie ya está en el borde hacia `direction` se dobla la arista:
        mismo cubie, nueva cara `direction`. Si no, mismo tipo de cara en el
        cubie adyacente.
        """
        self.check_direction(direction)

        if self.cubie.dot(direction) > 0:
            return CubieFace(self.cubie, direction)

        return CubieFace(self.cubie.add(direction), self.face)

    def reorient(self, direction: Arrow) -> Arrow:
        """Dirección con la que se sigue avanzando desde el vecino.

        Al doblar una arista la nueva dirección es `-face` (se sigue bajando
        por la cara nueva); en otro caso no cambia.
        """
        self.check_direction(direction)

        if self.cubie.dot(direction) > 0:
            return self.face.negate()

        return direction

    def twist(self, direction: Arrow, turns: int) -> Arrow:
        """Gira `direction` `turns` cuartos de vuelta en el plano de esta cara."""
        return rotate(self.face).power(turns).apply(direction)

    # --------------------------
    # Recorridos
    # --------------------------
    def walk(self, direction: Arrow, turns: Iterable[int]) -> Iterator[Tuple["CubieFace", Arrow]]:
        """Recorre la superficie del cubo paso a paso.

        Por cada elemento de `turns` avanza al vecino, reorienta la dirección
        y además la gira ese número de cuartos de vuelta sobre la cara nueva.

        Args:
            direction: Dirección inicial (unitaria y perpendicular a la cara).
            turns: Cuartos de vuelta adicionales (no negativos) por paso.

        Yields:
            (sticker, dirección) después de cada paso.
        """
        face: CubieFace = self
        for turn in turns:
            neighbour = face.neighbour(direction)
            direction = neighbour.twist(face.reorient(direction), turn)
            face = neighbour
            yield face, direction

    def follow(self, direction: Arrow, turns: Iterable[int]) -> "CubieFace":
        """Sticker final del recorrido `walk(direction, turns)`."""
        face: CubieFace = self
        for face, _ in self.walk(direction, turns):
            pass
        return face

    def loop(self, direction: Arrow) -> "CubieFace":
        """Doce pasos sin giro extra.

        Para un sticker exterior (`dot(cubie, face) == 1`) vuelve siempre al
        sticker de partida con la dirección de partida. Un par interior, como
        ((+,+,+), -Z), sale hacia las caras exteriores y no regresa.
        """
        return self.follow(direction, [0] * LOOP_STEPS)
