# rubik_algebra/core/arrow.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from rubik_algebra.core.errors import ContractViolation
from rubik_algebra.core.sign import Axis, Sign

AxisLike = Union[Axis, "Arrow"]


@dataclass(frozen=True)
class Arrow:
    """Vector discreto (x, y, z) con componentes en {-1, 0, 1}.

    Representa tanto una posición del retículo 3x3x3 de cubies como una
    dirección (vector unitario). Los invariantes ("unitario", "no nulo",
    "paralelo/perpendicular a un eje") no se imponen al construir: se
    verifican en cada punto de uso con los métodos `check_*`.
    """

    x: Sign = Sign.ZERO
    y: Sign = Sign.ZERO
    z: Sign = Sign.ZERO

    @classmethod
    def of(cls, x: int, y: int, z: int) -> "Arrow":
        """Construye un Arrow desde enteros en {-1, 0, 1}.

        Raises:
            ContractViolation: Si alguna componente está fuera de {-1, 0, 1}.
        """
        try:
            return cls(Sign(x), Sign(y), Sign(z))
        except ValueError as exc:
            raise ContractViolation(f"Componentes fuera de {{-1, 0, 1}}: {(x, y, z)}") from exc

    # --------------------------
    # Acceso
    # --------------------------
    def __getitem__(self, axis: Axis) -> Sign:
        return (self.x, self.y, self.z)[axis.value]

    def __iter__(self) -> Iterator[Sign]:
        return iter((self.x, self.y, self.z))

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.x.value, self.y.value, self.z.value)

    def __str__(self) -> str:
        return f"({self.x},{self.y},{self.z})"

    # --------------------------
    # Álgebra
    # --------------------------
    def dot(self, other: "Arrow") -> int:
        """Producto punto: suma de los productos componente a componente."""
        return sum(a.value * b.value for a, b in zip(self, other))

    def cross(self, other: "Arrow") -> "Arrow":
        """Producto cruz discreto (fórmula del determinante con aritmética de Sign).

        En el retículo {-1, 0, 1} cada componente es una resta de dos
        productos; sobre los vectores que usa el cubo (uno de los operandos
        unitario) nunca hay desborde. Con dos operandos no unitarios la resta
        satura: `(+,+,0) x (-,+,0)` da `(0,0,+)`.
        """
        a, b = self, other
        return Arrow(
            a.y * b.z + -(a.z * b.y),
            a.z * b.x + -(a.x * b.z),
            a.x * b.y + -(a.y * b.x),
        )

    def negate(self) -> "Arrow":
        return Arrow(-self.x, -self.y, -self.z)

    def add(self, other: "Arrow") -> "Arrow":
        """Suma saturada componente a componente.

        Componentes opuestas se cancelan en cero; iguales se quedan en ±1.
        Es la política que usa el acumulador de teclas de rotación.
        """
        return Arrow(self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, s: Sign) -> "Arrow":
        return Arrow(self.x * s, self.y * s, self.z * s)

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def __neg__(self) -> "Arrow":
        return self.negate()

    def __add__(self, other: "Arrow") -> "Arrow":
        return self.add(other)

    # --------------------------
    # Predicados
    # --------------------------
    def is_unit(self) -> bool:
        return self.dot(self) == 1

    def is_non_zero(self) -> bool:
        return self.dot(self) > 0

    def is_parallel_to(self, axis: AxisLike) -> bool:
        """Componente sobre `axis` distinta de cero."""
        return self[_as_axis(axis)] != Sign.ZERO

    def is_perpendicular_to(self, axis: AxisLike) -> bool:
        """Componente sobre `axis` igual a cero."""
        return self[_as_axis(axis)] == Sign.ZERO

    def unit_axis(self) -> Axis:
        """Eje sobre el que apunta un Arrow unitario."""
        self.check_unit()
        for axis in Axis:
            if self[axis] != Sign.ZERO:
                return axis
        raise ContractViolation(f"Sin componente no nula: {self}")

    # --------------------------
    # Contratos
    # --------------------------
    def check_unit(self) -> None:
        if not self.is_unit():
            raise ContractViolation(f"Se esperaba un vector unitario: {self}")

    def check_non_zero(self) -> None:
        if not self.is_non_zero():
            raise ContractViolation(f"Se esperaba un vector no nulo: {self}")

    def check_parallel(self, axis: AxisLike) -> None:
        if not self.is_parallel_to(axis):
            raise ContractViolation(f"{self} no es paralelo a {_describe(axis)}")

    def check_perpendicular(self, axis: AxisLike) -> None:
        if not self.is_perpendicular_to(axis):
            raise ContractViolation(f"{self} no es perpendicular a {_describe(axis)}")


def _as_axis(axis: AxisLike) -> Axis:
    if isinstance(axis, Axis):
        return axis
    return axis.unit_axis()


def _describe(axis: AxisLike) -> str:
    return axis.name if isinstance(axis, Axis) else str(axis)


ZERO = Arrow()


def arrows() -> List[Arrow]:
    """Los 27 puntos del retículo 3x3x3 (incluye el centro), en orden x, y, z."""
    return [Arrow(x, y, z) for x in Sign for y in Sign for z in Sign]


def basis() -> List[Arrow]:
    """Los 6 vectores unitarios, en el orden del retículo."""
    return [a for a in arrows() if a.dot(a) == 1]


def directions() -> List[Arrow]:
    """Los 6 vectores unitarios, eje por eje: +X, -X, +Y, -Y, +Z, -Z."""
    out: List[Arrow] = []
    for axis in Axis:
        out.append(axis.as_arrow())
        out.append(axis.as_arrow().negate())
    return out
