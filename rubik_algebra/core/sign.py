# rubik_algebra/core/sign.py
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rubik_algebra.core.arrow import Arrow


class Sign(Enum):
    """Escalar de tres valores {-1, 0, 1}.

    Cerrado bajo negación y multiplicación. La suma satura: dos valores
    opuestos se cancelan en `ZERO` y dos iguales se quedan en ±1.
    """

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def of(cls, n: int) -> "Sign":
        """Signo de un entero (por ejemplo, de un producto punto).

        Args:
            n: Entero cualquiera.

        Returns:
            `NEGATIVE`, `ZERO` o `POSITIVE`.
        """
        if n > 0:
            return cls.POSITIVE
        if n < 0:
            return cls.NEGATIVE
        return cls.ZERO

    def negate(self) -> "Sign":
        return Sign(-self.value)

    def times(self, other: "Sign") -> "Sign":
        return Sign(self.value * other.value)

    def plus(self, other: "Sign") -> "Sign":
        """Suma saturada: nunca sale de {-1, 0, 1}."""
        return Sign.of(self.value + other.value)

    def __neg__(self) -> "Sign":
        return self.negate()

    def __mul__(self, other: "Sign") -> "Sign":
        return self.times(other)

    def __add__(self, other: "Sign") -> "Sign":
        return self.plus(other)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return {-1: "-", 0: "0", 1: "+"}[self.value]


class Axis(Enum):
    """Eje principal del cubo; ordenado cíclicamente X -> Y -> Z -> X."""

    X = 0
    Y = 1
    Z = 2

    def cycle(self) -> "Axis":
        return Axis((self.value + 1) % 3)

    def as_arrow(self) -> "Arrow":
        """Vector unitario positivo sobre este eje."""
        from rubik_algebra.core.arrow import Arrow

        signs = [Sign.ZERO, Sign.ZERO, Sign.ZERO]
        signs[self.value] = Sign.POSITIVE
        return Arrow(*signs)
