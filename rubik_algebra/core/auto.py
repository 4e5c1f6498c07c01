# rubik_algebra/core/auto.py
from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

from rubik_algebra.core.errors import ContractViolation

T = TypeVar("T")


class Automorphism(Generic[T]):
    """Automorfismo componible sobre un dominio `T`.

    Envuelve una función pura `T -> T`. La misma abstracción se usa para
    rotar vectores (`Arrow`), permutar stickers (`CubieFace`) y transformar
    estados completos del cubo (`RubikCube`); solo cambia la función.

    Composición:
        `a.compose_with(b)` aplica primero `a` y después `b`.

    Potencia:
        `a.power(n)` es la composición de `a` consigo mismo `n` veces;
        `power(0)` es la identidad. La inversa de una rotación de orden 4
        se obtiene como `power(3)`.
    """

    def __init__(self, morph: Callable[[T], T]) -> None:
        self._morph = morph

    @classmethod
    def identity(cls) -> "Automorphism[T]":
        return cls(lambda x: x)

    def apply(self, x: T) -> T:
        return self._morph(x)

    def __call__(self, x: T) -> T:
        return self._morph(x)

    def compose_with(self, other: "Automorphism[T]") -> "Automorphism[T]":
        """Primero `self`, luego `other`."""
        first, second = self._morph, other._morph
        return Automorphism(lambda x: second(first(x)))

    def power(self, n: int) -> "Automorphism[T]":
        """Composición repetida `n` veces.

        Args:
            n: Entero no negativo.

        Raises:
            ContractViolation: Si `n` es negativo.
        """
        if n < 0:
            raise ContractViolation(f"La potencia debe ser no negativa: {n}")

        result: Automorphism[T] = Automorphism.identity()
        for _ in range(n):
            result = result.compose_with(self)
        return result

    def equals_on(self, other: "Automorphism[T]", domain: Iterable[T]) -> bool:
        """Igualdad observable: mismas salidas para todo elemento de `domain`."""
        return all(self.apply(x) == other.apply(x) for x in domain)
