# rubik_algebra/core/rotation.py
from __future__ import annotations

from rubik_algebra.core.arrow import Arrow
from rubik_algebra.core.auto import Automorphism
from rubik_algebra.core.sign import Sign


def rotate(axis: Arrow) -> Automorphism[Arrow]:
    """Rotación de 90° alrededor de un eje unitario (regla de la mano derecha).

    La parte de `v` perpendicular al eje gira con el producto cruz
    `cross(axis, v)`; la componente paralela al eje se conserva. Para un
    `v` perpendicular al eje el resultado es exactamente `cross(axis, v)`.

    Sentido: `rotate(+Z)` lleva +X -> +Y -> -X -> -Y -> +X.

    Args:
        axis: Vector unitario (cualquiera de los 6).

    Returns:
        Automorfismo sobre Arrow cuya cuarta potencia es la identidad.

    Raises:
        ContractViolation: Si `axis` no es unitario.
    """
    axis.check_unit()

    def morph(v: Arrow) -> Arrow:
        # cross(axis, v) no tiene componente sobre el eje; la suma no satura
        along = axis.scale(Sign.of(axis.dot(v)))
        return axis.cross(v).add(along)

    return Automorphism(morph)
