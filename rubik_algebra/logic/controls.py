# rubik_algebra/logic/controls.py
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

from PySide6.QtCore import Qt

from rubik_algebra.core.arrow import ZERO, Arrow
from rubik_algebra.core.sign import Axis

X = Axis.X.as_arrow()
Y = Axis.Y.as_arrow()
Z = Axis.Z.as_arrow()

# Cara (notación U D F B L R) -> eje del giro
FACE_TURNS: Dict[str, Arrow] = {
    "U": Y,
    "D": -Y,
    "F": -Z,
    "B": Z,
    "L": -X,
    "R": X,
}

Key = Union[int, Qt.Key]


def _code(key: Key) -> int:
    return key.value if isinstance(key, Enum) else int(key)


TURN_KEYS: Dict[int, Arrow] = {
    _code(getattr(Qt.Key, f"Key_{face}")): axis for face, axis in FACE_TURNS.items()
}

# Flechas -> rotación del punto de vista
ROTATION_KEYS: Dict[int, Arrow] = {
    _code(Qt.Key.Key_Up): Y,
    _code(Qt.Key.Key_Down): -Y,
    _code(Qt.Key.Key_Left): -X,
    _code(Qt.Key.Key_Right): X,
}


def turn_for_key(key: Key) -> Optional[Arrow]:
    """Eje de giro asociado a una tecla de cara (U D F B L R).

    Args:
        key: Código de tecla de Qt (`QKeyEvent.key()`).

    Returns:
        Vector unitario del giro, o None si la tecla no es de cara.
    """
    return TURN_KEYS.get(_code(key))


def rotation_for_key(key: Key) -> Arrow:
    """Rotación de vista asociada a una flecha; vector nulo para otras teclas."""
    return ROTATION_KEYS.get(_code(key), ZERO)


def _accumulate(current: Arrow, rotation: Arrow) -> Arrow:
    # Solo suma si no empuja en la misma dirección: el auto-repeat no acumula
    if current.dot(rotation) <= 0:
        return current.add(rotation)
    return current


def press_rotation(current: Arrow, key: Key) -> Arrow:
    """Acumula la rotación de vista al presionar una tecla.

    Mantener una flecha deja su eje en ±1 (la suma satura) y presionar la
    flecha opuesta a la vez cancela el eje a cero.

    Args:
        current: Rotación acumulada hasta ahora.
        key: Tecla presionada.

    Returns:
        Nueva rotación acumulada.
    """
    return _accumulate(current, rotation_for_key(key))


def release_rotation(current: Arrow, key: Key) -> Arrow:
    """Deshace la contribución de una tecla al soltarla."""
    return _accumulate(current, rotation_for_key(key).negate())
