from rubik_algebra.core.arrow import ZERO, Arrow, arrows, basis, directions
from rubik_algebra.core.auto import Automorphism
from rubik_algebra.core.cube_state import (
    Color,
    FaceTurn,
    RubikCube,
    apply_turn,
    color_at,
    initial_color,
    initial_state,
    stickers,
    valid_stickers,
)
from rubik_algebra.core.cubie_face import CubieFace
from rubik_algebra.core.errors import ContractViolation
from rubik_algebra.core.rotation import rotate
from rubik_algebra.core.sign import Axis, Sign

__all__ = [
    "ZERO",
    "Arrow",
    "Automorphism",
    "Axis",
    "Color",
    "ContractViolation",
    "CubieFace",
    "FaceTurn",
    "RubikCube",
    "Sign",
    "apply_turn",
    "arrows",
    "basis",
    "color_at",
    "directions",
    "initial_color",
    "initial_state",
    "rotate",
    "stickers",
    "valid_stickers",
]
