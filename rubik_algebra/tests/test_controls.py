# rubik_algebra/tests/test_controls.py
import unittest

from PySide6.QtCore import Qt

from rubik_algebra.core import ZERO, Arrow, FaceTurn
from rubik_algebra.logic.controls import (
    TURN_KEYS,
    press_rotation,
    release_rotation,
    rotation_for_key,
    turn_for_key,
)

A = Arrow.of

UP = Qt.Key.Key_Up
DOWN = Qt.Key.Key_Down
LEFT = Qt.Key.Key_Left


class TestTurnKeys(unittest.TestCase):
    def test_face_keys(self):
        self.assertEqual(turn_for_key(Qt.Key.Key_U), A(0, 1, 0))
        self.assertEqual(turn_for_key(Qt.Key.Key_D), A(0, -1, 0))
        self.assertEqual(turn_for_key(Qt.Key.Key_F), A(0, 0, -1))
        self.assertEqual(turn_for_key(Qt.Key.Key_B), A(0, 0, 1))
        self.assertEqual(turn_for_key(Qt.Key.Key_L), A(-1, 0, 0))
        self.assertEqual(turn_for_key(Qt.Key.Key_R), A(1, 0, 0))

    def test_other_keys(self):
        self.assertIsNone(turn_for_key(Qt.Key.Key_A))
        self.assertIsNone(turn_for_key(UP))

    def test_every_face_key_is_a_valid_turn(self):
        self.assertEqual(len(set(TURN_KEYS.values())), 6)
        for axis in TURN_KEYS.values():
            FaceTurn(axis)


class TestViewRotation(unittest.TestCase):
    def test_rotation_for_key(self):
        self.assertEqual(rotation_for_key(UP), A(0, 1, 0))
        self.assertEqual(rotation_for_key(LEFT), A(-1, 0, 0))
        self.assertEqual(rotation_for_key(Qt.Key.Key_U), ZERO)

    def test_held_key_does_not_accumulate(self):
        r = press_rotation(ZERO, UP)
        r = press_rotation(r, UP)
        self.assertEqual(r, A(0, 1, 0))
        self.assertEqual(release_rotation(r, UP), ZERO)

    def test_opposite_keys_cancel(self):
        r = press_rotation(ZERO, UP)
        r = press_rotation(r, DOWN)
        self.assertEqual(r, ZERO)

        r = release_rotation(r, UP)
        self.assertEqual(r, A(0, -1, 0))
        self.assertEqual(release_rotation(r, DOWN), ZERO)

    def test_two_axes_combine(self):
        r = press_rotation(press_rotation(ZERO, LEFT), UP)
        self.assertEqual(r, A(-1, 1, 0))
        self.assertEqual(release_rotation(r, LEFT), A(0, 1, 0))

    def test_non_arrow_key_is_neutral(self):
        r = A(1, 0, 0)
        self.assertEqual(press_rotation(r, Qt.Key.Key_U), r)
        self.assertEqual(release_rotation(r, Qt.Key.Key_U), r)


if __name__ == "__main__":
    unittest.main()
