# rubik_algebra/tests/test_cube_state.py
import unittest
from collections import Counter

from rubik_algebra.core import (
    Arrow,
    Color,
    ContractViolation,
    CubieFace,
    FaceTurn,
    apply_turn,
    basis,
    color_at,
    initial_color,
    initial_state,
    stickers,
    valid_stickers,
)

A = Arrow.of
X, Y, Z = A(1, 0, 0), A(0, 1, 0), A(0, 0, 1)


def scrambled():
    c = initial_state()
    for axis in (X, Y, -Z, X, -Y, Z, -X):
        c = apply_turn(c, axis)
    return c


class TestInitialState(unittest.TestCase):
    def test_face_colors(self):
        c = initial_state()
        self.assertEqual(color_at(c, A(0, 0, -1), -Z), Color.GREEN)
        self.assertEqual(color_at(c, A(1, 1, 1), Z), Color.BLUE)
        self.assertEqual(color_at(c, A(-1, 0, 0), -X), Color.ORANGE)
        self.assertEqual(color_at(c, A(1, -1, 0), X), Color.RED)
        self.assertEqual(color_at(c, A(0, -1, 1), -Y), Color.YELLOW)
        self.assertEqual(color_at(c, A(-1, 1, -1), Y), Color.WHITE)

    def test_invalid_sticker_raises(self):
        with self.assertRaises(ContractViolation):
            color_at(initial_state(), A(1, 0, 0), Y)
        with self.assertRaises(ContractViolation):
            initial_color(A(0, 0, 0))

    def test_stickers(self):
        all_stickers = stickers()
        self.assertEqual(len(all_stickers), 54)
        self.assertEqual(len(set(all_stickers)), 54)
        per_face = Counter(s.face for s in all_stickers)
        self.assertEqual(set(per_face.values()), {9})

    def test_starts_solved(self):
        self.assertTrue(initial_state().is_solved())


class TestFaceTurn(unittest.TestCase):
    def test_non_unit_axis_raises(self):
        with self.assertRaises(ContractViolation):
            FaceTurn(A(1, 1, 0))
        with self.assertRaises(ContractViolation):
            apply_turn(initial_state(), A(0, 0, 0))

    def test_corner_sticker_sense(self):
        turn = FaceTurn(Z).on_stickers()
        self.assertEqual(turn(CubieFace(A(1, 1, 1), Z)), CubieFace(A(-1, 1, 1), Z))
        self.assertEqual(turn(CubieFace(A(1, 1, 1), X)), CubieFace(A(-1, 1, 1), Y))

    def test_stickers_outside_layer_are_fixed(self):
        for axis in basis():
            turn = FaceTurn(axis).on_stickers()
            for s in stickers():
                if s.cubie.dot(axis) <= 0:
                    self.assertEqual(turn(s), s)

    def test_sticker_turn_is_a_permutation(self):
        for axis in basis():
            turn = FaceTurn(axis).on_stickers()
            self.assertEqual({turn(s) for s in stickers()}, set(stickers()))

    def test_sticker_turn_has_order_four(self):
        for axis in basis():
            turn = FaceTurn(axis).on_stickers()
            self.assertTrue(turn.power(4).equals_on(turn.power(0), stickers()))
            self.assertFalse(turn.power(2).equals_on(turn.power(0), stickers()))


class TestCubeState(unittest.TestCase):
    def test_pull_back_law(self):
        c = scrambled()
        for axis in basis():
            turned = apply_turn(c, axis)
            forward = FaceTurn(axis).on_stickers()
            for s in stickers():
                self.assertEqual(turned[s], c[forward(s)])

    def test_colors_come_from_the_turned_sticker(self):
        c = apply_turn(initial_state(), Z)
        self.assertEqual(color_at(c, A(1, 1, 1), X), Color.WHITE)
        self.assertEqual(color_at(c, A(1, 1, 1), Y), Color.ORANGE)
        self.assertEqual(color_at(c, A(1, 1, 1), Z), Color.BLUE)

    def test_four_turns_restore_any_state(self):
        for start in (initial_state(), scrambled()):
            for axis in basis():
                c = start
                for _ in range(4):
                    c = apply_turn(c, axis)
                self.assertEqual(c, start)

    def test_turn_cycles_through_four_distinct_states(self):
        for axis in basis():
            states = [initial_state()]
            for _ in range(4):
                states.append(apply_turn(states[-1], axis))
            self.assertEqual(len(set(states[:4])), 4)
            self.assertEqual(states[4], states[0])

    def test_untouched_outside_layer(self):
        c = scrambled()
        for axis in basis():
            turned = apply_turn(c, axis)
            for s in stickers():
                if s.cubie.dot(axis) <= 0:
                    self.assertEqual(turned[s], c[s])

    def test_inverse_undoes_turn(self):
        c = scrambled()
        for axis in basis():
            turn = FaceTurn(axis)
            self.assertEqual(turn.inverse().apply(turn.on_cube().apply(c)), c)

    def test_color_counts_remain_constant(self):
        c = scrambled()
        counts = Counter(c[s] for s in stickers())
        self.assertEqual(counts, Counter({color: 9 for color in Color}))
        self.assertFalse(c.is_solved())

    def test_frozen_is_equal(self):
        c = scrambled()
        f = c.frozen()
        self.assertEqual(f, c)
        self.assertEqual(hash(f), hash(c))
        self.assertEqual(apply_turn(f, X), apply_turn(c, X))

    def test_long_history_with_freezing(self):
        c = initial_state()
        for _ in range(300):
            c = apply_turn(c, Y).frozen()
        self.assertTrue(c.is_solved())

    def test_frozen_covers_inner_stickers(self):
        self.assertEqual(len(valid_stickers()), 108)

        c = initial_state()
        for _ in range(400):
            c = apply_turn(c, Y).frozen()
        self.assertEqual(color_at(c, A(1, 1, 1), -Z), Color.GREEN)
        self.assertEqual(color_at(c, A(1, 1, 1), -X), Color.ORANGE)
        for s in valid_stickers():
            self.assertEqual(c[s], initial_state()[s])


if __name__ == "__main__":
    unittest.main()
