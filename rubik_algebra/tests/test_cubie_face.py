# rubik_algebra/tests/test_cubie_face.py
import unittest

from rubik_algebra.core import Arrow, ContractViolation, CubieFace, basis, stickers

A = Arrow.of
X, Y, Z = A(1, 0, 0), A(0, 1, 0), A(0, 0, 1)


def tangent_directions(sticker):
    return [d for d in basis() if d.dot(sticker.face) == 0]


class TestCubieFaceContract(unittest.TestCase):
    def test_valid(self):
        s = CubieFace(A(1, 1, 1), Z)
        self.assertEqual(s.cubie, A(1, 1, 1))
        self.assertEqual(s.face, Z)

    def test_zero_cubie_raises(self):
        with self.assertRaises(ContractViolation):
            CubieFace(A(0, 0, 0), Z)

    def test_non_unit_face_raises(self):
        with self.assertRaises(ContractViolation):
            CubieFace(A(1, 1, 1), A(1, 1, 0))

    def test_sticker_off_its_face_raises(self):
        with self.assertRaises(ContractViolation):
            CubieFace(A(1, 0, 0), Z)

    def test_direction_must_be_tangent(self):
        s = CubieFace(A(1, 1, 1), Z)
        with self.assertRaises(ContractViolation):
            s.neighbour(Z)
        with self.assertRaises(ContractViolation):
            s.reorient(A(1, 1, 0))


class TestNeighbour(unittest.TestCase):
    def test_crosses_edge_on_same_cubie(self):
        s = CubieFace(A(1, 1, 1), Z)
        self.assertEqual(s.neighbour(X), CubieFace(A(1, 1, 1), X))
        self.assertEqual(s.reorient(X), -Z)

    def test_moves_to_adjacent_cubie(self):
        s = CubieFace(A(0, 0, 1), Z)
        self.assertEqual(s.neighbour(X), CubieFace(A(1, 0, 1), Z))
        self.assertEqual(s.reorient(X), X)

    def test_moves_inward_from_edge(self):
        s = CubieFace(A(-1, 0, 1), Z)
        self.assertEqual(s.neighbour(X), CubieFace(A(0, 0, 1), Z))
        self.assertEqual(s.reorient(X), X)

    def test_twist(self):
        s = CubieFace(A(0, 0, 1), Z)
        self.assertEqual(s.twist(X, 0), X)
        self.assertEqual(s.twist(X, 1), Y)
        self.assertEqual(s.twist(X, 2), -X)


class TestTraversal(unittest.TestCase):
    def test_follow_without_steps(self):
        s = CubieFace(A(1, 0, 1), Z)
        self.assertEqual(s.follow(Y, []), s)

    def test_loop_closes_for_every_sticker_and_direction(self):
        for s in stickers():
            for d in tangent_directions(s):
                self.assertEqual(s.loop(d), s, (str(s), str(d)))

    def test_loop_restores_direction(self):
        for s in stickers():
            for d in tangent_directions(s):
                path = list(s.walk(d, [0] * 12))
                self.assertEqual(len(path), 12)
                self.assertEqual(path[-1], (s, d))

    def test_loop_from_inner_pair_does_not_return(self):
        inner = CubieFace(A(1, 1, 1), -Z)
        self.assertEqual(inner.loop(X), CubieFace(A(1, 1, 0), X))

    def test_loop_visits_four_faces(self):
        s = CubieFace(A(1, 0, 1), Z)
        faces = {face.face for face, _ in s.walk(Y, [0] * 12)}
        self.assertEqual(faces, {Z, Y, -Z, -Y})

    def test_quarter_twists_walk_around_centre(self):
        centre = CubieFace(A(0, 0, 1), Z)
        path = list(centre.walk(X, [1, 1, 1, 1]))
        self.assertEqual(
            [face.cubie for face, _ in path],
            [A(1, 0, 1), A(1, 1, 1), A(0, 1, 1), A(0, 0, 1)],
        )
        self.assertEqual(path[-1], (centre, X))
        self.assertEqual(centre.follow(X, [1, 1, 1, 1]), centre)


if __name__ == "__main__":
    unittest.main()
