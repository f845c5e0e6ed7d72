from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for construction helper tests")
class ConstructTests(unittest.TestCase):
    def test_new_square_and_rectangular(self) -> None:
        import gridf64 as gf

        self.assertEqual(gf.new(2), [[0.0, 0.0], [0.0, 0.0]])
        self.assertEqual(gf.new(1, 3), [[0.0, 0.0, 0.0]])
        self.assertEqual(gf.new(0), [])

        m = gf.new(2, 2)
        m[0][0] = 1.0
        self.assertEqual(m[1][0], 0.0)

    def test_new_rejects_bad_dimensions(self) -> None:
        import gridf64 as gf

        for dims in ((-1,), (2, -3), (2.0,), (True, 2)):
            with self.subTest(dims=dims):
                with self.assertRaises(gf.GridShapeError):
                    gf.new(*dims)

    def test_identity(self) -> None:
        import gridf64 as gf

        self.assertEqual(gf.identity(3), [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])
        self.assertEqual(gf.identity(0), [])

    def test_flatten_row_major(self) -> None:
        import gridf64 as gf

        self.assertEqual(gf.flatten([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]), [1.0, 2.0, 3.0, 4.0, 5.0, 6.0])
        self.assertEqual(gf.flatten([]), [])

    def test_row_and_col_copy_with_negative_indices(self) -> None:
        import gridf64 as gf

        m = [[1.0, 2.3], [3.4, 1.7]]
        self.assertEqual(gf.row(m, 0), [1.0, 2.3])
        self.assertEqual(gf.row(m, -1), [3.4, 1.7])
        self.assertEqual(gf.col(m, 0), [1.0, 3.4])
        self.assertEqual(gf.col(m, -1), [2.3, 1.7])

        r = gf.row(m, 0)
        r[0] = 50.0
        self.assertEqual(m[0][0], 1.0)

        with self.assertRaises(gf.GridIndexError):
            gf.row(m, 2)
        with self.assertRaises(gf.GridIndexError):
            gf.col(m, -3)

    def test_append_col_returns_new_grid(self) -> None:
        import gridf64 as gf

        m = gf.new(2, 2)
        out = gf.append_col(m, [1.0, 2.0])
        self.assertEqual(out, [[0.0, 0.0, 1.0], [0.0, 0.0, 2.0]])
        self.assertEqual(m, [[0.0, 0.0], [0.0, 0.0]])

        with self.assertRaises(gf.GridShapeError):
            gf.append_col(m, [1.0, 2.0, 3.0])

    def test_equal_compares_shape_and_values(self) -> None:
        import gridf64 as gf

        self.assertTrue(gf.equal([[1.0, 2.0]], [[1.0, 2.0]]))
        self.assertFalse(gf.equal([[1.0, 2.0]], [[1.0, 3.0]]))
        self.assertFalse(gf.equal([[1.0, 2.0]], [[1.0, 2.0], [1.0, 2.0]]))
        self.assertFalse(gf.equal([[1.0, 2.0]], [[1.0]]))
        self.assertTrue(gf.equal([], []))

    def test_clone_is_deep(self) -> None:
        import gridf64 as gf

        m = [[1.0, 2.0], [3.0, 4.0]]
        c = gf.clone(m)
        self.assertTrue(gf.equal(c, m))
        gf.mul(c, 0.0)
        self.assertEqual(m, [[1.0, 2.0], [3.0, 4.0]])
        self.assertEqual(c, [[0.0, 0.0], [0.0, 0.0]])


if __name__ == "__main__":
    unittest.main()
