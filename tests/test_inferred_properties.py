from __future__ import annotations

import importlib.util
import math
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for inferred-property tests")
class InferredPropertiesTests(unittest.TestCase):
    SHAPES = [(1, 1), (2, 3), (3, 2), (4, 4), (1, 5)]

    def _grids(self):
        import jax
        import gridf64 as gf

        for idx, (rows, cols) in enumerate(self.SHAPES):
            yield gf.rand_mat(rows, cols, -10.0, 10.0, key=jax.random.PRNGKey(idx))

    def test_add_then_sub_restores_exactly_representable_values(self) -> None:
        """Restricted to integer-valued floats, where adding and subtracting 3.0 is exact."""
        import gridf64 as gf

        for m in self._grids():
            gf.apply(m, lambda x: float(math.floor(x)))
            original = gf.clone(m)
            with self.subTest(shape=(len(m), len(m[0]))):
                gf.add(m, 3.0)
                gf.sub(m, 3.0)
                self.assertTrue(gf.equal(m, original))

    def test_div_by_one_is_identity(self) -> None:
        import gridf64 as gf

        for m in self._grids():
            original = gf.clone(m)
            gf.div(m, 1.0)
            self.assertTrue(gf.equal(m, original))

    def test_mul_by_zero_zeroes_everything(self) -> None:
        import gridf64 as gf

        for m in self._grids():
            gf.mul(m, 0.0)
            self.assertTrue(gf.all(m, lambda x: x == 0.0))

    def test_transpose_is_an_involution(self) -> None:
        import gridf64 as gf

        for m in self._grids():
            self.assertTrue(gf.equal(gf.transpose(gf.transpose(m)), m))

    def test_dot_with_identity_on_the_right(self) -> None:
        import gridf64 as gf

        for m in self._grids():
            if len(m) != len(m[0]):
                continue
            self.assertTrue(gf.equal(gf.dot(m, gf.identity(len(m))), m))

    def test_constant_grid_reductions(self) -> None:
        import gridf64 as gf

        for rows, cols in self.SHAPES:
            for v in (2.0, 0.5, -1.0):
                with self.subTest(rows=rows, cols=cols, v=v):
                    m = gf.new(rows, cols)
                    gf.set_all(m, v)
                    self.assertEqual(gf.sum(m), rows * cols * v)
                    self.assertEqual(gf.average(m), v)
                    self.assertEqual(gf.product(m), v ** (rows * cols))

    def test_negative_row_index_equivalence(self) -> None:
        import gridf64 as gf

        for m in self._grids():
            rows = len(m)
            for i in range(rows):
                self.assertEqual(gf.sum(m, gf.Axis.ROW, i), gf.sum(m, gf.Axis.ROW, i - rows))

    def test_custom_reducer_agrees_with_sum(self) -> None:
        import gridf64 as gf

        total = gf.make_reducer(0.0, lambda acc, x: acc + x)
        for m in self._grids():
            self.assertEqual(total(m), gf.sum(m))


if __name__ == "__main__":
    unittest.main()
