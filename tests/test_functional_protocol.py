from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for functional protocol tests")
class FunctionalProtocolTests(unittest.TestCase):
    def test_apply_transforms_every_grid_element_in_place(self) -> None:
        import gridf64 as gf

        m = [[1.0, 2.0], [3.0, 4.0]]
        gf.apply(m, lambda x: x * x)
        self.assertEqual(m, [[1.0, 4.0], [9.0, 16.0]])

    def test_apply_transforms_vectors(self) -> None:
        import gridf64 as gf

        v = [1.0, -2.0, 3.0]
        gf.apply(v, abs)
        self.assertEqual(v, [1.0, 2.0, 3.0])

        gf.apply_vec(v, lambda x: -x)
        self.assertEqual(v, [-1.0, -2.0, -3.0])

    def test_apply_visits_row_major_order(self) -> None:
        import gridf64 as gf

        seen: list[float] = []

        def record(x: float) -> float:
            seen.append(x)
            return x

        gf.apply_mat([[1.0, 2.0], [3.0, 4.0]], record)
        self.assertEqual(seen, [1.0, 2.0, 3.0, 4.0])

    def test_apply_rejects_immutable_and_scalar_targets(self) -> None:
        import gridf64 as gf
        import jax.numpy as jnp

        for target in (1.0, jnp.zeros((2, 2)), (1.0, 2.0)):
            with self.subTest(target=type(target).__name__):
                with self.assertRaises(gf.GridTypeError):
                    gf.apply(target, lambda x: x)

    def test_set_all_for_vectors_and_grids(self) -> None:
        import gridf64 as gf

        v = [1.0, 2.0]
        m = gf.new(2, 3)
        gf.set_all(v, 7.0)
        gf.set_all(m, -1.5)
        self.assertEqual(v, [7.0, 7.0])
        self.assertEqual(m, [[-1.5, -1.5, -1.5], [-1.5, -1.5, -1.5]])

        with self.assertRaises(gf.GridTypeError):
            gf.set_all(m, "x")

    def test_all_and_any_filters(self) -> None:
        import gridf64 as gf

        def positive(x: float) -> bool:
            return x > 0.0

        self.assertTrue(gf.all([[1.0, 2.0], [3.0, 4.0]], positive))
        self.assertFalse(gf.all([[1.0, 2.0], [-3.0, 4.0]], positive))
        self.assertTrue(gf.any([[-1.0, -2.0], [3.0, -4.0]], positive))
        self.assertFalse(gf.any([[-1.0, -2.0], [-3.0, -4.0]], positive))
        self.assertTrue(gf.any([0.0, 1.0], positive))
        self.assertFalse(gf.all([0.0, 1.0], positive))

    def test_empty_containers_are_vacuous(self) -> None:
        import gridf64 as gf

        def always(_x: float) -> bool:
            return True

        def never(_x: float) -> bool:
            return False

        for empty in ([], [[]], [[], []]):
            with self.subTest(empty=empty):
                self.assertTrue(gf.all(empty, never))
                self.assertFalse(gf.any(empty, always))

    def test_all_and_any_short_circuit(self) -> None:
        import gridf64 as gf

        calls: list[float] = []

        def is_small(x: float) -> bool:
            calls.append(x)
            return x < 2.0

        self.assertFalse(gf.all([[1.0, 5.0], [0.0, 0.0]], is_small))
        self.assertEqual(calls, [1.0, 5.0])

        calls.clear()
        self.assertTrue(gf.any([[5.0, 1.0], [0.0, 0.0]], is_small))
        self.assertEqual(calls, [5.0, 1.0])

    def test_make_reducer_folds_row_major_from_initial_value(self) -> None:
        import gridf64 as gf

        total = gf.make_reducer(0.0, lambda acc, x: acc + x)
        m = gf.new(4)
        gf.set_all(m, 2.0)
        self.assertEqual(total(m), 32.0)

        order = gf.make_reducer(0.0, lambda acc, x: acc * 10.0 + x)
        self.assertEqual(order([[1.0, 2.0], [3.0, 4.0]]), 1234.0)

    def test_make_reducer_is_reusable_without_leaking_state(self) -> None:
        import gridf64 as gf

        total = gf.make_reducer(1.0, lambda acc, x: acc + x)
        self.assertEqual(total([[1.0, 1.0]]), 3.0)
        self.assertEqual(total([[1.0, 1.0]]), 3.0)
        self.assertEqual(total([]), 1.0)
        self.assertEqual(total([5.0]), 6.0)

    def test_make_reducer_validates_arguments(self) -> None:
        import gridf64 as gf

        with self.assertRaises(gf.GridTypeError):
            gf.make_reducer("0", lambda acc, x: acc + x)
        with self.assertRaises(gf.GridTypeError):
            gf.make_reducer(0.0, None)

        maximum = gf.make_reducer(float("-inf"), max)
        with self.assertRaises(gf.GridTypeError):
            maximum(3.0)
        self.assertEqual(maximum([[1.0, 9.0], [4.0, 2.0]]), 9.0)


if __name__ == "__main__":
    unittest.main()
