import unittest

from test_base import ArrayTestCase

from jsarray import Array, DisposedArrayError


class TestEndsAndFront(ArrayTestCase):
    def test_push_chains(self):
        arr = self.make("ant")
        self.assertIs(arr.push("duck", "elephant"), arr)
        self.assertElements(arr, ["ant", "duck", "elephant"])

    def test_pop(self):
        arr = self.make("duck", "elephant")
        self.assertEqual(arr.pop(), "elephant")
        self.assertEqual(arr.pop(), "duck")
        self.assertIsNone(arr.pop())
        self.assertEqual(arr.length, 0)

    def test_shift_updates_length(self):
        arr = self.make("ant", "bison", "camel")
        self.assertEqual(arr.shift(), "ant")
        self.assertElements(arr, ["bison", "camel"])
        self.assertEqual(arr.join(","), "bison,camel")

    def test_shift_empty(self):
        self.assertIsNone(self.make().shift())

    def test_unshift_keeps_argument_order(self):
        arr = self.make("ant", "bison", "camel")
        self.assertEqual(arr.unshift("x", "y"), 5)
        self.assertEqual(arr.join(","), "x,y,ant,bison,camel")


class TestSplice(ArrayTestCase):
    def setUp(self):
        super().setUp()
        self.arr = self.make("a", "b", "c", "d", "e")

    def test_replace_one(self):
        self.assertIs(self.arr.splice(2, 1, "x"), self.arr)
        self.assertElements(self.arr, ["a", "x", "c", "d", "e"])

    def test_replacements_interleave_with_deletions(self):
        self.arr.splice(2, 2, "x")
        self.assertElements(self.arr, ["a", "x", "x", "d", "e"])

    def test_delete_advances_one_slot_per_removal(self):
        self.arr.splice(2, 2)
        self.assertElements(self.arr, ["a", "c", "e"])

    def test_multiple_replacements_land_at_slot(self):
        self.arr.splice(1, 1, "x", "y")
        self.assertElements(self.arr, ["x", "y", "b", "c", "d", "e"])

    def test_index_past_end_is_noop(self):
        self.assertIs(self.arr.splice(6, 1, "x"), self.arr)
        self.assertElements(self.arr, ["a", "b", "c", "d", "e"])

    def test_zero_delete_count_inserts(self):
        self.arr.splice(2, 0, "x", "y")
        self.assertElements(self.arr, ["a", "x", "y", "b", "c", "d", "e"])

    def test_missing_delete_count_truncates(self):
        self.arr.splice(4)
        self.assertElements(self.arr, ["a", "b", "c"])

    def test_negative_index(self):
        self.arr.splice(-1, 1)
        self.assertElements(self.arr, ["a", "b", "c", "e"])

    def test_delete_count_beyond_end(self):
        self.arr.splice(5, 3, "x")
        self.assertElements(self.arr, ["a", "b", "c", "d", "x"])


class TestFillReverse(ArrayTestCase):
    def test_fill_range(self):
        arr = self.make(1, 2, 3, 4)
        arr.fill(0, 2, 4)
        self.assertElements(arr, [1, 2, 0, 0])
        arr.fill(5, 1)
        self.assertElements(arr, [1, 5, 5, 5])
        arr.fill(4)
        self.assertElements(arr, [4, 4, 4, 4])

    def test_fill_clamps_to_length(self):
        arr = self.make(1, 2)
        self.assertIs(arr.fill(9, 0, 10), arr)
        self.assertElements(arr, [9, 9])

    def test_fill_capacity_array(self):
        arr = self.track(Array(3)).fill(0)
        self.assertElements(arr, [0, 0, 0])

    def test_reverse_in_place(self):
        arr = self.make(1, 2, 3)
        data_before = arr.values()
        self.assertIs(arr.reverse(), arr)
        self.assertElements(arr, [3, 2, 1])
        self.assertIsNot(arr.values(), data_before)


class TestLengthInvariant(ArrayTestCase):
    def test_length_tracks_every_mutation(self):
        arr = self.make()
        arr.push(1, 2, 3)
        arr.unshift(0)
        arr.splice(2, 1, "x", "y")
        arr.pop()
        arr.shift()
        arr[99] = "tail"
        arr.concat([7, 8])
        arr.reverse().sort(lambda a, b: str(a) < str(b))
        self.assertEqual(arr.length, len(arr.values()))
        self.assertEqual(arr.length, 4)


class TestDispose(unittest.TestCase):
    def test_methods_fail_fast_after_dispose(self):
        arr = Array.of(1, 2, 3)
        arr.dispose()
        for call in (
            lambda: arr.push(4),
            lambda: arr.length,
            lambda: arr.values(),
            lambda: arr.map(lambda x: x),
            lambda: arr[1],
            lambda: len(arr),
            lambda: arr.entries(),
        ):
            with self.assertRaises(DisposedArrayError):
                call()

    def test_dispose_is_idempotent(self):
        arr = Array.of(1)
        arr.dispose()
        arr.dispose()
        self.assertEqual(repr(arr), "Array <disposed>")

    def test_values_handed_out_survive_dispose(self):
        arr = Array.of(1, 2)
        data = arr.values()
        arr.dispose()
        self.assertEqual(data, [1, 2])


if __name__ == '__main__':
    unittest.main()
