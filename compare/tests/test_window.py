from django.test import SimpleTestCase

from compare import window as win


class WindowNavigatorTests(SimpleTestCase):
    def test_next_walks_then_clamps(self):
        items = ["A", "B", "C"]
        offset = 0
        self.assertEqual(win.visible_window(items, offset, 1), ["A"])

        offset = win.next_offset(offset, 1, 3)
        self.assertEqual(offset, 1)
        self.assertEqual(win.visible_window(items, offset, 1), ["B"])

        offset = win.next_offset(offset, 1, 3)
        self.assertEqual(offset, 2)
        self.assertEqual(win.visible_window(items, offset, 1), ["C"])

        self.assertEqual(win.next_offset(offset, 1, 3), 2)

    def test_prev_stops_at_zero(self):
        self.assertEqual(win.prev_offset(1, 1, 3), 0)
        self.assertEqual(win.prev_offset(0, 1, 3), 0)

    def test_go_to_clamps_both_ends(self):
        self.assertEqual(win.go_to_offset(-5, 1, 3), 0)
        self.assertEqual(win.go_to_offset(10, 1, 3), 2)
        self.assertEqual(win.go_to_offset(1, 3, 4), 1)
        self.assertEqual(win.go_to_offset(2, 3, 4), 1)

    def test_window_larger_than_selection_pins_offset_to_zero(self):
        self.assertEqual(win.max_offset(3, 2), 0)
        self.assertEqual(win.next_offset(0, 3, 2), 0)
        self.assertEqual(win.visible_window(["A", "B"], 0, 3), ["A", "B"])
        self.assertFalse(win.can_go_next(0, 3, 2))
        self.assertFalse(win.can_go_prev(0, 3, 2))

    def test_shrinking_selection_reclamps(self):
        # [A,B,C] at offset 2 loses C
        self.assertEqual(win.clamp_offset(2, 1, 2), 1)

    def test_offset_always_in_range(self):
        for count in range(0, 6):
            for size in range(1, 4):
                for offset in range(-2, 8):
                    hi = max(0, count - size)
                    for got in (
                        win.next_offset(offset, size, count),
                        win.prev_offset(offset, size, count),
                        win.go_to_offset(offset, size, count),
                        win.clamp_offset(offset, size, count),
                    ):
                        self.assertTrue(0 <= got <= hi, (offset, size, count, got))

    def test_can_go_flags(self):
        self.assertTrue(win.can_go_next(0, 1, 3))
        self.assertFalse(win.can_go_prev(0, 1, 3))
        self.assertTrue(win.can_go_prev(2, 1, 3))
        self.assertFalse(win.can_go_next(2, 1, 3))

    def test_go_to_entity(self):
        ids = ["A", "B", "C", "D"]
        self.assertEqual(win.go_to_entity(0, 1, ids, "C"), 2)
        self.assertEqual(win.go_to_entity(0, 3, ids, "D"), 1)
        self.assertEqual(win.go_to_entity(1, 1, ids, "missing"), 1)

    def test_window_position(self):
        self.assertEqual(
            win.window_position(1, 1, 3),
            {"page": 2, "pages": 3, "first": 2, "last": 2, "total": 3},
        )
        self.assertEqual(win.window_position(0, 3, 0)["total"], 0)
        self.assertEqual(win.window_position(0, 3, 0)["pages"], 0)
