from django.test import SimpleTestCase

from compare import selection as sel
from compare.filters import MODE_DIFFERENCES, MODE_HIGHLIGHTS
from compare.sorting import SORT_PRICE
from compare.state import ComparisonEngine

from .fixtures import A, B, C, catalog, sample_schema


class ComparisonEngineTests(SimpleTestCase):
    def setUp(self):
        self.calls = []
        self.engine = ComparisonEngine(
            catalog(), sample_schema(), max_selected=3, window_size=1,
            on_selection_changed=lambda pid, change: self.calls.append((pid, change)),
        )

    def test_initial_state_drops_unknown_and_truncates(self):
        state = self.engine.initial_state(["ghost", "A", "B", "C", "D"])
        self.assertEqual(self.engine.current_selection(state), ("A", "B", "C"))

    def test_initial_state_coerces_bad_view_values(self):
        state = self.engine.initial_state(["A"], mode="nope", sort_by="nope", window_offset=99)
        self.assertEqual(state.view.mode, "all")
        self.assertEqual(state.view.sort_by, "name")
        self.assertEqual(state.view.window_offset, 0)

    def test_toggle_notifies_on_change_only(self):
        state = self.engine.initial_state(["A", "B"])
        state, outcome = self.engine.toggle(state, "C")
        self.assertEqual(outcome, sel.ADDED)

        state, outcome = self.engine.toggle(state, "D")
        self.assertEqual(outcome, sel.LIMIT_REACHED)

        state, outcome = self.engine.toggle(state, "ghost")
        self.assertEqual(outcome, sel.UNKNOWN_ID)

        self.assertEqual(self.calls, [("C", sel.ADDED)])
        self.assertEqual(state.selection.ids, ("A", "B", "C"))

    def test_removing_last_visible_reclamps_offset(self):
        state = self.engine.initial_state(["A", "B", "C"])
        state = self.engine.next(self.engine.next(state))
        self.assertEqual(state.view.window_offset, 2)
        self.assertEqual([e.id for e in self.engine.visible_entities(state)], ["C"])

        state, _ = self.engine.toggle(state, "C")
        self.assertEqual(state.view.window_offset, 1)
        self.assertEqual([e.id for e in self.engine.visible_entities(state)], ["B"])
        self.assertEqual(self.calls, [("C", sel.REMOVED)])

    def test_window_follows_sorted_order(self):
        state = self.engine.initial_state(["A", "B", "C"])
        state = self.engine.set_sort(state, SORT_PRICE)
        sorted_ids = [e.id for e in self.engine.sorted_selection(state)]
        self.assertEqual(sorted_ids, ["B", "C", "A"])
        self.assertEqual(self.engine.visible_entities(state), [B])
        # selection order itself is untouched
        self.assertEqual(self.engine.current_selection(state), ("A", "B", "C"))

    def test_differences_follow_the_window(self):
        engine = ComparisonEngine(catalog(), sample_schema(), max_selected=4, window_size=2)
        state = engine.set_mode(engine.initial_state(["A", "B", "C"]), MODE_DIFFERENCES)
        self.assertEqual(engine.visible_entities(state), [A, B])
        self.assertNotIn("Engine Type", engine.filtered_schema(state).field_labels())

        state = engine.next(state)
        self.assertEqual(engine.visible_entities(state), [B, C])
        self.assertIn("Engine Type", engine.filtered_schema(state).field_labels())

    def test_empty_selection_has_no_sections(self):
        state = self.engine.initial_state([])
        self.assertEqual(self.engine.visible_entities(state), [])
        self.assertEqual(len(self.engine.filtered_schema(state)), 0)
        self.assertFalse(self.engine.can_go_next(state))
        self.assertFalse(self.engine.can_go_prev(state))

    def test_highlights_mode(self):
        state = self.engine.set_mode(self.engine.initial_state(["A"]), MODE_HIGHLIGHTS)
        self.assertEqual(self.engine.filtered_schema(state).field_labels(), ["Price", "Engine Type"])

    def test_go_to_and_go_to_entity(self):
        state = self.engine.initial_state(["A", "B", "C"])
        self.assertEqual(self.engine.go_to(state, 7).view.window_offset, 2)
        self.assertEqual(self.engine.go_to_entity(state, "B").view.window_offset, 1)
        self.assertEqual(self.engine.go_to_entity(state, "D").view.window_offset, 0)

    def test_prev_and_position(self):
        state = self.engine.go_to(self.engine.initial_state(["A", "B", "C"]), 2)
        state = self.engine.prev(state)
        self.assertTrue(self.engine.can_go_prev(state))
        self.assertTrue(self.engine.can_go_next(state))
        self.assertEqual(self.engine.position(state)["page"], 2)

    def test_clear_all_resets_offset(self):
        state = self.engine.go_to(self.engine.initial_state(["A", "B", "C"]), 2)
        state = self.engine.clear_all(state)
        self.assertEqual(state.selection.ids, ())
        self.assertEqual(state.view.window_offset, 0)

    def test_set_from_external(self):
        state = self.engine.initial_state(["A"])
        state = self.engine.set_from_external(state, ["C", "ghost", "C", "B"])
        self.assertEqual(state.selection.ids, ("C", "B"))
        self.assertEqual(self.calls, [])

    def test_resize_truncates_and_reclamps(self):
        engine = ComparisonEngine(catalog(), sample_schema(), max_selected=4, window_size=3)
        state = engine.go_to(engine.initial_state(["A", "B", "C", "D"]), 1)
        state = engine.resize(state, max_selected=3, window_size=1)
        self.assertEqual(state.selection.ids, ("A", "B", "C"))
        self.assertEqual(state.view.window_size, 1)
        self.assertEqual(state.view.window_offset, 1)

        state = engine.resize(state, max_selected=3, window_size=3)
        self.assertEqual(state.view.window_offset, 0)

    def test_minimum_on_engine(self):
        engine = ComparisonEngine(catalog(), sample_schema(), max_selected=3, min_selected=1)
        state, outcome = engine.toggle(engine.initial_state(["A"]), "A")
        self.assertEqual(outcome, sel.MINIMUM_REACHED)
        self.assertEqual(state.selection.ids, ("A",))

    def test_ids_gone_from_catalog_are_not_counted(self):
        # selection built against a bigger catalog, then read against a smaller one
        state = self.engine.initial_state(["A", "B", "C"])
        smaller = ComparisonEngine(catalog(A, B), sample_schema(), max_selected=3, window_size=1)
        self.assertEqual(smaller.position(state)["total"], 2)
        self.assertEqual(smaller.visible_entities(smaller.go_to(state, 5)), [B])
