"""
Composition-level properties: tiling, overlap, count floor, depth bound, palette coverage,
plus the complexity and palette coverage passes on their own.
Run from project root: python -m pytest tests/ -v
"""
import random
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

SEEDS = range(12)


def _scenario_config(**changes):
    from mondrian.composition import MondrianConfig

    base = dict(
        canvas_width=800,
        canvas_height=800,
        min_cell_size=100,
        max_cell_size=200,
        color_palette=("#FFFFFF", "#D13C37", "#3755A1"),
        color_probability=0.4,
        split_probability=0.7,
        max_depth=3,
        min_splits=6,
    )
    base.update(changes)
    return MondrianConfig(**base)


class TestCompositionProperties(unittest.TestCase):
    """Invariants every generated composition must satisfy."""

    def _assert_valid_tiling(self, cells, cfg):
        from mondrian.analysis import overlapping_pairs, total_area

        self.assertEqual(total_area(cells), cfg.canvas_width * cfg.canvas_height)
        self.assertEqual(overlapping_pairs(cells), [])
        for c in cells:
            self.assertGreater(c.width, 0)
            self.assertGreater(c.height, 0)
            self.assertGreaterEqual(c.x, 0)
            self.assertGreaterEqual(c.y, 0)
            self.assertLessEqual(c.right, cfg.canvas_width)
            self.assertLessEqual(c.bottom, cfg.canvas_height)
            self.assertIn(c.color, cfg.color_palette)

    def test_scenario_red_blue(self):
        """800x800, min cell 100, depth 3, min_splits 6 → ≥6 cells, full tiling, both colors."""
        from mondrian.composition import generate_mondrian

        cfg = _scenario_config()
        for seed in range(5):
            cells = generate_mondrian(cfg, seed=seed)
            self.assertGreaterEqual(len(cells), 6)
            self._assert_valid_tiling(cells, cfg)
            colors = {c.color for c in cells}
            self.assertIn("#D13C37", colors)
            self.assertIn("#3755A1", colors)

    def test_default_config_properties(self):
        from mondrian.composition import MondrianConfig, generate_mondrian

        cfg = MondrianConfig()
        for seed in SEEDS:
            cells = generate_mondrian(cfg, seed=seed)
            self._assert_valid_tiling(cells, cfg)
            self.assertGreaterEqual(len(cells), cfg.resolved_min_splits())

    def test_derived_min_splits_for_deep_config(self):
        from mondrian.composition import generate_mondrian

        cfg = _scenario_config(min_cell_size=50, max_depth=6, min_splits=None)
        self.assertEqual(cfg.resolved_min_splits(), 10)
        for seed in SEEDS:
            cells = generate_mondrian(cfg, seed=seed)
            self.assertGreaterEqual(len(cells), 10)
            self._assert_valid_tiling(cells, cfg)

    def test_palette_coverage_when_background_cells_exist(self):
        from mondrian.analysis import missing_palette_colors
        from mondrian.composition import generate_mondrian

        cfg = _scenario_config(color_palette=("#FFFFFF", "#D13C37", "#3755A1", "#F2D13A"), min_cell_size=40)
        for seed in SEEDS:
            cells = generate_mondrian(cfg, seed=seed)
            missing = missing_palette_colors(cells, cfg)
            if missing:
                # Only possible when no background cell was left to recolor
                self.assertNotIn("#FFFFFF", {c.color for c in cells})

    def test_depth_bound_with_enforcement(self):
        from mondrian.composition import MondrianConfig, SplitTrace, generate_mondrian

        cfg = MondrianConfig(canvas_width=1000, canvas_height=700, min_cell_size=20, max_depth=3, min_splits=8)
        for seed in SEEDS:
            trace = SplitTrace()
            generate_mondrian(cfg, seed=seed, trace=trace)
            for event in trace.unforced():
                self.assertLess(event.depth, cfg.max_depth)
            for event in trace.events:
                if event.forced:
                    self.assertEqual(event.depth, 0)

    def test_same_seed_same_composition(self):
        from mondrian.composition import MondrianConfig, generate_mondrian

        cfg = MondrianConfig()
        self.assertEqual(generate_mondrian(cfg, seed=42), generate_mondrian(cfg, seed=42))

    def test_unseeded_runs_are_each_valid(self):
        from mondrian.composition import MondrianConfig, generate_mondrian

        cfg = MondrianConfig()
        for _ in range(2):
            self._assert_valid_tiling(generate_mondrian(cfg), cfg)

    def test_degenerate_min_cell_size(self):
        """No valid cut on 800x800 with min cell 500 → one cell spanning the canvas."""
        from mondrian.composition import generate_mondrian

        cfg = _scenario_config(min_cell_size=500, min_splits=None)
        with self.assertLogs("mondrian.composition.complexity", level="WARNING"):
            cells = generate_mondrian(cfg, seed=3)
        self.assertEqual(len(cells), 1)
        c = cells[0]
        self.assertEqual((c.x, c.y, c.width, c.height), (0, 0, 800, 800))
        self.assertIn(c.color, cfg.color_palette)

    def test_prominent_color_takes_every_cell(self):
        from mondrian.composition import generate_mondrian

        cfg = _scenario_config(prominent_color="#D13C37", prominent_color_boost=1.0, color_probability=1.0)
        with self.assertLogs("mondrian.composition.coverage", level="WARNING"):
            cells = generate_mondrian(cfg, seed=11)
        self.assertTrue(all(c.color == "#D13C37" for c in cells))


class TestComplexityEnforcer(unittest.TestCase):

    def test_largest_cell_index_ties_go_to_first(self):
        from mondrian.composition import Cell
        from mondrian.composition.complexity import largest_cell_index

        cells = [Cell(0, 0, 10, 10), Cell(10, 0, 20, 10), Cell(30, 0, 10, 20)]
        self.assertEqual(largest_cell_index(cells), 1)
        self.assertEqual(largest_cell_index([]), -1)

    def test_largest_cell_index_skips_cells_without_valid_cut(self):
        from mondrian.composition import Cell
        from mondrian.composition.complexity import largest_cell_index

        # 90x90 is larger but cannot be cut at floor 50; 100x60 can be cut across its width
        cells = [Cell(0, 0, 90, 90), Cell(90, 0, 100, 60)]
        self.assertEqual(largest_cell_index(cells, 50), 1)
        self.assertEqual(largest_cell_index([Cell(0, 0, 90, 90)], 50), -1)

    def test_smaller_cuttable_cell_is_split_when_largest_is_stuck(self):
        from mondrian.composition import Cell, MondrianConfig, enforce_min_splits

        cfg = MondrianConfig(canvas_width=190, canvas_height=90, min_cell_size=50, max_cell_size=200, min_splits=3)
        cells = [Cell(0, 0, 90, 90, "#FFFFFF"), Cell(90, 0, 100, 60, "#FFFFFF")]
        result = enforce_min_splits(cells, cfg, random.Random(0))
        self.assertGreaterEqual(len(result), 3)
        self.assertEqual(result[0], cells[0])
        self.assertEqual(sum(c.area for c in result), sum(c.area for c in cells))

    def test_count_floor_reached_unless_nothing_left_to_cut(self):
        """Small canvas where forced splits quickly leave uncuttable cells behind."""
        from mondrian.composition import MondrianConfig, generate_mondrian
        from mondrian.composition.complexity import largest_cell_index

        cfg = MondrianConfig(canvas_width=150, canvas_height=180, min_cell_size=40, max_cell_size=200,
                             max_depth=1, split_probability=0.3, min_splits=8)
        for seed in range(20):
            cells = generate_mondrian(cfg, seed=seed)
            if len(cells) < 8:
                self.assertEqual(largest_cell_index(cells, cfg.size_floor), -1)
            self.assertEqual(sum(c.area for c in cells), 150 * 180)

    def test_forces_splits_until_minimum(self):
        from mondrian.composition import Cell, MondrianConfig, enforce_min_splits

        cfg = MondrianConfig(canvas_width=800, canvas_height=800, min_cell_size=50, split_probability=0.0, min_splits=4)
        cells = enforce_min_splits([Cell(0, 0, 800, 800, "#FFFFFF")], cfg, random.Random(1))
        self.assertGreaterEqual(len(cells), 4)
        self.assertEqual(sum(c.area for c in cells), 800 * 800)

    def test_replaced_cells_stay_in_place(self):
        """The pieces of the split cell take its position in the list."""
        from mondrian.composition import Cell, MondrianConfig, enforce_min_splits

        cfg = MondrianConfig(min_cell_size=10, split_probability=0.0, min_splits=4)
        first, big, last = Cell(0, 0, 10, 100, "#FFFFFF"), Cell(10, 0, 100, 100, "#FFFFFF"), Cell(110, 0, 10, 100, "#FFFFFF")
        cells = enforce_min_splits([first, big, last], cfg, random.Random(5))
        self.assertEqual(cells[0], first)
        self.assertEqual(cells[-1], last)
        middle = cells[1:-1]
        self.assertGreaterEqual(len(middle), 2)
        self.assertEqual(sum(c.area for c in middle), big.area)

    def test_gives_up_when_no_cell_can_be_cut(self):
        from mondrian.composition import Cell, MondrianConfig, enforce_min_splits

        cfg = MondrianConfig(canvas_width=100, canvas_height=100, min_cell_size=80, min_splits=5)
        with self.assertLogs("mondrian.composition.complexity", level="WARNING"):
            cells = enforce_min_splits([Cell(0, 0, 100, 100, "#FFFFFF")], cfg, random.Random(0))
        self.assertEqual(len(cells), 1)

    def test_noop_when_enough_cells(self):
        from mondrian.composition import Cell, MondrianConfig, enforce_min_splits

        cfg = MondrianConfig(min_splits=2)
        cells = [Cell(0, 0, 400, 600, "#FFFFFF"), Cell(400, 0, 400, 600, "#FF0000")]
        self.assertEqual(enforce_min_splits(cells, cfg, random.Random(0)), cells)


class TestPaletteCoverage(unittest.TestCase):

    def _cells(self, n):
        from mondrian.composition import Cell

        return [Cell(i * 10, 0, 10, 10, "#FFFFFF") for i in range(n)]

    def test_missing_colors_take_distinct_background_cells(self):
        from mondrian.composition import MondrianConfig, ensure_palette_coverage

        cfg = MondrianConfig(color_palette=("#FFFFFF", "#D13C37", "#3755A1"), color_probability=0.0)
        cells = ensure_palette_coverage(self._cells(4), cfg, random.Random(2))
        colors = [c.color for c in cells]
        self.assertEqual(colors.count("#D13C37"), 1)
        self.assertEqual(colors.count("#3755A1"), 1)
        self.assertEqual(colors.count("#FFFFFF"), 2)
        # Geometry untouched
        self.assertEqual([(c.x, c.y) for c in cells], [(c.x, c.y) for c in self._cells(4)])

    def test_not_enough_background_cells(self):
        from mondrian.composition import MondrianConfig, ensure_palette_coverage

        cfg = MondrianConfig(color_palette=("#FFFFFF", "#D13C37", "#3755A1"), color_probability=0.0)
        with self.assertLogs("mondrian.composition.coverage", level="WARNING") as logs:
            cells = ensure_palette_coverage(self._cells(1), cfg, random.Random(0))
        self.assertEqual(cells[0].color, "#D13C37")
        self.assertIn("#3755A1", logs.output[0])

    def test_background_only_palette_recolors_to_background(self):
        from mondrian.composition import Cell, MondrianConfig, ensure_palette_coverage

        cfg = MondrianConfig(color_palette=("#FFFFFF",), color_probability=1.0)
        cells = ensure_palette_coverage([Cell(0, 0, 10, 10, "#000000")], cfg, random.Random(0))
        self.assertEqual(cells[0].color, "#FFFFFF")


if __name__ == "__main__":
    unittest.main()
