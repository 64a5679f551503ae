"""
Tests for the grid model: walls, validity and neighbour enumeration
"""

import pytest

from gridpath.core import Grid, new_grid


class TestGridConstruction:
    """Test suite for grid creation"""

    def test_new_grid_is_empty(self):
        grid = new_grid(4, 3)
        assert (grid.width, grid.height) == (4, 3)
        assert grid.walls == set()
        assert grid.corner_rule == "fixed"

    @pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 5)])
    def test_non_positive_dimensions_rejected(self, width, height):
        with pytest.raises(ValueError):
            new_grid(width, height)

    def test_unknown_corner_rule_rejected(self):
        with pytest.raises(ValueError, match="corner rule"):
            Grid(3, 3, corner_rule="strict")

    def test_constructor_copies_wall_set(self):
        walls = {(1, 1)}
        grid = Grid(3, 3, walls)

        grid.add_wall((0, 0))
        assert walls == {(1, 1)}
        grid.clear_walls()
        assert walls == {(1, 1)}

        walls.add((2, 2))
        assert not grid.contains_wall((2, 2))

    def test_with_corner_rule_copies_walls(self):
        grid = new_grid(3, 3)
        grid.add_wall((1, 1))
        other = grid.with_corner_rule("diagonal")

        assert other.corner_rule == "diagonal"
        assert other.walls == {(1, 1)}
        other.add_wall((0, 0))
        assert not grid.contains_wall((0, 0))


class TestWalls:
    """Test suite for wall set mutation"""

    def test_add_and_remove(self, open_3x3):
        open_3x3.add_wall((1, 1))
        assert open_3x3.contains_wall((1, 1))
        open_3x3.remove_wall((1, 1))
        assert not open_3x3.contains_wall((1, 1))

    def test_duplicate_add_and_missing_remove_are_silent(self, open_3x3):
        open_3x3.add_wall((0, 0))
        open_3x3.add_wall((0, 0))
        assert open_3x3.walls == {(0, 0)}
        open_3x3.remove_wall((2, 2))
        assert open_3x3.walls == {(0, 0)}

    def test_out_of_range_walls_accepted(self, open_3x3):
        open_3x3.add_wall((10, -4))
        assert open_3x3.contains_wall((10, -4))
        assert not open_3x3.is_valid((10, -4))

    def test_toggle(self, open_3x3):
        open_3x3.toggle_wall((2, 1))
        assert open_3x3.contains_wall((2, 1))
        open_3x3.toggle_wall((2, 1))
        assert not open_3x3.contains_wall((2, 1))

    def test_clear(self, open_3x3):
        for c in [(0, 0), (1, 2), (2, 2)]:
            open_3x3.add_wall(c)
        open_3x3.clear_walls()
        assert open_3x3.walls == set()


class TestIsValid:
    """Test suite for the fixed-offset validity rule"""

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_bounds(self, open_3x3, cell):
        assert not open_3x3.is_valid(cell)

    def test_wall_cell_invalid(self, open_3x3):
        open_3x3.add_wall((1, 1))
        assert not open_3x3.is_valid((1, 1))

    def test_boxed_below_and_left_is_invalid(self, open_3x3, boxed_corner_walls):
        open_3x3.walls |= boxed_corner_walls
        assert not open_3x3.is_valid((1, 1))

    def test_single_flanking_wall_is_fine(self, open_3x3):
        open_3x3.add_wall((1, 0))
        assert open_3x3.is_valid((1, 1))

    def test_boxed_above_and_right_is_still_valid(self):
        # the rule only looks below and to the left
        grid = new_grid(5, 5)
        grid.add_wall((2, 3))
        grid.add_wall((3, 2))
        assert grid.is_valid((2, 2))


class TestNeighbours:
    """Test suite for neighbour enumeration"""

    def test_corner_cell_order(self, open_3x3):
        assert open_3x3.get_neighbours((0, 0)) == [(1, 0), (0, 1), (1, 1)]

    def test_center_cell_has_all_eight(self, open_3x3):
        assert open_3x3.get_neighbours((1, 1)) == [
            (0, 1), (2, 1), (1, 0), (1, 2),
            (0, 2), (2, 0), (0, 0), (2, 2),
        ]

    def test_no_neighbours_is_none(self, open_3x3, boxed_corner_walls):
        open_3x3.walls |= boxed_corner_walls
        assert open_3x3.get_neighbours((0, 0)) is None

    def test_single_cell_grid(self):
        assert new_grid(1, 1).get_neighbours((0, 0)) is None

    def test_diagonal_rule_blocks_squeeze(self, boxed_corner_walls):
        grid = Grid(3, 3, set(boxed_corner_walls), corner_rule="diagonal")
        assert grid.get_neighbours((0, 0)) is None
        assert not grid.can_move((0, 0), (1, 1))

    def test_diagonal_rule_allows_one_flank(self):
        grid = Grid(3, 3, {(1, 0)}, corner_rule="diagonal")
        assert grid.get_neighbours((0, 0)) == [(0, 1), (1, 1)]

    def test_diagonal_rule_ignores_fixed_offsets(self, boxed_corner_walls):
        # (1,1) is boxed below/left, but entering it orthogonally is fine
        grid = Grid(3, 3, set(boxed_corner_walls), corner_rule="diagonal")
        assert grid.can_move((1, 2), (1, 1))
        assert grid.can_move((2, 2), (1, 1))

    def test_rules_disagree_on_up_right_corner(self):
        walls = {(2, 3), (3, 2)}
        fixed = Grid(5, 5, set(walls), corner_rule="fixed")
        diagonal = Grid(5, 5, set(walls), corner_rule="diagonal")

        assert (2, 2) in fixed.get_neighbours((3, 3))
        assert (2, 2) not in diagonal.get_neighbours((3, 3))
