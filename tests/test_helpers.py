"""Tests for level helper functions."""
import pytest
from sokoban_generator.models.cell import Cell
from sokoban_generator.utils.helpers import (
    copy_level,
    count_cells,
    encode_level,
    frame_level,
    level_to_rows,
    parse_level,
    render_text,
)


@pytest.fixture
def sample_level():
    """Small level with every entity kind."""
    return [
        [Cell.FLOOR, Cell.BOX, Cell.GOAL],
        [Cell.PLAYER, Cell.WALL, Cell.BOX_ON_GOAL],
        [Cell.SPECIAL_FLOOR, Cell.PLAYER_ON_GOAL, Cell.EMPTY],
    ]


class TestFrameLevel:
    """Test cases for frame_level."""

    def test_frame_dimensions(self, sample_level):
        """Test that the border adds two rows and two columns."""
        framed = frame_level(sample_level)

        assert len(framed) == 5
        assert all(len(row) == 5 for row in framed)

    def test_frame_is_wall(self, sample_level):
        """Test that every border cell is a wall."""
        framed = frame_level(sample_level)

        assert all(cell == Cell.WALL for cell in framed[0])
        assert all(cell == Cell.WALL for cell in framed[-1])
        assert all(row[0] == Cell.WALL and row[-1] == Cell.WALL for row in framed)

    def test_frame_keeps_interior(self, sample_level):
        """Test that the interior is copied unchanged."""
        framed = frame_level(sample_level)
        assert [row[1:-1] for row in framed[1:-1]] == sample_level

    def test_frame_does_not_alias(self, sample_level):
        """Test that the framed level is independent of the input."""
        framed = frame_level(sample_level)
        framed[1][1] = Cell.WALL
        assert sample_level[0][0] == Cell.FLOOR


class TestRendering:
    """Test cases for text rendering and encoding."""

    def test_render_text(self, sample_level):
        """Test glyphs and newline terminated rows."""
        assert render_text(sample_level) == " $.\n@#*\n + \n"

    def test_level_to_rows(self, sample_level):
        """Test row strings without newlines."""
        assert level_to_rows(sample_level) == [" $.", "@#*", " + "]

    def test_encode_level(self, sample_level):
        """Test the single line encoding."""
        assert encode_level(sample_level) == "-$.|@#*|-+-"

    def test_render_empty(self):
        """Test rendering a level without rows."""
        assert render_text([]) == ""


class TestParseLevel:
    """Test cases for parse_level."""

    def test_parse_rendered_level(self):
        """Test parsing the rendering glyphs."""
        level = parse_level("#####\n#@$.#\n#*+ #\n#####\n")

        assert level[1] == [Cell.WALL, Cell.PLAYER, Cell.BOX, Cell.GOAL, Cell.WALL]
        assert level[2] == [Cell.WALL, Cell.BOX_ON_GOAL, Cell.PLAYER_ON_GOAL, Cell.FLOOR, Cell.WALL]

    def test_render_after_parse(self):
        """Test that rendering a parsed level gives the same text."""
        text = "#####\n#@$.#\n#*+ #\n#####\n"
        assert render_text(parse_level(text)) == text

    def test_dash_is_floor(self):
        """Test the floor spelling of the encoding."""
        assert parse_level("-#-") == [[Cell.FLOOR, Cell.WALL, Cell.FLOOR]]

    def test_short_rows_are_padded(self):
        """Test that ragged rows are padded with floor."""
        level = parse_level("###\n#")
        assert level[1] == [Cell.WALL, Cell.FLOOR, Cell.FLOOR]

    def test_unknown_glyph(self):
        """Test that unknown glyphs are rejected."""
        with pytest.raises(ValueError, match="Unknown glyph"):
            parse_level("#x#")


class TestLevelUtilities:
    """Test cases for copy and count helpers."""

    def test_copy_level(self, sample_level):
        """Test that copies do not share rows."""
        copy = copy_level(sample_level)
        copy[0][0] = Cell.WALL

        assert sample_level[0][0] == Cell.FLOOR
        assert copy[1] == sample_level[1]

    def test_count_cells(self, sample_level):
        """Test counting with cell predicates."""
        assert count_cells(sample_level, Cell.is_box) == 2
        assert count_cells(sample_level, Cell.is_player) == 2
        assert count_cells(sample_level, Cell.is_goal) == 3
        assert count_cells(sample_level, Cell.is_floor) == 2
