"""Tests for the delimited text input format."""

import pytest

from conftest import PUZZLE_4, PUZZLE_9
from config.default_fallbacks import DEFAULT_PUZZLE
from utils.error_handling import DigitOutOfRangeError, InvalidDigitError, NonSquareError
from utils.parsing import format_grid_csv, parse_grid, parse_tiles, read_grid_file

SMALL_TEXT = "1,,,\n,,3,\n,4,,\n,,,2\n"


def test_parse_built_in_puzzle():
    grid = parse_grid(DEFAULT_PUZZLE)
    assert grid.row_width == 9
    assert list(grid) == PUZZLE_9


def test_empty_fields_are_zero():
    assert parse_tiles(",,\n1,,") == [0, 0, 0, 1, 0, 0]


def test_trailing_newline_adds_no_row():
    assert list(parse_grid(SMALL_TEXT)) == PUZZLE_4
    assert list(parse_grid(SMALL_TEXT.rstrip("\n"))) == PUZZLE_4


def test_explicit_zero_and_spaces():
    text = "1, 0,,\n,,3,\n,4,,\n,,,2"
    assert list(parse_grid(text)) == PUZZLE_4


def test_other_delimiter():
    text = SMALL_TEXT.replace(",", ";")
    assert list(parse_grid(text, delimiter=";")) == PUZZLE_4


@pytest.mark.parametrize("field", ["x", "1.5", "-1", "+2", "1_0", "٣", "３"])
def test_invalid_digit(field):
    text = SMALL_TEXT.replace("3", field)
    with pytest.raises(InvalidDigitError) as excinfo:
        parse_grid(text)
    assert excinfo.value.details["field"] == field
    assert excinfo.value.details["line"] == 2


def test_arabic_indic_digit_is_rejected():
    with pytest.raises(InvalidDigitError) as excinfo:
        parse_tiles("٣")
    assert excinfo.value.details["field"] == "٣"


def test_invalid_digit_chains_parse_failure():
    with pytest.raises(InvalidDigitError) as excinfo:
        parse_tiles("1,a")
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_wrong_cell_count():
    text = "\n".join([",".join(["1"] * 9)] * 8 + [",".join(["1"] * 8)])
    with pytest.raises(NonSquareError):
        parse_grid(text)


def test_digit_out_of_range():
    text = DEFAULT_PUZZLE.replace("5,3", "10,3", 1)
    with pytest.raises(DigitOutOfRangeError):
        parse_grid(text)


def test_read_grid_file(tmp_path):
    path = tmp_path / "small.csv"
    path.write_text(SMALL_TEXT, encoding="utf-8")
    assert list(read_grid_file(str(path))) == PUZZLE_4


def test_read_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_grid_file(str(tmp_path / "missing.csv"))


def test_format_grid_csv(small_puzzle):
    assert format_grid_csv(small_puzzle) == SMALL_TEXT
    assert format_grid_csv(small_puzzle, delimiter=";") == SMALL_TEXT.replace(",", ";")
