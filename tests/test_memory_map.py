import pytest

from lcdcontrol.memory_map import (
    MEMORY_MAP_1601_CONTIGUOUS,
    MEMORY_MAP_1602,
    MEMORY_MAP_2004,
    Contiguous1RMemoryMap,
    DisplayMemoryMap,
    StandardMemoryMap,
    scrollable_margin,
)


@pytest.mark.parametrize(
    ("width", "height", "expected"),
    [(16, 2, 24), (16, 4, 8), (20, 2, 20), (20, 4, 0), (40, 2, 0)],
)
def test_scrollable_margin(width, height, expected):
    assert scrollable_margin(width, height, 40) == expected


def test_scrollable_margin_too_wide():
    with pytest.raises(ValueError):
        scrollable_margin(41, 2, 40)


def test_position():
    memory_map = StandardMemoryMap(20, 4)
    assert memory_map.address_for_xy(0, 0) == 0
    assert memory_map.address_for_xy(19, 0) == 19
    assert memory_map.address_for_xy(0, 1) == 64
    assert memory_map.address_for_xy(1, 1) == 65


def test_invalid_col():
    assert MEMORY_MAP_2004.address_for_xy(20, 0) is None


def test_invalid_row():
    assert MEMORY_MAP_2004.address_for_xy(0, 4) is None


def test_invalid_rowcol():
    assert MEMORY_MAP_2004.address_for_xy(20, 4) is None


def test_third_row_follows_first():
    assert MEMORY_MAP_2004.address_for_xy(0, 2) == 20


def test_1602_lines_include_scrollable_margin():
    assert MEMORY_MAP_1602.columns_in_line(0) == 40
    assert MEMORY_MAP_1602.address_for_xy(39, 0) == 39
    assert MEMORY_MAP_1602.address_for_xy(40, 0) is None


def test_four_line_upper_rows_do_not_scroll():
    memory_map = StandardMemoryMap(16, 4)
    assert memory_map.columns_in_line(0) == 16
    assert memory_map.columns_in_line(1) == 16
    assert memory_map.columns_in_line(2) == 24


def test_standard_display_size():
    assert MEMORY_MAP_1602.display_size().get() == (16, 2)


def test_negative_coordinates_are_invalid():
    assert MEMORY_MAP_1602.address_for_xy(-1, 0) is None
    assert MEMORY_MAP_1602.address_for_xy(0, -1) is None


@pytest.mark.parametrize("height", [1, 5])
def test_unsupported_heights(height):
    with pytest.raises(ValueError):
        StandardMemoryMap(16, height)


def test_contiguous_map():
    memory_map = Contiguous1RMemoryMap(16)
    assert memory_map.address_for_xy(5, 0) == 5
    assert memory_map.address_for_xy(79, 0) == 79
    assert memory_map.address_for_xy(80, 0) is None
    assert memory_map.address_for_xy(0, 1) is None
    assert memory_map.columns_in_line(0) == 0x50


def test_contiguous_display_size():
    assert MEMORY_MAP_1601_CONTIGUOUS.display_size().get() == (16, 1)


def test_memory_map_is_abstract():
    with pytest.raises(TypeError):
        DisplayMemoryMap()