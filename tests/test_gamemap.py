import pytest

from solong.gamemap import (
    EMPTY_MESSAGE,
    NOT_VALID_MESSAGE,
    PATH_MESSAGE,
    RECTANGLE_MESSAGE,
    WALLS_MESSAGE,
    GameMap,
    MapError,
    check_composition,
    check_counts,
    check_not_empty,
    check_rectangular,
    check_valid_path,
    check_walls,
    line_width,
    load_map,
    parse_map,
)

VALID = "1111111\n1PC0CE1\n1111111"


def test_line_width_strips_only_newline():
    assert line_width("10P\n") == 3
    assert line_width("10P") == 3
    assert line_width("") == 0


def test_parse_valid_map():
    game_map = parse_map(VALID)
    assert game_map.lines == VALID.split("\n")
    assert game_map.height == 3
    assert game_map.width == len("1111111")


def test_find_and_count():
    game_map = parse_map(VALID)
    assert game_map.find("P") == (1, 1)
    assert game_map.find("E") == (5, 1)
    assert game_map.find("X") is None
    assert game_map.count("C") == 2
    assert game_map.count("P") == 1


def test_item_access_and_copy_independent():
    game_map = parse_map(VALID)
    clone = game_map.copy()
    clone[1, 1] = "0"
    assert game_map[1, 1] == "P"
    assert clone[1, 1] == "0"
    assert clone.count("P") == 0


def test_from_lines_matches_parse():
    lines = ["1111111\n", "1PC0CE1\n", "1111111"]
    assert GameMap.from_lines(lines) == parse_map(VALID)


def test_empty_map():
    with pytest.raises(MapError) as info:
        parse_map("")
    assert str(info.value) == EMPTY_MESSAGE
    with pytest.raises(MapError):
        check_not_empty([])


def test_bad_character():
    with pytest.raises(MapError) as info:
        parse_map("1111\n1PX1\n1111")
    assert str(info.value) == NOT_VALID_MESSAGE
    with pytest.raises(MapError):
        check_composition(["11\r\n"])


@pytest.mark.parametrize(
    "text",
    [
        "111111\n1PPCE1\n111111",
        "111111\n1PCEE1\n111111",
        "111111\n1P00E1\n111111",
        "111111\n10C0E1\n111111",
    ],
)
def test_wrong_counts(text):
    with pytest.raises(MapError) as info:
        parse_map(text)
    assert str(info.value) == NOT_VALID_MESSAGE


def test_counts_accept_many_collectibles():
    check_counts(["1PCCCE1"])
    assert parse_map(VALID).count("C") == 2


@pytest.mark.parametrize(
    "text",
    [
        "11011\n1PCE1\n11111",
        "11111\n0PCE1\n11111",
        "11111\n1PCE0\n11111",
        "11111\n1PCE1\n11101",
    ],
)
def test_missing_walls(text):
    with pytest.raises(MapError) as info:
        parse_map(text)
    assert str(info.value) == WALLS_MESSAGE


def test_trailing_newline_after_last_row_is_rejected():
    with pytest.raises(MapError) as info:
        parse_map(VALID + "\n")
    assert str(info.value) == WALLS_MESSAGE


def test_walls_need_two_lines():
    with pytest.raises(MapError):
        check_walls(["1111"])


def test_empty_middle_line_is_rejected():
    with pytest.raises(MapError):
        check_walls(["111\n", "\n", "111"])


def test_unreachable_exit():
    with pytest.raises(MapError) as info:
        parse_map("111111\n1P1CE1\n111111")
    assert str(info.value) == PATH_MESSAGE


def test_unreachable_collectible_is_accepted():
    game_map = parse_map("1111111\n1PE1C11\n1111111")
    assert game_map.count("C") == 1


def test_valid_path_without_player():
    with pytest.raises(MapError):
        check_valid_path(["1111\n", "10E1\n", "1111"])


def test_not_rectangular():
    with pytest.raises(MapError) as info:
        parse_map("11111\n1PCE1\n1111")
    assert str(info.value) == RECTANGLE_MESSAGE


def test_check_rectangular_accepts_equal_rows():
    lines = ["111\n", "1P1\n", "111"]
    check_rectangular(lines)
    assert GameMap.from_lines(lines).width == line_width(lines[0])


def test_load_map_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID, encoding="utf-8")
    assert load_map(path) == parse_map(VALID)


def test_load_map_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_map(tmp_path / "missing.ber")