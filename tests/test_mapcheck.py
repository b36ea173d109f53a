import pytest

from solong.mapcheck import (
    GameMap,
    MapError,
    check_elements,
    check_walls,
    main,
    read_map,
    validate_map,
)

VALID_ROWS = ["1111111", "1P0C0E1", "10C0001", "1111111"]


def write_map(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_bytes(text.encode("latin-1"))
    return path


def test_read_map_valid(tmp_path):
    path = write_map(tmp_path, "\n".join(VALID_ROWS) + "\n")
    game_map = read_map(path)
    assert game_map.rows == VALID_ROWS
    assert game_map.width == len(VALID_ROWS[0])
    assert game_map.height == len(VALID_ROWS)


def test_read_map_without_trailing_newline(tmp_path):
    path = write_map(tmp_path, "\n".join(VALID_ROWS))
    assert read_map(path).rows == VALID_ROWS


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError, match=r"^Could not open map file\.$"):
        read_map(tmp_path / "absent.ber")


def test_read_map_empty_line(tmp_path):
    path = write_map(tmp_path, "111\n\n111\n")
    with pytest.raises(MapError, match="Map contains empty lines."):
        read_map(path)


def test_read_map_trailing_blank_line_is_empty_line(tmp_path):
    path = write_map(tmp_path, "111\n111\n\n")
    with pytest.raises(MapError, match="Map contains empty lines."):
        read_map(path)


def test_read_map_not_rectangular(tmp_path):
    path = write_map(tmp_path, "1111\n111\n")
    with pytest.raises(MapError, match="Map is not rectangular."):
        read_map(path)


def test_read_map_empty_file(tmp_path):
    path = write_map(tmp_path, "")
    with pytest.raises(MapError, match="Map is empty or invalid dimensions."):
        read_map(path)


def test_carriage_return_counts_as_map_content(tmp_path):
    path = write_map(tmp_path, "111\r\n111\n")
    with pytest.raises(MapError, match="Map is not rectangular."):
        read_map(path)


def test_check_walls_accepts_enclosed_map():
    game_map = GameMap(rows=list(VALID_ROWS))
    check_walls(game_map)
    assert game_map.rows == VALID_ROWS


def test_check_walls_top_gap():
    game_map = GameMap(rows=["1101", "1PE1", "1111"])
    with pytest.raises(MapError, match=r"\(top/bottom\)"):
        check_walls(game_map)


def test_check_walls_bottom_gap():
    game_map = GameMap(rows=["1111", "1PE1", "1C11"])
    with pytest.raises(MapError, match=r"\(top/bottom\)"):
        check_walls(game_map)


def test_check_walls_side_gap():
    game_map = GameMap(rows=["1111", "0PE1", "1111"])
    with pytest.raises(MapError, match=r"\(left/right\)"):
        check_walls(game_map)


def test_check_elements_counts():
    game_map = GameMap(rows=list(VALID_ROWS))
    check_elements(game_map)
    assert game_map.player_count == 1
    assert game_map.exit_count == 1
    assert game_map.collectible_count == sum(row.count("C") for row in VALID_ROWS)


def test_check_elements_invalid_character():
    game_map = GameMap(rows=["11111", "1PXE1", "1C001", "11111"])
    with pytest.raises(MapError, match="invalid characters"):
        check_elements(game_map)


def test_check_elements_two_players():
    game_map = GameMap(rows=["111111", "1PPCE1", "111111"])
    with pytest.raises(MapError, match=r"exactly one player"):
        check_elements(game_map)


def test_check_elements_no_exit():
    game_map = GameMap(rows=["11111", "1PC01", "11111"])
    with pytest.raises(MapError, match=r"exactly one exit"):
        check_elements(game_map)


def test_check_elements_no_collectible():
    game_map = GameMap(rows=["11111", "1P0E1", "11111"])
    with pytest.raises(MapError, match=r"at least one collectible"):
        check_elements(game_map)


def test_validate_map_checks_walls_before_elements():
    game_map = GameMap(rows=["10111", "1PXE1", "11111"])
    with pytest.raises(MapError, match="top/bottom"):
        validate_map(game_map)


def test_main_success(tmp_path, capsys):
    path = write_map(tmp_path, "\n".join(VALID_ROWS) + "\n")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Map loaded:" in out
    assert f"Width: {len(VALID_ROWS[0])}, Height: {len(VALID_ROWS)}" in out
    assert "Map validation successful!" in out
    assert out.endswith("Program finished successfully.\n")


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == "Error\nUsage: ./so_long <map_file.ber>\n"


def test_main_bad_extension(tmp_path, capsys):
    assert main([str(tmp_path / "map.txt")]) == 1
    assert capsys.readouterr().err == "Error\nMap file must have .ber extension.\n"


def test_main_invalid_map(tmp_path, capsys):
    path = write_map(tmp_path, "11111\n1P0E1\n11111\n")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "Validating map..." in captured.out
    assert captured.err == "Error\nMap must contain at least one collectible ('C').\n"