import pytest

from terrainwalk.app import format_status, main


def test_status_player_line_format():
    line, _ = format_status((1.5, 2.0, -3.25))
    assert line == "Player position: (01.500, 02.000, -3.250)"


def test_status_grid_line_uses_chunk_grid():
    _, grid = format_status((0.0, 0.0, -1.0))
    assert grid == "Grid position: (000, -01)"


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--no-such-option"])