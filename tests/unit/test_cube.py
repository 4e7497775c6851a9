# Copyright (C) 2026 Lukas Huwald
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

from pathlib import Path

import pytest

from monkey_map.cube import PUZZLE_NET, PUZZLE_TABLE, FoldedNet, load_net, table_discrepancies
from monkey_map.models import Direction

# Path to test-specific nets file
TEST_NETS_FILE = Path(__file__).parent.parent / "config" / "test_nets.yaml"


def test_puzzle_table_face_ranges() -> None:
    assert PUZZLE_NET.face_of((51, 1)) == 1
    assert PUZZLE_NET.face_of((100, 50)) == 1
    assert PUZZLE_NET.face_of((101, 1)) == 2
    assert PUZZLE_NET.face_of((75, 75)) == 3
    assert PUZZLE_NET.face_of((1, 101)) == 4
    assert PUZZLE_NET.face_of((100, 150)) == 5
    assert PUZZLE_NET.face_of((50, 200)) == 6


def test_puzzle_table_has_fourteen_exits() -> None:
    assert len(PUZZLE_TABLE) == 14
    for face in range(1, 7):
        exits = [d for f, d in PUZZLE_TABLE if f == face]
        assert 2 <= len(exits) <= 3


def test_puzzle_table_entries() -> None:
    assert PUZZLE_NET.exit(1, Direction.LEFT, (51, 10)) == ((1, 141), Direction.RIGHT)
    assert PUZZLE_NET.exit(2, Direction.UP, (120, 1)) == ((20, 200), Direction.UP)
    assert PUZZLE_NET.exit(3, Direction.RIGHT, (100, 60)) == ((110, 50), Direction.UP)
    assert PUZZLE_NET.exit(4, Direction.LEFT, (1, 110)) == ((51, 10), Direction.RIGHT)
    assert PUZZLE_NET.exit(6, Direction.DOWN, (5, 200)) == ((105, 1), Direction.DOWN)


def test_puzzle_table_rejects_unknown_exit() -> None:
    with pytest.raises(ValueError):
        PUZZLE_NET.exit(3, Direction.UP, (75, 51))


def test_load_net() -> None:
    net = load_net("example", TEST_NETS_FILE)
    assert isinstance(net, FoldedNet)
    assert net.face_size == 4
    assert net.origin(1) == (9, 1)
    assert net.origin(6) == (13, 9)
    assert len(net.gluings) == 14
    assert net.gluings[(6, Direction.UP)] == (4, Direction.RIGHT)


def test_load_net_default_file() -> None:
    assert load_net("example").gluings == load_net("example", TEST_NETS_FILE).gluings
    assert load_net("puzzle").face_size == 50


def test_load_net_errors() -> None:
    with pytest.raises(KeyError):
        load_net("no_such_net", TEST_NETS_FILE)
    with pytest.raises(ValueError, match="14 exits"):
        load_net("missing_edge", TEST_NETS_FILE)
    with pytest.raises(ValueError, match="glued twice"):
        load_net("glued_twice", TEST_NETS_FILE)


def test_folded_net_faces() -> None:
    net = load_net("example", TEST_NETS_FILE)
    assert net.face_of((9, 1)) == 1
    assert net.face_of((5, 8)) == 3
    assert net.face_of((16, 12)) == 6
    with pytest.raises(ValueError):
        net.face_of((1, 1))


def test_folded_net_edges_meet_reversed() -> None:
    net = load_net("tiny_cross", TEST_NETS_FILE)
    assert net.exit(1, Direction.LEFT, (2, 1)) == ((1, 2), Direction.DOWN)
    assert net.exit(6, Direction.DOWN, (2, 4)) == ((2, 1), Direction.DOWN)

    net = load_net("example", TEST_NETS_FILE)
    for (face, edge), (target_face, target_edge) in net.gluings.items():
        for cell in net.edge_cells(face, edge):
            landing, facing = net.exit(face, edge, cell)
            assert net.face_of(landing) == target_face
            # Stepping straight back returns to where we came from
            assert net.exit(target_face, facing.opposite(), landing) == (cell, edge.opposite())


def test_puzzle_table_matches_fold_except_face_four_left() -> None:
    assert table_discrepancies(PUZZLE_NET, load_net("puzzle")) == [(4, Direction.LEFT)]
