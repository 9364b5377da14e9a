"""Unit tests for grid snapshot and path report schemas."""

import pytest
from pydantic import ValidationError

from puzzlekit import Grid, GridSnapshot, PathReport


def test_snapshot_from_grid_and_back():
    grid = Grid(["#", ".", ".", "#"], 2, 2, "#")

    snapshot = GridSnapshot.from_grid(grid)
    assert snapshot.rows == ["#.", ".#"]
    assert snapshot.width == 2 and snapshot.height == 2

    restored = snapshot.to_grid(lambda position, char: char, out_of_bounds="#")
    assert restored == grid


def test_snapshot_json_round_trip():
    snapshot = GridSnapshot(width=3, height=1, rows=["abc"])

    assert GridSnapshot.model_validate_json(snapshot.model_dump_json()) == snapshot


def test_snapshot_rejects_ragged_rows():
    with pytest.raises(ValidationError):
        GridSnapshot(width=3, height=2, rows=["abc", "ab"])

    with pytest.raises(ValidationError):
        GridSnapshot(width=3, height=2, rows=["abc"])


def test_path_report_found_and_missing():
    found = PathReport.from_path((0, 0), (2, 0), [(1, 0), (2, 0)], cost=2.0)
    assert found.found is True
    assert found.length == 2
    assert found.path == [(1, 0), (2, 0)]

    missing = PathReport.from_path((0, 0), (9, 9), None)
    assert missing.found is False
    assert missing.length is None
    assert missing.path == []
    assert '"found":false' in missing.model_dump_json()
