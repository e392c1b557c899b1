import _pickle
import bz2
import json
from pathlib import Path

import numpy.testing as npt
import pandas as pd
import pytest
from scipy.io import loadmat

from jnynpy import BesselTable, IntegerOrderBessel, jn, yn


@pytest.fixture(scope="module")
def table() -> BesselTable:
    return IntegerOrderBessel().table([0, 2, 7], [0.5, 3.0], kind="both")


def test_table_holds_both_kinds(table: BesselTable):
    assert table.orders == [0, 2, 7]
    assert table.arguments == [0.5, 3.0]
    assert len(table.j) == 3 and all(len(row) == 2 for row in table.j)
    assert table.j[2][1] == jn(7, 3.0)
    assert table.y[1][0] == yn(2, 0.5)


def test_single_kind_leaves_other_empty():
    only_y = IntegerOrderBessel().table([3], [1.0, 2.0], kind="y")
    assert only_y.j == []
    assert only_y.y == [[yn(3, 1.0), yn(3, 2.0)]]
    assert list(only_y.to_frame().columns) == ["order", "x", "yn"]


def test_unknown_kind_is_rejected():
    with pytest.raises(ValueError):
        IntegerOrderBessel().table([3], [1.0], kind="k")


def test_grid_shape_is_validated():
    with pytest.raises(ValueError, match="do not match"):
        BesselTable(orders=[1, 2], arguments=[1.0], kind="j", j=[[0.1]])


def test_to_frame_is_long_format(table: BesselTable):
    frame = table.to_frame()
    assert list(frame.columns) == ["order", "x", "jn", "yn"]
    assert len(frame) == 6
    row = frame[(frame["order"] == 7) & (frame["x"] == 3.0)].iloc[0]
    assert row["jn"] == jn(7, 3.0)
    assert row["yn"] == yn(7, 3.0)


def test_save_csv(tmp_path: Path, table: BesselTable):
    path = tmp_path / "table.csv"
    table.save(path)
    frame = pd.read_csv(path)
    npt.assert_allclose(frame["jn"].to_numpy(), table.to_frame()["jn"].to_numpy())


def test_save_json_and_bz2(tmp_path: Path, table: BesselTable):
    table.save(str(tmp_path / "table.json"))
    with open(tmp_path / "table.json") as f:
        assert BesselTable(**json.load(f)) == table

    table.save(tmp_path / "table.bz2")
    with bz2.BZ2File(tmp_path / "table.bz2") as f:
        assert BesselTable(**_pickle.load(f)) == table


def test_save_mat(tmp_path: Path, table: BesselTable):
    table.save(tmp_path / "table.mat")
    data = loadmat(tmp_path / "table.mat")
    npt.assert_allclose(data["j"], table.j)
    npt.assert_allclose(data["y"], table.y)


def test_save_rejects_unknown_suffix(tmp_path: Path, table: BesselTable):
    with pytest.raises(ValueError, match="Unknown file extension"):
        table.save(tmp_path / "table.xlsx")
