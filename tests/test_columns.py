# tests/test_columns.py
import pytest
from colkit.errors import InvalidColumnSpec
from colkit.table import Table
from colkit.utils import columns as U

def test_specs_single_ranges_and_repeats():
    assert U.parse_column_specs(["2"]) == [1]
    assert U.parse_column_specs(["1:3"]) == [0, 1, 2]
    assert U.parse_column_specs(["3:1"]) == [2, 1, 0]
    assert U.parse_column_specs(["2", "1:2", "2"]) == [1, 0, 1, 1]
    assert U.parse_column_specs(["4:4"]) == [3]

@pytest.mark.parametrize("spec", ["0", "0:2", "2:0", "a", "1:b", "1:", ":2", "1:2:3", "-1", ""])
def test_invalid_specs_raise(spec):
    with pytest.raises(InvalidColumnSpec):
        U.parse_column_specs([spec])

def test_invalid_spec_is_a_value_error():
    with pytest.raises(ValueError, match="1-based"):
        U.parse_column_specs(["0"])

def test_project_reversed_range():
    t = Table(headers=[], rows=[["a", "b", "c"]])
    U.project_table(t, ["3:1"])
    assert t.rows == [["c", "b", "a"]]
    assert t.selected_columns == [2, 1, 0]
    assert t.headers == []

def test_project_default_selects_widest_and_pads():
    t = Table(headers=["h1", "h2"], rows=[["a"], ["b", "c", "d"]])
    U.project_table(t, [])
    assert t.selected_columns == [0, 1, 2]
    assert t.headers == ["h1", "h2", ""]
    assert t.rows == [["a", "", ""], ["b", "c", "d"]]
    assert all(len(r) == len(t.selected_columns) for r in t.rows)

def test_project_out_of_range_source_is_empty():
    t = Table(headers=["x"], rows=[["1"], ["2"]])
    U.project_table(t, ["1", "5"])
    assert t.headers == ["x", ""]
    assert t.rows == [["1", ""], ["2", ""]]

def test_explicit_header_is_fitted_not_projected():
    t = Table(headers=[], rows=[["a", "b", "c"]])
    U.project_table(t, ["3", "1"], explicit_header=["A", "B", "C"])
    assert t.headers == ["A", "B"]
    t2 = Table(headers=[], rows=[["a", "b", "c"]])
    U.project_table(t2, [], explicit_header=["only"])
    assert t2.headers == ["only", "", ""]
