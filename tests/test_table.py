import pytest

from countrytable.table import ColumnTable


def test_rows_and_length():
    table = ColumnTable({"code": ["CA", "JP"], "population": [1, 2]})

    assert len(table) == 2
    assert table.columns == ["code", "population"]
    assert list(table.rows()) == [
        {"code": "CA", "population": 1},
        {"code": "JP", "population": 2},
    ]


def test_ragged_columns_are_rejected():
    with pytest.raises(ValueError):
        ColumnTable({"a": [1], "b": [1, 2]})


def test_non_list_column_is_rejected():
    with pytest.raises(TypeError):
        ColumnTable({"a": (1, 2)})


def test_select_copies_requested_columns():
    table = ColumnTable({"a": [1, 2], "b": [3, 4], "c": [5, 6]})

    picked = table.select(["c", "a"])

    assert picked.columns == ["c", "a"]
    assert list(picked.rows())[0] == {"c": 5, "a": 1}


def test_select_unknown_column():
    table = ColumnTable({"a": [1]})

    assert table.missing(["a", "z"]) == ["z"]
    with pytest.raises(KeyError):
        table.select(["z"])
    with pytest.raises(ValueError):
        table.select([])


def test_filter_keeps_masked_rows():
    table = ColumnTable({"code": ["CA", None, "JP"], "population": [1, None, 3]})

    kept = table.filter([True, False, True])

    assert len(kept) == 2
    assert list(kept.rows()) == [
        {"code": "CA", "population": 1},
        {"code": "JP", "population": 3},
    ]
    assert len(table) == 3


def test_filter_mask_length_must_match():
    with pytest.raises(ValueError):
        ColumnTable({"a": [1, 2]}).filter([True])


def test_empty_table():
    table = ColumnTable({})

    assert len(table) == 0
    assert list(table.rows()) == []
