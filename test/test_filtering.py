import pytest

from tablebench.dataset import build_dataset
from tablebench.operations.filtering import FilterRows


@pytest.fixture
def dataset():
    return build_dataset()


@pytest.mark.parametrize("label", ["python", "pyarrow", "pandas"])
def test_filter_rows_count(dataset, label):
    result = FilterRows().candidates()[label](dataset)
    assert len(result["mpg"]) == 14


def test_filter_rows_values(dataset):
    result = FilterRows().python(dataset)
    assert all(mpg > 20 for mpg in result["mpg"])
    assert result["car"][:3] == ["Mazda RX4", "Mazda RX4 Wag", "Datsun 710"]
    assert "Valiant" not in result["car"]


def test_filter_rows_candidates_agree(dataset):
    op = FilterRows()
    expected = op.python(dataset)
    assert op.pyarrow(dataset).to_pydict() == expected
    assert op.pandas(dataset).to_dict(orient="list") == expected


def test_filter_rows_threshold_is_exclusive(dataset):
    result = FilterRows(threshold=33.9).pyarrow(dataset)
    assert result.num_rows == 0


def test_filter_rows_other_column(dataset):
    result = FilterRows("hp", 250).pandas(dataset)
    assert result["car"].tolist() == ["Ford Pantera L", "Maserati Bora"]


def test_filter_rows_leaves_dataset_untouched(dataset):
    op = FilterRows()
    for candidate in op.candidates().values():
        candidate(dataset)
    assert dataset.num_rows == 32
    assert len(dataset.columns["mpg"]) == 32
    assert len(dataset.frame) == 32
