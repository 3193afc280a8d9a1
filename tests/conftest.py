import pandas as pd
import polars as pl
import pytest

QUERY_COLUMN = "uid"
ITEM_COLUMN = "iid"
RATING_COLUMN = "scores"
INIT_DICT = {
    "query_column": QUERY_COLUMN,
    "item_column": ITEM_COLUMN,
    "rating_column": RATING_COLUMN,
}

gt_data = [
    (1, 1, 5.0),
    (1, 2, 3.0),
    (1, 3, 1.0),
    (2, 4, 4.0),
    (2, 5, 2.0),
    (2, 6, 1.0),
    (3, 7, 5.0),
    (3, 8, 4.0),
]

predict_data = [
    (1, 1, 4.5),
    (1, 2, 2.0),
    (1, 3, 3.0),
    (2, 4, 1.0),
    (2, 5, 2.0),
    (2, 6, 3.0),
    (2, 9, 5.0),
]


@pytest.fixture(scope="module")
def gt_pd():
    return pd.DataFrame(gt_data, columns=[QUERY_COLUMN, ITEM_COLUMN, RATING_COLUMN])


@pytest.fixture(scope="module")
def predict_pd():
    return pd.DataFrame(predict_data, columns=[QUERY_COLUMN, ITEM_COLUMN, RATING_COLUMN])


@pytest.fixture(scope="module")
def gt_pl():
    return pl.DataFrame(gt_data, schema=[QUERY_COLUMN, ITEM_COLUMN, RATING_COLUMN], orient="row")


@pytest.fixture(scope="module")
def predict_pl():
    return pl.DataFrame(predict_data, schema=[QUERY_COLUMN, ITEM_COLUMN, RATING_COLUMN], orient="row")


def _to_dict(data):
    result = {}
    for query_id, item_id, rating in data:
        result.setdefault(query_id, []).append((item_id, rating))
    return result


@pytest.fixture(scope="module")
def gt_dict():
    return _to_dict(gt_data)


@pytest.fixture(scope="module")
def predict_dict():
    return _to_dict(predict_data)
