import pandas as pd
import pytest
from conftest import INIT_DICT

from rateval.data import SparseVector, TestUser, build_test_users


@pytest.mark.parametrize(
    "predict_data, gt_data",
    [
        ("predict_pd", "gt_pd"),
        ("predict_pl", "gt_pl"),
        ("predict_dict", "gt_dict"),
    ],
)
def test_build_test_users(predict_data, gt_data, request):
    predict_data = request.getfixturevalue(predict_data)
    gt_data = request.getfixturevalue(gt_data)

    users = build_test_users(gt_data, predict_data, **INIT_DICT)

    assert [user.query_id for user in users] == [1, 2, 3]
    assert users[0].test_ratings == {1: 5.0, 2: 3.0, 3: 1.0}
    assert users[0].predictions == {1: 4.5, 2: 2.0, 3: 3.0}
    assert users[1].predictions == {4: 1.0, 5: 2.0, 6: 3.0, 9: 5.0}
    assert users[2].test_ratings == {7: 5.0, 8: 4.0}
    assert users[2].predictions is None


def test_build_test_users_without_predictions(gt_dict):
    users = build_test_users(gt_dict)
    assert all(user.predictions is None for user in users)


def test_users_only_from_ground_truth(gt_pd, predict_pd):
    extra = pd.DataFrame([(100, 1, 1.0)], columns=predict_pd.columns)
    users = build_test_users(gt_pd, pd.concat([predict_pd, extra]), **INIT_DICT)
    assert 100 not in [user.query_id for user in users]


def test_different_types(gt_pd, predict_pl):
    with pytest.raises(ValueError, match="All given data frames must have the same type"):
        build_test_users(gt_pd, predict_pl, **INIT_DICT)


def test_unsupported_type():
    with pytest.raises(ValueError, match="Unsupported ratings type list"):
        build_test_users([(1, 1, 1.0)])


def test_duplicated_items(gt_pd):
    duplicated = pd.concat([gt_pd, gt_pd.head(1)])
    with pytest.raises(ValueError, match="Duplicated key"):
        build_test_users(duplicated, **INIT_DICT)


def test_test_user_properties():
    ratings = SparseVector.from_dict({1: 4.0})
    user = TestUser("u", ratings)
    assert user.query_id == "u"
    assert user.test_ratings is ratings
    assert user.predictions is None
    assert "query_id='u'" in repr(user)
