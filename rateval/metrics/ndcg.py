import logging
import math
from typing import List, Mapping, Optional, Sequence

import numpy as np

from rateval.data import TestUser

from .accumulator import MeanAccumulator
from .base_metric import Metric
from .result import MetricResult

NDCG_COLUMN = "nDCG"

logger = logging.getLogger("rateval")


def compute_dcg(items: Sequence[int], values: Mapping[int, float]) -> float:
    """
    Discounted cumulative gain of ``items`` taken in the given order.
    Gain of an item is its value, items absent in ``values`` have zero gain.

    >>> compute_dcg([1, 2], {1: 3.0, 2: 2.0})
    5.0
    >>> compute_dcg([], {1: 3.0})
    0.0
    """
    lg2 = math.log(2)

    gain = 0.0
    for rank, item in enumerate(items, start=1):
        value = values.get(item, 0.0)
        if rank < 2:
            gain += value
        else:
            gain += value * lg2 / math.log(rank)
    return gain


class NDCGPredictMetric(Metric[MeanAccumulator]):
    """
    Normalized Discounted Cumulative Gain of rating predictions.

    Items rated by the user in the test set are ordered by predicted rating
    and the real rating of every item is used as its gain.
    Only the queried items take part in the ranking, so recommending items
    the user has not rated is not penalized.

    .. math::
        DCG(i) = r_{i,j_1} + \\sum_{k=2}^{n}\\frac{r_{i,j_k}}{\\log_2 k}

    :math:`j_k` -- item at position :math:`k` when the items are sorted by predicted rating,
    :math:`r_{ij}` -- real rating of item :math:`j` given by user :math:`i`

    The ideal :math:`IDCG(i)` is the same sum over the items sorted by real rating.

    .. math::
        nDCG(i) = \\frac {DCG(i)}{IDCG(i)}

    Items with equal ratings are ranked by ascending item id.
    Users without predictions are skipped. If the ideal gain is zero
    the user gets a non-finite score, which is averaged as is.

    Metric is averaged by users.

    .. math::
        nDCG = \\frac {\\sum_{i=1}^{N}nDCG(i)}{N}

    >>> from rateval.data import build_test_users
    >>> ground_truth = {1: [(1, 5.0), (2, 3.0), (3, 1.0)], 2: [(4, 4.0), (5, 2.0)], 3: [(6, 5.0)]}
    >>> predictions = {1: [(1, 4.5), (2, 2.0), (3, 3.0)], 2: [(4, 3.9), (5, 3.1)]}
    >>> users = build_test_users(ground_truth, predictions)
    >>> metric = NDCGPredictMetric()
    >>> context = metric.create_context()
    >>> round(metric.measure_user(users[0], context).value, 6)
    0.914477
    >>> metric.measure_user(users[1], context)
    MetricResult(column='nDCG', value=1.0)
    >>> metric.measure_user(users[2], context) is None
    True
    >>> round(metric.get_results(context).value, 6)
    0.957239
    """

    @property
    def columns(self) -> List[str]:
        return [NDCG_COLUMN]

    def create_context(self) -> MeanAccumulator:
        return MeanAccumulator()

    def measure_user(self, user: TestUser, context: MeanAccumulator) -> Optional[MetricResult]:
        predictions = user.predictions
        if predictions is None:
            return None

        ratings = user.test_ratings
        ideal = ratings.keys_by_value(descending=True)
        actual = predictions.keys_by_value(descending=True)
        ideal_gain = compute_dcg(ideal, ratings)
        gain = compute_dcg(actual, ratings)
        with np.errstate(divide="ignore", invalid="ignore"):
            score = float(np.float64(gain) / np.float64(ideal_gain))
        if ideal_gain == 0.0:
            logger.debug("Zero ideal gain for user %s, nDCG is %s", user.query_id, score)
        context.add(score)
        return MetricResult(NDCG_COLUMN, score)

    def get_results(self, context: MeanAccumulator) -> MetricResult:
        return MetricResult(NDCG_COLUMN, context.mean)
