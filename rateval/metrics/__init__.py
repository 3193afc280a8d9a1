"""
Metrics evaluate rating predictions user by user.
For every user the metric gets held-out ratings and predicted ratings
as ``rateval.data.SparseVector`` objects wrapped in ``rateval.data.TestUser``.

A metric never stores anything between runs. Each evaluation run
(one algorithm on one data set) creates a context with ``Metric.create_context``,
passes it to ``Metric.measure_user`` for every test user
and reads the final value with ``Metric.get_results``.
Per-user and final values are ``MetricResult`` records
labeled with the report column of the metric.

Users without predictions are skipped and do not take part in averaging.

To evaluate several models on the same held-out ratings use ``Experiment``,
it keeps the final and per-user values in Pandas DataFrames.

For each metric, a formula for its calculation is given, because this is
important for the correct comparison of algorithms.
"""

from .accumulator import MeanAccumulator
from .base_metric import Metric
from .experiment import Experiment
from .ndcg import NDCG_COLUMN, NDCGPredictMetric, compute_dcg
from .result import MetricResult

__all__ = [
    "Experiment",
    "MeanAccumulator",
    "Metric",
    "MetricResult",
    "NDCGPredictMetric",
    "NDCG_COLUMN",
    "compute_dcg",
]
