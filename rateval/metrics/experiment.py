import logging
from typing import Any, Dict, List

import numpy as np
import pandas as pd

from rateval.data import build_test_users
from rateval.utils.types import RatingsLike

from .base_metric import Metric

logger = logging.getLogger("rateval")


# pylint: disable=too-few-public-methods
class Experiment:
    """
    The class is designed for calculating, storing and comparing metrics
    of rating predictions from different models in the Pandas DataFrame format.

    Every model run gets its own metric contexts, users are measured one after another.
    Calculated metrics are available with ``results`` attribute,
    values for each user are available with ``user_results`` attribute.

    Example:

    >>> from rateval.metrics import NDCGPredictMetric
    >>> ground_truth = {1: [(1, 5.0), (2, 3.0), (3, 1.0)], 2: [(4, 4.0), (5, 2.0), (6, 1.0)]}
    >>> baseline = {1: [(1, 1.0), (2, 2.0), (3, 3.0)], 2: [(4, 3.0), (5, 2.0), (6, 1.0)]}
    >>> model = {1: [(1, 3.0), (2, 2.0), (3, 1.0)], 2: [(4, 3.0), (5, 2.0), (6, 1.0)]}
    >>> ex = Experiment([NDCGPredictMetric()], ground_truth)
    >>> ex.add_result("baseline", baseline)
    >>> ex.add_result("model", model)
    >>> ex.results["nDCG"].round(4).to_dict()
    {'baseline': 0.9145, 'model': 1.0}
    >>> ex.compare("baseline")["nDCG"].to_dict()
    {'baseline': '–', 'model': '9.35%'}
    """

    def __init__(
        self,
        metrics: List[Metric],
        ground_truth: RatingsLike,
        query_column: str = "query_id",
        item_column: str = "item_id",
        rating_column: str = "rating",
    ):
        """
        :param metrics: (list of metrics): List of metrics to be calculated.
        :param ground_truth: (Pandas DataFrame or Polars DataFrame or dict): held-out ratings.
            If DataFrame then it must contains query, item and rating columns.
            If dict then key represents query_ids, value represents list of tuple(item_id, rating).
        :param query_column: (str): The name of the user column.
        :param item_column: (str): The name of the item column.
        :param rating_column: (str): The name of the rating column.
        """
        columns = [column for metric in metrics for column in metric.columns]
        if len(columns) != len(set(columns)):
            msg = f"Metrics produce duplicated columns: {columns}"
            raise ValueError(msg)
        self._metrics = metrics
        self._ground_truth = ground_truth
        self._query_column = query_column
        self._item_column = item_column
        self._rating_column = rating_column
        self.results = pd.DataFrame()
        self.user_results = pd.DataFrame()

    def add_result(
        self,
        name: str,
        predictions: RatingsLike,
    ) -> None:
        """
        Calculate metrics for predictions

        :param name: name of the run to store in the resulting DataFrame
        :param predictions: (Pandas DataFrame or Polars DataFrame or dict): predicted ratings.
            Must have the same type as ``ground_truth``.
        """
        users = build_test_users(
            self._ground_truth,
            predictions,
            query_column=self._query_column,
            item_column=self._item_column,
            rating_column=self._rating_column,
        )
        contexts = [metric.create_context() for metric in self._metrics]
        rows: List[Dict[str, Any]] = []
        for user in users:
            row: Dict[str, Any] = {"run": name, self._query_column: user.query_id}
            for metric, context in zip(self._metrics, contexts):
                result = metric.measure_user(user, context)
                if result is None:
                    row.update({column: np.nan for column in metric.columns})
                else:
                    row[result.column] = result.value
            rows.append(row)

        for metric, context in zip(self._metrics, contexts):
            result = metric.get_results(context)
            self.results.at[name, result.column] = result.value
            if not np.isfinite(result.value):
                logger.warning("%s of run %s is %s", result.column, name, result.value)
        logger.info("Run %s: %d users evaluated", name, len(rows))

        self.results = self.results.astype(float)
        previous = [self.user_results[self.user_results["run"] != name]] if len(self.user_results) else []
        self.user_results = pd.concat(previous + [pd.DataFrame(rows)], ignore_index=True)

    # pylint: disable=not-an-iterable
    def compare(self, name: str) -> pd.DataFrame:
        """
        Show results as a percentage difference to record ``name``.

        :param name: name of the baseline record
        :return: results table in a percentage format
        """
        if name not in self.results.index:
            msg = f"No results for model {name}"
            raise ValueError(msg)
        data_frame = self.results.copy().astype(object)
        baseline = self.results.loc[name]
        for idx in data_frame.index:
            if idx != name:
                diff = self.results.loc[idx] / baseline - 1
                data_frame.loc[idx] = [str(round(v * 100, 2)) + "%" for v in diff]
            else:
                data_frame.loc[name] = ["–"] * len(baseline)
        return data_frame
