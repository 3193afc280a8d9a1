from abc import ABC, abstractmethod
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from rateval.data import TestUser

from .result import MetricResult

ContextType = TypeVar("ContextType")
MetricsReturnType = Dict[str, float]


class Metric(ABC, Generic[ContextType]):
    """
    Base class for metrics evaluated user by user.

    A metric owns no state between runs: everything collected during one evaluation run
    lives in the context created by :meth:`create_context`.
    The caller creates one context per algorithm run, passes it to :meth:`measure_user`
    for each test user and finally reads the aggregated value with :meth:`get_results`.
    """

    @property
    @abstractmethod
    def columns(self) -> List[str]:  # pragma: no cover
        """
        Labels of the result columns produced by the metric.
        """
        raise NotImplementedError()

    @abstractmethod
    def create_context(self) -> ContextType:  # pragma: no cover
        """
        Create the state accumulated during a single evaluation run.
        """
        raise NotImplementedError()

    @abstractmethod
    def measure_user(self, user: TestUser, context: ContextType) -> Optional[MetricResult]:  # pragma: no cover
        """
        Metric calculation for one user.

        :param user: held-out ratings and predictions of the user
        :param context: state of the current run
        :return: metric value for the user or ``None`` if the user is skipped
        """
        raise NotImplementedError()

    @abstractmethod
    def get_results(self, context: ContextType) -> MetricResult:  # pragma: no cover
        """
        Aggregated metric value of the run.
        """
        raise NotImplementedError()

    def __call__(self, users: Iterable[TestUser]) -> MetricsReturnType:
        """
        Compute metric over all given users within a fresh context.

        :param users: test users of the run
        :return: metric values
        """
        context = self.create_context()
        for user in users:
            self.measure_user(user, context)
        return self.get_results(context).as_dict()
