class MeanAccumulator:
    """
    Running arithmetic mean of the values seen so far.

    Values are not validated, a single ``nan`` or ``inf`` makes the mean non-finite.
    Not thread-safe, calls to ``add`` must be serialized by the caller.

    >>> acc = MeanAccumulator()
    >>> acc.add(1.0)
    >>> acc.add(0.5)
    >>> acc.mean
    0.75
    """

    def __init__(self) -> None:
        self._total = 0.0
        self._count = 0

    def add(self, value: float) -> None:
        self._total += value
        self._count += 1

    @property
    def count(self) -> int:
        return self._count

    @property
    def total(self) -> float:
        return self._total

    @property
    def mean(self) -> float:
        """``nan`` if nothing was added"""
        if self._count == 0:
            return float("nan")
        return self._total / self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}(count={self._count}, total={self._total})"
