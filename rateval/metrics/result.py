from typing import Dict, NamedTuple


class MetricResult(NamedTuple):
    """
    Single metric value labeled with its report column.
    Per-user and overall results share this record so they are rendered the same way.
    """

    column: str
    value: float

    def as_dict(self) -> Dict[str, float]:
        return {self.column: self.value}
