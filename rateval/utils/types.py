from typing import Dict, Union

from pandas import DataFrame as PandasDataFrame
from polars import DataFrame as PolarsDataFrame
from typing_extensions import TypeAlias

DataFrameLike: TypeAlias = Union[PandasDataFrame, PolarsDataFrame]
RatingsLike: TypeAlias = Union[DataFrameLike, Dict]
NumType = Union[int, float]
