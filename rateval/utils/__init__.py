from .logger import get_logger, logger_with_settings
from .types import DataFrameLike, NumType, PandasDataFrame, PolarsDataFrame

__all__ = [
    "DataFrameLike",
    "NumType",
    "PandasDataFrame",
    "PolarsDataFrame",
    "get_logger",
    "logger_with_settings",
]
