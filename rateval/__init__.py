""" Rating prediction evaluation library """
from . import data, metrics, utils

__version__ = "0.1.0"

__all__ = ["data", "metrics", "utils"]
