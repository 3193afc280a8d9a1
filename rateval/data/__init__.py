from .sparse_vector import SparseVector
from .test_user import TestUser, build_test_users

__all__ = [
    "SparseVector",
    "TestUser",
    "build_test_users",
]
