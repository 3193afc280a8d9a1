from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

import numpy as np

from rateval.utils import NumType


class SparseVector(Mapping[int, float]):
    """
    Immutable mapping from item identifier to a real value (rating or predicted rating).

    Keys are stored in insertion order, missing keys read as ``0.0`` through :meth:`get`.

    >>> vector = SparseVector([10, 20, 30], [3.0, 5.0, 3.0])
    >>> vector.get(20)
    5.0
    >>> vector.get(40)
    0.0
    >>> vector.keys_by_value()
    [20, 10, 30]
    """

    def __init__(self, keys: Iterable[int], values: Iterable[NumType]) -> None:
        """
        :param keys: item identifiers, must be unique.
        :param values: values of the items, in the same order as ``keys``.
        """
        self._keys = np.asarray(list(keys), dtype=np.int64)
        self._values = np.asarray(list(values), dtype=np.float64)
        if self._keys.shape != self._values.shape:
            msg = f"Got {len(self._keys)} keys and {len(self._values)} values"
            raise ValueError(msg)

        self._index: Dict[int, int] = {}
        for position, key in enumerate(self._keys.tolist()):
            if key in self._index:
                msg = f"Duplicated key {key} in sparse vector"
                raise ValueError(msg)
            self._index[key] = position

        self._keys.setflags(write=False)
        self._values.setflags(write=False)

    @classmethod
    def from_dict(cls, mapping: Mapping[int, NumType]) -> "SparseVector":
        """
        Create vector from ``{item_id: value}`` mapping.
        """
        return cls(mapping.keys(), mapping.values())

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, NumType]]) -> "SparseVector":
        """
        Create vector from ``(item_id, value)`` pairs.
        """
        pairs = list(pairs)
        return cls([key for key, _ in pairs], [value for _, value in pairs])

    @classmethod
    def empty(cls) -> "SparseVector":
        return cls([], [])

    def __getitem__(self, key: int) -> float:
        return float(self._values[self._index[key]])

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[int]:
        return iter(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    __hash__ = None

    def __repr__(self) -> str:
        content = ", ".join(f"{key}: {value}" for key, value in self.items())
        return f"{type(self).__name__}({{{content}}})"

    def get(self, key: int, default: float = 0.0) -> float:
        """
        Value of ``key`` or ``default`` if the vector has no entry for it.
        """
        position = self._index.get(key)
        if position is None:
            return default
        return float(self._values[position])

    def keys_by_value(self, descending: bool = True) -> List[int]:
        """
        Keys ordered by their values.
        Items with equal values are always ordered by ascending item identifier.

        :param descending: put the highest value first.
        :return: list of item identifiers
        """
        if not self._index:
            return []
        values = -self._values if descending else self._values
        order = np.lexsort((self._keys, values))
        return self._keys[order].tolist()

    @property
    def keys_array(self) -> np.ndarray:
        """Read-only array of item identifiers"""
        return self._keys

    @property
    def values_array(self) -> np.ndarray:
        """Read-only array of values"""
        return self._values
