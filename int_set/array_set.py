import logging
import operator
import sys
from typing import Iterable, Optional, TextIO

import numpy as np

from int_set import linear_scan


logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 1
GROWTH_FACTOR = 1.5
FIELD_SEPARATOR = '  '

INT_MIN = int(np.iinfo(np.int32).min)
INT_MAX = int(np.iinfo(np.int32).max)


def _allocate_(capacity: int) -> np.ndarray:
    """
    :param capacity: The number of slots to allocate.
    :return: A new, uninitialized int32 buffer of the given length.

    Running out of storage is not something callers can recover from, so a failed allocation logs the
    failure and terminates the process. The termination travels as SystemExit (exit status 1), which
    unwinds through finally blocks on its way out.
    """
    try:
        return np.empty(capacity, dtype=np.int32)
    except (MemoryError, ValueError) as e:
        logger.critical(f'Allocation of {capacity} slots failed: {e}')
        sys.exit(f'Allocation failed: could not obtain storage for {capacity} integers.')


def _as_int_(value) -> int:
    """
    :return: value as a plain int. Raises TypeError for anything that is not an integer (floats included).
    """
    return operator.index(value)


def _in_range_(value: int) -> bool:
    return INT_MIN <= value <= INT_MAX


def _check_int_set_(other):
    if not isinstance(other, IntSet):
        raise TypeError(f"expected an IntSet, got {type(other).__name__}")


class IntSet:
    """
    A set of distinct signed 32-bit integers stored contiguously in a growable numpy buffer.

    Members live in data[0:used] in the order they became members; a value that is removed and added
    again goes to the end. Slots from used up to capacity hold garbage.

    >>> s = IntSet.from_values([1, 2, 3])
    >>> s.remove(2)
    True
    >>> str(s)
    '1, 3'
    """
    _data: np.ndarray
    _capacity: int
    _used: int

    def __init__(self, capacity=DEFAULT_CAPACITY):
        if capacity < 1:
            capacity = DEFAULT_CAPACITY

        self._data = _allocate_(capacity)
        self._capacity = capacity
        self._used = 0

    @classmethod
    def copy_of(cls, source: 'IntSet') -> 'IntSet':
        int_set = cls(source._capacity)
        int_set._data[:source._used] = source._data[:source._used]
        int_set._used = source._used

        return int_set

    @classmethod
    def from_values(cls, values: Iterable[int], capacity=DEFAULT_CAPACITY) -> 'IntSet':
        int_set = cls(capacity)

        for value in values:
            int_set.add(value)

        return int_set

    def __copy__(self):
        return IntSet.copy_of(self)

    def __deepcopy__(self, memo):
        return IntSet.copy_of(self)

    def assign(self, source: 'IntSet') -> 'IntSet':
        """
        Replace the contents and capacity of this set with a copy of source's.

        :param source: The set to copy from. Assigning a set to itself changes nothing.
        :return: This set.
        """
        if source is self:
            return self

        data = _allocate_(source._capacity)
        data[:source._used] = source._data[:source._used]

        self._data = data
        self._capacity = source._capacity
        self._used = source._used

        return self

    @property
    def capacity(self) -> int:
        return self._capacity

    def resize(self, new_capacity: int):
        """
        :param new_capacity: The requested capacity.

        The capacity never drops below the number of members, and never below 1. Members keep their
        positions.
        """
        if new_capacity < self._used:
            new_capacity = self._used

        if new_capacity < 1:
            new_capacity = 1

        data = _allocate_(new_capacity)
        data[:self._used] = self._data[:self._used]

        logger.debug(f'Resized from {self._capacity} to {new_capacity} slots ({self._used} used)')

        self._data = data
        self._capacity = new_capacity

    def _grow_(self):
        if self._capacity > 1:
            self.resize(int(self._capacity * GROWTH_FACTOR))
        else:
            self.resize(self._capacity + 1)

    def _values_(self):
        return self._data[:self._used].tolist()

    def size(self) -> int:
        return self._used

    def __len__(self):
        return self._used

    def is_empty(self) -> bool:
        return self._used == 0

    def contains(self, value: int) -> bool:
        value = _as_int_(value)

        if self._used == 0 or not _in_range_(value):
            return False

        return linear_scan.find(self._data, self._used, value) >= 0

    def __contains__(self, item):
        return self.contains(item)

    def is_subset_of(self, other: 'IntSet') -> bool:
        """
        :return: True if every member of this set is a member of other. The empty set is a subset of
            every set.
        """
        _check_int_set_(other)

        return linear_scan.all_found(self._data, self._used, other._data, other._used)

    def __le__(self, other):
        if not isinstance(other, IntSet):
            return NotImplemented

        return self.is_subset_of(other)

    def __eq__(self, other):
        if not isinstance(other, IntSet):
            return NotImplemented

        if self._used != other._used:
            return False

        return self.is_subset_of(other) and other.is_subset_of(self)

    def add(self, value: int) -> bool:
        """
        :param value: The integer to insert.
        :return: True if value became a member, False if it already was one.
        """
        value = _as_int_(value)

        if not _in_range_(value):
            raise OverflowError(f'{value} does not fit in a signed 32-bit integer')

        if self.contains(value):
            return False

        if self._used == self._capacity:
            self._grow_()

        self._data[self._used] = value
        self._used += 1

        return True

    def remove(self, value: int) -> bool:
        """
        :param value: The integer to take out.
        :return: True if value was a member and got removed, False otherwise.
        """
        value = _as_int_(value)

        if self._used == 0 or not _in_range_(value):
            return False

        index = linear_scan.find(self._data, self._used, value)

        if index < 0:
            return False

        self._data[index:self._used - 1] = self._data[index + 1:self._used]
        self._used -= 1

        return True

    def reset(self):
        self._used = 0

    def union_with(self, other: 'IntSet') -> 'IntSet':
        """
        :return: A new set holding this set's members followed by other's members not already here.
        """
        _check_int_set_(other)

        union = IntSet.copy_of(self)
        total = self._used + other._used

        if total > union._capacity:
            if union._capacity > 1:
                union.resize(int(total * GROWTH_FACTOR))
            else:
                union.resize(total + 1)

        for value in other._values_():
            union.add(value)

        return union

    def intersect(self, other: 'IntSet') -> 'IntSet':
        _check_int_set_(other)

        intersection = IntSet()

        for value in self._values_():
            if other.contains(value):
                intersection.add(value)

        return intersection

    def subtract(self, other: 'IntSet') -> 'IntSet':
        _check_int_set_(other)

        difference = IntSet.copy_of(self)

        for value in self._values_():
            if other.contains(value):
                difference.remove(value)

        return difference

    def __or__(self, other):
        return self.union_with(other)

    def __add__(self, other):
        return self.union_with(other)

    def __and__(self, other):
        return self.intersect(other)

    def __sub__(self, other):
        return self.subtract(other)

    def dump(self, sink: Optional[TextIO] = None):
        """
        Write the members, in storage order, separated by FIELD_SEPARATOR. Nothing is written for an
        empty set.

        :param sink: Any object with a write(str) method. Defaults to stdout.
        """
        if sink is None:
            sink = sys.stdout

        if self._used > 0:
            sink.write(FIELD_SEPARATOR.join(str(v) for v in self._values_()))

    def __str__(self):
        return ", ".join(str(v) for v in self._values_())

    def __repr__(self):
        return f"IntSet({self._values_()}, cap={self._capacity})"
