# © 2024 Intel Corporation
# SPDX-License-Identifier: MPL-2.0

from collections.abc import Hashable, Iterable, Mapping
from itertools import chain
from typing import Generic, TypeVar

__all__ = (
    'Set',
)

T = TypeVar('T', bound=Hashable)

class Set(Generic[T]):
    '''Mathematical set of hashable elements, backed by a dict whose
    values are all None

    Iteration order is unspecified. CPython happens to yield elements
    in insertion order, but callers must not rely on it; compare the
    result of to_sequence() unordered.

    Instances are not thread safe. Code that shares a Set between
    threads must hold its own lock around any compound operation.

    '''
    __slots__ = ['_d', '__iter__', '__contains__', '__len__']
    def __init__(self, els: Iterable[T] = ()):
        d = dict.fromkeys(els)
        self._d = d
        self.__iter__ = d.__iter__
        self.__contains__ = d.__contains__
        self.__len__ = d.__len__

    @classmethod
    def empty(cls) -> 'Set[T]':
        return cls()

    @classmethod
    def from_sequence(cls, seq: Iterable[T]) -> 'Set[T]':
        '''Set of the distinct elements of seq'''
        return cls(seq)

    @classmethod
    def from_keys_of(cls, mapping: Mapping[T, object]) -> 'Set[T]':
        '''Set of the keys of mapping; the values are ignored'''
        return cls(mapping.keys())

    def __repr__(self):
        if self._d:
            return f"Set([{', '.join(map(repr, self._d))}])"
        else:
            return 'Set()'

    def __str__(self):
        return self.__repr__()

    def __eq__(self, other):
        if isinstance(other, Set):
            return self.equals(other)
        return self._d.keys().__eq__(other)

    __hash__ = None

    def __le__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_subset_of(other)

    def __lt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.is_proper_subset_of(other)

    def __ge__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return other.is_subset_of(self)

    def __gt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return other.is_proper_subset_of(self)

    def __or__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    def to_sequence(self) -> list[T]:
        return list(self._d)

    def size(self) -> int:
        return len(self._d)

    def contains(self, x: T) -> bool:
        return x in self._d

    def equals(self, other: 'Set[T]') -> bool:
        if len(self._d) != len(other):
            return False
        return all(x in other for x in self._d)

    def is_subset_of(self, other: 'Set[T]') -> bool:
        '''True if every element of self is in other. Equal sets are
        subsets of each other.'''
        if len(self._d) > len(other):
            return False
        return all(x in other for x in self._d)

    def is_proper_subset_of(self, other: 'Set[T]') -> bool:
        return len(self._d) < len(other) and self.is_subset_of(other)

    def add(self, x: T) -> None:
        self._d[x] = None

    def remove(self, x: T) -> None:
        # absent elements are ignored
        self._d.pop(x, None)

    def add_all(self, xs: Iterable[T]) -> None:
        self._d.update((x, None) for x in xs)

    def remove_all(self, xs: Iterable[T]) -> None:
        pop = self._d.pop
        for x in xs:
            pop(x, None)

    def union(self, other: 'Set[T]') -> 'Set[T]':
        return Set(chain(self._d, other))

    def intersection(self, other: 'Set[T]') -> 'Set[T]':
        # iterate over the smaller operand; membership in the other
        # is a dict lookup
        if len(other) < len(self._d):
            return Set(x for x in other if x in self._d)
        return Set(x for x in self._d if x in other)

    def difference(self, other: 'Set[T]') -> 'Set[T]':
        if len(self._d) == 0:
            return Set()
        return Set(x for x in self._d if x not in other)
