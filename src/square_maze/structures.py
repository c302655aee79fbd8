"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import OutOfRangeIndexError


@dataclass
class DisjointSet:
    """Union-find over the elements ``0..len-1`` with union by size.

    ``values[i]`` is the parent index of ``i``, or minus the tree size when
    ``i`` is a root.
    """

    count: int = 0
    values: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("count must be non-negative")
        self.values = [-1] * self.count

    def __len__(self) -> int:
        return len(self.values)

    def add_elements(self, count: int) -> None:
        """Append `count` new singleton roots."""

        if count <= 0:
            return
        self.values.extend([-1] * count)
        self.count = len(self.values)

    def find(self, elem: int) -> int:
        self._check(elem)
        root = elem
        while self.values[root] >= 0:
            root = self.values[root]
        while self.values[elem] >= 0 and self.values[elem] != root:
            parent = self.values[elem]
            self.values[elem] = root
            elem = parent
        return root

    def union(self, a: int, b: int) -> None:
        """Merge the trees holding `a` and `b`.

        The smaller tree is hung under the larger one. When both are the same
        size the tree holding `b` goes under the root of `a`, which keeps seeded
        mazes reproducible.
        """

        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return
        if -self.values[root_a] >= -self.values[root_b]:
            self.values[root_a] += self.values[root_b]
            self.values[root_b] = root_a
        else:
            self.values[root_b] += self.values[root_a]
            self.values[root_a] = root_b

    def size(self, elem: int) -> int:
        return -self.values[self.find(elem)]

    def value(self, elem: int) -> int:
        """Return the raw stored entry for `elem` without compressing anything."""

        self._check(elem)
        return self.values[elem]

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def _check(self, elem: int) -> None:
        if not 0 <= elem < len(self.values):
            raise OutOfRangeIndexError(f"element {elem} outside 0..{len(self.values) - 1}")
