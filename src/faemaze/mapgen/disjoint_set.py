# src/faemaze/mapgen/disjoint_set.py
# Union–find over cell ids, used by the Kruskal carve.

from dataclasses import dataclass, field
from typing import List

@dataclass
class DisjointSet:
    parent: List[int]
    rank: List[int] = field(default_factory=list)

    def __post_init__(self):
        if not self.rank:
            self.rank = [0] * len(self.parent)

    @classmethod
    def of_size(cls, count: int) -> "DisjointSet":
        return cls(parent=list(range(count)), rank=[0] * count)

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, x: int) -> int:
        """
        Root of x's component. Two passes: climb to the root, then point every
        node on the way directly at it (no recursion, so chain length is unbounded).
        """
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the components of x and y. Lower rank goes under higher rank;
        on a tie y's root goes under x's root and x's root gains a rank.
        Returns False when they were already joined.
        """
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return False
        if self.rank[rx] < self.rank[ry]:
            self.parent[rx] = ry
        elif self.rank[rx] > self.rank[ry]:
            self.parent[ry] = rx
        else:
            self.parent[ry] = rx
            self.rank[rx] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)

    def component_count(self) -> int:
        return sum(1 for i in range(len(self.parent)) if self.find(i) == i)
