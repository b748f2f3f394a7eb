"""Hopcroft-Karp maximum bipartite matching."""

from __future__ import annotations

import math
from collections import deque

__all__ = ["HopcroftKarp"]


class HopcroftKarp:
    """Maximum matching between left vertices 0..left_size-1 and right 0..right_size-1."""

    def __init__(self, left_size: int, right_size: int) -> None:
        if left_size < 0 or right_size < 0:
            raise ValueError("sizes must be non-negative")
        self._left = left_size
        self._right = right_size
        self._adj: list[list[int]] = [[] for _ in range(left_size)]
        self._match_left = [-1] * left_size
        self._match_right = [-1] * right_size
        self._dist: list[float] = [0] * left_size
        self._iter = [0] * left_size

    @property
    def matching(self) -> list[int]:
        """``matching[a] = b`` after :meth:`max_matching`, or -1 if a is unmatched."""
        return list(self._match_left)

    def add_compatible_pair(self, a: int, b: int) -> None:
        """Add an edge between left vertex ``a`` and right vertex ``b``."""
        if not 0 <= a < self._left:
            raise IndexError(f"left vertex {a} out of range")
        if not 0 <= b < self._right:
            raise IndexError(f"right vertex {b} out of range")
        self._adj[a].append(b)

    def _bfs(self) -> bool:
        queue: deque[int] = deque()
        for a, partner in enumerate(self._match_left):
            if partner == -1:
                self._dist[a] = 0
                queue.append(a)
            else:
                self._dist[a] = math.inf

        found = False
        while queue:
            a = queue.popleft()
            for b in self._adj[a]:
                a2 = self._match_right[b]
                if a2 == -1:
                    found = True
                elif self._dist[a2] == math.inf:
                    self._dist[a2] = self._dist[a] + 1
                    queue.append(a2)
        return found

    def _dfs(self, a: int) -> bool:
        edges = self._adj[a]
        while self._iter[a] < len(edges):
            b = edges[self._iter[a]]
            a2 = self._match_right[b]
            if a2 == -1 or (self._dist[a2] == self._dist[a] + 1 and self._dfs(a2)):
                self._match_left[a] = b
                self._match_right[b] = a
                return True
            self._iter[a] += 1
        self._dist[a] = math.inf
        return False

    def max_matching(self) -> int:
        """Compute the matching from scratch and return its size."""
        self._match_left = [-1] * self._left
        self._match_right = [-1] * self._right

        size = 0
        while self._bfs():
            self._iter = [0] * self._left
            for a in range(self._left):
                if self._match_left[a] == -1 and self._dfs(a):
                    size += 1
        return size