"""Edmonds' blossom algorithm: maximum cardinality matching on a general graph."""

from __future__ import annotations

from collections import deque

__all__ = ["Blossom"]

_UNLABELLED, _EVEN, _ODD = 0, 1, -1


class Blossom:
    """Maximum matching among people 0..num_people-1; anyone may match anyone."""

    def __init__(self, num_people: int) -> None:
        if num_people < 0:
            raise ValueError("num_people must be non-negative")
        self._n = num_people
        self._adj: list[list[int]] = [[] for _ in range(num_people)]
        self._match = [-1] * num_people

    @property
    def matching(self) -> list[int]:
        """``matching[i] = j`` after :meth:`max_matching`, or -1 if i is unmatched."""
        return list(self._match)

    def add_compatible_pair(self, a: int, b: int) -> None:
        """Add an undirected compatibility edge between ``a`` and ``b``."""
        for vertex in (a, b):
            if not 0 <= vertex < self._n:
                raise IndexError(f"vertex {vertex} out of range")
        if a == b:
            raise ValueError("a person cannot be paired with themselves")
        self._adj[a].append(b)
        self._adj[b].append(a)

    def _augment(self, s: int) -> bool:
        """Search for an augmenting path from free vertex ``s`` and apply it."""
        n = self._n
        match = self._match
        label = [_UNLABELLED] * n
        pred = [-1] * n
        base = list(range(n))

        label[s] = _EVEN
        queue = deque([s])

        def lowest_common_ancestor(a: int, b: int) -> int:
            visited = [False] * n
            while True:
                a = base[a]
                visited[a] = True
                if a == s:
                    break
                a = base[pred[match[a]]]
            while True:
                b = base[b]
                if visited[b]:
                    return b
                b = base[pred[match[b]]]

        def mark_path(v: int, root: int, child: int) -> None:
            while base[v] != root:
                base[v] = root
                base[match[v]] = root
                prev = pred[v]
                pred[v] = child
                child = match[v]
                v = prev
                if label[v] != _EVEN:
                    label[v] = _EVEN
                    queue.append(v)

        while queue:
            v = queue.popleft()
            for u in self._adj[v]:
                if base[v] == base[u] or label[u] == _ODD:
                    continue
                if label[u] == _UNLABELLED:
                    if match[u] == -1:
                        pred[u] = v
                        cur = u
                        while cur != -1:
                            pv = pred[cur]
                            ppv = match[pv]
                            match[cur] = pv
                            match[pv] = cur
                            cur = ppv
                        return True
                    label[u] = _ODD
                    pred[u] = v
                    w = match[u]
                    label[w] = _EVEN
                    pred[w] = u
                    queue.append(w)
                else:
                    root = lowest_common_ancestor(v, u)
                    mark_path(v, root, u)
                    mark_path(u, root, v)
        return False

    def max_matching(self) -> int:
        """Compute the matching from scratch and return the number of couples."""
        self._match = [-1] * self._n
        result = 0
        for v in range(self._n):
            if self._match[v] == -1 and self._augment(v):
                result += 1
        return result