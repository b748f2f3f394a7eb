"""Hungarian algorithm for maximum-weight square assignment."""

from __future__ import annotations

import math
from collections.abc import Sequence

__all__ = ["Hungarian"]


class Hungarian:
    """Maximise the total score of a perfect assignment on an n x n matrix.

    ``score_matrix[i][j]`` is the score of pairing left i with right j.
    """

    def __init__(self, score_matrix: Sequence[Sequence[int]]) -> None:
        if not score_matrix:
            raise ValueError("score matrix must not be empty")
        n = len(score_matrix)
        if any(len(row) != n for row in score_matrix):
            raise ValueError("score matrix must be square")
        self._n = n
        self._scores = [list(row) for row in score_matrix]
        self._cost = [[-value for value in row] for row in self._scores]
        self.max_score = 0
        self.assignment: list[int] = []

    def solve(self) -> None:
        """Compute the optimal assignment and its total score."""
        n = self._n
        cost = self._cost
        u = [0] * (n + 1)
        v = [0] * (n + 1)
        p = [0] * (n + 1)  # p[j]: row assigned to column j (1-based, 0 = none)
        way = [0] * (n + 1)

        for i in range(1, n + 1):
            p[0] = i
            j0 = 0
            minv = [math.inf] * (n + 1)
            used = [False] * (n + 1)

            while True:
                used[j0] = True
                i0 = p[j0]
                row = cost[i0 - 1]
                delta = math.inf
                j1 = -1
                for j in range(1, n + 1):
                    if used[j]:
                        continue
                    cur = row[j - 1] - u[i0] - v[j]
                    if cur < minv[j]:
                        minv[j] = cur
                        way[j] = j0
                    if minv[j] < delta:
                        delta = minv[j]
                        j1 = j
                for j in range(n + 1):
                    if used[j]:
                        u[p[j]] += delta
                        v[j] -= delta
                    else:
                        minv[j] -= delta
                j0 = j1
                if p[j0] == 0:
                    break

            while j0 != 0:
                j1 = way[j0]
                p[j0] = p[j1]
                j0 = j1

        assignment = [-1] * n
        for j, row_index in enumerate(p[1:], start=0):
            if row_index != 0:
                assignment[row_index - 1] = j

        self.assignment = assignment
        self.max_score = sum(self._scores[i][j] for i, j in enumerate(assignment))