"""Gale-Shapley stable matching, proposer-optimal for group A."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

__all__ = ["GaleShapley"]


def _rank_table(prefs: Sequence[Sequence[int]], n: int, group: str) -> list[list[int]]:
    """Build rank[i][j] = position of j in person i's preference list."""
    table = []
    for person, order in enumerate(prefs):
        if len(order) != n or sorted(order) != list(range(n)):
            raise ValueError(
                f"group {group} person {person}: preferences must be a permutation of 0..{n - 1}"
            )
        ranks = [0] * n
        for rank, other in enumerate(order):
            ranks[other] = rank
        table.append(ranks)
    return table


class GaleShapley:
    """Stable matching between two equally sized groups.

    ``group_a_prefs[i]`` is person i's strictly ordered list of group-B indices;
    ``group_b_prefs[j]`` likewise lists group-A indices. Group A proposes.
    """

    def __init__(
        self,
        group_a_prefs: Sequence[Sequence[int]],
        group_b_prefs: Sequence[Sequence[int]],
    ) -> None:
        n = len(group_a_prefs)
        if len(group_b_prefs) != n:
            raise ValueError("both groups must have the same size")
        self._n = n
        self._prefs_a = [list(order) for order in group_a_prefs]
        self._rank_a = _rank_table(group_a_prefs, n, "A")
        self._rank_b = _rank_table(group_b_prefs, n, "B")
        self._match_a: list[int] = []
        self._match_b: list[int] = []
        self._has_run = False

    @property
    def matching_a(self) -> list[int]:
        """``matching_a[i] = j``: A-person i is matched with B-person j (-1 if none)."""
        return list(self._match_a)

    @property
    def matching_b(self) -> list[int]:
        """``matching_b[j] = i``: B-person j is matched with A-person i (-1 if none)."""
        return list(self._match_b)

    @property
    def matching(self) -> list[int]:
        """Alias for :attr:`matching_a`."""
        return self.matching_a

    def run(self) -> None:
        """Compute the matching from scratch; safe to call repeatedly."""
        n = self._n
        match_a = [-1] * n
        match_b = [-1] * n
        next_choice = [0] * n
        free = deque(range(n))

        while free:
            a = free.popleft()
            b = self._prefs_a[a][next_choice[a]]
            next_choice[a] += 1

            current = match_b[b]
            if current == -1:
                match_a[a] = b
                match_b[b] = a
            elif self._rank_b[b][a] < self._rank_b[b][current]:
                match_a[a] = b
                match_b[b] = a
                match_a[current] = -1
                free.append(current)
            else:
                free.append(a)

        self._match_a = match_a
        self._match_b = match_b
        self._has_run = True

    def is_stable(self) -> bool:
        """Return True iff no blocking pair exists in the current matching."""
        if not self._has_run:
            raise RuntimeError("is_stable() called before run()")

        for a, partner in enumerate(self._match_a):
            if partner == -1:
                continue
            ranks_a = self._rank_a[a]
            for b, b_partner in enumerate(self._match_b):
                if b == partner or b_partner == -1:
                    continue
                if ranks_a[b] >= ranks_a[partner]:
                    continue
                if self._rank_b[b][a] < self._rank_b[b][b_partner]:
                    return False
        return True