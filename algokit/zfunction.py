"""The Z-function of a sequence and quantities derived from it."""

from __future__ import annotations

from typing import Any, Sequence


def z_function(s: Sequence[Any]) -> list[int]:
    """``z[i]`` is the length of the longest common prefix of ``s`` and ``s[i:]``.

    ``z[0]`` is 0 by convention.
    """
    n = len(s)
    z = [0] * n
    left = right = 0
    for i in range(1, n):
        k = 0 if i > right else min(right - i + 1, z[i - left])
        while i + k < n and s[k] == s[i + k]:
            k += 1
        z[i] = k
        if i + k - 1 > right:
            left, right = i, i + k - 1
    return z


def period(z: Sequence[int], n: int | None = None) -> int:
    """Shortest ``p`` dividing ``n`` such that the first ``n`` items repeat with period ``p``."""
    if n is None:
        n = len(z)
    for i in range(1, n):
        if n % i == 0 and i + z[i] == n:
            return i
    return n


def count_prefix(z: Sequence[int]) -> list[int]:
    """Entry ``k`` is the number of occurrences of the prefix of length ``k + 1``."""
    n = len(z)
    counts = [0] * (n + 1)
    for value in z[1:]:
        if value >= 1:
            counts[value - 1] += 1
    counts[n] += 1
    for i in range(n - 1, -1, -1):
        counts[i] += counts[i + 1]
    return counts[:n]