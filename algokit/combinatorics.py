"""Factorial tables and binomial-type counts modulo a prime."""

from __future__ import annotations


class Combinatorics:
    """Factorials and inverse factorials of ``0 .. n-1`` modulo ``mod``.

    Every entry of the table must be invertible, which holds when ``mod`` is a
    prime larger than ``n - 1``.
    """

    def __init__(self, n: int, mod: int) -> None:
        if n < 1:
            raise ValueError(f"table size must be positive, got {n}")
        if mod < 2:
            raise ValueError(f"modulus must be at least 2, got {mod}")
        self.mod = mod
        fact = [1] * n
        for i in range(1, n):
            fact[i] = fact[i - 1] * i % mod
        inv = [0] * n
        try:
            inv[-1] = pow(fact[-1], -1, mod)
        except ValueError as exc:
            raise ValueError(f"{n - 1}! is not invertible modulo {mod}") from exc
        for i in range(n - 1, 0, -1):
            inv[i - 1] = inv[i] * i % mod
        self._fact = fact
        self._inv_fact = inv

    def __len__(self) -> int:
        return len(self._fact)

    def _check(self, n: int) -> int:
        if not 0 <= n < len(self._fact):
            raise IndexError(f"{n} outside table of size {len(self._fact)}")
        return n

    def fact(self, n: int) -> int:
        """``n!``, or 0 for negative ``n``."""
        return 0 if n < 0 else self._fact[self._check(n)]

    def inv_fact(self, n: int) -> int:
        """``1 / n!``, or 0 for negative ``n``."""
        return 0 if n < 0 else self._inv_fact[self._check(n)]

    def choose(self, n: int, r: int) -> int:
        """Binomial coefficient ``C(n, r)``; 0 when ``r`` is outside ``[0, n]``."""
        if r < 0 or r > n:
            return 0
        return self.fact(n) * self._inv_fact[r] * self._inv_fact[n - r] % self.mod

    def inv_choose(self, n: int, r: int) -> int:
        """``1 / C(n, r)``; 0 when ``r`` is outside ``[0, n]``."""
        if r < 0 or r > n:
            return 0
        return self.inv_fact(n) * self._fact[r] * self._fact[n - r] % self.mod

    def permute(self, n: int, r: int) -> int:
        """Number of ordered selections ``n! / (n - r)!``; 0 when out of range."""
        if r < 0 or r > n:
            return 0
        return self.fact(n) * self._inv_fact[n - r] % self.mod

    def inv_permute(self, n: int, r: int) -> int:
        """``(n - r)! / n!``; 0 when out of range."""
        if r < 0 or r > n:
            return 0
        return self.inv_fact(n) * self._fact[n - r] % self.mod

    def catalan(self, n: int, m: int | None = None, k: int = 0) -> int:
        """Catalan counts.

        With ``n`` alone: the ``n``-th Catalan number. With ``m`` (and ``k``): the
        number of arrangements of ``n`` "+1" and ``m`` "-1" steps, starting at
        height ``k``, whose running sum never drops below zero.
        """
        if m is None:
            if n < 0:
                return 0
            self._check(2 * n)
            self._check(n + 1)
            return self._fact[2 * n] * self._inv_fact[n + 1] * self._inv_fact[n] % self.mod
        if m > n + k:
            return 0
        return (self.choose(n + m, m) - self.choose(n + m, m - k - 1)) % self.mod

    def inv_catalan(self, n: int) -> int:
        """Inverse of the ``n``-th Catalan number; 0 for negative ``n``."""
        if n < 0:
            return 0
        self._check(2 * n)
        self._check(n + 1)
        return self._inv_fact[2 * n] * self._fact[n + 1] * self._fact[n] % self.mod