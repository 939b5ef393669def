"""Polynomial string hashing modulo the prime 2**64 - 2**32 + 1.

A ``PrefixHash`` stores the hash of every prefix of a sequence, so the hash of
any slice is available in O(1) and the longest common prefix of two slices in
O(log n). Several independent hashes can be run side by side with ``PairNum``.
"""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Iterable, Sequence, Union

MOD = 18446744069414584321


def _code(c: Any) -> Any:
    """Numeric value of one item of a hashed sequence."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


@total_ordering
class HashNum:
    """An integer modulo ``MOD``."""

    __slots__ = ("value",)

    def __init__(self, value: Union[int, "HashNum"] = 0) -> None:
        if isinstance(value, HashNum):
            self.value = value.value
        else:
            self.value = int(value) % MOD

    @staticmethod
    def _coerce(other: Any) -> "HashNum | None":
        if isinstance(other, HashNum):
            return other
        if isinstance(other, int):
            return HashNum(other)
        return None

    def __add__(self, other: Any) -> "HashNum":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return HashNum(self.value + o.value)

    __radd__ = __add__

    def __sub__(self, other: Any) -> "HashNum":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return HashNum(self.value - o.value)

    def __rsub__(self, other: Any) -> "HashNum":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return HashNum(o.value - self.value)

    def __mul__(self, other: Any) -> "HashNum":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return HashNum(self.value * o.value)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "HashNum":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        if o.value == 0:
            raise ZeroDivisionError("division by zero modulo MOD")
        return self * o.pow(MOD - 2)

    def __rtruediv__(self, other: Any) -> "HashNum":
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return o / self

    def pow(self, exponent: int) -> "HashNum":
        """``self`` raised to the non-negative power ``exponent``."""
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")
        return HashNum(pow(self.value, exponent, MOD))

    def __pow__(self, exponent: int) -> "HashNum":
        return self.pow(exponent)

    def __neg__(self) -> "HashNum":
        return HashNum(-self.value)

    def __pos__(self) -> "HashNum":
        return HashNum(self.value)

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self.value == o.value

    def __lt__(self, other: Any) -> bool:
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self.value < o.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __repr__(self) -> str:
        return f"HashNum({self.value})"


@total_ordering
class PairNum:
    """Two numbers combined component-wise, compared lexicographically."""

    __slots__ = ("first", "second")

    def __init__(self, first: Any, second: Any = None) -> None:
        if isinstance(first, PairNum) and second is None:
            self.first, self.second = first.first, first.second
        else:
            self.first = first
            self.second = first if second is None else second

    @staticmethod
    def _coerce(other: Any) -> "PairNum":
        return other if isinstance(other, PairNum) else PairNum(other)

    def __add__(self, other: Any) -> "PairNum":
        o = self._coerce(other)
        return PairNum(self.first + o.first, self.second + o.second)

    def __radd__(self, other: Any) -> "PairNum":
        return self._coerce(other) + self

    def __sub__(self, other: Any) -> "PairNum":
        o = self._coerce(other)
        return PairNum(self.first - o.first, self.second - o.second)

    def __rsub__(self, other: Any) -> "PairNum":
        return self._coerce(other) - self

    def __mul__(self, other: Any) -> "PairNum":
        o = self._coerce(other)
        return PairNum(self.first * o.first, self.second * o.second)

    def __rmul__(self, other: Any) -> "PairNum":
        return self._coerce(other) * self

    def __truediv__(self, other: Any) -> "PairNum":
        o = self._coerce(other)
        return PairNum(self.first / o.first, self.second / o.second)

    def __rtruediv__(self, other: Any) -> "PairNum":
        return self._coerce(other) / self

    def __neg__(self) -> "PairNum":
        return PairNum(-self.first, -self.second)

    def __pos__(self) -> "PairNum":
        return PairNum(+self.first, +self.second)

    def __eq__(self, other: object) -> bool:
        o = self._coerce(other)
        return self.first == o.first and self.second == o.second

    def __lt__(self, other: Any) -> bool:
        o = self._coerce(other)
        if self.first != o.first:
            return self.first < o.first
        return self.second < o.second

    def __hash__(self) -> int:
        return hash((self.first, self.second))

    def __iter__(self):
        yield self.first
        yield self.second

    def __repr__(self) -> str:
        return f"PairNum({self.first!r}, {self.second!r})"


def _one_like(value: Any) -> Any:
    if isinstance(value, HashNum):
        return HashNum(1)
    if isinstance(value, PairNum):
        return PairNum(_one_like(value.first), _one_like(value.second))
    return type(value)(1)


class BasePower:
    """A hashing base together with a growing cache of its powers."""

    def __init__(self, base: Any) -> None:
        self.base = base
        self.one = _one_like(base)
        self._powers = [self.one]

    def power(self, x: int) -> Any:
        """``base ** x``, extending the cache as needed."""
        if x < 0:
            raise ValueError(f"power must be non-negative, got {x}")
        powers = self._powers
        while len(powers) <= x:
            powers.append(powers[-1] * self.base)
        return powers[x]

    def __getitem__(self, x: int) -> Any:
        return self.power(x)

    def __call__(self, x: int) -> Any:
        return self.power(x)

    def clear(self) -> None:
        """Drop every cached power except ``base ** 0``."""
        self._powers = [self.one]

    def __len__(self) -> int:
        return len(self._powers)


def hash_string(s: Iterable[Any], powers: BasePower) -> Any:
    """Hash of the whole of ``s``, equal to the last prefix hash of a ``PrefixHash``."""
    result = powers.one
    for c in s:
        result = result * powers.base + _code(c)
    return result


class PrefixHash:
    """Hashes of every prefix of a sequence, answering slice hashes in O(1)."""

    def __init__(self, s: Iterable[Any], powers: BasePower) -> None:
        self.powers = powers
        self.data = [powers.one]
        for c in s:
            self.append(c)

    def append(self, c: Any) -> None:
        """Extend the hashed sequence by one item."""
        self.data.append(self.data[-1] * self.powers.base + _code(c))

    def __len__(self) -> int:
        return len(self.data) - 1

    def range_hash(self, frm: int, to: int) -> Any:
        """Hash of the slice ``[frm, to)``."""
        if not 0 <= frm <= to <= len(self):
            raise IndexError(f"slice [{frm}, {to}) outside [0, {len(self)}]")
        return self.data[to] - self.data[frm] * self.powers.power(to - frm)

    def __getitem__(self, index: Any) -> Any:
        """Prefix hash for an integer, slice hash for a pair ``(frm, to)``."""
        if isinstance(index, tuple):
            frm, to = index
            return self.range_hash(frm, to)
        return self.data[index]

    def __call__(self, frm: int, to: int) -> Any:
        return self.range_hash(frm, to)


def find_lcp(a: PrefixHash, s: int, b: PrefixHash, t: int) -> int:
    """Length of the longest common prefix of ``a`` from ``s`` and ``b`` from ``t``."""
    lo, hi = 0, min(len(a) - s, len(b) - t) + 1
    while hi - lo > 1:
        mid = (lo + hi) >> 1
        if a.range_hash(s, s + mid) == b.range_hash(t, t + mid):
            lo = mid
        else:
            hi = mid
    return lo


def compare(
    a: PrefixHash, a_start: int, a_end: int, b: PrefixHash, b_start: int, b_end: int
) -> int:
    """Compare ``a[a_start:a_end]`` with ``b[b_start:b_end]``: -1, 0 or 1.

    Slices that differ at some position are ordered by the items there. When
    one slice is a proper prefix of the other, the shorter one compares as
    the greater.
    """
    lo, hi = 0, min(a_end - a_start, b_end - b_start) + 1
    while hi - lo > 1:
        mid = (lo + hi) >> 1
        if a.range_hash(a_start, a_start + mid) == b.range_hash(b_start, b_start + mid):
            lo = mid
        else:
            hi = mid
    pa, pb = a_start + lo, b_start + lo
    if pa == a_end and pb == b_end:
        return 0
    if pa == a_end:
        return 1
    if pb == b_end:
        return -1
    return -1 if a.range_hash(pa, pa + 1) < b.range_hash(pb, pb + 1) else 1


def merge_hash(a: Any, b: Any, power_b: Any) -> Any:
    """Hash of a concatenation from the hashes of its parts and ``base ** len(b)``."""
    return a * power_b + b