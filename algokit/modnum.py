"""Integers modulo a fixed positive modulus."""

from __future__ import annotations

import functools


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo ``m`` using the extended Euclidean algorithm.

    Raises ZeroDivisionError when ``a`` and ``m`` are not coprime.
    """
    if m < 1:
        raise ValueError(f"modulus must be positive, got {m}")
    x, y = a % m, m
    u, n = 0, 1
    while x:
        t = y // x
        y -= t * x
        x, y = y, x
        u -= t * n
        u, n = n, u
    if y != 1:
        raise ZeroDivisionError(f"{a} is not invertible modulo {m}")
    return u % m


def bin_pow(base, exponent: int):
    """Raise ``base`` to a non-negative integer power by repeated squaring."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    result = ModNum(1, base.mod) if isinstance(base, ModNum) else 1
    while exponent > 0:
        if exponent & 1:
            result = result * base
        base = base * base
        exponent >>= 1
    return result


@functools.total_ordering
class ModNum:
    """An integer reduced modulo ``mod``, kept in ``[0, mod)``."""

    __slots__ = ("value", "mod")

    def __init__(self, value: int, mod: int) -> None:
        if mod < 1:
            raise ValueError(f"modulus must be positive, got {mod}")
        self.mod = mod
        self.value = int(value) % mod

    def _coerce(self, other):
        if isinstance(other, ModNum):
            if other.mod != self.mod:
                raise ValueError(f"moduli differ: {self.mod} and {other.mod}")
            return other.value
        if isinstance(other, int):
            return other % self.mod
        return NotImplemented

    def _make(self, value: int) -> ModNum:
        return ModNum(value, self.mod)

    def inverse(self) -> ModNum:
        """Return the multiplicative inverse."""
        return self._make(mod_inverse(self.value, self.mod))

    def __add__(self, other):
        v = self._coerce(other)
        return NotImplemented if v is NotImplemented else self._make(self.value + v)

    __radd__ = __add__

    def __sub__(self, other):
        v = self._coerce(other)
        return NotImplemented if v is NotImplemented else self._make(self.value - v)

    def __rsub__(self, other):
        v = self._coerce(other)
        return NotImplemented if v is NotImplemented else self._make(v - self.value)

    def __mul__(self, other):
        v = self._coerce(other)
        return NotImplemented if v is NotImplemented else self._make(self.value * v)

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self * mod_inverse(v, self.mod)

    def __rtruediv__(self, other):
        v = self._coerce(other)
        if v is NotImplemented:
            return NotImplemented
        return self._make(v) * self.inverse()

    def __pow__(self, exponent: int) -> ModNum:
        if exponent < 0:
            return bin_pow(self.inverse(), -exponent)
        return bin_pow(self, exponent)

    def __neg__(self) -> ModNum:
        return self._make(-self.value)

    def __pos__(self) -> ModNum:
        return self._make(self.value)

    def __eq__(self, other) -> bool:
        if isinstance(other, ModNum) and other.mod != self.mod:
            return False
        v = self._coerce(other)
        return NotImplemented if v is NotImplemented else self.value == v

    def __lt__(self, other) -> bool:
        v = self._coerce(other)
        return NotImplemented if v is NotImplemented else self.value < v

    def __hash__(self) -> int:
        return hash((self.value, self.mod))

    def __int__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"ModNum({self.value}, {self.mod})"