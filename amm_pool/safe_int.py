"""Checked integer arithmetic for reserve and share amounts.

Amounts the pool stores or pays out are computed through SafeInt, so a bad
computation aborts the operation rather than writing a corrupt reserve:
a zero divisor raises DivisionByZero, a negative difference raises Underflow,
and to_uint256() rejects anything outside [0, 2^256-1].

    from amm_pool.safe_int import S

    shares = (S(native_in) * total_shares // native_reserve).to_uint256()
"""

from __future__ import annotations

from functools import total_ordering

from amm_pool.constants import UINT256_MAX


class SafeIntError(ArithmeticError):
    """Base class for checked arithmetic failures."""


class DivisionByZero(SafeIntError):
    """A ratio was taken against a zero reserve or an empty share supply."""


class Underflow(SafeIntError):
    """A subtraction would drive an amount below zero."""


class Uint256Overflow(SafeIntError):
    """An amount does not fit in an unsigned 256-bit integer."""


@total_ordering
class SafeInt:
    """Immutable integer amount whose operators refuse to produce invalid results."""

    __slots__ = ("_value",)

    def __init__(self, value: int | SafeInt) -> None:
        self._value = _unwrap(value)

    @classmethod
    def zero(cls) -> SafeInt:
        return cls(0)

    @property
    def value(self) -> int:
        return self._value

    def to_uint256(self) -> int:
        """Return the plain int, checking it is a valid uint256.

        Raises:
            Uint256Overflow: If the amount is negative or above 2^256-1
        """
        if not 0 <= self._value <= UINT256_MAX:
            raise Uint256Overflow(f"{self._value} is outside the uint256 range")
        return self._value

    # Arithmetic

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _unwrap(other))

    __radd__ = __add__

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _unwrap(other))

    __rmul__ = __mul__

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        subtrahend = _unwrap(other)
        if subtrahend > self._value:
            raise Underflow(f"cannot compute {self._value} - {subtrahend}: result is negative")
        return SafeInt(self._value - subtrahend)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        divisor = _unwrap(other)
        if divisor == 0:
            raise DivisionByZero(f"cannot divide {self._value} by zero")
        return SafeInt(self._value // divisor)

    # Comparison and conversion

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (SafeInt, int)) and not isinstance(other, bool):
            return self._value == _unwrap(other)
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _unwrap(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return bool(self._value)

    def __repr__(self) -> str:
        return f"S({self._value})"

    def __str__(self) -> str:
        return str(self._value)


def _unwrap(value: SafeInt | int) -> int:
    if isinstance(value, SafeInt):
        return value._value
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"SafeInt needs an int amount, not {type(value).__name__}")
    return value


S = SafeInt
