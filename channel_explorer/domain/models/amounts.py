"""Exact token amounts expressed in their smallest unit."""

from collections.abc import Iterable
from enum import Enum
from functools import total_ordering

from channel_explorer.domain.errors import DivideByZero, PrecisionLoss, Underflow


class Ordering(Enum):
    """Result of a three-way amount comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


@total_ordering
class BigAmount:
    """Arbitrary-precision non-negative integer token amount.

    Values are immutable. Arithmetic never leaves the integer domain; the
    only float conversion is `to_display_float`, which refuses to round.

    Attributes:
        value: Amount in the smallest indivisible token unit.
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"BigAmount requires an int, got {type(value).__name__}"
            )
        if value < 0:
            raise ValueError(f"BigAmount cannot be negative: {value}")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value) -> None:
        raise AttributeError("BigAmount is immutable")

    @property
    def value(self) -> int:
        """Return the raw integer value."""
        return self._value

    @classmethod
    def zero(cls) -> "BigAmount":
        """Return the zero amount."""
        return cls(0)

    @classmethod
    def sum(cls, amounts: Iterable["BigAmount"]) -> "BigAmount":
        """Fold amounts into their exact total.

        Args:
            amounts: Amounts to add together.

        Returns:
            BigAmount: Exact sum, zero for an empty iterable.
        """
        total = 0
        for amount in amounts:
            total += _coerce(amount)
        return cls(total)

    @classmethod
    def from_json(cls, raw) -> "BigAmount":
        """Parse the decimal-string wire representation.

        Args:
            raw: Decimal digit string, or a JSON integer.

        Returns:
            BigAmount: Parsed amount.

        Raises:
            ValueError: If the value is not a plain non-negative integer.
        """
        if isinstance(raw, bool) or isinstance(raw, float):
            raise ValueError(f"Amounts must be decimal strings, got {raw!r}")
        if isinstance(raw, int):
            return cls(raw)
        if not isinstance(raw, str):
            raise ValueError(f"Amounts must be decimal strings, got {raw!r}")
        cleaned = raw.strip()
        if not cleaned or not cleaned.isascii() or not cleaned.isdigit():
            raise ValueError(f"Invalid amount string: {raw!r}")
        return cls(int(cleaned))

    def to_json(self) -> str:
        """Return the decimal-string wire representation."""
        return str(self._value)

    def add(self, other: "BigAmount | int") -> "BigAmount":
        """Return the exact sum."""
        return BigAmount(self._value + _coerce(other))

    def sub(self, other: "BigAmount | int") -> "BigAmount":
        """Return the exact difference.

        Raises:
            Underflow: If `other` is larger than this amount.
        """
        subtrahend = _coerce(other)
        if subtrahend > self._value:
            raise Underflow(
                f"Cannot subtract {subtrahend} from {self._value}"
            )
        return BigAmount(self._value - subtrahend)

    def mul_scalar(self, factor: int) -> "BigAmount":
        """Return the product with a non-negative integer scalar."""
        return BigAmount(self._value * _coerce(factor))

    def mul(self, other: "BigAmount | int") -> "BigAmount":
        """Return the exact product with another amount."""
        return BigAmount(self._value * _coerce(other))

    def div_floor(self, other: "BigAmount | int") -> "BigAmount":
        """Return the floor quotient, discarding the remainder.

        Raises:
            DivideByZero: If the divisor is zero.
        """
        divisor = _coerce(other)
        if divisor == 0:
            raise DivideByZero(f"Cannot divide {self._value} by zero")
        return BigAmount(self._value // divisor)

    def compare(self, other: "BigAmount") -> Ordering:
        """Return the three-way ordering against `other`."""
        right = _coerce(other)
        if self._value < right:
            return Ordering.LESS
        if self._value > right:
            return Ordering.GREATER
        return Ordering.EQUAL

    def to_display_float(self) -> float:
        """Convert to a float for display.

        Returns:
            float: Float holding exactly this integer value.

        Raises:
            PrecisionLoss: If the float would not equal the integer.
        """
        try:
            converted = float(self._value)
        except OverflowError as exc:
            raise PrecisionLoss(
                f"Amount {self._value} is too large for a float"
            ) from exc
        if int(converted) != self._value:
            raise PrecisionLoss(
                f"Amount {self._value} is not exactly representable"
            )
        return converted

    def is_zero(self) -> bool:
        """Return True for the zero amount."""
        return self._value == 0

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        # Lets the builtin sum() start from int 0.
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.div_floor(other)

    def __eq__(self, other) -> bool:
        if isinstance(other, BigAmount):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self._value < _coerce(other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __bool__(self) -> bool:
        return self._value != 0

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __repr__(self) -> str:
        return f"BigAmount({self._value})"

    def __reduce__(self):
        return (BigAmount, (self._value,))


def _is_operand(value) -> bool:
    if isinstance(value, BigAmount):
        return True
    return isinstance(value, int) and not isinstance(value, bool)


def _coerce(value) -> int:
    if isinstance(value, BigAmount):
        return value.value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Expected BigAmount or int, got {type(value).__name__}"
        )
    if value < 0:
        raise ValueError(f"Operand cannot be negative: {value}")
    return value


__all__ = ["BigAmount", "Ordering"]
