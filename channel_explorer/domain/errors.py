"""Domain errors for exact token arithmetic."""


class AmountError(ArithmeticError):
    """Base class for token amount arithmetic failures."""


class Underflow(AmountError):
    """Raised when a subtraction would produce a negative amount."""


class DivideByZero(AmountError, ZeroDivisionError):
    """Raised when an amount is divided by zero."""


class PrecisionLoss(AmountError):
    """Raised when an amount cannot be represented exactly as a float."""


__all__ = ["AmountError", "Underflow", "DivideByZero", "PrecisionLoss"]
