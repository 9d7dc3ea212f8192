"""
Arithmetic utility exercise.

A stateless calculator exposing the basic binary operations. Division by
zero is the only guarded path: ``divide`` raises ``DivideByZeroError`` and
``safe_divide`` returns a tagged ``DivisionResult`` instead.
"""

from dataclasses import dataclass
from typing import Optional, Union

Number = Union[int, float]

DIVIDE_BY_ZERO = 'DivideByZero'
DIVIDE_BY_ZERO_MESSAGE = 'Cannot divide by zero'


class DivideByZeroError(ValueError):
    """Raised when the divisor is zero."""

    def __init__(self, message: str = DIVIDE_BY_ZERO_MESSAGE):
        self.message = message
        super().__init__(self.message)


@dataclass(frozen=True)
class DivisionResult:
    """Either a quotient or a tagged error, never both."""

    value: Optional[Number] = None
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Calculator:
    """Simple calculator class."""

    @staticmethod
    def add(a: Number, b: Number) -> Number:
        """Add two numbers."""
        return a + b

    @staticmethod
    def subtract(a: Number, b: Number) -> Number:
        """Subtract second number from first."""
        return a - b

    @staticmethod
    def multiply(a: Number, b: Number) -> Number:
        """Multiply two numbers."""
        return a * b

    @staticmethod
    def divide(a: Number, b: Number) -> float:
        """Divide first number by second."""
        if b == 0:
            raise DivideByZeroError()
        return a / b

    @staticmethod
    def safe_divide(a: Number, b: Number) -> DivisionResult:
        """
        Divide first number by second without raising on a zero divisor.

        Callers must check ``result.ok`` before reading ``result.value``.
        """
        if b == 0:
            return DivisionResult(error=DIVIDE_BY_ZERO, message=DIVIDE_BY_ZERO_MESSAGE)
        return DivisionResult(value=a / b)

    @staticmethod
    def power(a: Number, b: int) -> Number:
        """Raise first number to the power of the second."""
        return a ** b
