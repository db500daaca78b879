# src/moneybank/domain/models.py
"""
Domain Models - Money Values and Expressions

This module contains the value objects of the money domain:
- Money: an integer amount in a named currency (leaf expression)
- Sum: a composite of two expressions, converted lazily on reduce
- Pair: a directional (from, to) key into a bank's rate table

Reduction is a depth-first walk of the expression tree. Each Money leaf is
converted independently through the rate source, and Sum nodes add the
converted amounts.

Files that USE this module:
- moneybank.application.bank (Bank stores Pair keys and reduces expressions)
- moneybank (package re-exports)
- tests.* (tests build Money and Sum values)

Files that this module USES:
- None (pure domain layer, no external dependencies)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from abc import ABC, abstractmethod  # Abstract base for the expression capability
from dataclasses import dataclass  # Decorator for creating immutable value types
from typing import Protocol  # Structural type for anything that can quote a rate


USD = "USD"
CHF = "CHF"


class RateSource(Protocol):
    """Protocol for objects that quote directional integer exchange rates."""
    def rate(self, from_currency: str, to_currency: str) -> int:  # source units per 1 target unit
        ...


def _check_int(value: object, name: str) -> int:
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _truncating_div(amount: int, rate: int) -> int:
    """
    Divide two integers, truncating toward zero.

    Python's ``//`` floors, so -7 // 2 == -4; conversion keeps -3 instead.
    """
    quotient = abs(amount) // abs(rate)
    return quotient if (amount < 0) == (rate < 0) else -quotient


class Expression(ABC):
    """
    Anything that can be reduced to a Money in a target currency.

    Variants are Money (leaf) and Sum (composite). Expressions never hold a
    bank; the rate source is passed to reduce() on every call, so one
    expression can be priced in several currencies.
    """

    @abstractmethod
    def reduce(self, bank: RateSource, to_currency: str) -> Money:
        """Convert this expression into a single Money in ``to_currency``."""
        raise NotImplementedError

    @abstractmethod
    def times(self, multiplier: int) -> Expression:
        """Return this expression scaled by ``multiplier``."""
        raise NotImplementedError

    def plus(self, addend: Expression) -> Sum:
        """Combine with another expression without converting either side."""
        return Sum(augend=self, addend=addend)


@dataclass(frozen=True)
class Money(Expression):
    """
    Integer amount in a named currency.

    Attributes:
        amount: Signed integer amount (arbitrary precision, never overflows)
        currency: Currency label such as "USD" or "CHF"
    """
    amount: int
    currency: str

    def __post_init__(self) -> None:
        _check_int(self.amount, "amount")
        if not isinstance(self.currency, str):
            raise TypeError(f"currency must be a str, got {type(self.currency).__name__}")

    @classmethod
    def dollar(cls, amount: int) -> Money:
        return cls(amount, USD)

    @classmethod
    def franc(cls, amount: int) -> Money:
        return cls(amount, CHF)

    def times(self, multiplier: int) -> Money:
        return Money(self.amount * _check_int(multiplier, "multiplier"), self.currency)

    def reduce(self, bank: RateSource, to_currency: str) -> Money:
        """
        Convert this amount into ``to_currency``.

        Args:
            bank: Rate source quoting units of this currency per unit of target
            to_currency: Target currency label

        Returns:
            New Money in the target currency (amount truncated toward zero)

        Raises:
            MissingRateError: If the bank has no rate for the pair
        """
        rate = bank.rate(self.currency, to_currency)
        return Money(_truncating_div(self.amount, rate), to_currency)


@dataclass(frozen=True)
class Sum(Expression):
    """
    Two operand expressions kept unconverted until reduce time.

    Attributes:
        augend: Left operand (any Expression)
        addend: Right operand (any Expression)
    """
    augend: Expression
    addend: Expression

    def __post_init__(self) -> None:
        for name in ("augend", "addend"):
            if not isinstance(getattr(self, name), Expression):
                raise TypeError(f"{name} must be an Expression")

    def times(self, multiplier: int) -> Sum:
        """
        Distribute the multiplier over every leaf, keeping the tree shape.

        Walks the tree with an explicit stack (post-order), so sums built
        by thousands of chained plus() calls do not hit the recursion limit.
        """
        _check_int(multiplier, "multiplier")
        scaled: list[Expression] = []
        stack: list[tuple[Expression, bool]] = [(self, False)]
        while stack:
            node, operands_done = stack.pop()
            if not isinstance(node, Sum):
                scaled.append(node.times(multiplier))
            elif operands_done:
                addend = scaled.pop()
                augend = scaled.pop()
                scaled.append(Sum(augend, addend))
            else:
                stack.append((node, True))
                stack.append((node.addend, False))
                stack.append((node.augend, False))
        return scaled[0]

    def reduce(self, bank: RateSource, to_currency: str) -> Money:
        # Leaves are converted one by one, augend side first
        total = 0
        stack: list[Expression] = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, Sum):
                stack.append(node.addend)
                stack.append(node.augend)
            else:
                total += node.reduce(bank, to_currency).amount
        return Money(total, to_currency)


@dataclass(frozen=True)
class Pair:
    """Directional lookup key for an exchange rate (no normalization)."""
    from_currency: str
    to_currency: str

    def __str__(self) -> str:
        return f"{self.from_currency}->{self.to_currency}"
