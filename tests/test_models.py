# tests/test_models.py
"""
Model Tests - Unit Tests for Money and Sum Expressions

This module contains unit tests for the domain value objects: Money
construction, equality, multiplication, and the Sum composite.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- moneybank.domain.models (Money, Sum, Pair, Expression)
- pytest (testing framework)
"""
import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Mock rate source for reduce tests

from moneybank.domain.models import CHF, USD, Expression, Money, Pair, Sum  # Value objects to test


class TestMoneyConstruction:
    def test_dollar_and_franc_factories(self):
        assert Money.dollar(5) == Money(5, "USD")
        assert Money.franc(5) == Money(5, "CHF")

    def test_currency(self):
        assert Money.dollar(1).currency == USD
        assert Money.franc(1).currency == CHF

    def test_negative_amount_allowed(self):
        assert Money(-3, "USD").amount == -3

    def test_rejects_non_integer_amount(self):
        with pytest.raises(TypeError):
            Money(1.5, "USD")
        with pytest.raises(TypeError):
            Money(True, "USD")

    def test_rejects_non_string_currency(self):
        with pytest.raises(TypeError):
            Money(1, None)

    def test_is_immutable(self):
        five = Money.dollar(5)
        with pytest.raises(AttributeError):
            five.amount = 6

    def test_is_an_expression(self):
        assert isinstance(Money.dollar(1), Expression)


class TestMoneyEquality:
    def test_equality(self):
        assert Money.dollar(5) == Money.dollar(5)
        assert Money.dollar(5) != Money.dollar(6)
        assert Money.franc(5) == Money.franc(5)
        assert Money.franc(5) != Money.franc(6)

    def test_different_currencies_never_equal(self):
        assert Money.dollar(5) != Money.franc(5)

    def test_money_is_not_equal_to_sum(self):
        assert Money.dollar(10) != Money.dollar(5).plus(Money.dollar(5))

    def test_hashable(self):
        assert len({Money.dollar(5), Money.dollar(5), Money.franc(5)}) == 2


class TestMoneyTimes:
    def test_multiplication(self):
        five = Money.dollar(5)
        assert five.times(2) == Money.dollar(10)
        assert five.times(3) == Money.dollar(15)

    def test_franc_multiplication(self):
        five = Money.franc(5)
        assert five.times(2) == Money.franc(10)
        assert five.times(3) == Money.franc(15)

    def test_times_does_not_mutate(self):
        five = Money.dollar(5)
        five.times(2)
        assert five == Money.dollar(5)

    def test_large_amounts_do_not_overflow(self):
        big = Money(2 ** 62, "USD")
        assert big.times(4).amount == 2 ** 64

    def test_rejects_non_integer_multiplier(self):
        with pytest.raises(TypeError):
            Money.dollar(5).times(1.5)


class TestSum:
    def test_plus_returns_sum(self):
        five = Money.dollar(5)
        result = five.plus(five)
        assert isinstance(result, Sum)
        assert result.augend == five
        assert result.addend == five

    def test_sum_plus_nests(self):
        total = Money.dollar(5).plus(Money.franc(10)).plus(Money.dollar(1))
        assert isinstance(total.augend, Sum)
        assert total.addend == Money.dollar(1)

    def test_times_distributes(self):
        total = Sum(Money.dollar(5), Money.franc(10)).times(2)
        assert total == Sum(Money.dollar(10), Money.franc(20))

    def test_structural_equality(self):
        assert Sum(Money.dollar(1), Money.franc(2)) == Sum(Money.dollar(1), Money.franc(2))
        assert Sum(Money.dollar(1), Money.franc(2)) != Sum(Money.franc(2), Money.dollar(1))

    def test_rejects_non_expression_operands(self):
        with pytest.raises(TypeError):
            Sum(Money.dollar(1), 5)


class TestReduceWithRateSource:
    def test_money_reduce_asks_for_rate(self):
        source = Mock()
        source.rate.return_value = 2
        result = Money.franc(10).reduce(source, USD)
        assert result == Money.dollar(5)
        source.rate.assert_called_once_with(CHF, USD)

    def test_integer_division_truncates(self):
        source = Mock()
        source.rate.return_value = 2
        assert Money.franc(3).reduce(source, USD) == Money.dollar(1)

    def test_negative_amount_truncates_toward_zero(self):
        source = Mock()
        source.rate.return_value = 2
        assert Money.franc(-7).reduce(source, USD) == Money.dollar(-3)

    def test_sum_reduce_converts_each_leaf(self):
        source = Mock()
        source.rate.side_effect = lambda frm, to: 1 if frm == to else 2
        total = Sum(Money.dollar(5), Money.franc(10))
        assert total.reduce(source, USD) == Money.dollar(10)
        assert source.rate.call_count == 2


class TestPair:
    def test_structural_equality_and_hash(self):
        assert Pair("CHF", "USD") == Pair("CHF", "USD")
        assert hash(Pair("CHF", "USD")) == hash(Pair("CHF", "USD"))

    def test_direction_matters(self):
        assert Pair("CHF", "USD") != Pair("USD", "CHF")

    def test_str(self):
        assert str(Pair("CHF", "USD")) == "CHF->USD"
