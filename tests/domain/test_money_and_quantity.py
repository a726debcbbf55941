"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from ecoshop.domain.exceptions import ValidationError
from ecoshop.domain.model.value_objects import Money, Quantity


# ── Money ────────────────────────────────────────────────────────────────────


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_quantizes_to_cents(self):
        assert Money.of(10).amount == Decimal("10.00")
        assert str(Money.of("9.5")) == "9.50"

    def test_of_factory_from_float_goes_through_str(self):
        assert Money.of(0.1) + Money.of(0.2) == Money.of("0.30")

    def test_invalid_amount_rejected(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1.00"))

    def test_negative_zero_normalized_by_factory(self):
        m = Money.of("-0.001")
        assert not m.amount.is_signed()
        assert str(m) == "0.00"
        assert Money.of("-0") == Money.zero()

    def test_negative_zero_rejected_by_constructor(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-0.00"))

    def test_sub_cent_precision_rejected(self):
        with pytest.raises(ValidationError, match="2 decimal places"):
            Money(Decimal("1.005"))

    def test_float_amount_rejected(self):
        with pytest.raises(ValidationError, match="must be a Decimal"):
            Money(1.5)

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_multiplication_by_int(self):
        assert Money.of("7.50") * 3 == Money.of("22.50")

    def test_multiplication_by_float_rejected(self):
        with pytest.raises(TypeError):
            Money.of("7.50") * 1.5

    def test_summing_many_cents_has_no_drift(self):
        total = Money.zero()
        for _ in range(1000):
            total = total + Money.of("0.10")
        assert total == Money.of("100.00")

    def test_comparison_operators(self):
        assert Money.of("5") < Money.of("10")
        assert Money.of("10") > Money.of("5")
        assert Money.of("10") >= Money.of("10")
        assert Money.of("10") <= Money.of("10")


# ── Quantity ─────────────────────────────────────────────────────────────────


class TestQuantity:

    def test_valid_quantity(self):
        assert Quantity(5).value == 5

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            Quantity(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="at least 1"):
            Quantity(-3)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            Quantity(True)

    def test_str(self):
        assert str(Quantity(7)) == "7"
