"""Unit tests for the Product aggregate's stock rules."""

import pytest

from flowershop.domain.exceptions import InsufficientStock, ValidationError
from flowershop.domain.model.value_objects import Money
from tests.fakes import make_product


class TestDecrementStock:

    def test_reduces_stock(self):
        p = make_product(stock=10)
        p.decrement_stock(4)
        assert p.stock == 6

    def test_can_take_everything(self):
        p = make_product(stock=3)
        p.decrement_stock(3)
        assert p.stock == 0
        assert not p.in_stock

    def test_more_than_stock_rejected_and_unchanged(self):
        p = make_product(stock=3)
        with pytest.raises(InsufficientStock) as exc_info:
            p.decrement_stock(4)
        assert exc_info.value.available == 3
        assert p.stock == 3

    def test_non_positive_rejected(self):
        p = make_product(stock=3)
        with pytest.raises(ValidationError, match="must be positive"):
            p.decrement_stock(0)


class TestProductInvariants:

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            make_product(stock=-1)

    def test_restore_stock(self):
        p = make_product(stock=2)
        p.restore_stock(5)
        assert p.stock == 7

    def test_update_price(self):
        p = make_product(price="150")
        p.update_price(Money.of("175"))
        assert p.price == Money.of("175")
