"""Unit tests for the CartEngine domain service."""

import pytest

from flowershop.domain.exceptions import (
    CartInvalid,
    InsufficientStock,
    ProductNotFound,
    ValidationError,
)
from flowershop.domain.model.value_objects import Money
from tests.fakes import build_core


def _engine():
    product_repo, _, _, cart_engine, _ = build_core()
    return product_repo, cart_engine


def _snapshot(cart_engine):
    return cart_engine.cart.lines


class TestAdd:

    def test_add_creates_line(self):
        _, engine = _engine()
        assert engine.add(1) == 1
        assert engine.cart.quantity_of(1) == 1

    def test_add_accumulates(self):
        _, engine = _engine()
        engine.add(1, 2)
        assert engine.add(1, 3) == 5
        assert len(engine.cart.lines) == 1

    def test_add_up_to_stock_exactly(self):
        _, engine = _engine()
        engine.add(2, 5)
        assert engine.cart.quantity_of(2) == 5

    def test_add_over_stock_rejected_and_cart_unchanged(self):
        product_repo, engine = _engine()
        product_repo.get_by_id(2).stock = 5
        engine.add(2, 3)
        before = _snapshot(engine)

        with pytest.raises(InsufficientStock) as exc_info:
            engine.add(2, 3)

        assert exc_info.value.available == 5
        assert engine.cart.quantity_of(2) == 3
        assert _snapshot(engine) == before

    def test_add_unknown_product(self):
        _, engine = _engine()
        with pytest.raises(ProductNotFound):
            engine.add(42)
        assert engine.cart.is_empty

    def test_add_sold_out_product_rejected(self):
        _, engine = _engine()
        with pytest.raises(InsufficientStock):
            engine.add(3)

    def test_add_non_positive_rejected(self):
        _, engine = _engine()
        with pytest.raises(ValidationError, match="must be positive"):
            engine.add(1, 0)


class TestSetQuantity:

    def test_set_quantity(self):
        _, engine = _engine()
        engine.add(1)
        engine.set_quantity(1, 7)
        assert engine.cart.quantity_of(1) == 7

    def test_set_quantity_creates_missing_line(self):
        _, engine = _engine()
        engine.set_quantity(2, 4)
        assert engine.cart.quantity_of(2) == 4

    def test_zero_removes_line(self):
        _, engine = _engine()
        engine.add(1, 2)
        engine.set_quantity(1, 0)
        assert engine.cart.is_empty

    def test_negative_removes_line(self):
        _, engine = _engine()
        engine.add(1, 2)
        engine.set_quantity(1, -4)
        assert engine.cart.is_empty

    def test_unknown_product_rejected_even_when_removing(self):
        _, engine = _engine()
        engine.add(1, 2)
        before = _snapshot(engine)

        with pytest.raises(ProductNotFound):
            engine.set_quantity(42, 0)

        assert _snapshot(engine) == before

    def test_over_stock_rejected_and_line_kept(self):
        _, engine = _engine()
        engine.add(1, 2)
        before = _snapshot(engine)

        with pytest.raises(InsufficientStock) as exc_info:
            engine.set_quantity(1, 11)

        assert exc_info.value.available == 10
        assert _snapshot(engine) == before


class TestRemoveAndTotal:

    def test_remove_present_line(self):
        _, engine = _engine()
        engine.add(1)
        engine.remove(1)
        assert engine.cart.is_empty

    def test_remove_absent_line_is_noop(self):
        _, engine = _engine()
        engine.add(1)
        engine.remove(2)
        assert engine.cart.quantity_of(1) == 1

    def test_total_uses_current_prices(self):
        product_repo, engine = _engine()
        engine.add(1, 2)  # 2 x 150
        engine.add(2, 1)  # 1 x 80
        assert engine.total() == Money.of("380")

        product_repo.get_by_id(1).update_price(Money.of("200"))
        assert engine.total() == Money.of("480")

    def test_empty_cart_total_is_zero(self):
        _, engine = _engine()
        assert engine.total() == Money.zero()


class TestCheckoutGate:

    def test_empty_cart_rejected(self):
        _, engine = _engine()
        with pytest.raises(CartInvalid, match="empty") as exc_info:
            engine.checkout()
        assert exc_info.value.product_ids == []

    def test_valid_cart_passes_without_mutation(self):
        product_repo, engine = _engine()
        engine.add(1, 3)
        engine.checkout()
        assert engine.cart.quantity_of(1) == 3
        assert product_repo.get_by_id(1).stock == 10

    def test_lists_lines_that_exceed_stock(self):
        product_repo, engine = _engine()
        engine.add(1, 5)
        engine.add(2, 5)
        product_repo.get_by_id(2).stock = 1

        with pytest.raises(CartInvalid) as exc_info:
            engine.checkout()

        assert exc_info.value.product_ids == [2]
        assert engine.cart.quantity_of(2) == 5


class TestCartNeverExceedsStock:

    def test_random_walk_of_mutations(self):
        product_repo, engine = _engine()
        operations = [
            ("add", 1, 4), ("add", 1, 7), ("set", 1, 12), ("add", 2, 5),
            ("set", 2, 6), ("remove", 1, 0), ("add", 1, 10), ("add", 1, 1),
            ("set", 2, 0), ("add", 3, 1), ("set", 1, 3),
        ]
        for op, pid, qty in operations:
            before = _snapshot(engine)
            try:
                if op == "add":
                    engine.add(pid, qty)
                elif op == "set":
                    engine.set_quantity(pid, qty)
                else:
                    engine.remove(pid)
            except InsufficientStock:
                assert _snapshot(engine) == before

            for line in engine.cart.lines:
                assert line.quantity <= product_repo.get_by_id(line.product_id).stock
