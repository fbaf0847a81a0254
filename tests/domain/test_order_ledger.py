"""Unit tests for the OrderLedger domain service."""

import pytest

from flowershop.domain.exceptions import (
    CartInvalid,
    NotAuthenticated,
    NotPermitted,
    OrderNotFound,
    OrderPlacementFailed,
)
from flowershop.domain.model.order import OrderStatus
from flowershop.domain.model.value_objects import Money
from tests.fakes import FailingSaveProductRepository, build_core, make_delivery, make_product


class TestPlaceOrderHappyPath:

    def test_single_line_scenario(self):
        product_repo, order_repo, _, engine, ledger = build_core()
        engine.add(1, 4)

        order = ledger.place_order("alice", engine.cart, make_delivery())

        assert product_repo.get_by_id(1).stock == 6
        assert len(order_repo.list_all()) == 1
        assert len(order.items) == 1
        line = order.items[0]
        assert line.quantity.value == 4
        assert line.unit_price == Money.of("150")
        assert order.status == OrderStatus.NEW
        assert engine.cart.is_empty

    def test_multi_line_order_decrements_every_product(self):
        product_repo, _, _, engine, ledger = build_core()
        engine.add(1, 2)
        engine.add(2, 5)

        order = ledger.place_order("alice", engine.cart, make_delivery())

        assert product_repo.get_by_id(1).stock == 8
        assert product_repo.get_by_id(2).stock == 0
        assert order.total == Money.of("700")

    def test_prices_frozen_at_purchase(self):
        product_repo, order_repo, _, engine, ledger = build_core()
        engine.add(1, 2)
        order = ledger.place_order("alice", engine.cart, make_delivery())

        product_repo.get_by_id(1).update_price(Money.of("999"))

        saved = order_repo.get_by_id(order.id)
        assert saved.items[0].unit_price == Money.of("150")
        assert saved.total == Money.of("300")


class TestOrderIds:

    def test_first_id_is_one(self):
        _, _, _, engine, ledger = build_core()
        engine.add(1)
        assert ledger.place_order("alice", engine.cart, make_delivery()).id == 1

    def test_ids_strictly_increase(self):
        _, _, _, engine, ledger = build_core()
        ids = []
        for _ in range(3):
            engine.add(1)
            ids.append(ledger.place_order("alice", engine.cart, make_delivery()).id)
        assert ids == [1, 2, 3]

    def test_ids_not_reused_after_deleting_newest(self):
        _, _, _, engine, ledger = build_core()
        engine.add(1)
        first = ledger.place_order("alice", engine.cart, make_delivery())
        engine.add(1)
        second = ledger.place_order("alice", engine.cart, make_delivery())

        ledger.delete_order(second.id, "alice")
        engine.add(1)
        third = ledger.place_order("alice", engine.cart, make_delivery())

        assert third.id > second.id > first.id


class TestPlaceOrderFailures:

    def test_empty_cart_scenario(self):
        product_repo, order_repo, _, engine, ledger = build_core()

        with pytest.raises(OrderPlacementFailed) as exc_info:
            ledger.place_order("alice", engine.cart, make_delivery())

        assert isinstance(exc_info.value.__cause__, CartInvalid)
        assert order_repo.list_all() == []
        assert product_repo.get_by_id(1).stock == 10

    def test_no_user_rejected(self):
        _, order_repo, _, engine, ledger = build_core()
        engine.add(1)
        with pytest.raises(NotAuthenticated):
            ledger.place_order(None, engine.cart, make_delivery())
        assert order_repo.list_all() == []
        assert not engine.cart.is_empty

    def test_stock_changed_since_checkout_is_all_or_nothing(self):
        product_repo, order_repo, _, engine, ledger = build_core()
        engine.add(1, 3)
        engine.add(2, 4)
        product_repo.get_by_id(2).stock = 2  # sold elsewhere meanwhile

        with pytest.raises(OrderPlacementFailed, match="#2"):
            ledger.place_order("alice", engine.cart, make_delivery())

        assert product_repo.get_by_id(1).stock == 10
        assert product_repo.get_by_id(2).stock == 2
        assert order_repo.list_all() == []
        assert engine.cart.quantity_of(1) == 3
        assert engine.cart.quantity_of(2) == 4

    def test_failure_during_decrement_rolls_back_earlier_lines(self):
        products = [make_product(1, "Rose", stock=10), make_product(2, "Tulip", stock=10)]
        repo = FailingSaveProductRepository(products, failing_id=2)
        _, order_repo, _, engine, ledger = build_core(product_repo=repo)
        engine.add(1, 3)
        engine.add(2, 3)

        with pytest.raises(OrderPlacementFailed, match="Storage refused"):
            ledger.place_order("alice", engine.cart, make_delivery())

        assert repo.get_by_id(1).stock == 10
        assert repo.get_by_id(2).stock == 10
        assert order_repo.list_all() == []
        assert engine.cart.item_count == 6


class TestDeleteOrder:

    def _placed(self, **kwargs):
        product_repo, order_repo, _, engine, ledger = build_core(**kwargs)
        engine.add(1, 4)
        order = ledger.place_order("alice", engine.cart, make_delivery())
        return product_repo, order_repo, ledger, order

    def test_owner_deletes_new_order_without_restoring_stock(self):
        product_repo, order_repo, ledger, order = self._placed()

        ledger.delete_order(order.id, "alice")

        assert order_repo.list_all() == []
        assert product_repo.get_by_id(1).stock == 6

    def test_delete_restores_stock_when_configured(self):
        product_repo, _, ledger, order = self._placed(restore_stock_on_delete=True)
        ledger.delete_order(order.id, "alice")
        assert product_repo.get_by_id(1).stock == 10

    def test_other_user_not_permitted(self):
        _, order_repo, ledger, order = self._placed()
        with pytest.raises(NotPermitted):
            ledger.delete_order(order.id, "mallory")
        assert len(order_repo.list_all()) == 1

    def test_non_new_order_not_permitted(self):
        _, order_repo, ledger, order = self._placed()
        order.status = OrderStatus.PROCESSING
        with pytest.raises(NotPermitted, match="only new orders"):
            ledger.delete_order(order.id, "alice")
        assert len(order_repo.list_all()) == 1

    def test_unknown_order_not_permitted(self):
        _, _, ledger, _ = self._placed()
        with pytest.raises(NotPermitted):
            ledger.delete_order(99, "alice")

    def test_anonymous_rejected(self):
        _, _, ledger, order = self._placed()
        with pytest.raises(NotAuthenticated):
            ledger.delete_order(order.id, None)


class TestQueries:

    def test_orders_for_user_newest_first(self):
        _, _, _, engine, ledger = build_core()
        for user in ("alice", "bob", "alice"):
            engine.add(1)
            ledger.place_order(user, engine.cart, make_delivery())

        assert [o.id for o in ledger.orders_for_user("alice")] == [3, 1]
        assert [o.id for o in ledger.orders_for_user("bob")] == [2]

    def test_orders_for_anonymous_rejected(self):
        _, _, _, _, ledger = build_core()
        with pytest.raises(NotAuthenticated):
            ledger.orders_for_user(None)

    def test_all_orders_filtered_by_status(self):
        _, _, _, engine, ledger = build_core()
        for _ in range(2):
            engine.add(1)
            ledger.place_order("alice", engine.cart, make_delivery())
        ledger.get(1).status = OrderStatus.PROCESSING

        assert [o.id for o in ledger.all_orders()] == [2, 1]
        assert [o.id for o in ledger.all_orders(OrderStatus.PROCESSING)] == [1]

    def test_get_unknown_order(self):
        _, _, _, _, ledger = build_core()
        with pytest.raises(OrderNotFound):
            ledger.get(5)


def test_stock_sold_after_adding_to_cart_fails_placement():
    product_repo, _, catalog, engine, ledger = build_core()
    engine.add(2, 5)
    catalog.decrement_stock(2, 1)

    with pytest.raises(OrderPlacementFailed) as exc_info:
        ledger.place_order("alice", engine.cart, make_delivery())

    assert isinstance(exc_info.value.__cause__, CartInvalid)
    assert product_repo.get_by_id(2).stock == 4
