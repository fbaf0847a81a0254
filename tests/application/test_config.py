"""Tests for environment-driven configuration."""

import pytest

from flowershop.domain.exceptions import ValidationError
from flowershop.domain.model.order import OrderStatus
from flowershop.domain.service.order_lifecycle import DEFAULT_CANCEL_REASON
from flowershop.infrastructure.bootstrap import build_storefront
from flowershop.infrastructure.config import StoreConfig, load_config


def test_defaults_when_environment_empty():
    assert load_config({}) == StoreConfig()


def test_flags_read_from_environment():
    config = load_config({
        "FLOWERSHOP_RESTORE_STOCK_ON_CANCEL": "yes",
        "FLOWERSHOP_RESTORE_STOCK_ON_DELETE": "0",
        "FLOWERSHOP_SEED_DEMO_ORDERS": "false",
        "FLOWERSHOP_DEFAULT_CANCEL_REASON": "Out of stock",
        "FLOWERSHOP_LOG_LEVEL": "info",
    })
    assert config.restore_stock_on_cancel is True
    assert config.restore_stock_on_delete is False
    assert config.seed_demo_orders is False
    assert config.default_cancel_reason == "Out of stock"
    assert config.log_level == "INFO"


def test_blank_cancel_reason_falls_back_to_default():
    config = load_config({"FLOWERSHOP_DEFAULT_CANCEL_REASON": "   "})
    assert config.default_cancel_reason == DEFAULT_CANCEL_REASON


def test_blank_cancel_reason_still_lets_admin_cancel():
    store = build_storefront(load_config({"FLOWERSHOP_DEFAULT_CANCEL_REASON": ""}))

    order = store.lifecycle.transition(2, OrderStatus.CANCELLED)

    assert order.status == OrderStatus.CANCELLED
    assert order.cancel_reason == DEFAULT_CANCEL_REASON


def test_blank_cancel_reason_rejected_when_built_directly():
    with pytest.raises(ValidationError, match="cancellation reason"):
        StoreConfig(default_cancel_reason=" ")


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError, match="Log level"):
        load_config({"FLOWERSHOP_LOG_LEVEL": "loud"})
