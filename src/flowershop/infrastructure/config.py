"""Runtime configuration, read from ``FLOWERSHOP_*`` environment variables."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from flowershop.domain.exceptions import ValidationError
from flowershop.domain.service.order_lifecycle import DEFAULT_CANCEL_REASON

ENV_PREFIX = "FLOWERSHOP_"
_TRUTHY = {"1", "true", "yes", "on"}
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class StoreConfig:
    """Knobs for the in-memory store.

    Stock is not given back when an order is cancelled or deleted
    unless the matching flag is switched on.
    """

    restore_stock_on_cancel: bool = False
    restore_stock_on_delete: bool = False
    default_cancel_reason: str = DEFAULT_CANCEL_REASON
    seed_demo_orders: bool = True
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not self.default_cancel_reason or not self.default_cancel_reason.strip():
            raise ValidationError("Default cancellation reason cannot be blank")
        if self.log_level not in LOG_LEVELS:
            raise ValidationError(
                f"Log level must be one of {', '.join(LOG_LEVELS)}, "
                f"got {self.log_level!r}"
            )


def load_config(environ: Mapping[str, str] | None = None) -> StoreConfig:
    env = os.environ if environ is None else environ

    def flag(name: str, default: bool) -> bool:
        raw = env.get(ENV_PREFIX + name)
        if raw is None:
            return default
        return raw.strip().lower() in _TRUTHY

    defaults = StoreConfig()

    # blank counts as unset
    cancel_reason = env.get(ENV_PREFIX + "DEFAULT_CANCEL_REASON", "").strip()

    return StoreConfig(
        restore_stock_on_cancel=flag("RESTORE_STOCK_ON_CANCEL", defaults.restore_stock_on_cancel),
        restore_stock_on_delete=flag("RESTORE_STOCK_ON_DELETE", defaults.restore_stock_on_delete),
        default_cancel_reason=cancel_reason or defaults.default_cancel_reason,
        seed_demo_orders=flag("SEED_DEMO_ORDERS", defaults.seed_demo_orders),
        log_level=env.get(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).strip().upper(),
    )
