"""
Market snapshot model.

A MarketState is a read-only snapshot of the indicators the engine consumes.
Fields left as None are treated as missing and replaced by engine defaults.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from ..config.defaults import MarketParams


@dataclass(frozen=True)
class MarketState:
    """Live or fallback market indicators for one refresh cycle."""
    price: Optional[float] = None          # Current unit price
    fear_index: Optional[float] = None     # 0-100 sentiment, lower = more fear
    high_24h: Optional[float] = None       # Recent high
    change_7d: Optional[float] = None      # Signed percent change over 7 days
    last_updated: Optional[datetime] = None
    error: Optional[str] = None
    is_mock: bool = False

    @property
    def ok(self) -> bool:
        """True when the snapshot carries data rather than a failure."""
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Provider record shape."""
        return {
            "price": self.price,
            "fearIndex": self.fear_index,
            "high24h": self.high_24h,
            "change7d": self.change_7d,
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
            "error": self.error,
            "isMock": self.is_mock,
        }


def mock_market_state(params: Optional[MarketParams] = None) -> MarketState:
    """Fixed fallback snapshot used when live retrieval fails."""
    params = params or MarketParams()
    return MarketState(
        price=params.mock_price,
        fear_index=params.mock_fear_index,
        high_24h=params.mock_high_24h,
        change_7d=params.mock_change_7d,
        last_updated=datetime.now(timezone.utc),
        is_mock=True,
    )


def failed_market_state(message: str) -> MarketState:
    """Snapshot flagging a failed retrieval."""
    return MarketState(error=message)
