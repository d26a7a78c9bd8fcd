"""Fixed-interval market refresh loop."""

import threading
from typing import Optional

import structlog

from ..models.market import MarketState, mock_market_state
from .provider import MarketDataProvider

logger = structlog.get_logger(__name__)

PRICE_UP = "up"
PRICE_DOWN = "down"


class MarketPoller:
    """
    Keeps the latest market snapshot fresh.

    A failed refresh never replaces a good snapshot: the previous one stays
    in effect, and the flagged mock snapshot is used only when nothing has
    been loaded yet.
    """

    def __init__(self, provider: MarketDataProvider, interval_seconds: Optional[float] = None):
        self.provider = provider
        self.interval_seconds = (
            interval_seconds if interval_seconds is not None
            else provider.params.poll_interval_seconds
        )
        self.logger = logger

        self._snapshot: Optional[MarketState] = None
        self._price_direction: Optional[str] = None
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def snapshot(self) -> Optional[MarketState]:
        """Snapshot currently in effect."""
        with self._lock:
            return self._snapshot

    @property
    def price_direction(self) -> Optional[str]:
        """Direction of the last live price change: 'up', 'down' or None."""
        with self._lock:
            return self._price_direction

    def refresh(self) -> MarketState:
        """
        Run one refresh cycle.

        Returns:
            The snapshot in effect after the cycle
        """
        try:
            fresh = self.provider.fetch()
        except Exception as e:
            # The loop must survive any provider failure
            self.logger.error(
                "Unexpected error during market refresh",
                error=str(e),
                error_type=type(e).__name__
            )
            fresh = None

        with self._lock:
            if fresh is not None and fresh.ok:
                previous = self._snapshot
                self._price_direction = self._direction(previous, fresh)
                self._snapshot = fresh
            else:
                self._price_direction = None
                if self._snapshot is None:
                    self._snapshot = mock_market_state(self.provider.params)
                    self.logger.warning("No live snapshot yet, using mock market data")
                else:
                    self.logger.warning(
                        "Market refresh failed, keeping previous snapshot",
                        snapshot_is_mock=self._snapshot.is_mock
                    )
            return self._snapshot

    def start(self) -> None:
        """Load the first snapshot and start the background refresh loop."""
        if self._thread is not None and self._thread.is_alive():
            return

        self._stop_event.clear()
        self.refresh()

        self._thread = threading.Thread(
            target=self._run,
            name="market-poller",
            daemon=True
        )
        self._thread.start()
        self.logger.info("Market poller started", interval_seconds=self.interval_seconds)

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop the refresh loop."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None
        self.logger.info("Market poller stopped")

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval_seconds):
            self.refresh()

    @staticmethod
    def _direction(previous: Optional[MarketState], current: MarketState) -> Optional[str]:
        if previous is None or previous.price is None or current.price is None:
            return None
        if current.price > previous.price:
            return PRICE_UP
        if current.price < previous.price:
            return PRICE_DOWN
        return None
