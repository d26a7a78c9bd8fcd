"""HTTP market data provider."""

from datetime import datetime, timezone
from collections.abc import Callable
from http.client import HTTPException
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

import structlog

from ..config.defaults import MarketParams, RetryParams
from ..data.parsers import parse_coingecko_markets, parse_fear_greed, parse_json_payload
from ..errors import DataQualityError
from ..models.market import MarketState, failed_market_state, mock_market_state
from ..utils.retry import (
    PermanentRequestError,
    RetryableRequestError,
    exponential_backoff,
    retry,
)

logger = structlog.get_logger(__name__)

LIVE_DATA_ERROR = "Failed to load live data."


class MarketDataProvider:
    """Fetches and normalizes live price and sentiment indicators."""

    def __init__(
        self,
        params: Optional[MarketParams] = None,
        retry_params: Optional[RetryParams] = None,
        sleep: Optional[Callable[[float], None]] = None
    ):
        self.params = params or MarketParams()
        self.retry_params = retry_params or RetryParams()
        self.logger = logger

        retry_kwargs: dict[str, Any] = {
            "max_attempts": self.retry_params.max_attempts,
            "backoff": exponential_backoff(self.retry_params.backoff_base_seconds),
        }
        if sleep is not None:
            retry_kwargs["sleep"] = sleep
        self._get_json = retry(**retry_kwargs)(self._request_json)

    def fetch(self) -> MarketState:
        """
        Fetch a live snapshot.

        Returns:
            MarketState with live values, or one flagged with an error message
            when the upstream sources fail after all retry attempts
        """
        try:
            fear_payload = self._get_json(self.params.fear_greed_url)
            fear_index = parse_fear_greed(fear_payload)

            markets_payload = self._get_json(self.params.markets_url)
            quote = parse_coingecko_markets(markets_payload)

        except (RetryableRequestError, PermanentRequestError, OSError) as e:
            self.logger.error(
                "Market data request failed",
                error=str(e),
                error_type=type(e).__name__
            )
            return failed_market_state(LIVE_DATA_ERROR)

        except DataQualityError as e:
            self.logger.error(
                "Market data payload rejected",
                error=str(e),
                error_type=type(e).__name__,
                context=e.context
            )
            return failed_market_state(LIVE_DATA_ERROR)

        snapshot = MarketState(
            price=quote["price"],
            fear_index=fear_index,
            high_24h=quote["high_24h"],
            change_7d=quote["change_7d"],
            last_updated=datetime.now(timezone.utc),
        )

        self.logger.debug(
            "Market snapshot fetched",
            price=snapshot.price,
            fear_index=snapshot.fear_index,
            high_24h=snapshot.high_24h,
            change_7d=snapshot.change_7d
        )
        return snapshot

    def fetch_or_mock(self) -> MarketState:
        """Fetch a live snapshot, substituting the flagged mock on failure."""
        snapshot = self.fetch()
        if snapshot.ok:
            return snapshot

        self.logger.warning(
            "Using mock market snapshot",
            reason=snapshot.error
        )
        return mock_market_state(self.params)

    def _request_json(self, url: str) -> Any:
        """Single GET attempt returning the parsed JSON body."""
        req = Request(
            url,
            headers={
                "Accept": "application/json",
                "User-Agent": "satsignal/0.1"
            },
            method="GET"
        )

        try:
            with urlopen(req, timeout=self.params.timeout_seconds) as response:
                body = response.read()

        except HTTPError as e:
            error_msg = f"HTTP {e.code}: {e.reason}"
            # Rate limits and server errors are transient
            if e.code == 429 or e.code >= 500:
                raise RetryableRequestError(error_msg)
            raise PermanentRequestError(error_msg)

        except (URLError, TimeoutError) as e:
            raise RetryableRequestError(f"Network error: {e}")

        except HTTPException as e:
            # Truncated body or broken status line
            raise RetryableRequestError(f"Protocol error: {e!r}")

        return parse_json_payload(body)
