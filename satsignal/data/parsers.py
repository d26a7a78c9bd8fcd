"""
Upstream payload parsers for the sentiment index and market quote sources.

This module converts raw JSON bodies into the indicator values of a
MarketState, raising data quality errors on unexpected shapes.
"""

from typing import Any, Union

import orjson

from ..errors import MalformedDataError, MissingDataError
from ..utils.numbers import parse_number


def parse_json_payload(raw_data: Union[str, bytes]) -> Any:
    """
    Parse a raw JSON body.

    Args:
        raw_data: Response body from the upstream source

    Returns:
        Parsed JSON value

    Raises:
        MalformedDataError: If the body is not valid JSON
    """
    try:
        return orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedDataError(
            f"Invalid JSON: {e}",
            raw_data=str(raw_data)[:200],
            expected_format="json"
        )


def _require_number(record: dict[str, Any], key: str, source: str) -> float:
    if key not in record or record[key] is None:
        raise MissingDataError(f"{source} payload missing '{key}'", data_type=source)

    value = parse_number(record[key])
    if value is None:
        raise MalformedDataError(
            f"{source} field '{key}' is not numeric",
            raw_data=repr(record[key]),
            expected_format="number"
        )
    return value


def parse_fear_greed(payload: Any) -> float:
    """
    Extract the sentiment score from a Fear & Greed response.

    Expected shape: {"data": [{"value": "23", ...}]}

    Returns:
        Sentiment score as float (0-100, lower = more fear)
    """
    if not isinstance(payload, dict):
        raise MalformedDataError("Fear & Greed payload must be an object", expected_format="object")

    data = payload.get("data")
    if not isinstance(data, list) or not data:
        raise MissingDataError("Fear & Greed payload has no data entries", data_type="fear_greed")

    if not isinstance(data[0], dict):
        raise MalformedDataError("Fear & Greed entry must be an object", expected_format="object")

    return _require_number(data[0], "value", "fear_greed")


def parse_coingecko_markets(payload: Any) -> dict[str, float]:
    """
    Extract price, 24h high and 7-day change from a CoinGecko markets response.

    Expected shape: [{"current_price": ..., "high_24h": ...,
    "price_change_percentage_7d_in_currency": ...}]

    Returns:
        Dict with price, high_24h and change_7d
    """
    if not isinstance(payload, list) or not payload:
        raise MissingDataError("Markets payload has no coin entries", data_type="markets")

    coin = payload[0]
    if not isinstance(coin, dict):
        raise MalformedDataError("Markets entry must be an object", expected_format="object")

    return {
        "price": _require_number(coin, "current_price", "markets"),
        "high_24h": _require_number(coin, "high_24h", "markets"),
        "change_7d": _require_number(coin, "price_change_percentage_7d_in_currency", "markets"),
    }
