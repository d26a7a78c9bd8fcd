"""Default configuration parameters for the recommendation service."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RetryParams:
    """Retry-with-backoff parameters for upstream requests."""
    max_attempts: int = 3                   # Total attempts, first one included
    backoff_base_seconds: float = 1.0       # Delay before 2nd attempt, doubles after


@dataclass(frozen=True)
class MarketParams:
    """Market data provider parameters."""
    fear_greed_url: str = "https://api.alternative.me/fng/?limit=1"
    markets_url: str = (
        "https://api.coingecko.com/api/v3/coins/markets"
        "?vs_currency=usd&ids=bitcoin&sparkline=false&price_change_percentage=7d"
    )
    timeout_seconds: float = 5.0
    poll_interval_seconds: float = 15.0

    # Fallback snapshot used when live retrieval fails
    mock_price: float = 92000.0
    mock_fear_index: float = 45.0
    mock_high_24h: float = 94000.0
    mock_change_7d: float = -2.5


@dataclass(frozen=True)
class StorageParams:
    """Profile storage parameters."""
    profiles_path: str = "satsignal_profiles.json"


@dataclass(frozen=True)
class AdvisorParams:
    """Narrative advisor relay parameters."""
    relay_url: str = "http://localhost:3000/api/analyze"
    use_direct_gemini: bool = False
    gemini_model: str = "gemini-1.5-flash"
    api_key_env: str = "GEMINI_API_KEY"
    timeout_seconds: float = 20.0


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    market: MarketParams
    retry: RetryParams
    storage: StorageParams
    advisor: AdvisorParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        market=MarketParams(),
        retry=RetryParams(),
        storage=StorageParams(),
        advisor=AdvisorParams(),
        logging=LoggingParams(),
    )
