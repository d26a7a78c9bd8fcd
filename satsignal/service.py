"""
Service coordinator.

Wires configuration, logging, the market poller, the profile store, the
application runtime and the narrative advisor together:

    Provider → Poller → Engine → Advisor
                 Profile Store ⇄ Runtime
"""

from datetime import date
from pathlib import Path
from typing import Any, Optional

import structlog

from .advisor.narrative import NarrativeAdvisor
from .advisor.transports import create_transport
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .logging.config import configure_logging
from .market.poller import MarketPoller
from .market.provider import MarketDataProvider
from .models.recommendation import Recommendation
from .persistence.profile_store import ProfileStore
from .simulation.lab import SimulationResult, simulate
from .state.runtime import AppRuntime

logger = structlog.get_logger(__name__)


class SatSignalService:
    """Main coordinator for the daily accumulation recommendation service."""

    def __init__(self, config: DefaultConfig):
        self.config = config
        self.logger = logger

        self.provider = MarketDataProvider(config.market, config.retry)
        self.poller = MarketPoller(self.provider, config.market.poll_interval_seconds)
        self.store = ProfileStore(config.storage.profiles_path)
        self.advisor = NarrativeAdvisor(create_transport(config.advisor))
        self.runtime = AppRuntime(self.store, self.advisor)

    @classmethod
    def from_config_dir(
        cls,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
        setup_logging: bool = True
    ) -> "SatSignalService":
        """
        Load configuration with 3-tier precedence and build the service.

        Raises:
            ValueError: If the merged configuration fails validation
        """
        loader = ConfigLoader.create(config_dir)

        validation_errors = ConfigValidator.validate_config(loader.merge_config(overrides))
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            logger.error("Configuration validation failed", errors=error_msgs)
            raise ValueError(f"Invalid configuration: {'; '.join(error_msgs)}")

        config = loader.load(overrides)
        if setup_logging:
            configure_logging(level=config.logging.level, format_json=config.logging.format_json)
        return cls(config)

    def start(self) -> None:
        """Load profiles and start polling market data."""
        self.runtime.load()
        self.poller.start()
        self.logger.info(
            "SatSignal service started",
            profile_count=len(self.runtime.state.profiles)
        )

    def stop(self) -> None:
        self.poller.stop()
        self.logger.info("SatSignal service stopped")

    def current_recommendation(self, today: Optional[date] = None) -> Optional[Recommendation]:
        """Recommendation for the active profile against the latest snapshot."""
        return self.runtime.recommend(self.poller.snapshot, today)

    def simulate(self, **sliders: float) -> Optional[SimulationResult]:
        """Simulation lab projection for the active profile."""
        profile = self.runtime.state.active_profile
        if profile is None:
            return None
        return simulate(profile, **sliders)
