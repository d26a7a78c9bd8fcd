"""Advisory text for a recommendation."""

import threading
from http.client import HTTPException
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from ..errors import DataQualityError
from ..models.recommendation import Recommendation
from .transports import AdvisorTransport

logger = structlog.get_logger(__name__)

CONFIG_ERROR_TEXT = "AI currently unavailable (Config Error)."
UNAVAILABLE_TEXT = "AI Analysis unavailable."


@dataclass(frozen=True)
class AdvisoryResult:
    """Text to show next to the recommendation."""
    text: str
    ok: bool


def build_prompt(recommendation: Recommendation) -> str:
    """Summarize a recommendation as an advisor prompt."""
    safety = "CAPPED" if recommendation.is_capped_by_reserve else "OK"
    return (
        "You are a strategic Bitcoin investment advisor.\n"
        "\n"
        "Current Status:\n"
        f"- Recommended Buy: ${recommendation.final_buy:.0f}\n"
        f"- Market Sentiment: Fear Level {recommendation.stats.fear:g} (0=Panic, 100=Greed)\n"
        f"- Multiplier: {recommendation.total_mult:.2f}x\n"
        f"- Budget Safety: {safety}\n"
        "\n"
        "Write a concise insight (max 40 words).\n"
        "- First, explain \"Why\" (e.g. \"Market panic offers discount\").\n"
        "- Second, give a command (e.g. \"Accumulate aggressively\").\n"
    )


class NarrativeAdvisor:
    """Requests advisory text; failures turn into placeholder messages."""

    def __init__(self, transport: AdvisorTransport):
        self.transport = transport
        self.logger = logger

    def advise(self, recommendation: Recommendation) -> AdvisoryResult:
        """Fetch advisory text for ``recommendation``. Never raises."""
        prompt = build_prompt(recommendation)

        try:
            response = self.transport.send(prompt)
        except (OSError, HTTPException, DataQualityError, ValueError) as e:
            self.logger.error("Advisor request failed", error=str(e), error_type=type(e).__name__)
            return AdvisoryResult(text=UNAVAILABLE_TEXT, ok=False)

        if response.get("error"):
            self.logger.warning("Advisor relay returned an error", error=response.get("error"))
            return AdvisoryResult(text=CONFIG_ERROR_TEXT, ok=False)

        text = response.get("text")
        if not isinstance(text, str) or not text.strip():
            self.logger.warning("Advisor relay returned no text")
            return AdvisoryResult(text=UNAVAILABLE_TEXT, ok=False)

        return AdvisoryResult(text=text.strip(), ok=True)

    def advise_async(
        self,
        recommendation: Recommendation,
        callback: Callable[[AdvisoryResult], None]
    ) -> threading.Thread:
        """
        Fetch advisory text on a background thread.

        Requests are not deduplicated; whichever finishes last calls its
        callback last.
        """
        def run() -> None:
            callback(self.advise(recommendation))

        thread = threading.Thread(target=run, name="narrative-advisor", daemon=True)
        thread.start()
        return thread
