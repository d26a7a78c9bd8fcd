"""
Narrative advisor module.

Builds a short prompt from a recommendation and relays it to a text service.
The returned text is advisory only and never feeds back into the numbers.
"""
from .narrative import AdvisoryResult, NarrativeAdvisor, build_prompt

__all__ = ["AdvisoryResult", "NarrativeAdvisor", "build_prompt"]
