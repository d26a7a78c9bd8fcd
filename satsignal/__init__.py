"""
SatSignal - Daily Accumulation Recommendation Engine

Recommends a bounded daily buy amount for a recurring accumulation strategy
from live market indicators and a user's budget profile, along with the
multipliers that produced it.
"""

__version__ = "0.1.0"
__author__ = "SatSignal Team"
