"""
Configuration module.

Runtime settings for market polling, retries, profile storage, the advisor
relay and logging. Recommendation policy constants live in the engine and
are not configurable.
"""
