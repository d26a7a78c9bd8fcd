"""
Market data module.

Live indicator retrieval with retry-with-backoff and the fixed-interval
poller that keeps the latest snapshot for the engine.
"""
