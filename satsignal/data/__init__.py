"""
Market data ingestion module.

Parses raw upstream JSON payloads into validated indicator values.
"""
