"""
Utility functions module.

Numeric coercion for loosely-typed inputs, calendar helpers for the budgeting
period and the retry policy shared by upstream requests.
"""
