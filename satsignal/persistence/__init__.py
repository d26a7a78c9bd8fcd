"""Profile persistence layer."""
