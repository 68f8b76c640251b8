"""Profile endpoints."""
