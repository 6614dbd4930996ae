"""Observability – structured logging for the scheduler."""
