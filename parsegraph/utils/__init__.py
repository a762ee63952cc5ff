"""Shared helpers used across parsegraph modules."""
