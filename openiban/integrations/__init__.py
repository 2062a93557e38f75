"""Adapters for third-party validation frameworks."""
