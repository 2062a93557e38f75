"""Shared utilities: logging, configuration, text helpers."""
