"""Shared utilities for configuration and logging."""
