"""Shared utilities: JSON config management."""
