"""Shared helpers used by the platform's services."""
