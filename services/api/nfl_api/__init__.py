"""NFL Public API service: read-only HTTP access to league reference data."""
