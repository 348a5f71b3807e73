"""HTTP API for the recovery engine."""
