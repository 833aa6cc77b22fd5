"""HTTP API for the vesting engine."""
