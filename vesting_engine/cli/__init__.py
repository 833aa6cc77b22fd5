"""Command-line interface for the vesting engine."""
