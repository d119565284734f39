"""Command-line interface for jpiconfig."""
