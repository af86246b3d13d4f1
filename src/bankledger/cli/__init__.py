"""Command line interface for bankledger."""
