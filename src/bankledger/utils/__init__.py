"""Utility functions for bankledger."""

from bankledger.utils.amount_parser import parse_amount

__all__ = ["parse_amount"]
