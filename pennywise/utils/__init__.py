"""Mini README: Shared helper utilities for Pennywise modules."""

from .money import format_amount, to_amount

__all__ = ["format_amount", "to_amount"]
