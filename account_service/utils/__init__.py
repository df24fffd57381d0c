"""Utility modules for the account service."""

from .datetime_utils import now

__all__ = [
    "now",
]
