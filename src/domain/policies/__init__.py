"""Domain policies package."""

from .recipients import is_valid_recipient

__all__ = ["is_valid_recipient"]
