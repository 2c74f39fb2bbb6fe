"""Luhn checksum validation for identification numbers."""

from .validators import is_valid

__all__ = ["is_valid"]
