"""Utility functions for jmap."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
