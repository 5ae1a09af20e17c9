"""Exception types raised by the analysis pipeline."""
from __future__ import annotations


class VidtrendError(Exception):
    """Base class for pipeline failures."""


class LoadError(VidtrendError):
    """The input table is missing, unreadable or does not match the schema."""
