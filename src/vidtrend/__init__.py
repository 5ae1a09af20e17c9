"""Exploratory analysis of YouTube video statistics."""

__version__ = "0.1.0"
