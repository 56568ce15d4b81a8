"""Ratings hub: a ranked catalog built from GitHub issues."""

__version__ = "0.1.0"
