"""Coin Runner - a one-button arcade runner."""

__version__ = "0.1.0"
