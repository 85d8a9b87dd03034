"""Brickstone Realty Group marketing site service."""

__version__ = "0.3.0"
