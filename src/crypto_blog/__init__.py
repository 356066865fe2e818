"""Crypto Blog client: post list synchronization and submission pipeline."""

__version__ = "0.1.0"
