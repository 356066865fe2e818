"""Core configuration for the Crypto Blog client."""
