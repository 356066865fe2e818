"""Post store backends."""
