"""Plain-text presentation of the post screen."""
