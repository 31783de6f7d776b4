"""Infrastructure layer for Interprete."""
