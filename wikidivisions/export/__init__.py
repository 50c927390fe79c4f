"""CSV output and input."""
