"""Command-line interface for patternlab."""
