"""Command-line interface for pyd2proto."""
