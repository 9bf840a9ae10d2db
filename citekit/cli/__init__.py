"""Command line interface for citekit."""
