"""Command line interface for stylec."""
