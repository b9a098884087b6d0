"""Core constants."""
