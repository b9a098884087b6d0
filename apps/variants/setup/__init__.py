"""Application setup (config, logging, DI)."""
