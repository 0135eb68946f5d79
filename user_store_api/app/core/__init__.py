"""Core infrastructure: settings, logging setup and locking primitives."""
