"""Shared helpers: text primitives, typed errors and logging."""
