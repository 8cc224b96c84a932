"""Utility helpers: configuration and credential hashing."""
