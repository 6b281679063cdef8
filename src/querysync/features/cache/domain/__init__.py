"""Domain types for the cache feature."""
