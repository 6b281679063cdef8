"""Domain types for the errors feature."""
