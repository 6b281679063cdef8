"""Domain types for the modal feature."""
