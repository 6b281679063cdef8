"""Configuration package: portable paths, persisted config and derived settings."""
