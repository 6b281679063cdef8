"""querysync: URL-synchronized modal state, request caching and error normalization."""

__version__ = "0.1.0"
