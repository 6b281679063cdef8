"""Feature packages: errors, cache, modal and composed screens."""
