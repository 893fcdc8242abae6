"""Provider strategies and their registry."""
