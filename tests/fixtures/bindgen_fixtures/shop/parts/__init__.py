"""Parts referenced by the shop models."""
