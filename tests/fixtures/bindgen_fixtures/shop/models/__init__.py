"""Core shop models."""
