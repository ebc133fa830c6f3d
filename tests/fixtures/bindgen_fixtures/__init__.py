"""Schema packages used by the introspection and end-to-end tests."""
