"""Schema package without any bindable classes."""
