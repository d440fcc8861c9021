"""Helper utilities."""
