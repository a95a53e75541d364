"""Bundled block catalog."""
