"""Interfaces layer: presenters for validation results."""
