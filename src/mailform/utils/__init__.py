"""Shared utilities: paths, errors, logging and configuration."""
