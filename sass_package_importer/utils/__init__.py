"""Helpers for the sass-pkg command line."""
