"""Utility module for commitpolicy package."""
