"""Data models and utility functions.

This package contains:
- types: Result types and TypedDicts
- utils: Utility functions (address normalisation, light paths, etc.)
"""
