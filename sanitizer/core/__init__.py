# sanitizer/core/__init__.py

"""Core domain models and utilities used across the sanitizer.

This package provides domain types, exceptions, category constants and the
loader for the bundled pattern table.
"""
