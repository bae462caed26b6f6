# sanitizer/engine/__init__.py

"""Engine package providing the registries, detector and cleaner.

This package contains the components that scan for invisible characters and
formatting artifacts and rewrite text under the configured rules.
"""
