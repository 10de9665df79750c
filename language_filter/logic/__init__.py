# language_filter/logic/__init__.py

"""Replacement strategies applied by the filter's sanitize operation."""
