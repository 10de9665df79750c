# language_filter/core/__init__.py

"""Core domain models and utilities used across the language filter.

This package provides domain types, exceptions, and list loading helpers
shared by the rest of the application.
"""
