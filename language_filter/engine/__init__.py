# language_filter/engine/__init__.py

"""Engine package providing pattern compilation, scanning and overlap checks.

These components turn pattern fragments into fenced regular expressions and
decide which occurrences an exception list protects.
"""
