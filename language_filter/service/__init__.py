# language_filter/service/__init__.py

"""Service layer: settings and the Filter orchestrator."""
