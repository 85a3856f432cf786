"""
Top-level package for the CSV browser.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    csv_browser.core
    csv_browser.services
    csv_browser.ui
"""

__all__: list[str] = []
