"""
Top-level package for the leader lexis browser.

This package exposes the linked-view architecture (domain, views, UI adapters).
Most code should import from submodules such as:
    leader_lexis.core
    leader_lexis.views
    leader_lexis.ui
"""

__all__: list[str] = []
