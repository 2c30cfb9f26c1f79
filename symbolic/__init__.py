# Symbolic Package
"""
Core of the Symbolic icon designer.

Components:
  - Search: Filtered symbol catalogs, published by section
  - Export: Per-variant icon snapshots for drag-and-drop
  - Services: Subscription entitlement checks
"""

__version__ = "0.1.0-dev"
