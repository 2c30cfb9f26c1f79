# Symbolic Panels Package
"""
UI toolkit adapters. Import panels.gtk explicitly; it needs PyGObject.
"""
