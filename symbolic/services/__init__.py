# Symbolic Services Package
"""
Services that sit beside the core pipelines.
"""

from .entitlement import Transaction, VerificationResult, has_entitlement, is_entitled

__all__ = ["Transaction", "VerificationResult", "has_entitlement", "is_entitled"]
