"""Pipeline execution modules for compatibility runs."""

from .runner import compute_and_store_compatibility, CompatibilityRunResult

__all__ = ['compute_and_store_compatibility', 'CompatibilityRunResult']
