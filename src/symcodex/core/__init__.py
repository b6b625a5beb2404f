"""
Core domain models, errors and data contracts.

This package contains the immutable symbol tree and its invariants,
independent of how a catalog is authored or loaded.
"""
