"""
Games catalog consolidation.

Merges duplicate game records by canonical name and flags near-duplicate
names for review.
"""

__version__ = "0.1.0"
