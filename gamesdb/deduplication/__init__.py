"""
Deduplication pipeline components.

These modules canonicalize game names through an alias table, merge records
sharing a canonical name into one record, and flag near-duplicate names
that the alias table missed.
"""

from .canonicalize import canonical_name
from .merge import DeduplicationResult, deduplicate
from .near_duplicates import MAX_REPORTED_DISTANCE, closest_name, find_near_duplicates, format_report

__all__ = [
    'canonical_name',
    'deduplicate',
    'DeduplicationResult',
    'find_near_duplicates',
    'closest_name',
    'format_report',
    'MAX_REPORTED_DISTANCE',
]
