"""
quote-it - Source Package

A small quote journal for the terminal. Quotes are appended to a local
on-disk store and listed back, filtered by author and date.

DESIGN PRINCIPLES:
1. Validate before touching the store
2. Fail early, fail visibly
3. Records are append-only
4. Storage layer is swappable
"""

__version__ = "0.1.0"
