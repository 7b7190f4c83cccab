# wld_analyzer/reader/__init__.py
"""Binary reading primitives."""
from .cursor import ByteCursor, ProgressCallback, parse_guid

__all__ = [
    'ByteCursor',
    'ProgressCallback',
    'parse_guid'
]
