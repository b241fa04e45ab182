"""
Iraira platform layer.

Shared services used by the wire game: logging and structured run records.
"""

__version__ = "1.0.0"
