"""
Core utilities module for gochef.
"""

from gochef.core.utils.go_literals import quote, unquote

__all__ = ["quote", "unquote"]
