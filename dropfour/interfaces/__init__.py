"""
dropfour.interfaces - User-facing front ends for dropfour
"""

# Don't import anything here to avoid circular imports
__all__ = []
