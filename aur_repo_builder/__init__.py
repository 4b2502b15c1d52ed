"""
AUR Repository Builder
"""

__version__ = "1.0.0"
