"""
Repository management modules package
"""

from .cleanup_manager import CleanupManager
from .database_manager import DatabaseManager
from .landing_page import LandingPageData, LandingPageGenerator
from .version_tracker import VersionTracker

__all__ = [
    'CleanupManager',
    'DatabaseManager',
    'LandingPageData',
    'LandingPageGenerator',
    'VersionTracker',
]
