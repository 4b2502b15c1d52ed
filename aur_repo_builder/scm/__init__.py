"""
Source control modules
"""

from .git_client import GitClient

__all__ = ['GitClient']
