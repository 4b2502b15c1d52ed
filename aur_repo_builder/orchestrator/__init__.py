"""
Orchestrator modules package
"""

from .package_builder import PackageBuilder
from .state import RunContext
from .toolchain import SystemToolchain, Toolchain

__all__ = ['PackageBuilder', 'RunContext', 'SystemToolchain', 'Toolchain']
