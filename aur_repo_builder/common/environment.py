"""
Environment setup and validation module
"""

import shutil
import logging
from pathlib import Path
from typing import Iterable, List

from aur_repo_builder import config
from aur_repo_builder.common.errors import ToolMissingError

logger = logging.getLogger(__name__)


def validate_environment(tools: Iterable[str] = None) -> List[str]:
    """
    Pre-flight check that every required external tool is on PATH.

    Returns:
        List of resolved tool paths

    Raises:
        ToolMissingError: one or more tools are missing
    """
    if tools is None:
        tools = config.REQUIRED_BUILD_TOOLS

    resolved = []
    missing = []
    for tool in tools:
        path = shutil.which(tool)
        if path:
            resolved.append(path)
            logger.debug(f"TOOL_FOUND tool={tool} path={path}")
        else:
            missing.append(tool)
            logger.error(f"{tool} is required but not installed")

    if missing:
        raise ToolMissingError(f"Missing required tools: {', '.join(missing)}")

    return resolved


def prepare_directories(*directories: Path):
    """Create output and cache directories"""
    for directory in directories:
        Path(directory).mkdir(parents=True, exist_ok=True)
