"""
Shell Executor Module - Handles external command execution with logging
"""

import os
import subprocess
import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


class ShellExecutor:
    """Runs external tools as argument lists and logs what happened"""

    def __init__(self, debug_mode: bool = False):
        self.debug_mode = debug_mode

    def run_command(self, cmd: List[str], cwd=None, capture: bool = True,
                    log_cmd: bool = False) -> subprocess.CompletedProcess:
        """
        Run a command to completion and return the completed process.

        External tools block the run until they exit; callers inspect
        returncode themselves.

        Args:
            cmd: Command and arguments
            cwd: Working directory (defaults to the current directory)
            capture: Capture stdout/stderr instead of streaming them to the console
            log_cmd: Log the command at INFO level (DEBUG otherwise)

        Returns:
            subprocess.CompletedProcess

        Raises:
            FileNotFoundError: The executable does not exist
        """
        cmd_str = " ".join(str(part) for part in cmd)
        if log_cmd or self.debug_mode:
            logger.info(f"RUNNING COMMAND: {cmd_str}")
        else:
            logger.debug(f"RUNNING COMMAND: {cmd_str}")

        if cwd is None:
            cwd = Path.cwd()

        env = os.environ.copy()
        env['LC_ALL'] = 'C'

        result = subprocess.run(
            [str(part) for part in cmd],
            cwd=str(cwd),
            capture_output=capture,
            text=True,
            check=False,
            env=env
        )

        if self.debug_mode and capture:
            if result.stdout:
                logger.debug(f"STDOUT: {result.stdout[:2000]}")
            if result.stderr:
                logger.debug(f"STDERR: {result.stderr[:2000]}")
            logger.debug(f"EXIT CODE: {result.returncode}")

        if result.returncode != 0 and capture:
            logger.debug(f"COMMAND_FAILED exit={result.returncode} cmd={cmd[0]}")

        return result
