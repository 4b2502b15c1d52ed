#!/usr/bin/env python3
"""
Main Entry Point for the AUR Repository Builder
"""

import sys
import logging

from aur_repo_builder.common.config_loader import ConfigLoader
from aur_repo_builder.common.environment import prepare_directories, validate_environment
from aur_repo_builder.common.errors import ConfigError, ToolMissingError
from aur_repo_builder.common.logging_utils import setup_logging
from aur_repo_builder.common.shell_executor import ShellExecutor
from aur_repo_builder.orchestrator.package_builder import PackageBuilder
from aur_repo_builder.orchestrator.state import RunContext
from aur_repo_builder.orchestrator.toolchain import SystemToolchain

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    """
    Run one build pass.

    Fatal problems (missing tools, unreadable config) stop the run before
    anything on disk is touched.
    """
    env_config = ConfigLoader.load_environment_config()
    setup_logging(debug_mode=env_config['debug_mode'], ci=env_config['ci'], log_file=env_config['log_file'])

    argv = sys.argv[1:] if argv is None else argv
    config_file = argv[0] if argv else env_config['config_file']

    logger.warning("Starting AUR package build process")

    try:
        validate_environment()
        repo_config = ConfigLoader.load_config(config_file)
    except (ToolMissingError, ConfigError) as e:
        logger.error(f"❌ {e}")
        return 1

    context = RunContext.create(repo_config, env_config)
    try:
        prepare_directories(context.arch_dir, context.clone_dir)
    except OSError as e:
        logger.error(f"❌ Failed to create build directories: {e}")
        return 1

    toolchain = SystemToolchain(context, ShellExecutor(debug_mode=env_config['debug_mode']))
    builder = PackageBuilder(context, toolchain)
    return builder.run()


def run():
    """Console script entry point"""
    sys.exit(main())


if __name__ == "__main__":
    run()
