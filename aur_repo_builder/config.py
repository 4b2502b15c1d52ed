"""
Configuration file for AUR Repository Builder
=================================================================================
PURPOSE: Centralized defaults for the repository builder.
         This file contains settings that control where things live on disk,
         which upstream services are queried and which tools are required.

USAGE: Imported by the config loader and the orchestrator.
       Environment variables can override the directory and file settings
       (see common/config_loader.py).

ORGANIZATION:
1. Package list and output layout
2. AUR configuration
3. Package artifacts
4. Landing page templates
5. Required build tools
"""

# ==============================================================================
# 1. PACKAGE LIST AND OUTPUT LAYOUT
# ==============================================================================

# CONFIG_FILE_NAME: Declarative package list (YAML)
# Can be overridden by CONFIG_FILE environment variable
CONFIG_FILE_NAME = "config.yml"

# BUILD_DIR: Root of the published tree (index.html, icon.png, <arch>/)
# Can be overridden by BUILD_DIR environment variable
BUILD_DIR = "build"

# ARCH: Architecture subdirectory holding packages and database files
ARCH = "x86_64"

# AUR_CLONE_DIR: Cache of cloned AUR build recipes, one directory per package
# Can be overridden by AUR_CLONE_DIR environment variable
AUR_CLONE_DIR = "aur"

# ==============================================================================
# 2. AUR CONFIGURATION
# ==============================================================================

AUR_BASE_URL = "https://aur.archlinux.org"

# RPC endpoint queried once per run for every declared package
AUR_RPC_URL = f"{AUR_BASE_URL}/rpc/"
AUR_RPC_VERSION = "5"

# Seconds to wait for the batched version lookup
AUR_RPC_TIMEOUT = 10

# Clone URL template for build recipes
AUR_GIT_URL = AUR_BASE_URL + "/{pkg_name}.git"

# ==============================================================================
# 3. PACKAGE ARTIFACTS
# ==============================================================================

# Suffixes makepkg produces that are published into the repository
PACKAGE_SUFFIXES = (".pkg.tar.zst", ".pkg.tar.xz")

# Build recipe file that must exist in every clone
PKGBUILD_FILE = "PKGBUILD"

# makepkg flags for the actual build:
# no prompts, skip dependency checks (handled separately), overwrite, clean up
MAKEPKG_BUILD_FLAGS = ["--noconfirm", "--nodeps", "--force", "--clean"]

# ==============================================================================
# 4. LANDING PAGE TEMPLATES
# ==============================================================================

# TEMPLATE_DIR: Directory holding landing page templates
# Can be overridden by TEMPLATE_DIR environment variable
TEMPLATE_DIR = "src"

INDEX_HTML_TEMPLATE = "index.html"
README_TEMPLATE = "repo-README.md"
INSTALLER_TEMPLATE = "install.sh"
ICON_FILE = "icon.png"

# ==============================================================================
# 5. REQUIRED BUILD TOOLS
# ==============================================================================
# The builder refuses to start when any of these is missing from PATH.

REQUIRED_BUILD_TOOLS = [
    "makepkg",   # Builds packages from PKGBUILD
    "git",       # Clones AUR build recipes
    "repo-add",  # Indexes the repository database
    "pacman",    # Installs build dependencies
]
