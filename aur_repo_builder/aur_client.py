"""
AUR RPC API Client - Fetch package versions without cloning
"""

import requests
import logging
from typing import Dict, Iterable

from aur_repo_builder import config
from aur_repo_builder.common.errors import NetworkError

logger = logging.getLogger(__name__)


class AURClient:
    """AUR RPC API client for batched version lookups"""

    def __init__(self, base_url: str = config.AUR_RPC_URL, timeout: float = config.AUR_RPC_TIMEOUT,
                 session: requests.Session = None):
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_versions(self, package_names: Iterable[str]) -> Dict[str, str]:
        """
        Fetch the latest version of every package in a single request.

        Args:
            package_names: Package names; duplicates are fine, empty names are not

        Returns:
            Mapping of package name to version. Packages the AUR does not know
            are simply missing from the mapping.

        Raises:
            ValueError: an empty package name was given
            NetworkError: transport failure, non-success status or unreadable body
        """
        names = list(package_names)
        if not names:
            return {}
        if any(not name for name in names):
            raise ValueError("Package names must be non-empty")

        params = [('v', config.AUR_RPC_VERSION), ('type', 'info')]
        params.extend(('arg[]', name) for name in names)

        try:
            response = self.session.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"AUR RPC request failed: {e}") from e
        except ValueError as e:
            raise NetworkError(f"AUR RPC returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise NetworkError("AUR RPC returned an unexpected document")
        if data.get('type') == 'error':
            raise NetworkError(f"AUR RPC error: {data.get('error')}")

        results = data.get('results') or []
        if not isinstance(results, list):
            raise NetworkError("AUR RPC returned results in an unexpected shape")

        versions = {}
        for package_info in results:
            if not isinstance(package_info, dict):
                logger.debug(f"AUR_RESULT_SKIPPED entry={package_info!r}")
                continue
            pkg_name = package_info.get('Name')
            version = package_info.get('Version')
            if pkg_name and version:
                versions[pkg_name] = version

        logger.info(f"✅ Fetched versions for {len(versions)}/{len(names)} AUR packages")
        return versions
