#!/usr/bin/env python3
"""Utility functions for bare2gitea."""

from typing import Optional
from urllib.parse import quote

API_PREFIX = "/api/v1"
GIT_SUFFIX = ".git"


def api_path(*segments: str) -> str:
    """Build an ``/api/v1/...`` path, quoting each segment.

    Example: api_path('repos', 'acme', 'widgets') -> '/api/v1/repos/acme/widgets'
    """
    return API_PREFIX + "".join(f"/{quote(seg, safe='')}" for seg in segments)


def repo_name_from_dir(dirname: str) -> Optional[str]:
    """Return the repository name for a bare repository directory.

    'widgets.git' -> 'widgets'; anything without the suffix -> None.
    """
    if not dirname.endswith(GIT_SUFFIX):
        return None
    return dirname[: -len(GIT_SUFFIX)]
