#!/usr/bin/env python3
"""Discovery of bare repositories laid out as <root>/<org>/<repo>.git."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, List

from logging_utils import Logger
from utils import repo_name_from_dir


class SourceError(Exception):
    """The local tree could not be read."""


class SourceLayoutError(SourceError):
    """An organization directory holds something that is not a bare repo."""


@dataclass(frozen=True)
class LocalRepository:
    path: str
    org: str
    name: str


class LocalSource:
    """Walks a two-level tree of organizations and bare repositories."""

    def __init__(self, root: str) -> None:
        self.root = os.path.abspath(root)

    def iter_repositories(self) -> Iterator[LocalRepository]:
        """Yield repositories one at a time, in directory-listing order.

        A malformed entry raises when it is reached, so everything yielded
        before it has already been handled by the caller.
        """
        for org_entry in self._list_dirs(self.root):
            Logger.info(f"org: {org_entry.path}")
            for repo_entry in self._list_dirs(org_entry.path):
                name = repo_name_from_dir(repo_entry.name)
                if not name:
                    raise SourceLayoutError(f"not a git repo: {repo_entry.path}")
                yield LocalRepository(
                    path=repo_entry.path, org=org_entry.name, name=name
                )

    @staticmethod
    def _list_dirs(path: str) -> List[os.DirEntry]:
        try:
            with os.scandir(path) as entries:
                return [entry for entry in entries if entry.is_dir()]
        except OSError as e:
            raise SourceError(f"failed to read directory '{path}': {e}") from e
