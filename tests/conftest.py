"""Shared fixtures: an in-memory Gitea stand-in that records every call."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import pytest

from forge_client import ForgeHTTPError
from local_source import LocalSource

REASONS = {401: "Unauthorized", 404: "Not Found", 500: "Internal Server Error"}


class RecordingClient:
    """Answers the four Gitea endpoints from dictionaries and logs each call."""

    def __init__(
        self,
        orgs: Optional[Dict[str, int]] = None,
        repos: Optional[List[Tuple[str, str]]] = None,
        next_id: int = 42,
    ) -> None:
        self.orgs: Dict[str, int] = dict(orgs or {})
        self.repos = set(repos or [])
        self.next_id = next_id
        self.failures: Dict[Tuple[str, str], Any] = {}
        self.calls: List[Tuple[str, str, Optional[Dict[str, Any]]]] = []

    def fail(self, method: str, path: str, status: Any) -> None:
        """Make every matching call fail with an HTTP status or raise an exception."""
        self.failures[(method, path)] = status

    def get(self, path: str) -> Dict[str, Any]:
        self.calls.append(("GET", path, None))
        self._maybe_fail("GET", path)
        parts = path.split("/")[3:]
        if parts[0] == "repos":
            owner, name = parts[1], parts[2]
            if (owner, name) not in self.repos:
                raise ForgeHTTPError(404, "Not Found")
            return {"id": 100, "name": name, "full_name": f"{owner}/{name}",
                    "owner": {"id": self.orgs.get(owner, 0), "login": owner}}
        if parts[0] == "orgs":
            name = parts[1]
            if name not in self.orgs:
                raise ForgeHTTPError(404, "Not Found")
            return {"id": self.orgs[name], "username": name}
        raise AssertionError(f"unexpected GET {path}")

    def post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(("POST", path, payload))
        self._maybe_fail("POST", path)
        if path == "/api/v1/orgs":
            org_id = self.next_id
            self.next_id += 1
            self.orgs[payload["username"]] = org_id
            return {"id": org_id, "username": payload["username"]}
        if path == "/api/v1/repos/migrate":
            owner = next(n for n, i in self.orgs.items() if i == payload["UID"])
            self.repos.add((owner, payload["repo_name"]))
            return {"id": 200, "name": payload["repo_name"]}
        raise AssertionError(f"unexpected POST {path}")

    def posts(self) -> List[Tuple[str, str, Optional[Dict[str, Any]]]]:
        return [call for call in self.calls if call[0] == "POST"]

    def _maybe_fail(self, method: str, path: str) -> None:
        status = self.failures.get((method, path))
        if isinstance(status, Exception):
            raise status
        if status is not None:
            raise ForgeHTTPError(status, REASONS.get(status, ""))


@pytest.fixture
def sorted_listing(monkeypatch):
    """Make directory listings deterministic so call order can be asserted."""
    original = LocalSource._list_dirs

    def _sorted(path):
        return sorted(original(path), key=lambda entry: entry.name)

    monkeypatch.setattr(LocalSource, "_list_dirs", staticmethod(_sorted))


def make_tree(root, layout: Dict[str, List[str]]) -> None:
    """Create <root>/<org>/<entry>/ directories."""
    for org, entries in layout.items():
        (root / org).mkdir()
        for entry in entries:
            (root / org / entry).mkdir()
