#!/usr/bin/env python3
"""Gitea-side operations: look up repos, ensure organizations, start migrations."""

from __future__ import annotations

from typing import Dict, Optional

from forge_client import ForgeClient, ForgeHTTPError
from forge_models import (MigrationRequest, OrganizationCreateRequest,
                          OrganizationRecord, RepositoryRecord)
from logging_utils import Logger
from utils import api_path


class ForgeTarget:
    """Wrapper around the Gitea API for the three calls a migration needs."""

    def __init__(self, client: ForgeClient) -> None:
        self.client = client
        self._org_cache: Dict[str, OrganizationRecord] = {}

    def get_repository(self, owner: str, name: str) -> Optional[RepositoryRecord]:
        """Return the repository, or None when the forge reports 404."""
        try:
            data = self.client.get(api_path("repos", owner, name))
        except ForgeHTTPError as e:
            if e.not_found:
                return None
            raise
        return RepositoryRecord.from_json(data)

    def resolve_organization(self, name: str) -> OrganizationRecord:
        """Fetch organization ``name``, creating it when it does not exist yet."""
        cached = self._org_cache.get(name)
        if cached is not None:
            return cached

        try:
            data = self.client.get(api_path("orgs", name))
        except ForgeHTTPError as e:
            if not e.not_found:
                raise
            request = OrganizationCreateRequest(username=name)
            data = self.client.post(api_path("orgs"), request.to_payload())
            Logger.info(f"created organization: {name}")
            Logger.security_event("ORG_CREATED", f"organization {name} created")

        org = OrganizationRecord.from_json(data)
        self._org_cache[name] = org
        return org

    def migrate_repository(self, local_path: str, org: str, name: str) -> bool:
        """Trigger a server-side migration of ``local_path`` into ``org/name``.

        Returns False without touching the forge when the repository is
        already there, True once the migrate request has been accepted.
        """
        Logger.info(f"git repo: {local_path}")
        if self.get_repository(org, name) is not None:
            Logger.warn(f"repo already exists: owner={org} repo={name}")
            return False

        owner = self.resolve_organization(org)
        request = MigrationRequest(clone_addr=local_path, repo_name=name, uid=owner.id)
        self.client.post(api_path("repos", "migrate"), request.to_payload())
        Logger.success(f"migrated: {org}/{name}")
        return True
