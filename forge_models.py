#!/usr/bin/env python3
"""Request and response records for the Gitea REST API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class MigrationRequest:
    """Body of ``POST /api/v1/repos/migrate``."""
    clone_addr: str
    repo_name: str
    uid: int

    def to_payload(self) -> Dict[str, Any]:
        # Gitea expects the owner id under the upper-case "UID" key
        return {
            "clone_addr": self.clone_addr,
            "repo_name": self.repo_name,
            "UID": self.uid,
        }


@dataclass
class OrganizationCreateRequest:
    """Body of ``POST /api/v1/orgs``. Only ``username`` is filled in by this tool."""
    username: str
    full_name: str = ""
    description: str = ""
    location: str = ""
    website: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "full_name": self.full_name,
            "description": self.description,
            "location": self.location,
            "website": self.website,
        }


@dataclass(frozen=True)
class OrganizationRecord:
    """Organization metadata as reported by the forge."""
    id: int
    username: str
    full_name: str = ""
    description: str = ""
    location: str = ""
    website: str = ""
    avatar_url: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "OrganizationRecord":
        return cls(
            id=int(data.get("id", 0)),
            username=data.get("username", ""),
            full_name=data.get("full_name", ""),
            description=data.get("description", ""),
            location=data.get("location", ""),
            website=data.get("website", ""),
            avatar_url=data.get("avatar_url", ""),
        )


@dataclass(frozen=True)
class OwnerSummary:
    """Owner block embedded in a repository record."""
    id: int = 0
    login: str = ""
    full_name: str = ""
    email: str = ""
    avatar_url: str = ""
    language: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "OwnerSummary":
        return cls(
            id=int(data.get("id", 0)),
            login=data.get("login", ""),
            full_name=data.get("full_name", ""),
            email=data.get("email", ""),
            avatar_url=data.get("avatar_url", ""),
            language=data.get("language", ""),
        )


@dataclass(frozen=True)
class RepositoryPermissions:
    admin: bool = False
    push: bool = False
    pull: bool = False


@dataclass(frozen=True)
class RepositoryRecord:
    """Repository metadata as reported by the forge.

    Only used as evidence that a repository exists; absence is expressed by
    the resolver returning ``None``, never by a placeholder record.
    """
    id: int
    name: str
    full_name: str = ""
    description: str = ""
    html_url: str = ""
    clone_url: str = ""
    ssh_url: str = ""
    website: str = ""
    default_branch: str = ""
    owner: OwnerSummary = field(default_factory=OwnerSummary)
    permissions: RepositoryPermissions = field(default_factory=RepositoryPermissions)
    private: bool = False
    fork: bool = False
    mirror: bool = False
    empty: bool = False
    archived: bool = False
    size: int = 0
    forks_count: int = 0
    stars_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "RepositoryRecord":
        perms = data.get("permissions") or {}
        return cls(
            id=int(data.get("id", 0)),
            name=data.get("name", ""),
            full_name=data.get("full_name", ""),
            description=data.get("description", ""),
            html_url=data.get("html_url", ""),
            clone_url=data.get("clone_url", ""),
            ssh_url=data.get("ssh_url", ""),
            website=data.get("website", ""),
            default_branch=data.get("default_branch", ""),
            owner=OwnerSummary.from_json(data.get("owner") or {}),
            permissions=RepositoryPermissions(
                admin=bool(perms.get("admin", False)),
                push=bool(perms.get("push", False)),
                pull=bool(perms.get("pull", False)),
            ),
            private=bool(data.get("private", False)),
            fork=bool(data.get("fork", False)),
            mirror=bool(data.get("mirror", False)),
            empty=bool(data.get("empty", False)),
            archived=bool(data.get("archived", False)),
            size=int(data.get("size", 0)),
            forks_count=int(data.get("forks_count", 0)),
            stars_count=int(data.get("stars_count", 0)),
            watchers_count=int(data.get("watchers_count", 0)),
            open_issues_count=int(data.get("open_issues_count", 0)),
            created_at=data.get("created_at", ""),
            updated_at=data.get("updated_at", ""),
        )
