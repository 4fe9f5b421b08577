#!/usr/bin/env python3
"""Configuration dataclasses for bare2gitea."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ForgeConfig:
    """Gitea connection configuration."""
    url: str
    username: str
    password: str
    debug: bool = False


@dataclass
class SourceConfig:
    """Local repository tree configuration."""
    path: str


@dataclass
class BehaviorConfig:
    """Migration behavior configuration."""
    dry_run: bool = False


@dataclass
class Config:
    """Main configuration for a local-to-Gitea migration run."""
    forge: ForgeConfig
    source: SourceConfig
    behavior: BehaviorConfig
