#!/usr/bin/env python3
"""Main orchestrator for migrating a local bare-repository tree into Gitea."""

from __future__ import annotations

from config import Config
from forge_client import ForgeClient, ForgeError, ForgeHTTPError
from forge_target import ForgeTarget
from local_source import LocalRepository, LocalSource, SourceError
from logging_utils import Logger

# Exit codes
EXIT_SUCCESS = 0
EXIT_EXECUTION_ERROR = 1
EXIT_SOURCE_ERROR = 30
EXIT_FORGE_ERROR = 31
EXIT_AUTH_ERROR = 40


class MigrationOrchestrator:
    def __init__(self, cfg: Config) -> None:
        self.cfg = cfg
        self.source = LocalSource(cfg.source.path)
        self.forge = ForgeTarget(ForgeClient(cfg.forge))
        self.migrated = 0
        self.skipped = 0

    def run(self) -> int:
        """Process every repository in order, stopping at the first error."""
        Logger.info(f"source: {self.source.root}")
        Logger.info(f"target: {self.cfg.forge.url}")
        try:
            for repo in self.source.iter_repositories():
                self._process_single_repository(repo)
        except SourceError as e:
            Logger.error(f"source error: {e}")
            return EXIT_SOURCE_ERROR
        except ForgeHTTPError as e:
            Logger.error(f"gitea error: {e}")
            if e.status_code in (401, 403):
                return EXIT_AUTH_ERROR
            return EXIT_FORGE_ERROR
        except ForgeError as e:
            Logger.error(f"gitea error: {e}")
            return EXIT_FORGE_ERROR
        except Exception as e:
            Logger.error(f"unexpected error: {e}")
            return EXIT_EXECUTION_ERROR
        finally:
            Logger.info(f"migrated: {self.migrated}, skipped: {self.skipped}")

        if self.cfg.behavior.dry_run:
            Logger.info("dry-run completed")
        else:
            Logger.info("mission accomplished")
        return EXIT_SUCCESS

    def _process_single_repository(self, repo: LocalRepository) -> None:
        if self.cfg.behavior.dry_run:
            if self.forge.get_repository(repo.org, repo.name) is not None:
                Logger.info(f"would skip (exists): {repo.org}/{repo.name}")
                self.skipped += 1
            else:
                Logger.info(f"would migrate: {repo.path} -> {repo.org}/{repo.name}")
                self.migrated += 1
            return

        if self.forge.migrate_repository(repo.path, repo.org, repo.name):
            self.migrated += 1
        else:
            self.skipped += 1
