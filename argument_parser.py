#!/usr/bin/env python3
"""Command line argument parsing and configuration building."""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional, Tuple

from config import BehaviorConfig, Config, ForgeConfig, SourceConfig
from logging_utils import Logger
from security import SecurityValidator

# Exit codes
EXIT_AUTH_ERROR = 40
EXIT_MISSING_ARGUMENTS = 2


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Migrate local bare git repositories (<path>/<org>/<repo>.git) "
        "into a Gitea instance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -path /srv/git -url https://git.server.com -username admin -password secret
  GITEA_PASSWORD=secret %(prog)s -path /srv/git -url https://git.server.com -username admin
  %(prog)s -path /srv/git -url https://git.server.com -username admin --dry-run -debug
        """,
    )
    return parser


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    """Add local source arguments to parser."""
    parser.add_argument(
        "-path",
        "--path",
        dest="path",
        required=True,
        help="Path to local repos, laid out as <path>/<org>/<repo>.git",
    )


def _add_forge_arguments(parser: argparse.ArgumentParser) -> None:
    """Add Gitea-related arguments to parser."""
    parser.add_argument(
        "-url",
        "--url",
        dest="url",
        required=True,
        help="URL to Gitea. Ex: https://git.server.com",
    )
    parser.add_argument(
        "-username",
        "--username",
        dest="username",
        help="Gitea username (or set GITEA_USERNAME env var)",
    )
    parser.add_argument(
        "-password",
        "--password",
        dest="password",
        help="Gitea password (or set GITEA_PASSWORD env var)",
    )


def _add_behavior_arguments(parser: argparse.ArgumentParser) -> None:
    """Add behavior arguments to parser."""
    parser.add_argument(
        "-debug",
        "--debug",
        action="store_true",
        dest="debug",
        help="Show debug output (full HTTP requests and responses)",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        dest="dry_run",
        help="Check which repositories would be migrated without migrating",
    )


def _validate_parsed_arguments(args) -> Tuple[str, str]:
    """Validate and normalize the url and path arguments."""
    try:
        validated_url = SecurityValidator.validate_url(args.url, ["https", "http"])
        validated_path = SecurityValidator.validate_directory(args.path)
    except ValueError as e:
        Logger.security_event(
            "CONFIG_VALIDATION_FAILED", f"configuration validation failed: {e}"
        )
        Logger.error(f"configuration validation error: {e}")
        sys.exit(EXIT_MISSING_ARGUMENTS)

    Logger.security_event(
        "CONFIG_VALIDATION", "successfully validated all configuration inputs"
    )
    return validated_url, validated_path


def _get_and_validate_credentials(args) -> Tuple[str, str]:
    """Get basic-auth credentials from flags or the environment."""
    username = args.username or os.getenv("GITEA_USERNAME")
    password = args.password or os.getenv("GITEA_PASSWORD")
    if not username:
        Logger.error("error: missing username (use -username or GITEA_USERNAME)")
        sys.exit(EXIT_AUTH_ERROR)
    if not password:
        Logger.error("error: missing password (use -password or GITEA_PASSWORD)")
        sys.exit(EXIT_AUTH_ERROR)

    try:
        validated_username = SecurityValidator.validate_username(username)
    except ValueError as e:
        Logger.security_event(
            "USERNAME_VALIDATION_FAILED", f"Gitea username validation failed: {e}"
        )
        Logger.error(f"Gitea username validation error: {e}")
        sys.exit(EXIT_AUTH_ERROR)

    return validated_username, password


def parse_arguments(argv: Optional[List[str]] = None) -> Config:
    """Parse command line arguments and return configuration object."""
    parser = _create_argument_parser()
    _add_source_arguments(parser)
    _add_forge_arguments(parser)
    _add_behavior_arguments(parser)

    args = parser.parse_args(argv)

    validated_url, validated_path = _validate_parsed_arguments(args)
    username, password = _get_and_validate_credentials(args)

    return Config(
        forge=ForgeConfig(
            url=validated_url,
            username=username,
            password=password,
            debug=args.debug,
        ),
        source=SourceConfig(path=validated_path),
        behavior=BehaviorConfig(dry_run=args.dry_run),
    )
