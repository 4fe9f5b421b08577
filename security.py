#!/usr/bin/env python3
"""Security validation utilities for bare2gitea."""

import os
import re
from typing import List, Optional


class SecurityValidator:
    """Security validation utilities for input sanitization and validation."""

    MAX_URL_LENGTH = 2048
    MAX_USERNAME_LENGTH = 100
    MAX_PATH_LENGTH = 4096

    @classmethod
    def validate_url(cls, url: str, allowed_schemes: Optional[List[str]] = None) -> str:
        """Validate the forge base URL and strip any trailing slash."""
        if not url or not isinstance(url, str):
            raise ValueError("URL must be a non-empty string")

        if len(url) > cls.MAX_URL_LENGTH:
            raise ValueError(f"URL exceeds maximum length of {cls.MAX_URL_LENGTH}")

        # Check for null bytes and control characters
        if "\x00" in url or any(ord(c) < 32 for c in url):
            raise ValueError("URL contains null bytes or control characters")

        if not url.startswith(("http://", "https://")):
            raise ValueError("URL must use http or https scheme")

        if allowed_schemes:
            scheme = url.split("://")[0].lower()
            if scheme not in allowed_schemes:
                raise ValueError(
                    f"URL scheme '{scheme}' not in allowed schemes: {allowed_schemes}"
                )

        # Credentials belong in -username/-password, not in the URL
        if "@" in url.split("://", 1)[1].split("/", 1)[0]:
            raise ValueError("URL must not embed credentials")

        return url.rstrip("/")

    @classmethod
    def validate_username(cls, username: str) -> str:
        """Validate username for security."""
        if not username or not isinstance(username, str):
            raise ValueError("Username must be a non-empty string")

        if len(username) > cls.MAX_USERNAME_LENGTH:
            raise ValueError(
                f"Username exceeds maximum length of {cls.MAX_USERNAME_LENGTH}"
            )

        # Check for null bytes and control characters
        if "\x00" in username or any(ord(c) < 32 for c in username):
            raise ValueError("Username contains null bytes or control characters")

        # Basic auth joins user and password with a colon
        if ":" in username:
            raise ValueError("Username must not contain a colon")

        return username

    @classmethod
    def validate_directory(cls, path: str) -> str:
        """Validate that path names an existing directory; return it absolute."""
        if not path or not isinstance(path, str):
            raise ValueError("Path must be a non-empty string")

        if len(path) > cls.MAX_PATH_LENGTH:
            raise ValueError(f"Path exceeds maximum length of {cls.MAX_PATH_LENGTH}")

        if "\x00" in path:
            raise ValueError("Path contains null bytes")

        absolute = os.path.abspath(path)
        if not os.path.isdir(absolute):
            raise ValueError(f"Path is not a directory: {absolute}")

        return absolute

    @classmethod
    def sanitize_for_logging(cls, message: str) -> str:
        """Sanitize message for safe logging by removing potential credentials."""
        if not message:
            return message

        # Patterns to redact
        patterns = [
            (r"(authorization:\s*basic\s+)[^\s]+", r"\1[REDACTED]"),  # Basic auth header
            (r"(authorization:\s*token\s+)[^\s]+", r"\1[REDACTED]"),  # Token header
            (r"(https?://)[^:/@\s\"]+:[^/@\s\"]+@", r"\1[REDACTED]@"),  # URLs with credentials
            (r"password\s*[=:]\s*[^\s]+", "password=[REDACTED]"),  # Password assignments
            (r"token\s*[=:]\s*[^\s]+", "token=[REDACTED]"),  # Token assignments
        ]

        sanitized = message
        for pattern, replacement in patterns:
            sanitized = re.sub(pattern, replacement, sanitized, flags=re.IGNORECASE)

        return sanitized
