#!/usr/bin/env python3
"""Logging utilities for bare2gitea."""

import os
import sys
import time
from typing import TextIO

import colorama

from security import SecurityValidator

# Initialize colorama for cross-platform colored output
colorama.init(autoreset=True)


class Logger:
    """Handles formatted console output with colors and credential redaction."""

    PROCESS_NAME = "bare2gitea"

    @classmethod
    def debug(cls, *messages: str) -> None:
        cls._emit(sys.stdout, colorama.Fore.LIGHTBLACK_EX, *messages)

    @classmethod
    def info(cls, *messages: str) -> None:
        cls._emit(sys.stdout, colorama.Fore.CYAN, *messages)

    @classmethod
    def success(cls, *messages: str) -> None:
        cls._emit(sys.stdout, colorama.Fore.GREEN, *messages)

    @classmethod
    def warn(cls, *messages: str) -> None:
        cls._emit(sys.stdout, colorama.Fore.YELLOW, *messages)

    @classmethod
    def error(cls, *messages: str) -> None:
        cls._emit(sys.stderr, colorama.Fore.RED, *messages)

    @classmethod
    def security_event(cls, event_type: str, details: str) -> None:
        """Log security events with appropriate sanitization."""
        timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
        cls._emit(
            sys.stderr,
            colorama.Fore.MAGENTA,
            f"[SECURITY:{event_type}] {timestamp}: {details}",
        )

    @classmethod
    def dump(cls, title: str, text: str) -> None:
        """Write a multi-line block (HTTP request/response) under a title line.

        Each line is redacted on its own so header values such as
        ``Authorization`` never reach the terminal.
        """
        cls.debug(f"{title}:")
        for line in text.splitlines():
            cls.debug(f"  {line}")

    @classmethod
    def _emit(cls, stream: TextIO, color: str, *messages: str) -> None:
        sanitized = [
            SecurityValidator.sanitize_for_logging(str(msg)) for msg in messages
        ]
        stream.write(cls._format_line(color, *sanitized) + "\n")

    @classmethod
    def _get_header(cls) -> str:
        return f"[{cls.PROCESS_NAME}:{os.getpid()}]"

    @classmethod
    def _format_line(cls, color: str, *messages: str) -> str:
        header = cls._get_header()
        message = " ".join(messages)
        return f"{color}{header}{colorama.Style.RESET_ALL} {message}"
