#!/usr/bin/env python3
"""Thin Gitea REST client: basic auth, JSON bodies, strict status checks."""

from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from config import ForgeConfig
from logging_utils import Logger


class ForgeError(Exception):
    """Base class for everything that can go wrong talking to the forge."""


class ForgeHTTPError(ForgeError):
    """The forge answered with a status other than the one expected."""

    def __init__(self, status_code: int, reason: str, body: str = "") -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        super().__init__(self.status_line)

    @property
    def status_line(self) -> str:
        return f"{self.status_code} {self.reason}".strip()

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class ForgeTransportError(ForgeError):
    """Connection, read or JSON decoding failure."""


class ForgeClient:
    """Sends authenticated requests to ``<url><path>`` and decodes JSON replies."""

    def __init__(self, config: ForgeConfig) -> None:
        self.config = config
        self.session = requests.Session()
        self.session.auth = (config.username, config.password)

    def get(self, path: str) -> Dict[str, Any]:
        response = self._send("GET", path)
        return self._decode(response, expected_status=200)

    def post(self, path: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        response = self._send("POST", path, payload)
        return self._decode(response, expected_status=201)

    def _send(
        self, method: str, path: str, payload: Optional[Dict[str, Any]] = None
    ) -> requests.Response:
        url = f"{self.config.url}{path}"
        try:
            if method == "POST":
                # json= sets Content-Type: application/json
                response = self.session.post(url, json=payload)
            else:
                response = self.session.get(url)
        except requests.RequestException as e:
            raise ForgeTransportError(f"{method} {url} failed: {e}") from e

        if self.config.debug:
            Logger.debug(f"*** HTTP {method} ***")
            Logger.dump("request", _format_request(response.request))
            Logger.dump("response", _format_response(response))
        return response

    @staticmethod
    def _decode(response: requests.Response, expected_status: int) -> Dict[str, Any]:
        if response.status_code != expected_status:
            raise ForgeHTTPError(response.status_code, response.reason or "", response.text)
        try:
            return response.json()
        except ValueError as e:
            raise ForgeTransportError(
                f"invalid JSON in response from {response.url}: {e}"
            ) from e


def _format_headers(headers) -> str:
    return "\n".join(f"{name}: {value}" for name, value in headers.items())


def _format_request(request: requests.PreparedRequest) -> str:
    body = request.body or ""
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    return f"{request.method} {request.url}\n{_format_headers(request.headers)}\n\n{body}"


def _format_response(response: requests.Response) -> str:
    return (
        f"{response.status_code} {response.reason}\n"
        f"{_format_headers(response.headers)}\n\n{response.text}"
    )
