"""HTTP transport and error handling for the Honeycomb API."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any
from urllib.parse import urljoin, urlsplit

import requests

DEFAULT_API_URL = "https://api.honeycomb.io"
DEFAULT_USER_AGENT = "hnyapi"

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """Client configuration; blank values are filled in from the defaults."""

    api_key: str = ""
    api_url: str = ""
    user_agent: str = ""
    debug: bool = False

    def merge(self, other: Config) -> None:
        """Copy every non-blank value of ``other`` into this config."""
        if other.api_key:
            self.api_key = other.api_key
        if other.api_url:
            self.api_url = other.api_url
        if other.user_agent:
            self.user_agent = other.user_agent
        self.debug = self.debug or other.debug


class HoneycombError(Exception):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


class NotFoundError(HoneycombError):
    """Raised when the requested item could not be found."""

    def __init__(self) -> None:
        super().__init__("404 Not Found", 404)


def is_2xx(status: int) -> bool:
    """Return whether an HTTP status code is successful."""
    return 200 <= status < 300


def url_encode_dataset(dataset: str) -> str:
    """Sanitize a dataset name for use in a URL path."""
    return dataset.replace("/", "-")


def error_message_from_body(body: bytes | str) -> str:
    """Extract a readable error message from an API error response body."""
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    try:
        payload = json.loads(text)
    except ValueError:
        return text
    if payload is None:
        return ""
    if not isinstance(payload, dict):
        return text

    error = payload.get("error") or ""
    details = payload.get("type_detail") or []
    if not isinstance(error, str) or not isinstance(details, list):
        return text
    if not all(isinstance(d, dict) for d in details):
        return text

    if details:
        return "".join(
            f"{d.get('code') or ''} - {d.get('description') or ''}" for d in details
        )
    return error


def _validate_api_url(api_url: str) -> str:
    try:
        parts = urlsplit(api_url)
    except ValueError as exc:
        raise ValueError(f"could not parse api_url: {exc}") from exc
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"could not parse api_url: {api_url!r}")
    return api_url


class Transport:
    """Sends authenticated JSON requests to the Honeycomb API."""

    def __init__(self, config: Config) -> None:
        cfg = Config(api_url=DEFAULT_API_URL, user_agent=DEFAULT_USER_AGENT)
        cfg.merge(config)

        if not cfg.api_key:
            raise ValueError("api_key must be configured")

        self.api_url = _validate_api_url(cfg.api_url)
        self.user_agent = cfg.user_agent
        self.debug = cfg.debug
        self._api_key = cfg.api_key
        self._session = requests.Session()

    def request(self, method: str, path: str, body: Any = None) -> Any:
        """Perform a request and return the decoded JSON response, if any.

        Raises NotFoundError on a 404 and HoneycombError on any other
        non-2xx response.
        """
        url = urljoin(self.api_url, path)
        data = None if body is None else json.dumps(body)
        headers = {
            "X-Honeycomb-Team": self._api_key,
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }

        if self.debug:
            logger.info("Sending request\n\n%s %s\n%s\n", method, url, data or "")

        resp = self._session.request(method, url, data=data, headers=headers)

        if self.debug:
            logger.info(
                "Received response\n\n%s %s\n%s\n",
                resp.status_code,
                resp.reason,
                resp.text,
            )

        if not is_2xx(resp.status_code):
            if resp.status_code == 404:
                raise NotFoundError()
            reason = resp.reason
            if not reason:
                try:
                    reason = HTTPStatus(resp.status_code).phrase
                except ValueError:
                    reason = ""
            status_line = f"{resp.status_code} {reason}".strip()
            message = error_message_from_body(resp.content)
            raise HoneycombError(
                f"{status_line}: {message}" if message else status_line,
                resp.status_code,
            )

        if not resp.content:
            return None
        return resp.json()